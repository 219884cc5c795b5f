"""
HelloRest — Token Exchange Form Route
======================================

What:  POST /camel/forms. Binds a form-encoded token-exchange request and
       echoes it back as JSON.
Why:   Shows form → model → JSON binding. Nothing is validated or
       authenticated; the fields are received and logged only.

Request Flow:
    1. Route dependency checks Content-Type is application/x-www-form-urlencoded
    2. `bind_token_exchange` reads the form into TokenExchangeRequest
    3. Handler logs the bound body and returns it unchanged
"""

import logging

from fastapi import Depends, Request

from hellorest.routes.registry import MEDIA_TYPE_FORM, MEDIA_TYPE_JSON, Route
from hellorest.schemas.token_exchange import TokenExchangeRequest

logger = logging.getLogger(__name__)


async def bind_token_exchange(request: Request) -> TokenExchangeRequest:
    """Missing fields bind to None; unknown fields are dropped."""
    form = await request.form()
    return TokenExchangeRequest.model_validate(dict(form.items()))


async def post_form(
    payload: TokenExchangeRequest = Depends(bind_token_exchange),
) -> TokenExchangeRequest:
    logger.info("%r", payload)
    return payload


ROUTES = (
    Route(
        method="POST",
        path="/forms",
        endpoint=post_form,
        consumes=MEDIA_TYPE_FORM,
        produces=MEDIA_TYPE_JSON,
        response_model=TokenExchangeRequest,
        summary="Echo a token-exchange form as JSON",
    ),
)
