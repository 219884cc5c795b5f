"""
HelloRest — Request/Response Schemas
=====================================

    - TokenExchangeRequest: form body of POST /camel/forms, echoed back as JSON
    - Message:              single-field payload, renderable as JSON or XML
    - HealthResponse:       body of GET /health
"""

from hellorest.schemas.health import HealthResponse
from hellorest.schemas.message import Message
from hellorest.schemas.token_exchange import TokenExchangeRequest

__all__ = ["HealthResponse", "Message", "TokenExchangeRequest"]
