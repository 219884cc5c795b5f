"""
HelloRest — Response Binding
=============================

What:  Renders a route's return value according to the process-wide binding
       mode, for routes that do not declare what they produce.
Who:   Called by handlers such as GET /camel/say/helloObject/{name}.

Negotiation (json_xml only):
    The Accept header is ranked by q-value (ties keep header order); the first
    of application/json or application/xml (text/xml) wins. Anything else,
    or no Accept header, falls back to JSON.
"""

from typing import Any, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from hellorest.config import BindingMode, settings
from hellorest.routes.registry import MEDIA_TYPE_JSON

MEDIA_TYPE_XML = "application/xml"
XML_MEDIA_TYPES = frozenset({MEDIA_TYPE_XML, "text/xml"})


def prefers_xml(accept: Optional[str]) -> bool:
    if not accept:
        return False

    ranked = []
    for position, part in enumerate(accept.split(",")):
        media_type, _, params = part.partition(";")
        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        ranked.append((-quality, position, media_type.strip().lower()))

    for _, _, media_type in sorted(ranked):
        if media_type in XML_MEDIA_TYPES:
            return True
        if media_type == MEDIA_TYPE_JSON:
            return False
    return False


def bind_response(request: Request, value: Any) -> Response:
    mode = settings.binding_mode

    if mode == BindingMode.OFF:
        return PlainTextResponse(str(value))

    if (
        mode == BindingMode.JSON_XML
        and hasattr(value, "to_xml")
        and prefers_xml(request.headers.get("accept"))
    ):
        return Response(content=value.to_xml(), media_type=MEDIA_TYPE_XML)

    return JSONResponse(content=jsonable_encoder(value))
