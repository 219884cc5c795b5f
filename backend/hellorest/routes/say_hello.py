"""
HelloRest — Greeting Routes
============================

What:  The /say routes of the route table.

Route Inventory:
    GET /say/hello                → literal "Hello World!"        (text/plain)
    GET /say/hello/{name}         → greeter.greetings(name)       (text/plain)
    GET /say/helloObject/{name}   → greeter.say_hello_object(name) (binding mode)
    GET /say/greetings/{name}     → greeter.greetings(name)       (text/plain)

`hello/{name}` and `greetings/{name}` behave the same; both are kept as
separate rows so existing clients of either path keep working.
"""

import logging

from fastapi import Depends, Request, Response

from hellorest.routes.binding import bind_response
from hellorest.routes.registry import MEDIA_TYPE_TEXT, Route
from hellorest.services.greeter import Greeter, get_greeter

logger = logging.getLogger(__name__)

HELLO_WORLD = "Hello World!"


async def say_hello() -> str:
    logger.info("%s", HELLO_WORLD)
    return HELLO_WORLD


async def say_hello_to(name: str, greeter: Greeter = Depends(get_greeter)) -> str:
    body = greeter.greetings(name)
    logger.info("%s", body)
    return body


async def say_hello_object(
    name: str,
    request: Request,
    greeter: Greeter = Depends(get_greeter),
) -> Response:
    message = greeter.say_hello_object(name)
    logger.info("%r", message)
    return bind_response(request, message)


async def greetings(name: str, greeter: Greeter = Depends(get_greeter)) -> str:
    body = greeter.greetings(name)
    logger.info("%s", body)
    return body


ROUTES = (
    Route(
        method="GET",
        path="/say/hello",
        endpoint=say_hello,
        produces=MEDIA_TYPE_TEXT,
        summary="Fixed greeting",
    ),
    Route(
        method="GET",
        path="/say/hello/{name}",
        endpoint=say_hello_to,
        produces=MEDIA_TYPE_TEXT,
        summary="Greet by name",
    ),
    Route(
        method="GET",
        path="/say/helloObject/{name}",
        endpoint=say_hello_object,
        summary="Greeting object, rendered per binding mode",
    ),
    Route(
        method="GET",
        path="/say/greetings/{name}",
        endpoint=greetings,
        produces=MEDIA_TYPE_TEXT,
        summary="Greet by name",
    ),
)
