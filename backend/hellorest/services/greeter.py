"""
HelloRest — Greeting Component
===============================

What:  Produces greeting strings and greeting objects for the /say routes.
How:   Resolved per request through the `get_greeter` FastAPI dependency, so
       tests (or another deployment) can override it with
       `app.dependency_overrides[get_greeter]`.
"""

from hellorest.schemas.message import Message


class Greeter:
    """Greeting component exposing `greetings(name)` and `say_hello_object(name)`."""

    def greetings(self, name: str) -> str:
        return f"Hello {name}, how are you?"

    def say_hello_object(self, name: str) -> Message:
        return Message(text=f"Hello {name}!")


# Stateless; one instance serves every request
greeter = Greeter()


def get_greeter() -> Greeter:
    return greeter
