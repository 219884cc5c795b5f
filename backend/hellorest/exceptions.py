"""
HelloRest — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions raised while binding and handling requests.
Why:   Precise causes in the logs. On the wire every failure looks the same:
       the error normalizer reports all of them (and any other exception)
       as `error : <message>` with the configured error status (503).
Who:   Raised by the route table's binding helpers; caught by the error normalizer.

Exception Hierarchy:
    HelloRestError (base)
    └── BindingError                   → request body could not be bound
        └── UnsupportedMediaTypeError  → Content-Type does not match `consumes`
"""

from typing import Any, Dict, Optional


class HelloRestError(Exception):
    """
    Base exception for all HelloRest application errors.

    Attributes:
        message:  Error description, used verbatim in the error response body
        context:  Additional debug info (logged only)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BindingError(HelloRestError):
    """
    Raised when a request body cannot be bound to the route's declared type.

    When:  Form body is unreadable or a field does not fit the target model.
    """

    def __init__(
        self,
        message: str = "Request body could not be bound",
        target: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if target:
            ctx["target"] = target
        super().__init__(message=message, context=ctx)
        self.target = target


class UnsupportedMediaTypeError(BindingError):
    """
    Raised when the request Content-Type does not match what the route consumes.

    When:  POST /camel/forms with a JSON or multipart body, or no body at all.
    """

    def __init__(
        self,
        received: Optional[str],
        expected: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Content-Type '{received or 'none'}' is not supported. Expected: {expected}"
        )
        ctx = context or {}
        ctx["received"] = received
        ctx["expected"] = expected
        super().__init__(message=message, context=ctx)
        self.received = received
        self.expected = expected
