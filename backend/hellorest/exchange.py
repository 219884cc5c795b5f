"""
HelloRest — Per-Request Exchange Context
=========================================

What:  Carries the in-flight request/response headers, the response body and
       an optional captured exception for the duration of one request.
Who:   Created by ErrorNormalizerMiddleware, stored on `request.state.exchange`,
       read back when a failure has to be turned into a response.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

HeaderList = List[Tuple[str, str]]

# Headers that frame the *request* body; echoing them would corrupt the response.
BODY_FRAMING_HEADERS = frozenset(
    {"content-length", "content-type", "content-encoding", "transfer-encoding", "connection"}
)


@dataclass
class ExchangeContext:
    request_headers: HeaderList
    response_headers: HeaderList = field(default_factory=list)
    body: Optional[str] = None
    exception: Optional[BaseException] = None

    @classmethod
    def from_request(cls, request: Request) -> "ExchangeContext":
        return cls(request_headers=list(request.headers.items()))

    @classmethod
    def of(cls, request: Request) -> "ExchangeContext":
        """Return the exchange attached to `request`, attaching a new one if absent."""
        exchange = getattr(request.state, "exchange", None)
        if exchange is None:
            exchange = cls.from_request(request)
            request.state.exchange = exchange
        return exchange

    @property
    def failed(self) -> bool:
        return self.exception is not None

    def capture(self, exc: BaseException) -> None:
        self.exception = exc

    def copy_request_headers(self) -> None:
        """Pass every inbound header through to the response (minus body framing)."""
        self.response_headers = [
            (name, value)
            for name, value in self.request_headers
            if name.lower() not in BODY_FRAMING_HEADERS
        ]

    def to_response(self, status_code: int) -> Response:
        response = PlainTextResponse(content=self.body or "", status_code=status_code)
        for name, value in self.response_headers:
            response.headers.append(name, value)
        return response
