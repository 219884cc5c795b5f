"""
HelloRest — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped):
    ├── app:              Fresh FastAPI instance from create_app()
    ├── test_client:      HTTPX AsyncClient talking to `app` over ASGI
    ├── failing_greeter:  Overrides the greeter dependency with one that raises
    └── token_exchange_form: Complete form body for POST /camel/forms
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CONTEXT_PATH"] = "/camel"
os.environ["BINDING_MODE"] = "json"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from hellorest.main import create_app
from hellorest.schemas.message import Message
from hellorest.services.greeter import Greeter, get_greeter


class FailingGreeter(Greeter):
    """Greeter whose every call blows up, to drive the error normalizer."""

    def greetings(self, name: str) -> str:
        raise RuntimeError("greeter unavailable")

    def say_hello_object(self, name: str) -> Message:
        raise KeyError(name)


@pytest.fixture
def app():
    return create_app()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Usage:
        async def test_hello(test_client):
            response = await test_client.get("/camel/say/hello")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def failing_greeter(app):
    app.dependency_overrides[get_greeter] = FailingGreeter
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def token_exchange_form():
    return {
        "client_id": "abc",
        "client_secret": "s3cr3t",
        "grant_type": "urn:ietf:params:oauth:grant-type:token-exchange",
        "subject_token": "eyJhbGciOiJSUzI1NiJ9.e30.sig",
        "subject_issuer": "https://issuer.example.com",
        "subject_token_type": "urn:ietf:params:oauth:token-type:access_token",
        "audience": "orders-api",
    }
