"""
HelloRest — Route Table Endpoint Tests
=======================================

What:  Happy-path behavior of every row in the route table, over HTTP.
How:   HTTPX AsyncClient over ASGITransport (no server process).

What we test:
    ✅ GET /camel/say/hello returns exactly "Hello World!"
    ✅ hello/{name} and greetings/{name} greet by name
    ✅ helloObject/{name} renders a Message through the binding mode
    ✅ POST /camel/forms echoes the form as JSON
    ✅ Every route logs its body
"""

import logging

import pytest


class TestSayHello:
    """Tests for the /say routes."""

    @pytest.mark.asyncio
    async def test_hello_world(self, test_client):
        response = await test_client.get("/camel/say/hello")

        assert response.status_code == 200
        assert response.text == "Hello World!"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["Ann", "Zoë", "with space", "42"])
    async def test_hello_name_contains_name(self, test_client, name):
        response = await test_client.get(f"/camel/say/hello/{name}")

        assert response.status_code == 200
        assert name in response.text
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["Ann", "Zoë", "with space", "42"])
    async def test_greetings_name_contains_name(self, test_client, name):
        response = await test_client.get(f"/camel/say/greetings/{name}")

        assert response.status_code == 200
        assert name in response.text

    @pytest.mark.asyncio
    async def test_hello_and_greetings_agree(self, test_client):
        """The two greeting paths are separate rows with the same behavior."""
        hello = await test_client.get("/camel/say/hello/Bob")
        greetings = await test_client.get("/camel/say/greetings/Bob")

        assert hello.text == greetings.text == "Hello Bob, how are you?"

    @pytest.mark.asyncio
    async def test_hello_object_defaults_to_json(self, test_client):
        response = await test_client.get("/camel/say/helloObject/Ann")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"text": "Hello Ann!"}

    @pytest.mark.asyncio
    async def test_route_logs_body(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="hellorest.routes.say_hello")

        await test_client.get("/camel/say/hello/Carol")

        assert "Hello Carol, how are you?" in caplog.text


class TestForms:
    """Tests for POST /camel/forms."""

    @pytest.mark.asyncio
    async def test_client_credentials_scenario(self, test_client):
        """grant_type + client_id only: the other five fields come back null."""
        response = await test_client.post(
            "/camel/forms",
            content=b"grant_type=client_credentials&client_id=abc",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {
            "client_id": "abc",
            "client_secret": None,
            "grant_type": "client_credentials",
            "subject_token": None,
            "subject_issuer": None,
            "subject_token_type": None,
            "audience": None,
        }

    @pytest.mark.asyncio
    async def test_full_form_is_echoed(self, test_client, token_exchange_form):
        response = await test_client.post("/camel/forms", data=token_exchange_form)

        assert response.status_code == 200
        assert response.json() == token_exchange_form

    @pytest.mark.asyncio
    async def test_empty_form_binds_all_none(self, test_client):
        response = await test_client.post(
            "/camel/forms",
            content=b"",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

        assert response.status_code == 200
        assert set(response.json().values()) == {None}

    @pytest.mark.asyncio
    async def test_empty_field_value_is_kept(self, test_client):
        response = await test_client.post("/camel/forms", data={"audience": ""})

        assert response.status_code == 200
        assert response.json()["audience"] == ""

    @pytest.mark.asyncio
    async def test_unknown_fields_are_ignored(self, test_client):
        response = await test_client.post(
            "/camel/forms", data={"client_id": "abc", "scope": "read write"}
        )

        assert response.status_code == 200
        assert "scope" not in response.json()
        assert response.json()["client_id"] == "abc"

    @pytest.mark.asyncio
    async def test_content_type_parameters_are_accepted(self, test_client):
        response = await test_client.post(
            "/camel/forms",
            content=b"client_id=abc",
            headers={"Content-Type": "application/x-www-form-urlencoded; charset=utf-8"},
        )

        assert response.status_code == 200
        assert response.json()["client_id"] == "abc"

    @pytest.mark.asyncio
    async def test_form_is_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="hellorest.routes.forms")

        await test_client.post("/camel/forms", data={"client_id": "abc"})

        assert "client_id='abc'" in caplog.text


class TestHealth:
    """Tests for GET /health."""

    @pytest.mark.asyncio
    async def test_health_reports_route_table(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["routes"] == 5
        assert body["binding_mode"] == "json"
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_health_is_outside_context_path(self, test_client):
        response = await test_client.get("/camel/health")

        assert response.status_code == 404
