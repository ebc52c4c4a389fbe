"""Relay Route: end-to-end through FastAPI with a scripted upstream.

Tests:
    - Status codes and envelopes for every row of the relay's status table
    - Both the versioned and the legacy serverless path
    - Credential absent from every response body
"""

import pytest

from prompt_relay.api.routes.relay import LEGACY_RELAY_PATH, RELAY_PATH
from prompt_relay.core.errors import UpstreamUnreachableError

from tests.services.fake_transport import GEMINI_SUCCESS, json_reply, text_reply


@pytest.mark.parametrize("path", [RELAY_PATH, LEGACY_RELAY_PATH])
async def test_success_forwards_upstream_json(client, fake_transport, settings, path):
    fake_transport._replies.append(json_reply(200, GEMINI_SUCCESS))

    resp = await client.post(path, json={"prompt": "Say hello"})

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == GEMINI_SUCCESS
    call = fake_transport.calls[0]
    assert call["url"] == (
        "https://gemini.test/v1beta/models/gemini-2.0-flash:generateContent"
    )
    assert call["params"] == {"key": settings.gemini_api_key}


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH"])
async def test_non_post_gets_405_envelope(client, method):
    resp = await client.request(method, RELAY_PATH)
    assert resp.status_code == 405
    assert resp.json() == {"error": "Method Not Allowed. Please use POST."}
    assert resp.headers["allow"] == "POST"


async def test_options_without_preflight_headers_gets_405(client):
    resp = await client.options(RELAY_PATH)
    assert resp.status_code == 405


async def test_invalid_json_gets_400(client, fake_transport):
    resp = await client.post(
        RELAY_PATH, content=b"prompt=hi",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "Bad request: Could not parse JSON body."}
    assert fake_transport.calls == []


async def test_missing_prompt_gets_400(client):
    resp = await client.post(RELAY_PATH, json={"question": "hi"})
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Bad request: 'prompt' is missing")


async def test_missing_credential_gets_500(client, settings, fake_transport):
    settings.gemini_api_key = None
    resp = await client.post(RELAY_PATH, json={"prompt": "hi"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Server configuration error: API key is missing."}
    assert fake_transport.calls == []


async def test_rate_limit_status_forwarded(client, fake_transport):
    fake_transport._replies.append(
        json_reply(429, {"error": {"code": 429, "message": "rate limited"}}),
    )
    resp = await client.post(RELAY_PATH, json={"prompt": "hi"})
    assert resp.status_code == 429
    assert "rate limited" in resp.json()["error"]


async def test_html_upstream_gets_502(client, fake_transport):
    fake_transport._replies.append(text_reply(502, "<html>Bad Gateway</html>"))
    resp = await client.post(RELAY_PATH, json={"prompt": "hi"})
    assert resp.status_code == 502
    assert resp.json()["details"] == "<html>Bad Gateway</html>"


async def test_transport_failure_gets_500(client, fake_transport):
    fake_transport._replies.append(
        UpstreamUnreachableError("[Errno 111] Connection refused"),
    )
    resp = await client.post(RELAY_PATH, json={"prompt": "hi"})
    assert resp.status_code == 500
    assert "Connection refused" in resp.json()["error"]


async def test_credential_never_in_error_bodies(client, fake_transport, settings):
    fake_transport._replies.append(
        json_reply(400, {"error": {"message": "API key not valid. Please pass a valid API key."}}),
    )
    resp = await client.post(RELAY_PATH, json={"prompt": "hi"})
    assert settings.gemini_api_key not in resp.text


async def test_two_requests_two_upstream_calls(client, fake_transport):
    fake_transport._replies.extend([
        json_reply(200, GEMINI_SUCCESS), json_reply(200, GEMINI_SUCCESS),
    ])
    await client.post(RELAY_PATH, json={"prompt": "same"})
    await client.post(RELAY_PATH, json={"prompt": "same"})
    assert len(fake_transport.calls) == 2


async def test_deeply_nested_body_gets_400(client, fake_transport):
    resp = await client.post(RELAY_PATH, content=b"[" * 200000)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Bad request: Could not parse JSON body."}
    assert fake_transport.calls == []


@pytest.mark.parametrize("method", ["TRACE", "PURGE", "PROPFIND"])
@pytest.mark.parametrize("path", [RELAY_PATH, LEGACY_RELAY_PATH])
async def test_any_other_method_gets_405_envelope(client, fake_transport, method, path):
    resp = await client.request(method, path)
    assert resp.status_code == 405
    assert resp.json() == {"error": "Method Not Allowed. Please use POST."}
    assert resp.headers["allow"] == "POST"
    assert fake_transport.calls == []


async def test_405_outside_relay_keeps_default_shape(client):
    resp = await client.post("/api/v1/health/")
    assert resp.status_code == 405
    assert resp.json() == {"detail": "Method Not Allowed"}
