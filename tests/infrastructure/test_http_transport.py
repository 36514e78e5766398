"""HTTP Transport - request shape and the single "no result" signal.

Tests cover:
    - GET/POST/PATCH resolve the path against the base URL
    - POST/PATCH send JSON content type and the raw body
    - Success returns the raw text undecoded
    - Transport errors, empty bodies, non-UTF-8 bodies and bad URLs return None
    - Error statuses with a body still return the body

Design Decisions:
    - httpx.MockTransport behind an injected AsyncClient: no network
"""

import httpx
import pytest

from api_bridge.infrastructure.http_transport import HttpTransport

BASE = "http://escuela.test/v1"


def _transport(handler, base_url: str = BASE) -> tuple[HttpTransport, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(record))
    return HttpTransport(base_url, client=client), seen


async def test_get_returns_raw_text():
    transport, seen = _transport(lambda r: httpx.Response(200, text='[{"id": 1}]'))
    assert await transport.get("/escuela/persona") == '[{"id": 1}]'
    assert seen[0].method == "GET"
    assert str(seen[0].url) == f"{BASE}/escuela/persona"
    assert "content-type" not in seen[0].headers


@pytest.mark.parametrize("method", ["post", "patch"])
async def test_write_sends_json_body(method):
    transport, seen = _transport(lambda r: httpx.Response(200, text="ok"))
    body = '{"id_persona": 0, "nombre": "Ana"}'
    result = await getattr(transport, method)("/escuela/persona", body)
    assert result == "ok"
    assert seen[0].method == method.upper()
    assert seen[0].headers["content-type"] == "application/json"
    assert seen[0].content == body.encode("utf-8")


async def test_non_ascii_body_is_utf8():
    transport, seen = _transport(lambda r: httpx.Response(200, text="ok"))
    await transport.post("/escuela/persona", '{"nombre": "Íñigo"}')
    assert seen[0].content.decode("utf-8") == '{"nombre": "Íñigo"}'


async def test_base_url_trailing_slash_is_ignored():
    transport, seen = _transport(
        lambda r: httpx.Response(200, text="[]"), base_url=BASE + "/",
    )
    await transport.get("/escuela/persona")
    assert str(seen[0].url) == f"{BASE}/escuela/persona"


async def test_connection_error_returns_none():
    def fail(request):
        raise httpx.ConnectError("refused", request=request)

    transport, _ = _transport(fail)
    assert await transport.get("/escuela/persona") is None


async def test_timeout_returns_none():
    def slow(request):
        raise httpx.ReadTimeout("slow", request=request)

    transport, _ = _transport(slow)
    assert await transport.post("/escuela/persona", "{}") is None


async def test_empty_body_returns_none():
    transport, _ = _transport(lambda r: httpx.Response(204))
    assert await transport.patch("/escuela/persona", "{}") is None


async def test_non_utf8_body_returns_none():
    transport, _ = _transport(lambda r: httpx.Response(200, content=b"\xff\xfe\x00"))
    assert await transport.get("/escuela/persona") is None


async def test_error_status_with_body_returns_body():
    transport, _ = _transport(lambda r: httpx.Response(500, text='{"error": "boom"}'))
    assert await transport.get("/escuela/persona") == '{"error": "boom"}'


async def test_malformed_url_returns_none():
    transport = HttpTransport("not a url")
    assert await transport.get("/escuela/persona") is None


async def test_unsupported_scheme_returns_none():
    transport = HttpTransport("ftp://escuela.test/v1")
    assert await transport.get("/escuela/persona") is None


def test_from_settings(settings):
    transport = HttpTransport.from_settings(settings)
    assert transport.base_url == "http://escuela.test/v1"
    assert transport.timeout_seconds is None
    assert transport._client_options() == {}


def test_timeout_option_passed_when_set():
    transport = HttpTransport(BASE, timeout_seconds=2.5)
    assert transport._client_options() == {"timeout": 2.5}
