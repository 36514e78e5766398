"""HTTP Transport - GET/POST/PATCH against one base URL, text in, text out.

Invariants:
    - Every call resolves exactly once, to the response text or None
    - None is the only failure signal: malformed URL, any httpx error, an empty
      body or a body that is not UTF-8 all look the same to the caller
    - Nothing is raised past this boundary for transport-level failures
    - Status codes are not interpreted; an error status with a body returns the body
    - No retries, no parsing, no state across calls besides an injected client

Design Decisions:
    - Injected httpx.AsyncClient is reused as-is (tests pass a MockTransport);
      without one, a client is opened and closed per request
    - timeout_seconds=None leaves httpx's default timeout in place
"""

import logging

import httpx

from api_bridge.config import Settings

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class HttpTransport:
    """Minimal async HTTP client for the escuela service."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = client

    @classmethod
    def from_settings(
        cls, settings: Settings, client: httpx.AsyncClient | None = None,
    ) -> "HttpTransport":
        return cls(
            settings.base_url,
            timeout_seconds=settings.http_timeout_seconds,
            client=client,
        )

    async def get(self, path: str) -> str | None:
        return await self.request("GET", path)

    async def post(self, path: str, body: str) -> str | None:
        return await self.request("POST", path, body)

    async def patch(self, path: str, body: str) -> str | None:
        return await self.request("PATCH", path, body)

    async def request(
        self, method: str, path: str, body: str | None = None,
    ) -> str | None:
        """Issue one request. Returns the raw body text, or None on failure."""
        url = f"{self.base_url}{path}"
        log_extra = {"method": method, "path": path}
        headers = {"Content-Type": JSON_CONTENT_TYPE} if body is not None else {}
        content = body.encode("utf-8") if body is not None else None

        try:
            if self._client is not None:
                response = await self._client.request(
                    method, url, content=content, headers=headers,
                )
            else:
                async with httpx.AsyncClient(**self._client_options()) as client:
                    response = await client.request(
                        method, url, content=content, headers=headers,
                    )
        except httpx.InvalidURL as e:
            logger.warning("Invalid URL %r: %s", url, e, extra=log_extra)
            return None
        except httpx.HTTPError as e:
            logger.warning("Transport error: %s", e, extra=log_extra)
            return None

        log_extra["status_code"] = response.status_code
        if response.status_code >= 400:
            logger.warning("Server answered with an error status", extra=log_extra)

        if not response.content:
            logger.warning("Response had no body", extra=log_extra)
            return None
        try:
            text = response.content.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Response body is not UTF-8", extra=log_extra)
            return None

        logger.debug("Request completed", extra=log_extra)
        return text

    def _client_options(self) -> dict:
        if self.timeout_seconds is None:
            return {}
        return {"timeout": self.timeout_seconds}
