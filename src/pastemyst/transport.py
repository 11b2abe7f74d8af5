"""
HTTP transport for the PasteMyst API.

Each call is one independent round trip through a fresh ``httpx.AsyncClient``.
There are no retries and nothing is cached between calls.
"""

from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from .config import Settings, get_logger, get_settings
from .core.responses import (
    decode_response,
    map_request_exception,
    parse_http_error_response,
)
from .endpoints import build_headers

M = TypeVar("M", bound=BaseModel)


class Transport:
    """
    Performs requests against the API and decodes the responses.

    Args:
        settings: Client settings; read from the environment when omitted
        http_transport: Optional httpx transport to route requests through,
            for example ``httpx.MockTransport`` in tests
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.api_root = self.settings.api_root
        self._http_transport = http_transport
        self.logger = get_logger("transport")

    def _create_client(self, auth_token: Optional[str]) -> httpx.AsyncClient:
        kwargs: Dict[str, Any] = {
            "headers": build_headers(auth_token, self.settings.user_agent),
        }
        if self.settings.timeout_seconds is not None:
            kwargs["timeout"] = httpx.Timeout(self.settings.timeout_seconds)
        if self._http_transport is not None:
            kwargs["transport"] = self._http_transport
        return httpx.AsyncClient(**kwargs)

    async def request(
        self,
        method: str,
        url: str,
        body: Optional[Dict[str, Any]] = None,
        auth_token: Optional[str] = None,
    ) -> httpx.Response:
        """Send one request and return the response whatever its status."""
        self.logger.debug("%s %s", method, url)

        try:
            async with self._create_client(auth_token) as client:
                response = await client.request(method, url, json=body)
        except httpx.RequestError as e:
            self.logger.error("%s %s failed: %s", method, url, e)
            raise map_request_exception(e, method, url) from e

        self.logger.debug("%s %s -> %d", method, url, response.status_code)
        return response

    async def execute(
        self,
        method: str,
        url: str,
        model: Type[M],
        body: Optional[Dict[str, Any]] = None,
        auth_token: Optional[str] = None,
    ) -> M:
        """Send one request and decode a successful response into ``model``."""
        response = await self.request(method, url, body=body, auth_token=auth_token)

        if not response.is_success:
            raise parse_http_error_response(response)

        return decode_response(response, model)


_default_transport: Optional[Transport] = None


def get_transport() -> Transport:
    """Shared transport built from environment settings."""
    global _default_transport
    if _default_transport is None:
        _default_transport = Transport()
    return _default_transport
