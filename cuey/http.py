"""HTTP transport for the Cuey API"""

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from cuey.config import ClientSettings
from cuey.errors import InternalServerError, error_from_response


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class HttpClient:
    """
    Issues one authenticated JSON request per call

    The API key is read from the settings on every request, so a client
    without a key can be built and only fails when it is used. Nothing is
    retried; transport errors from httpx propagate unchanged.
    """

    def __init__(
        self,
        settings: ClientSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.settings = settings
        self.transport = transport
        self.timeout = timeout
        self.client: Optional[httpx.AsyncClient] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def get_client(self) -> httpx.AsyncClient:
        """
        Get or create the connection pool for the running event loop

        Pooled connections belong to the loop that opened them, so a new
        pool is created when the client is used from another loop (e.g.
        successive asyncio.run calls).
        """
        loop = asyncio.get_running_loop()
        if self.client is None or self.client.is_closed or self._loop is not loop:
            if self.client is not None and not self.client.is_closed:
                logger.debug("Event loop changed, opening a new connection pool")
            self.client = httpx.AsyncClient(
                base_url=self.settings.api_url,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
                transport=self.transport,
            )
            self._loop = loop
        return self.client

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send a request and decode the response

        Args:
            method: HTTP method
            path: API path, e.g. "/api/v1/events"
            body: JSON-serializable request body (omitted when None)
            params: Query parameters; None values are dropped

        Returns:
            Decoded JSON, response text, or None for an empty body

        Raises:
            ConfigurationError: No API key is configured
            CueyError: Non-2xx response or unreadable JSON
        """
        api_key = self.settings.require_api_key()

        kwargs: Dict[str, Any] = {
            "headers": {"Authorization": f"Bearer {api_key}"},
        }
        if body is not None:
            kwargs["json"] = body
        if params:
            query = {key: value for key, value in params.items() if value is not None}
            if query:
                kwargs["params"] = query

        response = await self.get_client().request(method, path, **kwargs)
        logger.debug("%s %s -> %s", method, response.request.url, response.status_code)

        data = self._decode(response)

        if not response.is_success:
            raise error_from_response(response.status_code, data)

        return data

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            try:
                return response.json()
            except ValueError as e:
                raise InternalServerError(f"Failed to parse JSON response: {e}") from e

        return response.text

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def aclose(self):
        """Close the underlying connection pool"""
        if self.client is not None:
            await self.client.aclose()
