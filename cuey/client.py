"""Cuey Python SDK Client"""

import os
from typing import Optional

import httpx

from cuey.config import Getenv, resolve_settings
from cuey.http import DEFAULT_TIMEOUT, HttpClient
from cuey.models import Cron, Event
from cuey.resources import CronsResource, EventsResource


class Cuey:
    """
    Python SDK for the Cuey webhook scheduling API

    Construction never fails for a missing API key; the first request
    raises ConfigurationError instead.

    Example:
        async with Cuey(api_key="...", base_url="https://example.com") as client:
            event = await client.schedule(
                webhook_url="/webhook",
                scheduled_at="2030-01-01T00:00:00Z",
            )
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        api_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        getenv: Getenv = os.getenv,
    ):
        """
        Args:
            api_key: API key, falls back to CUEY_API_KEY
            base_url: Base URL for relative webhook URLs, falls back to CUEY_BASE_URL
            api_url: Cuey API location, falls back to CUEY_API_URL
            timeout: Request timeout in seconds
            transport: Custom httpx transport
            getenv: Environment lookup used for the fallbacks
        """
        self.settings = resolve_settings(
            api_key=api_key,
            base_url=base_url,
            api_url=api_url,
            getenv=getenv,
        )
        self.http = HttpClient(self.settings, transport=transport, timeout=timeout)
        self.crons = CronsResource(self.http, self.webhook_base_url)
        self.events = EventsResource(self.http, self.webhook_base_url)

    @property
    def webhook_base_url(self) -> Optional[str]:
        return self.settings.webhook_base_url

    async def schedule(self, **kwargs) -> Event:
        """Schedule a one-off event. Alias for events.create()"""
        return await self.events.create(**kwargs)

    async def repeat(self, **kwargs) -> Cron:
        """Create a recurring cron job. Alias for crons.create()"""
        return await self.crons.create(**kwargs)

    async def close(self):
        """Close the client"""
        await self.http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
