"""Events resource"""

from datetime import datetime
from typing import Any, Mapping, Optional, Union

from cuey.models import Event, EventStatus, HttpMethod, Page, RetryConfig
from cuey.resources.base import UNSET, BaseResource
from cuey.validation import validate_scheduled_at


class EventsResource(BaseResource):
    """Create, list, fetch, update and delete one-off scheduled events"""

    path = "/api/v1/events"

    async def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Union[EventStatus, str, None] = None,
        cron_id: Optional[str] = None,
    ) -> Page[Event]:
        """
        List events

        Args:
            page: Page number (0-indexed)
            limit: Items per page (1-1000)
            status: Only events in this status
            cron_id: Only events spawned by this cron

        Returns:
            Page of events with pagination metadata
        """
        params = {
            "page": page,
            "limit": limit,
            "status": status.value if isinstance(status, EventStatus) else status,
            "cron_id": cron_id,
        }
        response = await self.http.get(self.path, params=params)
        return Page[Event].model_validate(self._envelope(response))

    async def get(self, event_id: str) -> Event:
        """Get a single event by ID"""
        response = await self.http.get(self._item_path(event_id))
        return Event.model_validate(self._unwrap(response))

    async def create(
        self,
        webhook_url: str,
        scheduled_at: Union[str, datetime],
        method: Union[HttpMethod, str, None] = None,
        headers: Optional[Mapping[str, str]] = None,
        payload: Any = None,
        retry_config: Union[RetryConfig, Mapping, None] = None,
    ) -> Event:
        """
        Schedule an event for future execution

        Args:
            webhook_url: Full URL, or a path resolved against the base URL
            scheduled_at: ISO-8601 timestamp strictly in the future;
                without an offset it is taken as UTC
            method: Webhook HTTP method, POST when omitted
            headers: Extra headers sent with the webhook
            payload: JSON payload sent with the webhook
            retry_config: Retry policy; server defaults when omitted

        Returns:
            The created event

        Raises:
            ValidationError: Input rejected locally or by the server
        """
        body = self._validated_target(
            webhook_url, HttpMethod.POST if method is None else method, headers, retry_config
        )
        body["scheduled_at"] = validate_scheduled_at(scheduled_at)
        body["payload"] = payload

        # omitted optional fields fall back to server defaults
        body = {key: value for key, value in body.items() if value is not None}

        response = await self.http.post(self.path, body)
        return Event.model_validate(self._unwrap(response))

    async def update(
        self,
        event_id: str,
        webhook_url: str,
        scheduled_at: Union[str, datetime],
        method: Union[HttpMethod, str, None] = None,
        headers: Optional[Mapping[str, str]] = UNSET,
        payload: Any = UNSET,
        retry_config: Union[RetryConfig, Mapping, None] = UNSET,
    ) -> Event:
        """
        Update a pending event

        headers, payload and retry_config are only sent when passed;
        passing None clears them. method is left unchanged when None.
        """
        body = self._validated_target(webhook_url, method, headers, retry_config)
        body["scheduled_at"] = validate_scheduled_at(scheduled_at)
        self._set_fields(body, payload=payload)

        response = await self.http.put(self._item_path(event_id), body)
        return Event.model_validate(self._unwrap(response))

    async def delete(self, event_id: str) -> None:
        """Delete a pending event that was not created by a cron"""
        await self.http.delete(self._item_path(event_id))
