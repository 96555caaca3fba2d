"""Crons resource"""

from typing import Any, Mapping, Optional, Union

from cuey.models import Cron, HttpMethod, Page, RetryConfig
from cuey.resources.base import UNSET, BaseResource


class CronsResource(BaseResource):
    """Create, list, fetch, update and delete recurring cron jobs"""

    path = "/api/v1/crons"

    async def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        is_active: Optional[bool] = None,
    ) -> Page[Cron]:
        """
        List cron jobs

        Args:
            page: Page number (0-indexed)
            limit: Items per page (1-1000)
            is_active: Only active (True) or inactive (False) crons
        """
        params = {
            "page": page,
            "limit": limit,
            "is_active": None if is_active is None else str(is_active).lower(),
        }
        response = await self.http.get(self.path, params=params)
        return Page[Cron].model_validate(self._envelope(response))

    async def get(self, cron_id: str) -> Cron:
        """Get a single cron job by ID"""
        response = await self.http.get(self._item_path(cron_id))
        return Cron.model_validate(self._unwrap(response))

    async def create(
        self,
        webhook_url: str,
        cron_expression: str,
        method: Union[HttpMethod, str, None] = None,
        timezone: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        payload: Any = None,
        retry_config: Union[RetryConfig, Mapping, None] = None,
        is_active: Optional[bool] = None,
    ) -> Cron:
        """
        Create a cron job

        The cron expression is passed through as-is; the server rejects
        malformed expressions.

        Args:
            webhook_url: Full URL, or a path resolved against the base URL
            cron_expression: Five-field schedule, e.g. "0 0 * * *"
            method: Webhook HTTP method, POST when omitted
            timezone: IANA timezone for the expression, UTC when omitted
            headers: Extra headers sent with the webhook
            payload: JSON payload sent with the webhook
            retry_config: Retry policy; server defaults when omitted
            is_active: Whether the cron fires, active when omitted

        Returns:
            The created cron job
        """
        body = self._validated_target(
            webhook_url, HttpMethod.POST if method is None else method, headers, retry_config
        )
        body.update(
            cron_expression=cron_expression,
            timezone=timezone,
            payload=payload,
            is_active=is_active,
        )
        body = {key: value for key, value in body.items() if value is not None}

        response = await self.http.post(self.path, body)
        return Cron.model_validate(self._unwrap(response))

    async def update(
        self,
        cron_id: str,
        webhook_url: str,
        cron_expression: str,
        method: Union[HttpMethod, str, None] = None,
        timezone: Optional[str] = UNSET,
        headers: Optional[Mapping[str, str]] = UNSET,
        payload: Any = UNSET,
        retry_config: Union[RetryConfig, Mapping, None] = UNSET,
        is_active: Optional[bool] = None,
    ) -> Cron:
        """
        Update a cron job

        timezone, headers, payload and retry_config are only sent when
        passed; passing None clears them. method and is_active are left
        unchanged when None.
        """
        body = self._validated_target(webhook_url, method, headers, retry_config)
        body["cron_expression"] = cron_expression
        self._set_fields(body, timezone=timezone, payload=payload)
        if is_active is not None:
            body["is_active"] = is_active

        response = await self.http.put(self._item_path(cron_id), body)
        return Cron.model_validate(self._unwrap(response))

    async def delete(self, cron_id: str) -> None:
        """Delete a cron job"""
        await self.http.delete(self._item_path(cron_id))
