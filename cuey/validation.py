"""
Client-side request validation

Pure functions run by the resource clients before every create and
update call. Each raises cuey.errors.ValidationError before anything is
sent over the network.
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

import httpx

from cuey.errors import ValidationError
from cuey.models import ALLOWED_HTTP_METHODS, BackoffType, HttpMethod, RetryConfig, dump_retry_config


MAX_RETRIES_RANGE = (1, 10)
BACKOFF_MS_RANGE = (100, 5000)
BACKOFF_TYPES = tuple(backoff.value for backoff in BackoffType)


def _is_valid_url(url: str) -> bool:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.host)


def normalize_webhook_url(webhook_url: Any, base_url: Optional[str] = None) -> str:
    """
    Validate a webhook URL and resolve relative paths

    Args:
        webhook_url: Full http(s) URL, or a path starting with "/"
        base_url: Base URL that relative paths are appended to

    Returns:
        The fully qualified webhook URL

    Raises:
        ValidationError: URL is malformed, or relative without a base URL
    """
    if not webhook_url or not isinstance(webhook_url, str):
        raise ValidationError(
            "webhook_url is required and must be a string",
            {"field": "webhook_url", "value": webhook_url},
        )

    trimmed = webhook_url.strip()

    if trimmed.startswith(("http://", "https://")):
        if not _is_valid_url(trimmed):
            raise ValidationError(
                f'Invalid webhook URL: "{trimmed}" is not a valid URL',
                {"field": "webhook_url", "value": trimmed},
            )
        return trimmed

    if trimmed.startswith("/"):
        if not base_url:
            raise ValidationError(
                "Relative webhook URL provided but no base URL is configured. "
                "Either provide a full URL (starting with http:// or https://) "
                "or pass base_url to the client or set the CUEY_BASE_URL "
                "environment variable.",
                {"field": "webhook_url", "value": trimmed, "base_url": base_url},
            )

        full_url = base_url.removesuffix("/") + trimmed
        if not _is_valid_url(full_url):
            raise ValidationError(
                f'Invalid webhook URL: cannot combine base URL "{base_url}" '
                f'with path "{trimmed}"',
                {"field": "webhook_url", "value": trimmed, "base_url": base_url},
            )
        return full_url

    raise ValidationError(
        f'Invalid webhook URL: "{trimmed}" must be a full URL (starting with '
        "http:// or https://) or a relative path (starting with /)",
        {"field": "webhook_url", "value": trimmed},
    )


def _check_int_range(key: str, value: Any, bounds: tuple) -> None:
    low, high = bounds
    # bool is an int subclass; it is never a valid count
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise ValidationError(
            f"retry_config.{key} must be an integer between {low} and {high}",
            {"field": f"retry_config.{key}", "value": value},
        )


def validate_retry_config(
    retry_config: Union[RetryConfig, Mapping, None],
) -> Optional[Dict[str, Any]]:
    """
    Check retry policy bounds

    None means "use server defaults". Only the keys that are present are
    checked; a partial config is allowed.

    Returns:
        The config as a dict with wire keys, or None
    """
    if retry_config is None:
        return None

    if isinstance(retry_config, RetryConfig):
        config = dump_retry_config(retry_config)
    elif isinstance(retry_config, Mapping):
        config = dict(retry_config)
    else:
        raise ValidationError(
            "retry_config must be an object or null",
            {"field": "retry_config", "value": retry_config},
        )

    if "maxRetries" in config:
        _check_int_range("maxRetries", config["maxRetries"], MAX_RETRIES_RANGE)
    if "backoffMs" in config:
        _check_int_range("backoffMs", config["backoffMs"], BACKOFF_MS_RANGE)
    if "backoffType" in config:
        backoff_type = config["backoffType"]
        if isinstance(backoff_type, BackoffType):
            backoff_type = config["backoffType"] = backoff_type.value
        if backoff_type not in BACKOFF_TYPES:
            raise ValidationError(
                'retry_config.backoffType must be either "exponential" or "linear"',
                {"field": "retry_config.backoffType", "value": backoff_type},
            )

    return config


def validate_headers(headers: Optional[Mapping]) -> Optional[Dict[str, str]]:
    """Check that custom webhook headers map non-empty names to strings"""
    if headers is None:
        return None

    if not isinstance(headers, Mapping):
        raise ValidationError(
            "headers must be an object or null",
            {"field": "headers", "value": headers},
        )

    for key, value in headers.items():
        if not isinstance(key, str) or not key.strip():
            raise ValidationError(
                "All header keys must be non-empty strings",
                {"field": "headers", "key": key, "value": value},
            )
        if not isinstance(value, str):
            raise ValidationError(
                f'Header "{key}" must have a string value',
                {"field": "headers", "key": key, "value": value},
            )

    return dict(headers)


def validate_method(method: Union[HttpMethod, str, None]) -> Optional[str]:
    """
    Check an HTTP method against the allowed set

    None passes through unchanged; defaulting is up to the caller.
    """
    if method is None:
        return None

    if isinstance(method, HttpMethod):
        return method.value

    if method not in ALLOWED_HTTP_METHODS:
        raise ValidationError(
            f'Invalid HTTP method: "{method}". Must be one of: '
            f"{', '.join(ALLOWED_HTTP_METHODS)}",
            {"field": "method", "value": method, "allowed_methods": list(ALLOWED_HTTP_METHODS)},
        )
    return method


def _as_utc(value: datetime) -> datetime:
    # naive timestamps are taken as UTC
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def validate_scheduled_at(
    scheduled_at: Union[str, datetime, None],
    now: Optional[datetime] = None,
) -> str:
    """
    Check that scheduled_at is a parseable instant strictly in the future

    Args:
        scheduled_at: ISO-8601 timestamp or datetime; values without an
            offset are taken as UTC and sent with "+00:00"
        now: Reference instant (defaults to the current UTC time)

    Returns:
        The timestamp as sent on the wire

    Raises:
        ValidationError: Missing, unparseable, or not after now
    """
    if isinstance(scheduled_at, datetime):
        instant = _as_utc(scheduled_at)
        trimmed = instant.isoformat()
    else:
        if not scheduled_at or not isinstance(scheduled_at, str):
            raise ValidationError(
                "scheduled_at is required and must be a string",
                {"field": "scheduled_at", "value": scheduled_at},
            )

        trimmed = scheduled_at.strip()
        if not trimmed:
            raise ValidationError(
                "scheduled_at cannot be empty",
                {"field": "scheduled_at", "value": scheduled_at},
            )

        try:
            parsed = datetime.fromisoformat(trimmed)
        except ValueError:
            raise ValidationError(
                f'Invalid scheduled_at format: "{trimmed}" is not a valid ISO timestamp',
                {"field": "scheduled_at", "value": trimmed},
            ) from None

        instant = _as_utc(parsed)
        if parsed.tzinfo is None:
            # send the offset so the server reads the same instant
            trimmed = instant.isoformat()

    now = _as_utc(now) if now else datetime.now(timezone.utc)
    if instant <= now:
        raise ValidationError(
            f'scheduled_at must be in the future. Received: "{trimmed}"',
            {"field": "scheduled_at", "value": trimmed, "now": now.isoformat()},
        )

    return trimmed
