"""Cuey Python SDK"""

from cuey.client import Cuey
from cuey.config import DEFAULT_API_URL, ClientSettings, resolve_settings
from cuey.errors import (
    BadRequestError,
    ConfigurationError,
    CueyError,
    ErrorCode,
    InternalServerError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from cuey.models import (
    ALLOWED_HTTP_METHODS,
    BackoffType,
    Cron,
    Event,
    EventStatus,
    HttpMethod,
    Page,
    Pagination,
    RetryConfig,
)
from cuey.resources import CronsResource, EventsResource

__version__ = "0.1.0"

# Configured from CUEY_API_KEY / CUEY_BASE_URL; the key is checked on first use
cuey = Cuey()

__all__ = [
    "ALLOWED_HTTP_METHODS",
    "BackoffType",
    "BadRequestError",
    "ClientSettings",
    "ConfigurationError",
    "Cron",
    "CronsResource",
    "Cuey",
    "CueyError",
    "DEFAULT_API_URL",
    "ErrorCode",
    "Event",
    "EventStatus",
    "EventsResource",
    "HttpMethod",
    "InternalServerError",
    "NotFoundError",
    "Page",
    "Pagination",
    "RetryConfig",
    "UnauthorizedError",
    "ValidationError",
    "cuey",
    "resolve_settings",
]
