"""Client configuration resolution"""

import os
from dataclasses import dataclass, field
from typing import Callable, Optional

from cuey.errors import ConfigurationError


DEFAULT_API_URL = "https://cuey.dev"

API_KEY_ENV = "CUEY_API_KEY"
BASE_URL_ENV = "CUEY_BASE_URL"
API_URL_ENV = "CUEY_API_URL"

Getenv = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class ClientSettings:
    """
    Resolved client configuration

    Always constructible. The API key falls back to the environment
    each time a request needs it, so a key exported after the client was
    built is still picked up.
    """
    api_key: Optional[str] = None
    webhook_base_url: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    getenv: Getenv = field(default=os.getenv, repr=False, compare=False)

    def require_api_key(self) -> str:
        api_key = self.api_key or self.getenv(API_KEY_ENV)
        if not api_key:
            raise ConfigurationError(
                "API key is required. Provide it via api_key or set the "
                f"{API_KEY_ENV} environment variable."
            )
        return api_key


def resolve_settings(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    api_url: Optional[str] = None,
    getenv: Getenv = os.getenv,
) -> ClientSettings:
    """
    Resolve settings from explicit values with environment fallback

    Explicit non-empty values win over the environment. The base URL and
    API URL are resolved now; the API key lookup is deferred to
    require_api_key(). getenv is injectable so callers (and tests) can
    supply another lookup source.
    """
    return ClientSettings(
        api_key=api_key or None,
        webhook_base_url=base_url or getenv(BASE_URL_ENV) or None,
        api_url=(api_url or getenv(API_URL_ENV) or DEFAULT_API_URL).rstrip("/"),
        getenv=getenv,
    )
