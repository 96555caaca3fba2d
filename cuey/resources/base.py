"""Shared behaviour for API resources"""

from typing import Any, Dict, Mapping, Optional, Union

from cuey.errors import InternalServerError
from cuey.http import HttpClient
from cuey.models import HttpMethod, RetryConfig
from cuey.validation import (
    normalize_webhook_url,
    validate_headers,
    validate_method,
    validate_retry_config,
)


class _Unset:
    """Marker for an argument the caller did not pass"""

    def __repr__(self) -> str:
        return "UNSET"


# update() leaves UNSET fields out of the body; None is sent as null
UNSET: Any = _Unset()


class BaseResource:
    """Base class holding the transport and the webhook base URL"""

    path: str = ""

    def __init__(self, http: HttpClient, webhook_base_url: Optional[str] = None):
        self.http = http
        self.webhook_base_url = webhook_base_url

    def _item_path(self, resource_id: str) -> str:
        return f"{self.path}/{resource_id}"

    def _validated_target(
        self,
        webhook_url: str,
        method: Union[HttpMethod, str, None],
        headers: Optional[Mapping[str, str]],
        retry_config: Union[RetryConfig, Mapping, None],
    ) -> Dict[str, Any]:
        """
        Run the shared validators in order: method, URL, retry config, headers

        Returns the wire fields; method is left out when None, retry config
        and headers when UNSET.
        """
        body: Dict[str, Any] = {}

        validated_method = validate_method(method)
        if validated_method is not None:
            body["method"] = validated_method

        body["webhook_url"] = normalize_webhook_url(webhook_url, self.webhook_base_url)
        if retry_config is not UNSET:
            body["retry_config"] = validate_retry_config(retry_config)
        if headers is not UNSET:
            body["headers"] = validate_headers(headers)
        return body

    @staticmethod
    def _set_fields(body: Dict[str, Any], **fields: Any) -> Dict[str, Any]:
        body.update((key, value) for key, value in fields.items() if value is not UNSET)
        return body

    @staticmethod
    def _envelope(response: Any) -> Dict[str, Any]:
        if not isinstance(response, dict) or "data" not in response:
            raise InternalServerError(
                "Unexpected response: expected a JSON object with a data field",
                {"response": response},
            )
        return response

    def _unwrap(self, response: Any) -> Any:
        return self._envelope(response)["data"]
