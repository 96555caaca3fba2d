"""Cuey resource models"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class HttpMethod(str, Enum):
    """HTTP methods accepted for webhook requests"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


ALLOWED_HTTP_METHODS = tuple(method.value for method in HttpMethod)


class EventStatus(str, Enum):
    """Event execution status (owned by the server)"""
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


class BackoffType(str, Enum):
    """Retry backoff strategy"""
    EXPONENTIAL = "exponential"
    LINEAR = "linear"


class RetryConfig(BaseModel):
    """
    Retry policy applied by the server to failed webhook deliveries

    Wire keys are camelCase; bounds are checked by
    cuey.validation.validate_retry_config before sending.
    """
    model_config = ConfigDict(populate_by_name=True)

    max_retries: Optional[int] = Field(None, alias="maxRetries", description="1-10")
    backoff_ms: Optional[int] = Field(None, alias="backoffMs", description="100-5000 ms")
    backoff_type: Optional[BackoffType] = Field(None, alias="backoffType")


class Event(BaseModel):
    """One-off scheduled webhook invocation"""
    id: str
    cron_id: Optional[str] = None
    retry_of: Optional[str] = None
    scheduled_at: datetime
    executed_at: Optional[datetime] = None
    status: EventStatus
    webhook_url: str
    method: HttpMethod
    headers: Optional[Any] = None
    payload: Optional[Any] = None
    retry_config: Optional[RetryConfig] = None
    response_status: Optional[int] = None
    response_headers: Optional[Any] = None
    response_body: Optional[str] = Field(None, description="Truncated to 1KB by the server")
    response_duration: Optional[float] = Field(None, description="Milliseconds")
    response_error: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    team_id: Optional[str] = None

    @property
    def is_retry(self) -> bool:
        return self.retry_of is not None

    @property
    def is_finished(self) -> bool:
        return self.status in (EventStatus.SUCCESS, EventStatus.FAILED)


class Cron(BaseModel):
    """Recurring webhook schedule"""
    id: str
    cron_expression: str
    timezone: Optional[str] = Field(None, description="Null means UTC")
    webhook_url: str
    method: HttpMethod
    headers: Optional[Any] = None
    payload: Optional[Any] = None
    retry_config: Optional[RetryConfig] = None
    is_active: Optional[bool] = Field(None, description="Null means active")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    team_id: Optional[str] = None


class Pagination(BaseModel):
    """Pagination metadata for list responses"""
    page: int
    limit: int
    total: int


T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """Paginated list envelope"""
    data: List[T] = Field(default_factory=list)
    pagination: Pagination


def dump_retry_config(retry_config: RetryConfig) -> Dict[str, Any]:
    """Serialize a RetryConfig with wire keys, dropping unset fields"""
    return retry_config.model_dump(by_alias=True, exclude_unset=True, mode="json")
