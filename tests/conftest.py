"""Shared fixtures: an in-memory stand-in for the Cuey API"""

import json
import uuid
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from cuey import Cuey


TEST_API_KEY = "test-api-key"


def error_response(status_code, message, code=None, details=None):
    error = {"message": message}
    if code:
        error["code"] = code
    if details is not None:
        error["details"] = details
    return httpx.Response(status_code, json={"error": error})


class FakeCueyServer:
    """
    Minimal fake of the remote API

    Echoes stored resources, rejects cron expressions that are not five
    fields and answers 500 for pages past the end, like the real service.
    """

    def __init__(self, api_key=TEST_API_KEY):
        self.api_key = api_key
        self.store = {"events": {}, "crons": {}}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.headers.get("Authorization") != f"Bearer {self.api_key}":
            return error_response(401, "Invalid API key", "UNAUTHORIZED")

        parts = request.url.path.strip("/").split("/")
        if len(parts) < 3 or parts[:2] != ["api", "v1"] or parts[2] not in self.store:
            return error_response(404, "Route not found", "NOT_FOUND")

        kind = parts[2]
        item_id = parts[3] if len(parts) > 3 else None
        items = self.store[kind]

        if item_id is None:
            if request.method == "GET":
                return self._list(kind, request)
            if request.method == "POST":
                return self._create(kind, json.loads(request.content))
            return error_response(400, "Method not allowed", "BAD_REQUEST")

        if item_id not in items:
            return error_response(404, f"{kind[:-1].capitalize()} not found", "NOT_FOUND")

        if request.method == "GET":
            return httpx.Response(200, json={"data": items[item_id]})
        if request.method == "PUT":
            body = json.loads(request.content)
            rejected = self._check(kind, body)
            if rejected:
                return rejected
            items[item_id].update(body)
            return httpx.Response(200, json={"data": items[item_id]})
        if request.method == "DELETE":
            del items[item_id]
            return httpx.Response(204)

        return error_response(400, "Method not allowed", "BAD_REQUEST")

    def _check(self, kind, body):
        if kind == "crons" and len(str(body.get("cron_expression", "")).split()) != 5:
            return error_response(
                400,
                "Invalid cron expression",
                "VALIDATION_ERROR",
                {"field": "cron_expression", "value": body.get("cron_expression")},
            )
        return None

    def _create(self, kind, body):
        rejected = self._check(kind, body)
        if rejected:
            return rejected

        now = datetime.now(timezone.utc).isoformat()
        resource = {
            "id": str(uuid.uuid4()),
            "headers": None,
            "payload": None,
            "retry_config": None,
            "created_at": now,
            "updated_at": now,
            "team_id": "team-1",
        }
        if kind == "events":
            resource.update(
                cron_id=None,
                retry_of=None,
                executed_at=None,
                status="pending",
                response_status=None,
                response_headers=None,
                response_body=None,
                response_duration=None,
                response_error=None,
            )
        else:
            resource.update(timezone=None, is_active=True)
        resource.update(body)

        self.store[kind][resource["id"]] = resource
        return httpx.Response(201, json={"data": resource})

    def _list(self, kind, request):
        params = request.url.params
        page = int(params.get("page", 0))
        limit = int(params.get("limit", 100))

        items = list(self.store[kind].values())
        if "status" in params:
            items = [item for item in items if item["status"] == params["status"]]
        if "cron_id" in params:
            items = [item for item in items if item["cron_id"] == params["cron_id"]]
        if "is_active" in params:
            active = params["is_active"] == "true"
            items = [item for item in items if item["is_active"] is active]

        total = len(items)
        if page > 0 and page * limit >= total:
            return error_response(500, "Page out of range")

        return httpx.Response(
            200,
            json={
                "data": items[page * limit:(page + 1) * limit],
                "pagination": {"page": page, "limit": limit, "total": total},
            },
        )

    def seed_event(self, **fields):
        event = {
            "id": str(uuid.uuid4()),
            "cron_id": None,
            "retry_of": None,
            "scheduled_at": future_timestamp(),
            "executed_at": None,
            "status": "pending",
            "webhook_url": "https://example.com/webhook",
            "method": "POST",
            "headers": None,
            "payload": None,
            "retry_config": None,
            "response_status": None,
            "response_headers": None,
            "response_body": None,
            "response_duration": None,
            "response_error": None,
            "created_at": None,
            "updated_at": None,
            "team_id": "team-1",
        }
        event.update(fields)
        self.store["events"][event["id"]] = event
        return event

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_body(self):
        return json.loads(self.last_request.content)


def future_timestamp(hours=1) -> str:
    return (datetime.now(timezone.utc) + timedelta(hours=hours)).isoformat()


def make_client(handler, api_key=TEST_API_KEY, base_url=None, environ=None) -> Cuey:
    environ = {} if environ is None else environ
    return Cuey(
        api_key=api_key,
        base_url=base_url,
        transport=httpx.MockTransport(handler),
        getenv=environ.get,
    )


@pytest.fixture
def server():
    return FakeCueyServer()


@pytest.fixture
def client(server):
    return make_client(server, base_url="https://example.com")
