"""Framework-neutral request pipeline shared by every hosting entrypoint.

Hosting bindings translate their native request into ``(method, body)``,
call :func:`handle_request` and write the returned :class:`HttpResponse`
back in their own format.
"""

import json
import traceback
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Union
from ...application.service import ListingsService
from ..marketplace.relevance_marketplace import RelevanceMarketplaceClient
from ...domain.errors import MethodNotAllowed, UpstreamError
from ...domain.models import UserContext

ALLOWED_METHOD = "POST"
JSON_HEADERS = {"Content-Type": "application/json"}

RawBody = Union[None, bytes, str, Dict[str, Any]]


@dataclass
class HttpResponse:
    status: int
    body: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))

    def to_json(self) -> str:
        return json.dumps(self.body)


def default_service() -> ListingsService:
    return ListingsService(RelevanceMarketplaceClient())


def parse_body(raw: RawBody) -> UserContext:
    """Read ``user.email`` / ``user.company``; anything unreadable means no user."""
    if raw is None or isinstance(raw, dict):
        return UserContext.from_body(raw)
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if not raw.strip():
        return UserContext()
    try:
        return UserContext.from_body(json.loads(raw))
    except ValueError:
        print("[handler] Request body is not JSON; continuing without user context.")
        return UserContext()


def error_response(status: int, message: str, headers: Optional[Dict[str, str]] = None) -> HttpResponse:
    resp = HttpResponse(status=status, body={"error": message})
    if headers:
        resp.headers.update(headers)
    return resp


def _check_method(method: Optional[str]) -> None:
    if method != ALLOWED_METHOD:
        raise MethodNotAllowed(method or "", ALLOWED_METHOD)


def handle_request(
    method: Optional[str],
    body: RawBody = None,
    service: Optional[ListingsService] = None,
    service_factory: Callable[[], ListingsService] = default_service,
) -> HttpResponse:
    try:
        _check_method(method)
    except MethodNotAllowed as e:
        return error_response(405, "Method not allowed", {"Allow": e.allowed})

    owned: Optional[ListingsService] = None
    try:
        user = parse_body(body)
        if service is None:
            service = owned = service_factory()
        payload = service.top_listings(user)
        return HttpResponse(status=200, body=payload)
    except UpstreamError as e:
        print(f"[handler] Marketplace request failed with status {e.status}")
        return error_response(502, "Failed to fetch listings from marketplace")
    except Exception as e:
        print(f"[handler] Server error in fetch-listings: {type(e).__name__}: {e}")
        traceback.print_exc()
        return error_response(500, "Internal server error")
    finally:
        if owned is not None:
            owned.close()
