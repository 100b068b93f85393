import base64
from typing import Any, Dict, Mapping, Optional
from .handler import handle_request
from ...application.service import ListingsService


def _event_method(event: Mapping[str, Any]) -> Optional[str]:
    method = event.get("httpMethod")
    if method:
        return method
    # HTTP API (payload v2) events
    return ((event.get("requestContext") or {}).get("http") or {}).get("method")


def _event_body(event: Mapping[str, Any]) -> Optional[bytes]:
    raw = event.get("body")
    if raw is None:
        return None
    if event.get("isBase64Encoded"):
        return base64.b64decode(raw)
    return raw.encode("utf-8") if isinstance(raw, str) else raw


def lambda_handler(event: Mapping[str, Any], context: Any = None, service: Optional[ListingsService] = None) -> Dict[str, Any]:
    try:
        body = _event_body(event)
    except ValueError as e:
        print(f"[handler] Could not decode event body: {e}")
        body = None
    resp = handle_request(_event_method(event), body, service=service)
    return {
        "statusCode": resp.status,
        "headers": resp.headers,
        "body": resp.to_json(),
    }
