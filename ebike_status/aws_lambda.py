"""Lambda handler for API Gateway proxy integration (REST v1 and HTTP API v2 events)."""

from ebike_status.handler import StatusRequest, handle
from ebike_status.log import configure_logging

configure_logging(log_format="json")


def _header(event, name):
    """Case-insensitive header lookup; falls back to multiValueHeaders (v1 only)."""
    name = name.lower()
    for key, value in (event.get("headers") or {}).items():
        if key.lower() == name and value is not None:
            return value
    for key, values in (event.get("multiValueHeaders") or {}).items():
        if key.lower() == name and values:
            return ", ".join(values)
    return None


def to_status_request(event: dict) -> StatusRequest:
    query = event.get("queryStringParameters") or {}
    return StatusRequest(
        accept=_header(event, "accept"),
        user_agent=_header(event, "user-agent"),
        fmt=query.get("format"),
    )


def handler(event: dict, context) -> dict:
    """AWS Lambda handler for API Gateway proxy integration."""
    resp = handle(to_status_request(event or {}))
    return {
        "statusCode": resp.status_code,
        "headers": resp.headers(),
        "body": resp.body,
        "isBase64Encoded": False,
    }
