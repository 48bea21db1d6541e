"""Serverless function entrypoint (API Gateway / Lambda-style events).

Event fields read:
    - `httpMethod` (REST API v1) or `requestContext.http.method` (HTTP API v2).
    - `body`, base64-decoded when `isBase64Encoded` is true.

The returned dict carries `statusCode`, `headers` and a string `body`.
"""

from prompt_expander.api.handler import PromptExpansionHandler
from prompt_expander.api.logging_setup import configure_logging

configure_logging()

_handler = PromptExpansionHandler()


def _event_method(event) -> str:
    method = event.get("httpMethod")
    if not method:
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return method or ""


def _to_event_response(result):
    return {
        "statusCode": result.status_code,
        "headers": result.headers,
        "body": result.body_text(),
    }


def handler(event, _ctx, expansion_handler=None):
    expansion_handler = expansion_handler or _handler
    result = expansion_handler.handle(
        _event_method(event),
        event.get("body"),
        base64_encoded=bool(event.get("isBase64Encoded")),
    )
    return _to_event_response(result)
