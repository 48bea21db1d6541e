"""HTTP transport for provider requests.

Architectural role:
    Executes one `OutboundRequest` built by a provider adapter and returns the
    decoded success payload. Status mapping lives here; text extraction lives in
    `prompt_expander.llm.providers`.

Retry behavior:
    No retry loop is implemented. Each call is attempted exactly once with the
    configured timeout.

Failure handling model:
    - Non-success status -> `UpstreamError` carrying the upstream message, or the
      HTTP reason phrase when the error body does not parse.
    - Success status with a non-JSON body -> `MalformedResponseError`.
    - `requests` transport exceptions propagate unchanged to the caller.

Security considerations:
    Request headers and query parameters carry the credential and are never logged.
"""

import logging

import requests
from pydantic import ValidationError

from prompt_expander.llm.errors import MalformedResponseError, UpstreamError
from prompt_expander.llm.models import UpstreamErrorBody

logger = logging.getLogger(__name__)


def extract_error_message(response) -> str:
    """Return the upstream error description for a failed response.

    Falls back to the reason phrase (or the bare status code) when the body is not
    JSON or lacks `error.message`.
    """
    fallback = response.reason or f"HTTP {response.status_code}"
    try:
        body = UpstreamErrorBody.model_validate(response.json())
    except (ValueError, ValidationError):
        return fallback

    if body.error is not None and body.error.message:
        return body.error.message
    return fallback


def send_request(provider, outbound, timeout, session=None):
    """POST `outbound` to the provider and return the decoded JSON payload.

    Args:
        provider: Adapter whose `label` is used in errors and logs.
        outbound: `OutboundRequest` produced by `provider.build_request`.
        timeout: Timeout in seconds passed to `requests`.
        session: Object exposing `post(url, **kwargs)`; defaults to the `requests`
            module. Tests inject a fake here.

    Raises:
        UpstreamError: Provider answered with a non-success status.
        MalformedResponseError: Success body is not JSON.
        requests.RequestException: Network-level failure.
    """
    transport = session or requests

    response = transport.post(
        outbound.url,
        headers=outbound.headers,
        params=outbound.params or None,
        json=outbound.json,
        timeout=timeout,
    )

    if not response.ok:
        message = extract_error_message(response)
        logger.error(
            "%s request failed with status %s: %s",
            provider.label,
            response.status_code,
            message,
        )
        raise UpstreamError(provider.label, response.status_code, message)

    try:
        return response.json()
    except ValueError as err:
        raise MalformedResponseError(
            f"{provider.label} returned a non-JSON success body"
        ) from err
