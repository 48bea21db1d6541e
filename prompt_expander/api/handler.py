"""
Framework-neutral prompt expansion handler.

Architectural role:
- Owns the complete request -> response contract for prompt expansion.
- Is wrapped by thin transport adapters (`http_api`, `serverless`, `cli`) that only
  translate their native request/response objects.

Request lifecycle:
1. Method gate: `OPTIONS` -> 200 empty, anything but `POST` -> 405.
2. Decode the JSON body and require a non-empty `idea` (400 otherwise).
3. Resolve provider settings (explicit or read from the environment now).
4. Build system prompt + labeled user input, let the provider shape the request.
5. Perform exactly one upstream call.
6. Map the outcome to one `{"prompt": ...}` response.

Error handling strategy:
- `UpstreamError` -> 500 with the provider's own diagnostic.
- Every other exception (body decoding, network, malformed payload) -> 500 with
  the exception description.
- Errors are logged; nothing is retried.

Determinism considerations:
- Response shape is deterministic for a given upstream outcome; generated text is
  not.
"""

import base64
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, field_validator

from prompt_expander.llm.client import send_request
from prompt_expander.llm.errors import UpstreamError
from prompt_expander.llm.provider_config import ProviderSettings, load_settings
from prompt_expander.llm.providers import Provider, get_provider
from prompt_expander.prompting.prompt_builder import SYSTEM_PROMPT, build_user_input

logger = logging.getLogger(__name__)

WRITE_METHOD = "POST"
PREFLIGHT_METHOD = "OPTIONS"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

METHOD_NOT_ALLOWED = "Method Not Allowed"
MISSING_IDEA = "Missing 'idea' in request body"
FALLBACK_PROMPT = "Sorry, the AI could not generate a prompt."


# ============================================================
# Request / Response Schema
# ============================================================

class ExpansionRequest(BaseModel):
    """Validated creative brief. Optional fields default to empty text."""

    idea: str
    style: str = ""
    lighting: str = ""

    @field_validator("idea", "style", "lighting", mode="before")
    @classmethod
    def _as_text(cls, value):
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    body: Optional[Dict[str, str]] = None
    headers: Dict[str, str] = field(default_factory=dict)

    def body_text(self) -> str:
        if self.body is None:
            return ""
        return json.dumps(self.body, ensure_ascii=False)


def _respond(status_code: int, prompt: Optional[str] = None) -> HandlerResponse:
    headers = dict(CORS_HEADERS)
    headers["Content-Type"] = "application/json"
    body = None if prompt is None else {"prompt": prompt}
    return HandlerResponse(status_code=status_code, body=body, headers=headers)


def internal_error_response(err: Exception) -> HandlerResponse:
    """Log `err` and map it to the 500 "Internal Server Error" response."""
    logger.exception("Prompt expansion failed")
    return _respond(500, f"Internal Server Error. Details: {err}")


def decode_body(body: Any, base64_encoded: bool = False) -> Dict[str, Any]:
    """Return the request body as a dict.

    Accepts already-decoded objects, `str` and `bytes`; `base64_encoded` bodies are
    decoded first. Empty bodies and JSON values that are not objects decode to `{}`;
    invalid base64 or JSON raises `ValueError`.
    """
    if body is None:
        return {}
    if base64_encoded and body:
        body = base64.b64decode(body, validate=True)
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")
    if isinstance(body, str):
        if not body.strip():
            return {}
        body = json.loads(body)
    return body if isinstance(body, dict) else {}


# ============================================================
# Handler
# ============================================================

class PromptExpansionHandler:
    """Expand a creative brief into a detailed image-generation prompt.

    Args:
        settings: Fixed provider settings. When omitted, `settings_factory` is called
            on every request so the credential is read at invocation time.
        settings_factory: Zero-argument callable returning `ProviderSettings`.
        provider: Provider adapter override; defaults to the one registered under
            `settings.name`.
        session: Transport exposing `post(url, **kwargs)`; defaults to `requests`.
    """

    def __init__(
        self,
        settings: Optional[ProviderSettings] = None,
        settings_factory: Callable[[], ProviderSettings] = load_settings,
        provider: Optional[Provider] = None,
        session=None,
    ):
        self._settings = settings
        self._settings_factory = settings_factory
        self._provider = provider
        self._session = session

    def handle(self, method: str, body: Any = None, base64_encoded: bool = False) -> HandlerResponse:
        method = (method or "").upper()

        if method == PREFLIGHT_METHOD:
            return _respond(200)

        if method != WRITE_METHOD:
            return _respond(405, METHOD_NOT_ALLOWED)

        try:
            payload = decode_body(body, base64_encoded)

            if not payload.get("idea"):
                return _respond(400, MISSING_IDEA)

            brief = ExpansionRequest.model_validate(payload)
            return _respond(200, self.expand(brief))

        except UpstreamError as err:
            return _respond(
                500,
                f"{err.provider} API Error: Check key or billing: {err.message}",
            )

        except Exception as err:
            return internal_error_response(err)

    def expand(self, brief: ExpansionRequest) -> str:
        """Run one upstream call for `brief` and return the trimmed text.

        Raises:
            UpstreamError: Provider returned a non-success status.
            MalformedResponseError: Success payload lacked the expected fields.
            requests.RequestException: Transport failure.
        """
        settings = self._settings or self._settings_factory()
        provider = self._provider or get_provider(settings.name)

        user_input = build_user_input(brief.idea, brief.style, brief.lighting)
        outbound = provider.build_request(settings, SYSTEM_PROMPT, user_input)

        payload = send_request(provider, outbound, settings.timeout, session=self._session)
        text = provider.extract_text(payload).strip()

        return text or FALLBACK_PROMPT
