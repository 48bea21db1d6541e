"""Provider adapters for prompt expansion.

Architectural role:
    Isolates everything provider-specific behind two operations used by
    `prompt_expander.api.handler`:

    - `build_request(settings, system_prompt, user_input)` -> `OutboundRequest`
    - `extract_text(payload)` -> generated text

Provider handling:
    - OpenAI (chat completions): bearer credential header, system + user messages,
      `temperature` and `max_tokens` at top level.
    - Gemini (generateContent): credential as `key` query parameter, a single
      user-role part carrying system instruction and user input,
      `generationConfig` with `temperature` and `maxOutputTokens`.

Adding a provider:
    Subclass `BaseProvider`, implement both operations and register it in
    `PROVIDER_REGISTRY` under the same key used in `provider_config.PROVIDERS`.

Failure handling model:
    `extract_text` raises `MalformedResponseError` when the success payload does
    not contain the expected fields. Empty text is not an error here; the handler
    applies its own fallback.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Protocol

from pydantic import ValidationError

from prompt_expander.llm.errors import MalformedResponseError
from prompt_expander.llm.models import ChatCompletionResponse, GenerateContentResponse
from prompt_expander.llm.provider_config import ProviderSettings


@dataclass(frozen=True)
class OutboundRequest:
    """Transport-neutral description of one upstream POST."""

    url: str
    json: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)


class Provider(Protocol):
    """Capability set the handler needs from a provider."""

    label: str

    def build_request(
        self, settings: ProviderSettings, system_prompt: str, user_input: str
    ) -> OutboundRequest:
        ...

    def extract_text(self, payload: Any) -> str:
        ...


class BaseProvider:
    label = "Provider"

    def _validate(self, model, payload: Any):
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"{self.label} response is not a JSON object"
            )
        try:
            return model.model_validate(payload)
        except ValidationError as err:
            raise MalformedResponseError(
                f"{self.label} response has an unexpected shape: {err}"
            ) from err


class OpenAIProvider(BaseProvider):
    label = "OpenAI"

    def build_request(self, settings, system_prompt, user_input):
        return OutboundRequest(
            url=settings.url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {settings.api_key}",
            },
            json={
                "model": settings.model,
                "messages": [
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_input},
                ],
                "temperature": settings.temperature,
                "max_tokens": settings.max_tokens,
            },
        )

    def extract_text(self, payload):
        data = self._validate(ChatCompletionResponse, payload)

        if not data.choices:
            raise MalformedResponseError("OpenAI response contains no choices")

        message = data.choices[0].message
        if message is None:
            raise MalformedResponseError("OpenAI choice contains no message")

        return message.content or ""


class GeminiProvider(BaseProvider):
    label = "Gemini"

    def build_request(self, settings, system_prompt, user_input):
        return OutboundRequest(
            url=settings.url,
            headers={"Content-Type": "application/json"},
            params={"key": settings.api_key},
            json={
                "contents": [
                    {
                        "role": "user",
                        "parts": [{"text": f"{system_prompt}\n\n{user_input}"}],
                    }
                ],
                "generationConfig": {
                    "temperature": settings.temperature,
                    "maxOutputTokens": settings.max_tokens,
                },
            },
        )

    def extract_text(self, payload):
        data = self._validate(GenerateContentResponse, payload)

        if not data.candidates:
            raise MalformedResponseError("Gemini response contains no candidates")

        content = data.candidates[0].content
        if content is None or not content.parts:
            raise MalformedResponseError("Gemini candidate contains no content parts")

        return content.parts[0].text or ""


PROVIDER_REGISTRY: Dict[str, type] = {
    "openai": OpenAIProvider,
    "gemini": GeminiProvider,
}


def get_provider(name: str) -> Provider:
    """Instantiate the adapter registered under `name`."""
    try:
        return PROVIDER_REGISTRY[name]()
    except KeyError:
        raise ValueError(f"Unknown provider: {name}") from None
