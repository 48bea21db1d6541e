"""Provider/runtime configuration for the LLM layer.

Architectural role:
    Centralizes provider selection, generation defaults and credential lookup for
    `prompt_expander.llm.providers` and `prompt_expander.api.handler`.

Model call flow integration:
    - `handler.PromptExpansionHandler` asks `load_settings()` for a fresh
      `ProviderSettings` on every invocation (or receives one explicitly).
    - `providers.get_provider` maps `ProviderSettings.name` to a provider adapter.

Determinism:
    Deterministic for a fixed process environment. The credential is read at call
    time, never cached at import.

Failure behavior:
    Missing credentials are represented as an empty string and surface only through
    the upstream provider's own error response. Unknown provider names raise
    `ValueError`.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

# Primary provider routing control.
DEFAULT_PROVIDER = "openai"

# Generation defaults shared by every provider.
TEMPERATURE = 0.8
MAX_TOKENS = 350
DEFAULT_TIMEOUT = 60.0

# Endpoint and model map. Gemini URLs are templated on the model name.
PROVIDERS = {

    "openai": {
        "url": "https://api.openai.com/v1/chat/completions",
        "model": "gpt-3.5-turbo-0125",
    },

    "gemini": {
        "url": (
            "https://generativelanguage.googleapis.com/v1beta/models/"
            "{model}:generateContent"
        ),
        "model": "gemini-1.5-flash",
    },

}


@dataclass(frozen=True)
class ProviderSettings:
    """Resolved configuration for one upstream call.

    Attributes:
        name: Provider key in `PROVIDERS`.
        url: Endpoint URL with the model already substituted.
        model: Model identifier sent to (or addressed on) the provider.
        api_key: Credential; may be empty, in which case the provider rejects it.
        temperature: Sampling temperature.
        max_tokens: Output length cap.
        timeout: Outbound request timeout in seconds.
    """

    name: str
    url: str
    model: str
    api_key: str = ""
    temperature: float = TEMPERATURE
    max_tokens: int = MAX_TOKENS
    timeout: float = DEFAULT_TIMEOUT


def key_env_name(provider: str) -> str:
    """Return the credential variable for a provider (`openai` -> `OPENAI_API_KEY`)."""
    return provider.upper() + "_API_KEY"


def load_key(provider: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Read the provider credential from the environment.

    No defaulting and no shape validation; an absent key yields `""`.
    """
    env = os.environ if environ is None else environ
    return env.get(key_env_name(provider), "")


def load_settings(
    provider: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ProviderSettings:
    """Build `ProviderSettings` from the environment.

    Resolution order:
        1. Explicit `provider` argument.
        2. `PROVIDER` variable.
        3. `DEFAULT_PROVIDER`.

    Args:
        provider: Optional provider override.
        environ: Mapping used instead of `os.environ` (tests pass a dict).

    Returns:
        Fresh settings; the credential is read on every call.

    Edge cases:
        - Provider names are matched case-insensitively.
        - Invalid `LLM_TIMEOUT` values raise `ValueError`.
    """
    env = os.environ if environ is None else environ
    name = (provider or env.get("PROVIDER") or DEFAULT_PROVIDER).strip().lower()

    if name not in PROVIDERS:
        raise ValueError(f"Unknown provider: {name}")

    config = PROVIDERS[name]
    model = env.get("MODEL_NAME") or config["model"]

    return ProviderSettings(
        name=name,
        url=config["url"].format(model=model),
        model=model,
        api_key=load_key(name, env),
        timeout=float(env.get("LLM_TIMEOUT") or DEFAULT_TIMEOUT),
    )
