"""Error kinds raised by the LLM layer."""


class ProviderError(Exception):
    """Base class for provider failures."""


class UpstreamError(ProviderError):
    """The provider answered with a non-success HTTP status.

    Attributes:
        provider: Display label of the provider (`"OpenAI"`, `"Gemini"`).
        status_code: HTTP status returned upstream.
        message: Upstream error description, or the reason phrase when the body
            carried none.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.message = message


class MalformedResponseError(ProviderError):
    """The provider reported success but the payload lacks the expected fields."""
