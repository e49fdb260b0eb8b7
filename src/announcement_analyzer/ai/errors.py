"""Error classes for the AI layer.

These are raised by the provider adapters and caught by the orchestrators,
which turn them into the documented soft-failure values.
"""


def provider_tag(provider) -> str:
    """Return the upper-cased tag used when logging a provider, e.g. "GEMINI"."""
    return str(getattr(provider, "value", provider)).upper()


class AnalyzerError(Exception):
    """Base class for all analyzer errors."""
    pass


class ProviderError(AnalyzerError):
    """Error raised when a provider call fails or returns nothing usable."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"[{provider_tag(provider)}] {message}")
        self.provider = provider


class MalformedOutputError(ProviderError):
    """Error raised when structured output cannot be decoded into feature records."""
    pass
