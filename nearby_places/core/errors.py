"""Error types shared by the vendor clients, the gateway and the HTTP layer."""

from typing import Optional


class InvalidInputError(ValueError):
    """Raised when a query-string or CLI value cannot be parsed."""

    kind = "invalid_input"


class ProviderError(RuntimeError):
    """Base class for failures talking to an upstream provider."""

    kind = "provider"
    retryable = False

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider


class NetworkError(ProviderError):
    """The provider could not be reached."""

    kind = "network"
    retryable = True


class UpstreamTimeoutError(ProviderError):
    """The provider did not answer within the configured deadline."""

    kind = "timeout"
    retryable = True


class ParseError(ProviderError):
    """The provider answered with a body we cannot interpret."""

    kind = "parse"


class UpstreamError(ProviderError):
    """The provider answered with a non-success HTTP status."""

    kind = "upstream"

    def __init__(self, message: str, status_code: int, provider: Optional[str] = None):
        super().__init__(message, provider=provider)
        self.status_code = status_code

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.status_code >= 500
