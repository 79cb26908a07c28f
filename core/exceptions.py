"""Custom exception hierarchy for the Claude API relay."""


class RelayError(Exception):
    """Base exception for all relay errors."""


class UpstreamError(RelayError):
    """Raised when the upstream API answers with a non-success status.

    Attributes:
        message: Error message
        status_code: HTTP status code from upstream (None for transport failures)
        body: Raw upstream response body, relayed to the caller untouched
        content_type: Upstream content type of ``body``
        provider: Upstream provider name (e.g., 'Anthropic')
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: bytes = b"",
        content_type: str | None = None,
        provider: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.content_type = content_type
        self.provider = provider


class UpstreamTimeoutError(UpstreamError):
    """Raised when an upstream provider request times out."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
    ) -> None:
        super().__init__(message, status_code=None, provider=provider)


class UpstreamConnectionError(UpstreamError):
    """Raised when unable to connect to an upstream provider."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
    ) -> None:
        super().__init__(message, status_code=None, provider=provider)


class UpstreamRequestError(UpstreamError):
    """Raised when the outbound request cannot be encoded."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
    ) -> None:
        super().__init__(message, status_code=None, provider=provider)
