class MergeAssistantError(RuntimeError):
    """Base class for every failure raised by the merge assistant."""


class ApiError(MergeAssistantError):
    """Raised when GitHub answers a request with a non-2xx status."""

    def __init__(self, status: int, message: str, documentation_url: str = "") -> None:
        super().__init__(f"Merge Assistant Error {status}: {message}")
        self.status = status
        self.message = message
        self.documentation_url = documentation_url


class ResponseFormatError(MergeAssistantError):
    """Raised when a response body does not have the expected shape."""


class LocalValidationError(MergeAssistantError):
    """Raised for local input problems detected before any remote call."""
