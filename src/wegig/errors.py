"""Error types raised by the catalog proxies and gig services."""


class WeGigError(Exception):
    """Base class for application errors."""


class ConfigurationError(WeGigError):
    """Raised when a required credential or setting is missing."""


class UpstreamError(WeGigError):
    """Raised when an external catalog answers with a non-success status."""

    def __init__(self, service: str, status_code: int, body: str) -> None:
        self.service = service
        self.status_code = status_code
        self.body = body
        super().__init__(f"{service} error {status_code}: {body}")


class TransportError(WeGigError):
    """Raised when an external catalog cannot be reached."""

    def __init__(self, service: str, detail: str) -> None:
        self.service = service
        self.detail = detail
        super().__init__(f"{service} request failed: {detail}")


class GigValidationError(WeGigError):
    """Raised when gig input fails validation."""
