"""
Errors raised by the external deck and card services.

The analysis core never raises on malformed input; these exceptions only
come from the HTTP clients and are translated to 5xx/4xx responses by the
API layer.
"""


class DeckServiceError(Exception):
    """Base class for failures talking to an external service."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ScryfallError(DeckServiceError):
    """Raised when the Scryfall card lookup fails."""


class DeckFetchError(DeckServiceError):
    """Raised when a deck-hosting service returns an error or bad payload."""


class UnsupportedDeckUrlError(ValueError):
    """Raised when no deck provider recognises a URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Unsupported deck URL: {url}")
