"""Domain errors raised by the gallery catalog."""

from __future__ import annotations


class ArtGalleryError(Exception):
    """Base class for catalog errors."""


class InvalidArgumentError(ArtGalleryError, ValueError):
    """Raised when a caller passes a tag or type the catalog does not know."""


class ArtworkNotFoundError(ArtGalleryError, LookupError):
    """Raised when a lookup does not match any artwork."""


class DuplicateArtworkError(ArtGalleryError):
    """Raised by catalog managers when an equal artwork is already present."""


class InvalidArtStyleError(ArtGalleryError, ValueError):
    """Raised when a style string cannot be mapped to an ``ArtStyle``."""

    def __init__(self, message: str, invalid_style: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.invalid_style = invalid_style

    def __str__(self) -> str:
        if self.invalid_style is not None:
            return f"{self.message} Invalid style: {self.invalid_style}"
        return self.message
