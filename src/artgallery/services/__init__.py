"""Validation and formatting services for the gallery catalog."""

from .formatting import ArtworkFormatter, DefaultFormatter, format_with_style, get_default_formatter
from .validation import ArtworkValidator, PaintingValidator, SculptureValidator, ValidationResult

__all__ = [
    "ArtworkFormatter",
    "DefaultFormatter",
    "format_with_style",
    "get_default_formatter",
    "ArtworkValidator",
    "PaintingValidator",
    "SculptureValidator",
    "ValidationResult",
]
