import pytest

from artgallery.exceptions import (
    ArtGalleryError,
    ArtworkNotFoundError,
    DuplicateArtworkError,
    InvalidArgumentError,
    InvalidArtStyleError,
)


def test_error_hierarchy() -> None:
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(ArtworkNotFoundError, LookupError)
    for error in (InvalidArgumentError, ArtworkNotFoundError, DuplicateArtworkError, InvalidArtStyleError):
        assert issubclass(error, ArtGalleryError)


def test_duplicate_artwork_keeps_cause() -> None:
    cause = KeyError("Guernica")
    with pytest.raises(DuplicateArtworkError) as excinfo:
        raise DuplicateArtworkError("Guernica is already catalogued") from cause
    assert excinfo.value.__cause__ is cause


def test_invalid_art_style_message() -> None:
    assert str(InvalidArtStyleError("Unsupported style.")) == "Unsupported style."
    error = InvalidArtStyleError("Unsupported style.", "Baroque")
    assert error.invalid_style == "Baroque"
    assert str(error) == "Unsupported style. Invalid style: Baroque"
