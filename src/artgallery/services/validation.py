"""Variant-specific checks applied to artworks after construction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import structlog

from artgallery.exceptions import InvalidArgumentError
from artgallery.models import Artwork, Painting, Sculpture

logger = structlog.get_logger(__name__)

_PERMITTED_VALIDATORS = frozenset({"PaintingValidator", "SculptureValidator"})


@dataclass(frozen=True, slots=True)
class ValidationResult:
    is_valid: bool
    message: str

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(True, "")

    @classmethod
    def invalid(cls, message: str) -> "ValidationResult":
        return cls(False, message)


class ArtworkValidator(ABC):
    """Checks the invariants of one artwork variant.

    Only ``PaintingValidator`` and ``SculptureValidator`` exist; use
    :meth:`for_type` to pick the one matching an artwork class.
    """

    target: type[Artwork]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__name__ not in _PERMITTED_VALIDATORS or cls.__module__ != __name__:
            raise TypeError(f"ArtworkValidator does not permit {cls.__name__}")

    @staticmethod
    def for_type(artwork_type: type[Artwork] | str) -> "ArtworkValidator":
        if isinstance(artwork_type, str):
            name = artwork_type
            validator = _VALIDATORS_BY_KIND.get(artwork_type.strip().lower())
        else:
            name = getattr(artwork_type, "__name__", repr(artwork_type))
            validator = _VALIDATORS_BY_TYPE.get(artwork_type)
        if validator is None:
            raise InvalidArgumentError(f"No validator for type: {name}")
        return validator()

    def validate(self, artwork: Artwork) -> bool:
        if not isinstance(artwork, self.target):
            logger.debug("validator.wrong_variant", validator=type(self).__name__, type=type(artwork).__name__)
            return False
        ok = self._check(artwork)
        logger.debug("validator.checked", validator=type(self).__name__, title=artwork.title, valid=ok)
        return ok

    def check(self, artwork: Artwork) -> ValidationResult:
        """Like :meth:`validate` but explains a failure."""
        if not isinstance(artwork, self.target):
            return ValidationResult.invalid(
                f"{type(self).__name__} cannot validate {type(artwork).__name__}"
            )
        if self.validate(artwork):
            return ValidationResult.valid()
        return ValidationResult.invalid(self.failure_message(artwork))

    @abstractmethod
    def _check(self, artwork: Any) -> bool:
        ...

    @abstractmethod
    def failure_message(self, artwork: Any) -> str:
        ...


class PaintingValidator(ArtworkValidator):
    target = Painting

    def _check(self, artwork: Painting) -> bool:
        return bool(artwork.medium.strip())

    def failure_message(self, artwork: Painting) -> str:
        return f"Painting '{artwork.title}' has no medium"


class SculptureValidator(ArtworkValidator):
    target = Sculpture

    def _check(self, artwork: Sculpture) -> bool:
        return artwork.weight_kg > 0

    def failure_message(self, artwork: Sculpture) -> str:
        return f"Sculpture '{artwork.title}' must weigh more than 0 kg (got {artwork.weight_kg})"


_VALIDATORS_BY_TYPE: dict[type, type[ArtworkValidator]] = {
    Painting: PaintingValidator,
    Sculpture: SculptureValidator,
}
_VALIDATORS_BY_KIND = {cls.__name__.lower(): validator for cls, validator in _VALIDATORS_BY_TYPE.items()}
