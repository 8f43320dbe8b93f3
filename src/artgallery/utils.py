"""Factory, filtering and description helpers for artworks."""

from __future__ import annotations

import re
import unicodedata
from typing import Callable, Iterable, TypeVar

import structlog

from artgallery.exceptions import InvalidArgumentError
from artgallery.models import ArtStyle, Artwork, Painting, Sculpture

logger = structlog.get_logger(__name__)

SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
DEFAULT_MEDIUM = "Oil"
DEFAULT_MATERIAL = "Bronze"
LARGE_SCULPTURE_KG = 100

T = TypeVar("T", bound=Artwork)


def create_artwork(type_tag: str, title: str, artist: str, year: int, style: ArtStyle) -> Artwork:
    """Build a painting or sculpture from a case-insensitive type tag."""
    kind = (type_tag or "").lower()
    if kind == "painting":
        artwork: Artwork = Painting(
            title=title, artist_name=artist, year_created=year, style=style, medium=DEFAULT_MEDIUM
        )
    elif kind == "sculpture":
        artwork = Sculpture(
            title=title, artist_name=artist, year_created=year, style=style, material=DEFAULT_MATERIAL
        )
    else:
        raise InvalidArgumentError(f"Unknown artwork type: {type_tag}")
    logger.debug("factory.created", type=artwork.art_type, title=title)
    return artwork


def filter_artworks(artworks: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    return [artwork for artwork in artworks if predicate(artwork)]


def describe_artwork(artwork: Artwork | None) -> str:
    if artwork is None:
        return "No artwork provided"
    if isinstance(artwork, Painting):
        return f"Painting: {artwork.title} in {artwork.medium}"
    if isinstance(artwork, Sculpture):
        if artwork.weight_kg > LARGE_SCULPTURE_KG:
            return f"Large sculpture: {artwork.title} (needs special handling)"
        return f"Sculpture: {artwork.title} made of {artwork.material}"
    return "Unknown artwork type"


def create_description(*details: str) -> str:
    """Join free-form details as ``a | b | c``."""
    return " | ".join(details)


def calculate_shipping_cost(sculpture: Sculpture, price_per_kg: float) -> float:
    return sculpture.weight_kg * price_per_kg


def slugify(value: str, max_length: int = 80) -> str:
    """Create a filesystem-safe slug."""
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode()
    value = value.lower()
    value = SLUG_PATTERN.sub("-", value).strip("-")
    if not value:
        value = "item"
    return value[:max_length]
