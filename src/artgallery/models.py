"""Core data models for the gallery catalog."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Annotated, Any, Literal, Union

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationInfo,
    field_validator,
    model_validator,
)

from artgallery.exceptions import InvalidArtStyleError

logger = structlog.get_logger(__name__)

MIN_YEAR = 1000
_PERMITTED_VARIANTS = frozenset({"Painting", "Sculpture"})


class ArtStyle(str, Enum):
    """Style categories an artwork can be filed under."""

    ABSTRACT = "ABSTRACT"
    IMPRESSIONISM = "IMPRESSIONISM"
    EXPRESSIONISM = "EXPRESSIONISM"
    CUBISM = "CUBISM"
    SURREALISM = "SURREALISM"
    REALISM = "REALISM"
    MINIMALISM = "MINIMALISM"
    POP_ART = "POP_ART"
    CONTEMPORARY = "CONTEMPORARY"
    RENAISSANCE = "RENAISSANCE"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def parse(cls, text: str) -> "ArtStyle":
        """Accept a tag (``POP_ART``) or display name (``pop art``) in any case."""
        key = (text or "").strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise InvalidArtStyleError("Unknown art style.", invalid_style=text) from None


def max_year() -> int:
    return date.today().year + 1


class Artwork(BaseModel):
    """Fields and behaviour shared by paintings and sculptures.

    The hierarchy is closed: only ``Painting`` and ``Sculpture`` may extend it
    and the base class itself cannot be instantiated.
    """

    model_config = ConfigDict(validate_assignment=True)

    title: str = Field(frozen=True)
    artist_name: str = Field(frozen=True)
    year_created: int = Field(frozen=True)
    style: ArtStyle = Field(frozen=True)
    price: float = 0.0
    tags: list[str] = Field(default_factory=list)
    creation_date: date = Field(default_factory=date.today, frozen=True)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__name__ not in _PERMITTED_VARIANTS or cls.__module__ != __name__:
            raise TypeError(f"Artwork only permits Painting and Sculpture, not {cls.__name__}")

    def __init__(self, **data: Any) -> None:
        if type(self) is Artwork:
            raise TypeError("Artwork is abstract; construct a Painting or Sculpture")
        super().__init__(**data)

    @field_validator("title", "artist_name")
    @classmethod
    def _require_text(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"{info.field_name} cannot be blank")
        return value

    @field_validator("style", mode="before")
    @classmethod
    def _coerce_style(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, ArtStyle):
            return ArtStyle.parse(value)
        return value

    @field_validator("year_created")
    @classmethod
    def _check_year(cls, value: int) -> int:
        if value < MIN_YEAR or value > max_year():
            raise ValueError(f"Invalid year created: {value}")
        return value

    @field_validator("price")
    @classmethod
    def _check_price(cls, value: float) -> float:
        if value < 0:
            raise ValueError("Price cannot be negative")
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _clean_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return _normalize_tags(value)
        return value

    def _equality_key(self) -> tuple:
        return (type(self), self.title, self.artist_name, self.year_created, self.style, self.price)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Artwork):
            return NotImplemented
        return self._equality_key() == other._equality_key()

    def __hash__(self) -> int:
        return hash(self._equality_key())

    @property
    def art_type(self) -> str:
        return type(self).__name__

    @property
    def style_name(self) -> str:
        return self.style.name

    @property
    def age_in_years(self) -> int:
        return date.today().year - self.year_created

    def set_price(self, price: float) -> None:
        """Validate and store a new price; a rejected value leaves the old one."""
        previous = self.price
        self.price = price
        logger.debug("artwork.price_updated", title=self.title, previous=previous, price=self.price)

    def add_tags(self, *tags: str | None) -> None:
        self.tags = [*self.tags, *_normalize_tags(tags)]

    def log_info(self) -> None:
        logger.info(
            "artwork.info",
            title=self.title,
            artist=self.artist_name,
            year=self.year_created,
            style=self.style.display_name,
            price=self.price,
            type=self.art_type,
            created=self.creation_date.isoformat(),
        )


def _normalize_tags(tags: Any) -> list[str]:
    cleaned = []
    for tag in tags:
        if tag is None:
            continue
        if isinstance(tag, str):
            tag = tag.strip()
            if not tag:
                continue
        cleaned.append(tag)
    return cleaned


class Painting(Artwork):
    """A painting; ``medium`` is e.g. Oil, Watercolor, Acrylic."""

    kind: Literal["painting"] = Field(default="painting", frozen=True)
    medium: str = Field(frozen=True)
    framed: bool = False

    def update_artwork(self, new_price: float, framed: bool | None = None) -> None:
        self.set_price(new_price)
        if framed is not None:
            self.framed = framed


class Sculpture(Artwork):
    """A sculpture; ``material`` is e.g. Marble, Bronze, Wood."""

    kind: Literal["sculpture"] = Field(default="sculpture", frozen=True)
    material: str = Field(frozen=True)
    weight_kg: float = Field(default=0.0, frozen=True)
    outdoor: bool = Field(default=False, frozen=True)


AnyArtwork = Annotated[Union[Painting, Sculpture], Field(discriminator="kind")]

_ARTWORK_LIST = TypeAdapter(list[AnyArtwork])


def parse_artworks(payload: Any) -> list[Painting | Sculpture]:
    """Validate a list of ``kind``-tagged dicts into artwork instances."""
    return _ARTWORK_LIST.validate_python(payload)


class Exhibition(BaseModel):
    """A named, dated selection of artworks."""

    name: str
    start_date: date
    end_date: date
    artworks: list[AnyArtwork] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_dates(self) -> "Exhibition":
        if self.end_date < self.start_date:
            raise ValueError("Exhibition cannot end before it starts")
        return self

    def summary(self) -> str:
        return f"Exhibition '{self.name}' with {len(self.artworks)} artworks"
