"""Formatters that render an artwork on a single line."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from artgallery.models import Artwork


class ArtworkFormatter(ABC):
    """Renders an artwork to text.

    Subclasses only implement :meth:`format`; :meth:`format_with_style`
    is derived from it.
    """

    @abstractmethod
    def format(self, artwork: Artwork) -> str:
        ...

    def format_with_style(self, artwork: Artwork) -> str:
        return format_with_style(self, artwork)

    def __call__(self, artwork: Artwork) -> str:
        return self.format(artwork)

    @staticmethod
    def from_callable(func: Callable[[Artwork], str]) -> "ArtworkFormatter":
        return _CallableFormatter(func)


class DefaultFormatter(ArtworkFormatter):
    def __init__(self, currency: str = "$") -> None:
        self.currency = currency

    def format(self, artwork: Artwork) -> str:
        return (
            f"{artwork.title} by {artwork.artist_name} "
            f"({artwork.year_created}) - {self.currency}{artwork.price:.2f}"
        )


class _CallableFormatter(ArtworkFormatter):
    def __init__(self, func: Callable[[Artwork], str]) -> None:
        self._func = func

    def format(self, artwork: Artwork) -> str:
        return self._func(artwork)


def get_default_formatter(currency: str = "$") -> ArtworkFormatter:
    return DefaultFormatter(currency)


def format_with_style(formatter: ArtworkFormatter | Callable[[Artwork], str], artwork: Artwork) -> str:
    """Append `` - <style>`` to whatever ``formatter`` renders."""
    render = formatter.format if isinstance(formatter, ArtworkFormatter) else formatter
    return f"{render(artwork)} - {artwork.style.display_name}"
