"""Text reports for single artworks and whole catalogs."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from artgallery.models import Artwork, Exhibition, Painting, Sculpture
from artgallery.services.validation import ArtworkValidator
from artgallery.utils import describe_artwork

REPORT_HEADER = "===== ARTWORK REPORT ====="
REPORT_FOOTER = "=========================="


def _flag(value: bool) -> str:
    return "true" if value else "false"


def artwork_details(artwork: Artwork) -> str:
    if isinstance(artwork, Painting):
        return f"Medium: {artwork.medium}\nFramed: {_flag(artwork.framed)}"
    if isinstance(artwork, Sculpture):
        return (
            f"Material: {artwork.material}\n"
            f"Weight: {artwork.weight_kg:.1f} kg\n"
            f"Outdoor: {_flag(artwork.outdoor)}"
        )
    return ""


def generate_artwork_report(artwork: Artwork) -> str:
    lines = [
        REPORT_HEADER,
        f"Title:      {artwork.title}",
        f"Artist:     {artwork.artist_name}",
        f"Year:       {artwork.year_created}",
        f"Style:      {artwork.style.display_name}",
        f"Price:      ${artwork.price:.2f}",
        f"Type:       {artwork.art_type}",
        artwork_details(artwork),
        REPORT_FOOTER,
    ]
    return "\n".join(lines) + "\n"


def formatted_info(artwork: Artwork, include_price: bool = False) -> str:
    lines = [
        f"Title: {artwork.title}",
        f"Artist: {artwork.artist_name}",
        f"Year: {artwork.year_created}",
        f"Style: {artwork.style.display_name}",
    ]
    if artwork.tags:
        lines.append("Tags: " + ", ".join(tag.lower() for tag in artwork.tags))
    if include_price:
        lines.append(f"Price: ${artwork.price:.2f}")
    return "\n".join(lines)


def build_catalog_report(
    artworks: Sequence[Artwork],
    *,
    title: str = "Gallery Catalog",
    exhibition: Exhibition | None = None,
) -> str:
    """Render a Markdown overview of a catalog."""
    kinds = Counter(artwork.art_type for artwork in artworks)
    total = sum(artwork.price for artwork in artworks)
    lines = [f"# {title}", ""]
    if exhibition is not None:
        lines.append(
            f"_{exhibition.summary()}, {exhibition.start_date.isoformat()} to {exhibition.end_date.isoformat()}_"
        )
        lines.append("")

    lines.append("## Summary")
    lines.append(f"- Artworks: {len(artworks)}")
    for kind in sorted(kinds):
        lines.append(f"- {kind}s: {kinds[kind]}")
    lines.append(f"- Total value: ${total:.2f}")
    lines.append("")

    lines.append("## Artworks")
    if not artworks:
        lines.append("_Catalog is empty._")
    for artwork in artworks:
        result = ArtworkValidator.for_type(type(artwork)).check(artwork)
        suffix = "" if result.is_valid else f" (invalid: {result.message})"
        lines.append(f"- {describe_artwork(artwork)}{suffix}")
    return "\n".join(lines) + "\n"
