"""Catalog export helpers."""

from __future__ import annotations

import csv
import io
import json
from typing import Sequence

from artgallery.models import Artwork, Painting, Sculpture

CSV_FIELDS = [
    "kind",
    "title",
    "artist_name",
    "year_created",
    "style",
    "price",
    "detail",
    "tags",
]


def export_json(artworks: Sequence[Artwork]) -> str:
    payload = [artwork.model_dump(mode="json") for artwork in artworks]
    return json.dumps(payload, indent=2)


def export_csv(artworks: Sequence[Artwork]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_FIELDS, lineterminator="\n")
    writer.writeheader()
    for artwork in artworks:
        writer.writerow(artwork_to_row(artwork))
    return buffer.getvalue()


def artwork_to_row(artwork: Artwork) -> dict[str, str]:
    detail = ""
    if isinstance(artwork, Painting):
        detail = artwork.medium + (" (framed)" if artwork.framed else "")
    elif isinstance(artwork, Sculpture):
        detail = f"{artwork.material}, {artwork.weight_kg:.1f} kg" + (" (outdoor)" if artwork.outdoor else "")
    return {
        "kind": artwork.art_type.lower(),
        "title": artwork.title,
        "artist_name": artwork.artist_name,
        "year_created": str(artwork.year_created),
        "style": artwork.style.value,
        "price": f"{artwork.price:.2f}",
        "detail": detail,
        "tags": ";".join(artwork.tags),
    }
