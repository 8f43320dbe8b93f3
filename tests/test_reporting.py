from datetime import date

from artgallery.models import ArtStyle, Exhibition, Painting, Sculpture
from artgallery.reporting import build_catalog_report, formatted_info, generate_artwork_report


def _painting() -> Painting:
    return Painting(
        title="Persistence of Memory",
        artist_name="Salvador Dali",
        year_created=1931,
        style=ArtStyle.SURREALISM,
        price=1500.0,
        medium="Oil",
        framed=True,
    )


def _sculpture(weight: float = 152.4) -> Sculpture:
    return Sculpture(
        title="Cloud Gate",
        artist_name="Anish Kapoor",
        year_created=2006,
        style=ArtStyle.CONTEMPORARY,
        material="Stainless steel",
        weight_kg=weight,
        outdoor=True,
    )


def test_painting_report_layout() -> None:
    expected = (
        "===== ARTWORK REPORT =====\n"
        "Title:      Persistence of Memory\n"
        "Artist:     Salvador Dali\n"
        "Year:       1931\n"
        "Style:      Surrealism\n"
        "Price:      $1500.00\n"
        "Type:       Painting\n"
        "Medium: Oil\n"
        "Framed: true\n"
        "==========================\n"
    )
    assert generate_artwork_report(_painting()) == expected


def test_sculpture_report_details() -> None:
    report = generate_artwork_report(_sculpture())
    assert "Type:       Sculpture\n" in report
    assert "Material: Stainless steel\nWeight: 152.4 kg\nOutdoor: true\n" in report


def test_formatted_info_tags_and_price() -> None:
    painting = _painting()
    assert "Tags:" not in formatted_info(painting)
    painting.add_tags("Melting", "CLOCKS")
    info = formatted_info(painting, include_price=True)
    assert info.splitlines() == [
        "Title: Persistence of Memory",
        "Artist: Salvador Dali",
        "Year: 1931",
        "Style: Surrealism",
        "Tags: melting, clocks",
        "Price: $1500.00",
    ]


def test_catalog_report_sections() -> None:
    report = build_catalog_report([_painting(), _sculpture(0)])
    assert report.startswith("# Gallery Catalog\n")
    assert "- Artworks: 2" in report
    assert "- Paintings: 1" in report
    assert "- Total value: $1500.00" in report
    assert "- Painting: Persistence of Memory in Oil\n" in report
    assert "(invalid: Sculpture 'Cloud Gate' must weigh more than 0 kg" in report


def test_catalog_report_for_exhibition() -> None:
    exhibition = Exhibition(
        name="Dreams",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 2, 1),
        artworks=[_painting()],
    )
    report = build_catalog_report(exhibition.artworks, title=exhibition.name, exhibition=exhibition)
    assert "# Dreams" in report
    assert "Exhibition 'Dreams' with 1 artworks, 2024-01-01 to 2024-02-01" in report


def test_empty_catalog_report() -> None:
    assert "_Catalog is empty._" in build_catalog_report([])
