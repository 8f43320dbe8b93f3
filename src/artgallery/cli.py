"""Command-line interface for the gallery catalog."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from artgallery import exporters
from artgallery.exceptions import ArtGalleryError
from artgallery.models import ArtStyle, Artwork, Exhibition, Sculpture, parse_artworks
from artgallery.reporting import build_catalog_report, generate_artwork_report
from artgallery.services import ArtworkValidator, get_default_formatter
from artgallery.settings import get_settings
from artgallery.utils import calculate_shipping_cost, create_artwork, describe_artwork, filter_artworks, slugify

console = Console()
app = typer.Typer(help="Art gallery catalog tools")
logger = structlog.get_logger(__name__)
KINDS = {"painting", "sculpture"}


def _load_catalog(path: Path) -> tuple[list[Artwork], Exhibition | None]:
    """Read a JSON list of artworks, or an exhibition object with an ``artworks`` list."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        exhibition = Exhibition.model_validate(payload)
        return list(exhibition.artworks), exhibition
    return list(parse_artworks(payload)), None


def _open_catalog(path: Path) -> tuple[list[Artwork], Exhibition | None]:
    try:
        artworks, exhibition = _load_catalog(path)
    except (OSError, json.JSONDecodeError, ValidationError, ArtGalleryError) as exc:
        logger.warning("catalog.load_failed", path=str(path), error=str(exc))
        console.print(f"[red]Could not load catalog {path}:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc
    logger.info("catalog.loaded", path=str(path), count=len(artworks))
    return artworks, exhibition


def _filter_kind(artworks: list[Artwork], kind: Optional[str]) -> list[Artwork]:
    if not kind:
        return artworks
    if kind.lower() not in KINDS:
        console.print(f"[red]Unknown kind:[/red] {kind}")
        raise typer.Exit(code=1)
    return filter_artworks(artworks, lambda artwork: artwork.art_type.lower() == kind.lower())


def _write_or_echo(content: str, output: Optional[Path]) -> None:
    if output:
        output.write_text(content, encoding="utf-8")
        console.print(f"[green]Wrote {output}")
    else:
        typer.echo(content, nl=False)


@app.callback()
def main() -> None:
    try:
        get_settings()
    except ValidationError as exc:
        console.print(f"[red]Invalid settings:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc


@app.command()
def styles() -> None:
    """List the available art styles."""
    table = Table(title="Art Styles")
    table.add_column("Tag")
    table.add_column("Display name")
    for style in ArtStyle:
        table.add_row(style.value, style.display_name)
    console.print(table)


@app.command()
def create(
    kind: str = typer.Argument(..., help="painting or sculpture"),
    title: str = typer.Argument(...),
    artist: str = typer.Argument(...),
    year: int = typer.Argument(...),
    style: str = typer.Argument(..., help="Style tag or display name, e.g. POP_ART or 'Pop Art'"),
    price: float = typer.Option(0.0, help="Asking price"),
    tag: Optional[list[str]] = typer.Option(None, "--tag", help="Tag to attach (repeatable)"),
) -> None:
    """Build an artwork through the factory and print its report."""
    try:
        artwork = create_artwork(kind, title, artist, year, ArtStyle.parse(style))
        artwork.set_price(price)
        artwork.add_tags(*(tag or []))
    except (ArtGalleryError, ValidationError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc
    typer.echo(generate_artwork_report(artwork), nl=False)
    typer.echo(get_default_formatter().format_with_style(artwork))


@app.command()
def report(
    catalog: Path = typer.Argument(..., help="JSON catalog file"),
    kind: Optional[str] = typer.Option(None, help="Only include painting or sculpture"),
    detailed: bool = typer.Option(False, "--detailed", help="Append a full report per artwork"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write report to a file"),
) -> None:
    """Generate a Markdown catalog report."""
    artworks, exhibition = _open_catalog(catalog)
    artworks = _filter_kind(artworks, kind)
    title = exhibition.name if exhibition else "Gallery Catalog"
    content = build_catalog_report(artworks, title=title, exhibition=exhibition)
    if detailed:
        blocks = [generate_artwork_report(artwork) for artwork in artworks]
        content += "\n```\n" + "\n".join(blocks) + "```\n"
    _write_or_echo(content, output)


@app.command()
def describe(catalog: Path = typer.Argument(..., help="JSON catalog file")) -> None:
    """Show a description and validation status for each artwork."""
    artworks, _ = _open_catalog(catalog)
    if not artworks:
        console.print("[yellow]Catalog is empty.")
        return
    formatter = get_default_formatter(get_settings().currency)
    table = Table(title="Artworks")
    table.add_column("Description", overflow="fold")
    table.add_column("Listing", overflow="fold")
    table.add_column("Valid")
    for artwork in artworks:
        result = ArtworkValidator.for_type(type(artwork)).check(artwork)
        table.add_row(
            describe_artwork(artwork),
            escape(formatter.format_with_style(artwork)),
            "[green]yes[/green]" if result.is_valid else f"[red]no[/red] {result.message}",
        )
    console.print(table)


@app.command()
def export(
    catalog: Path = typer.Argument(..., help="JSON catalog file"),
    fmt: str = typer.Option("json", "--format", "-f", help="json or csv"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Destination file or directory"),
) -> None:
    """Export the catalog as JSON or CSV."""
    fmt = fmt.lower()
    if fmt not in {"json", "csv"}:
        console.print(f"[red]Unsupported format:[/red] {fmt}")
        raise typer.Exit(code=1)
    artworks, exhibition = _open_catalog(catalog)
    content = exporters.export_json(artworks) if fmt == "json" else exporters.export_csv(artworks)
    if output and output.is_dir():
        stem = slugify(exhibition.name) if exhibition else slugify(catalog.stem)
        output = output / f"{stem}.{fmt}"
    if fmt == "json":
        content += "\n"
    _write_or_echo(content, output)


@app.command()
def shipping(
    catalog: Path = typer.Argument(..., help="JSON catalog file"),
    rate: Optional[float] = typer.Option(None, help="Cost per kg (defaults to ARTGALLERY_SHIPPING_RATE)"),
) -> None:
    """Estimate shipping costs for the sculptures in a catalog."""
    artworks, _ = _open_catalog(catalog)
    per_kg = rate if rate is not None else get_settings().shipping_rate_per_kg
    sculptures = filter_artworks(artworks, lambda artwork: isinstance(artwork, Sculpture))
    if not sculptures:
        console.print("[yellow]No sculptures in catalog.")
        return
    table = Table(title=f"Shipping at {per_kg:.2f} per kg")
    table.add_column("Title")
    table.add_column("Weight (kg)", justify="right")
    table.add_column("Cost", justify="right")
    for sculpture in sculptures:
        cost = calculate_shipping_cost(sculpture, per_kg)
        table.add_row(sculpture.title, f"{sculpture.weight_kg:.1f}", f"{cost:.2f}")
    console.print(table)


@app.command()
def config(
    json_output: bool = typer.Option(False, "--json", help="Output settings as JSON"),
) -> None:
    """Display the resolved settings."""
    settings = get_settings()
    if json_output:
        typer.echo(settings.model_dump_json(indent=2))
        return
    table = Table(title="Art Gallery Settings")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)
