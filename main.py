#!/usr/bin/env python3
"""CLI entrypoint for inspecting a consolidated CLDR data directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import pydantic
import typer
from tqdm import tqdm

from cldr_catalog import (
    ArchiveSource,
    CatalogSettings,
    CldrError,
    LocaleCatalog,
    expand_locale_names,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    help="Query normalized CLDR locale data.",
    add_completion=False,
)


def _catalog(ctx: typer.Context) -> LocaleCatalog:
    return ctx.obj


@app.callback()
def cli(
    ctx: typer.Context,
    data_dir: Annotated[
        Path | None,
        typer.Option(
            "--data-dir",
            help="Directory holding the consolidated CLDR documents. Defaults to $CLDR_DATA_DIR or ./priv/cldr.",
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = None,
    cldr_zip: Annotated[
        Path | None,
        typer.Option(
            "--cldr-zip",
            help="Read the documents from a zip archive instead of a directory.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    locales: Annotated[
        str | None,
        typer.Option(
            "--locales",
            help='Comma separated locale names or patterns, or "all".',
        ),
    ] = None,
    default_locale: Annotated[
        str | None,
        typer.Option("--default-locale", help="Default locale (e.g., en, fr-CA)."),
    ] = None,
    dev: Annotated[
        bool,
        typer.Option("--dev", help="Load locales missing a required module with a warning."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output."),
    ] = False,
) -> None:
    """Build the catalog shared by every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )
    overrides = {
        "data_dir": data_dir,
        "locales": locales,
        "default_locale": default_locale,
        "dev": dev or None,
    }
    try:
        settings = CatalogSettings(**{k: v for k, v in overrides.items() if v is not None})
        source = ArchiveSource(cldr_zip) if cldr_zip else settings.data_source()
        ctx.obj = LocaleCatalog(source, settings.to_config())
    except (CldrError, pydantic.ValidationError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("locales")
def list_locales(ctx: typer.Context) -> None:
    """List the known locales, and any requested locale CLDR does not have."""
    catalog = _catalog(ctx)
    try:
        known = catalog.known_locale_names()
        unknown = catalog.unknown_locale_names()
    except CldrError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    for locale in known:
        typer.echo(locale)
    if unknown:
        typer.secho(
            f"Unknown locales: {', '.join(unknown)}", fg=typer.colors.YELLOW, err=True
        )


@app.command()
def show(
    ctx: typer.Context,
    locale: Annotated[str, typer.Argument(help="Locale name (e.g., en, fr-CA).")],
) -> None:
    """Summarize the normalized record of a locale."""
    catalog = _catalog(ctx)
    try:
        record = catalog.get(locale)
        calendars = catalog.calendars_for_locale(locale)
    except CldrError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(record.name, bold=True)
    systems = ", ".join(
        f"{system_type}={name}" for system_type, name in sorted(record.number_systems.items())
    )
    typer.echo(f"Number systems: {systems or '-'}")
    typer.echo(f"Symbol sets: {', '.join(sorted(record.number_symbols)) or '-'}")
    typer.echo(f"Minimum grouping digits: {record.minimum_grouping_digits}")
    for group, rule_sets in sorted(record.rbnf.items()):
        typer.echo(f"RBNF {group}: {', '.join(sorted(rule_sets))}")
    typer.echo(f"Calendars: {', '.join(calendars) or '-'}")
    typer.echo(f"Unit styles: {', '.join(sorted(record.units)) or '-'}")
    typer.echo(f"Territories: {len(record.territories)}")
    typer.echo(f"Languages: {len(record.languages)}")


@app.command()
def expand(
    ctx: typer.Context,
    patterns: Annotated[
        list[str], typer.Argument(help="Locale names or regular expressions.")
    ],
) -> None:
    """Expand locale names and wildcard patterns against the CLDR locales."""
    catalog = _catalog(ctx)
    try:
        names = expand_locale_names(patterns, catalog.all_locale_names())
    except CldrError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    for name in names:
        typer.echo(name)


@app.command()
def like(
    ctx: typer.Context,
    locale: Annotated[str, typer.Argument(help="Reference locale name.")],
    system: Annotated[
        str, typer.Argument(help="Number system name or type (e.g., latn, default).")
    ],
) -> None:
    """List locale and number system pairs with the same digits and symbols."""
    catalog = _catalog(ctx)
    try:
        matches = catalog.find_like(locale, system)
    except CldrError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    for match_locale, match_system in matches:
        typer.echo(f"{match_locale}\t{match_system}")


@app.command()
def preload(ctx: typer.Context) -> None:
    """Load and validate every known locale."""
    catalog = _catalog(ctx)
    try:
        locales = catalog.known_locale_names()
        for locale in tqdm(locales, desc="Loading locales", unit="locale"):
            catalog.get(locale)
    except CldrError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.secho(
        f"\nSuccessfully loaded {len(locales)} locales", fg=typer.colors.GREEN, bold=True
    )


if __name__ == "__main__":
    app()
