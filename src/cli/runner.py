# src/cli/runner.py

"""Headless catalog listing and downloads, sharing the TUI's view pipeline."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from src.config.settings import Settings
from src.models.product import PRODUCT_COLUMNS, Product
from src.models.view_state import FilterCriteria, SortSpec
from src.services.catalog_view import CatalogView, default_sort
from src.storage.catalog_store import CatalogLoadError, CatalogStore
from src.storage.exporter import CatalogExporter, ExportError

logger = logging.getLogger("assort_catalog.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)

# JSON output keys accepted as --sort names
_SORT_ALIASES: dict[str, str] = {"sizeRange": "size_range"}


def _load_store(data_path: str | None) -> CatalogStore | None:
    """Load the catalog, reporting failures on stderr."""
    try:
        return CatalogStore.load(
            Path(data_path) if data_path else None
        )
    except CatalogLoadError as exc:
        logger.error("Catalog load failed: %s", exc, exc_info=True)
        _err.print(f"[red]Cannot load catalog: {exc}[/red]")
        return None


def build_sort(column: str | None, descending: bool) -> SortSpec:
    """Turn CLI sort options into a SortSpec.

    Accepts the JSON output key ``sizeRange`` for ``size_range``.
    Raises ``SystemExit`` on an unknown column.
    """
    if column is None:
        spec = default_sort()
        return SortSpec(spec.column, descending)
    column = _SORT_ALIASES.get(column, column)
    if column not in PRODUCT_COLUMNS:
        valid = ", ".join(PRODUCT_COLUMNS)
        _err.print(f"[red]Unknown sort column: {column}[/red]")
        _err.print(f"[dim]Available: {valid}[/dim]")
        raise SystemExit(1)
    return SortSpec(column, descending)


def build_criteria(
    name: str | None,
    categories: list[str] | None,
    size_ranges: list[str] | None,
    genders: list[str] | None,
) -> FilterCriteria:
    """Collect CLI filter options into a FilterCriteria."""
    return FilterCriteria(
        name=name or "",
        categories=frozenset(categories or ()),
        size_ranges=frozenset(size_ranges or ()),
        genders=frozenset(genders or ()),
    )


def _products_to_dicts(
    products: tuple[Product, ...],
) -> list[dict[str, str]]:
    """Serialise products to plain dicts for JSON output."""
    return [
        {
            "id": p.id,
            "name": p.name,
            "category": p.category,
            "sizeRange": p.size_range,
            "gender": p.gender,
            "version": p.version,
        }
        for p in products
    ]


def _print_table(
    products: tuple[Product, ...], version: str | None,
) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title=f"{Settings.APP_TITLE} (version {version})",
        show_lines=False,
        title_style="bold cyan",
    )
    for col in Settings.COLUMNS:
        table.add_column(col["label"])

    for p in products:
        table.add_row(*(p.value_of(col["id"]) for col in Settings.COLUMNS))

    Console().print(table)


def cli_list(
    version: str | None,
    criteria: FilterCriteria,
    sort: SortSpec,
    output_format: str,
    data_path: str | None = None,
) -> int:
    """Render one view of the catalog and return an exit code."""
    store = _load_store(data_path)
    if store is None:
        return 1

    result = CatalogView(store).render(version, criteria, sort)
    _err.print(
        f"[bold]Version:[/bold] {result.version}  "
        f"[dim]available={', '.join(result.versions) or 'none'}[/dim]"
    )

    if result.is_empty:
        _err.print(f"[yellow]{Settings.EMPTY_STATE_MESSAGE}.[/yellow]")
    else:
        _err.print(
            f"[green]✓ {len(result.products)} of "
            f"{result.total_in_version} products[/green]"
        )

    if output_format == "table":
        if not result.is_empty:
            _print_table(result.products, result.version)
    else:
        json.dump(
            _products_to_dicts(result.products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0


def cli_download(
    fmt: str,
    export_mode: str | None = None,
    output_dir: str | None = None,
    data_path: str | None = None,
) -> int:
    """Write ``data.<fmt>`` for the full catalog and return an exit code."""
    store = _load_store(data_path)
    if store is None:
        return 1

    try:
        exporter = CatalogExporter(
            store,
            mode=export_mode,
            downloads_dir=Path(output_dir) if output_dir else None,
        )
        path = exporter.export(fmt)
    except (ExportError, ValueError) as exc:
        logger.error("Download failed: %s", exc, exc_info=True)
        _err.print(f"[red]Download failed: {exc}[/red]")
        return 1

    _err.print(f"[green]✓ Saved {path}[/green]")
    return 0
