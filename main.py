# main.py

"""Entry point for the assort_catalog viewer (TUI or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings
from src.models.product import PRODUCT_COLUMNS

logger = logging.getLogger("assort_catalog.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="assort_catalog",
        description=f"{Settings.APP_TITLE}: browse and download the catalog.",
        epilog=f"Sortable columns: {', '.join(PRODUCT_COLUMNS)}",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_view",
        help="Print one filtered/sorted view instead of launching the TUI.",
    )
    parser.add_argument(
        "--download",
        choices=Settings.EXPORT_FORMATS,
        default=None,
        help="Write data.csv or data.xlsx for the full catalog and exit.",
    )
    parser.add_argument(
        "--data",
        default=None,
        dest="data_path",
        help="Catalog JSON file (default: bundled data.json).",
    )
    parser.add_argument(
        "-v",
        "--version-id",
        default=None,
        help="Catalog version to show (default: first available).",
    )
    parser.add_argument(
        "-n",
        "--name",
        default=None,
        help="Case-insensitive substring match on product name.",
    )
    parser.add_argument(
        "--category",
        action="append",
        default=None,
        dest="categories",
        help="Allowed category (repeatable).",
    )
    parser.add_argument(
        "--size-range",
        action="append",
        default=None,
        dest="size_ranges",
        help="Allowed size range (repeatable).",
    )
    parser.add_argument(
        "--gender",
        action="append",
        default=None,
        dest="genders",
        help="Allowed gender (repeatable).",
    )
    parser.add_argument(
        "--sort",
        default=None,
        dest="sort_column",
        help=(
            f"Column to sort by: {', '.join(PRODUCT_COLUMNS)} "
            f"(default: {Settings.DEFAULT_SORT_COLUMN})."
        ),
    )
    parser.add_argument(
        "--desc",
        action="store_true",
        default=False,
        help="Sort descending.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format for --list (default: json).",
    )
    parser.add_argument(
        "--export-mode",
        choices=Settings.EXPORT_MODES,
        default=None,
        help=f"Download behaviour (default: {Settings.EXPORT_MODE}).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        dest="output_dir",
        help="Download directory (default: downloads/).",
    )
    return parser


def _run_tui(args: argparse.Namespace) -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import CatalogApp

    try:
        app = CatalogApp(
            data_path=args.data_path,
            export_mode=args.export_mode,
        )
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("assort_catalog TUI shutting down")


def _run_list(args: argparse.Namespace) -> None:
    """Print one view of the catalog and exit."""
    from src.cli.runner import build_criteria, build_sort, cli_list

    exit_code = cli_list(
        version=args.version_id,
        criteria=build_criteria(
            args.name, args.categories, args.size_ranges, args.genders,
        ),
        sort=build_sort(args.sort_column, args.desc),
        output_format=args.output_format,
        data_path=args.data_path,
    )
    sys.exit(exit_code)


def _run_download(args: argparse.Namespace) -> None:
    """Write a download artifact and exit."""
    from src.cli.runner import cli_download

    exit_code = cli_download(
        args.download,
        export_mode=args.export_mode,
        output_dir=args.output_dir,
        data_path=args.data_path,
    )
    sys.exit(exit_code)


def main() -> None:
    """Route to the TUI (no args), a listing, or a download."""
    log_file = setup_logging()
    logger.info("assort_catalog starting — log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.download:
        _run_download(args)
    elif args.list_view:
        _run_list(args)
    else:
        _run_tui(args)


if __name__ == "__main__":
    main()
