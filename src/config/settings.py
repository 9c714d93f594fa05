# src/config/settings.py

"""Central configuration for the assort_catalog viewer."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the assort_catalog viewer."""

    APP_TITLE: str = "ASSORT Standard Products"

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_PATH: Path = Path(
        os.getenv("CATALOG_DATA_PATH")
        or BASE_DIR / "src" / "data" / "data.json"
    )
    STATIC_EXPORT_DIR: Path = Path(
        os.getenv("CATALOG_STATIC_EXPORT_DIR")
        or BASE_DIR / "src" / "data" / "exports"
    )
    DOWNLOADS_DIR: Path = Path(
        os.getenv("CATALOG_DOWNLOADS_DIR") or BASE_DIR / "downloads"
    )
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Export ---
    # "snapshot": full raw dataset as indented JSON, whatever the extension
    # "static":   copy the pre-generated asset from STATIC_EXPORT_DIR
    EXPORT_MODES: list[str] = ["snapshot", "static"]
    EXPORT_MODE: str = os.getenv("CATALOG_EXPORT_MODE") or "snapshot"
    EXPORT_FORMATS: list[str] = ["csv", "xlsx"]
    EXPORT_BASENAME: str = "data"
    EXPORT_JSON_INDENT: int = 2

    # --- View ---
    DEFAULT_SORT_COLUMN: str = "id"
    EMPTY_STATE_MESSAGE: str = "No products found"

    # --- Columns (display order) ---
    COLUMNS: list[dict[str, str]] = [
        {"id": "id", "label": "ID"},
        {"id": "name", "label": "Name"},
        {"id": "category", "label": "Category"},
        {"id": "size_range", "label": "Size Range"},
        {"id": "gender", "label": "Gender"},
    ]

    # Fields offered as multi-select filter groups
    FACET_FIELDS: list[dict[str, str]] = [
        {"id": "category", "label": "Category"},
        {"id": "size_range", "label": "Size Range"},
        {"id": "gender", "label": "Gender"},
    ]
