# src/storage/exporter.py

"""Writes the catalog download artifacts (``data.csv`` / ``data.xlsx``).

Downloads are dataset snapshots, not view snapshots: whatever filters or
sort order the user has applied, the artifact holds the full catalog.
"""

import json
import logging
import shutil
from pathlib import Path

from src.config.settings import Settings
from src.storage.catalog_store import CatalogStore

logger = logging.getLogger("assort_catalog.storage")


class ExportError(OSError):
    """A download artifact could not be produced."""


class CatalogExporter:
    """Produces download files for the whole catalog."""

    def __init__(
        self,
        store: CatalogStore,
        mode: str | None = None,
        downloads_dir: Path | None = None,
        static_dir: Path | None = None,
    ) -> None:
        self.store = store
        self.mode: str = mode or Settings.EXPORT_MODE
        if self.mode not in Settings.EXPORT_MODES:
            msg = (
                f"Unknown export mode {self.mode!r}; "
                f"expected one of {', '.join(Settings.EXPORT_MODES)}"
            )
            raise ValueError(msg)
        self.downloads_dir: Path = downloads_dir or Settings.DOWNLOADS_DIR
        self.static_dir: Path = static_dir or Settings.STATIC_EXPORT_DIR
        logger.debug(
            "CatalogExporter initialised — mode=%s downloads_dir=%s",
            self.mode,
            self.downloads_dir,
        )

    @staticmethod
    def filename_for(fmt: str) -> str:
        """Return the artifact filename for a download format."""
        if fmt not in Settings.EXPORT_FORMATS:
            msg = (
                f"Unsupported download format {fmt!r}; "
                f"expected one of {', '.join(Settings.EXPORT_FORMATS)}"
            )
            raise ValueError(msg)
        return f"{Settings.EXPORT_BASENAME}.{fmt}"

    def snapshot_text(self) -> str:
        """The full dataset document as indented JSON."""
        return json.dumps(
            self.store.document,
            ensure_ascii=False,
            indent=Settings.EXPORT_JSON_INDENT,
        )

    def export(self, fmt: str) -> Path:
        """Write ``data.<fmt>`` into the downloads directory.

        In ``snapshot`` mode the file holds the raw dataset as JSON,
        regardless of the extension. In ``static`` mode the shipped asset
        of the same name is copied verbatim.

        Raises:
            ValueError: For an unsupported format.
            ExportError: When a static asset is missing.
        """
        filename = self.filename_for(fmt)
        self.downloads_dir.mkdir(parents=True, exist_ok=True)
        target = self.downloads_dir / filename

        if self.mode == "static":
            self._copy_static(filename, target)
        else:
            with open(target, "w", encoding="utf-8") as f:
                f.write(self.snapshot_text())

        logger.info(
            "Exported %d products (%s mode) to %s",
            len(self.store),
            self.mode,
            target,
        )
        return target

    def _copy_static(self, filename: str, target: Path) -> None:
        source = self.static_dir / filename
        if not source.is_file():
            msg = f"Pre-generated download not found: {source}"
            raise ExportError(msg)
        shutil.copyfile(source, target)
