# tests/test_cli_runner.py

"""Tests for the headless listing and download runner."""

import io
import json
import tempfile
import unittest
from pathlib import Path
from typing import Any
from unittest.mock import patch

from src.cli.runner import (
    build_criteria,
    build_sort,
    cli_download,
    cli_list,
)
from src.models.view_state import FilterCriteria, SortSpec

DOCUMENT: dict[str, Any] = {
    "version": {
        "1": [
            {
                "id": "A1",
                "name": "Tent",
                "category": "Shelter",
                "sizeRange": "One Size",
                "gender": "Unisex",
            },
            {
                "id": "A2",
                "name": "Tarp",
                "category": "Shelter",
                "sizeRange": "One Size",
                "gender": "Unisex",
            },
        ],
        "2": [
            {
                "id": "B1",
                "name": "T-Shirt",
                "category": "Tops",
                "sizeRange": "S-XL",
                "gender": "Men",
            },
        ],
    }
}


class TestBuilders(unittest.TestCase):
    """Option → value object conversion."""

    def test_build_sort_default(self) -> None:
        """No column falls back to id ascending."""
        self.assertEqual(build_sort(None, False), SortSpec("id"))

    def test_build_sort_default_desc(self) -> None:
        """--desc alone reverses the default column."""
        self.assertEqual(build_sort(None, True), SortSpec("id", True))

    def test_build_sort_column(self) -> None:
        """A known column is accepted."""
        self.assertEqual(
            build_sort("size_range", True), SortSpec("size_range", True)
        )

    def test_build_sort_accepts_json_key(self) -> None:
        """The sizeRange key printed by --format json sorts size_range."""
        self.assertEqual(
            build_sort("sizeRange", False), SortSpec("size_range")
        )

    def test_build_sort_unknown_exits(self) -> None:
        """An unknown column exits with status 1."""
        with self.assertRaises(SystemExit) as ctx:
            build_sort("price", False)
        self.assertEqual(ctx.exception.code, 1)

    def test_build_criteria(self) -> None:
        """Repeatable options become frozensets."""
        criteria = build_criteria(
            "tent", ["Shelter", "Shelter"], None, ["Unisex"]
        )
        self.assertEqual(
            criteria,
            FilterCriteria(
                name="tent",
                categories=frozenset({"Shelter"}),
                genders=frozenset({"Unisex"}),
            ),
        )

    def test_build_criteria_all_none(self) -> None:
        """No options means no restriction."""
        self.assertTrue(build_criteria(None, None, None, None).is_empty)


class TestCliList(unittest.TestCase):
    """cli_list output and exit codes."""

    def setUp(self) -> None:
        """Write the test catalog to a temp file."""
        self.tmp_dir = Path(tempfile.mkdtemp())
        self.data_path = self.tmp_dir / "data.json"
        self.data_path.write_text(json.dumps(DOCUMENT), encoding="utf-8")

    def _run_json(
        self,
        version: str | None,
        criteria: FilterCriteria,
        sort: SortSpec,
    ) -> tuple[int, list[dict[str, str]]]:
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = cli_list(
                version, criteria, sort, "json", str(self.data_path)
            )
        rows: list[dict[str, str]] = json.loads(out.getvalue())
        return code, rows

    def test_json_output_sorted_and_filtered(self) -> None:
        """Version 1, Shelter, name ascending → Tarp, Tent."""
        code, rows = self._run_json(
            "1",
            FilterCriteria(categories=frozenset({"Shelter"})),
            SortSpec("name"),
        )
        self.assertEqual(code, 0)
        self.assertEqual([r["name"] for r in rows], ["Tarp", "Tent"])
        self.assertEqual(rows[0]["sizeRange"], "One Size")
        self.assertEqual(rows[0]["version"], "1")

    def test_default_version(self) -> None:
        """Without --version-id the first version is listed."""
        code, rows = self._run_json(None, FilterCriteria(), SortSpec("id"))
        self.assertEqual(code, 0)
        self.assertEqual([r["id"] for r in rows], ["A1", "A2"])

    def test_empty_result_is_success(self) -> None:
        """No matches prints [] and still exits 0."""
        code, rows = self._run_json(
            "1", FilterCriteria(name="xyz-nonexistent"), SortSpec("id")
        )
        self.assertEqual(code, 0)
        self.assertEqual(rows, [])

    def test_unknown_version_is_empty(self) -> None:
        """An unknown version lists nothing."""
        code, rows = self._run_json("9", FilterCriteria(), SortSpec("id"))
        self.assertEqual(code, 0)
        self.assertEqual(rows, [])

    def test_table_output(self) -> None:
        """Table format prints product names to stdout."""
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = cli_list(
                "2",
                FilterCriteria(),
                SortSpec("id"),
                "table",
                str(self.data_path),
            )
        self.assertEqual(code, 0)
        self.assertIn("T-Shirt", out.getvalue())

    def test_bad_data_path_fails(self) -> None:
        """A missing catalog file exits 1."""
        code = cli_list(
            None,
            FilterCriteria(),
            SortSpec("id"),
            "json",
            str(self.tmp_dir / "missing.json"),
        )
        self.assertEqual(code, 1)


class TestCliDownload(unittest.TestCase):
    """cli_download artifacts."""

    def setUp(self) -> None:
        """Temp catalog file and output directory."""
        self.tmp_dir = Path(tempfile.mkdtemp())
        self.data_path = self.tmp_dir / "data.json"
        self.data_path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
        self.out_dir = self.tmp_dir / "out"

    def test_snapshot_download(self) -> None:
        """Snapshot mode writes the full document as JSON."""
        code = cli_download(
            "csv",
            export_mode="snapshot",
            output_dir=str(self.out_dir),
            data_path=str(self.data_path),
        )
        self.assertEqual(code, 0)
        with open(self.out_dir / "data.csv", encoding="utf-8") as f:
            self.assertEqual(json.load(f), DOCUMENT)

    def test_static_missing_asset_fails(self) -> None:
        """A missing static asset exits 1."""
        with patch(
            "src.config.settings.Settings.STATIC_EXPORT_DIR",
            self.tmp_dir / "no_assets",
        ):
            code = cli_download(
                "xlsx",
                export_mode="static",
                output_dir=str(self.out_dir),
                data_path=str(self.data_path),
            )
        self.assertEqual(code, 1)

    def test_bad_data_path_fails(self) -> None:
        """A missing catalog file exits 1."""
        code = cli_download(
            "csv", data_path=str(self.tmp_dir / "missing.json")
        )
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
