# tests/test_view_selector.py

"""Tests for version partition selection."""

import unittest

from src.filters.view_selector import (
    available_versions,
    resolve_version,
    select_version,
)
from src.models.product import Product
from src.services.catalog_view import CatalogView
from src.storage.catalog_store import CatalogStore


def _store(*pairs: tuple[str, str]) -> CatalogStore:
    """Build a store from (id, version) pairs."""
    return CatalogStore(
        tuple(Product(id=i, name=f"Item {i}", version=v) for i, v in pairs)
    )


class TestAvailableVersions(unittest.TestCase):
    """available_versions ordering."""

    def test_sorted_ascending(self) -> None:
        """Versions come back in ascending order regardless of load order."""
        store = _store(("a", "2"), ("b", "1"), ("c", "3"))
        self.assertEqual(available_versions(store), ["1", "2", "3"])

    def test_numeric_not_lexicographic(self) -> None:
        """Digit-only identifiers sort by value: 2 before 10."""
        store = _store(("a", "10"), ("b", "2"))
        self.assertEqual(available_versions(store), ["2", "10"])

    def test_non_numeric_after_numeric(self) -> None:
        """Named versions follow numeric ones, alphabetically."""
        store = _store(("a", "beta"), ("b", "1"), ("c", "alpha"))
        self.assertEqual(
            available_versions(store), ["1", "alpha", "beta"]
        )

    def test_superscript_digit_sorts_as_named(self) -> None:
        """Digit-like keys int() rejects sort with the named versions."""
        store = _store(("a", "²"), ("b", "1"), ("c", "③"))
        self.assertEqual(
            available_versions(store), ["1", "²", "③"]
        )

    def test_superscript_version_renders(self) -> None:
        """A view over such a catalog builds and selects normally."""
        store = _store(("a", "²"), ("b", "1"))
        result = CatalogView(store).render("²")
        self.assertEqual([p.id for p in result.products], ["a"])

    def test_distinct(self) -> None:
        """Each version appears once."""
        store = _store(("a", "1"), ("b", "1"))
        self.assertEqual(available_versions(store), ["1"])

    def test_empty_store(self) -> None:
        """An empty catalog has no versions."""
        self.assertEqual(available_versions(_store()), [])


class TestResolveVersion(unittest.TestCase):
    """resolve_version defaulting."""

    def test_defaults_to_first(self) -> None:
        """No selection picks the first available version."""
        self.assertEqual(resolve_version(None, ["1", "2"]), "1")
        self.assertEqual(resolve_version("", ["1", "2"]), "1")

    def test_explicit_selection_wins(self) -> None:
        """An explicit selection is kept."""
        self.assertEqual(resolve_version("2", ["1", "2"]), "2")

    def test_unknown_selection_kept(self) -> None:
        """Unknown selections are not corrected; they yield empty views."""
        self.assertEqual(resolve_version("9", ["1", "2"]), "9")

    def test_no_versions(self) -> None:
        """An empty catalog resolves to None."""
        self.assertIsNone(resolve_version(None, []))


class TestSelectVersion(unittest.TestCase):
    """select_version partition semantics."""

    def setUp(self) -> None:
        """Build a two-version store."""
        self.store = _store(
            ("A1", "1"), ("B1", "2"), ("A2", "1"), ("B2", "2"),
        )

    def test_only_matching_version(self) -> None:
        """Every selected product carries the requested version."""
        selected = select_version(self.store, "1")
        self.assertEqual([p.id for p in selected], ["A1", "A2"])
        self.assertTrue(all(p.version == "1" for p in selected))

    def test_partitions_cover_dataset_without_overlap(self) -> None:
        """The union over all versions is the dataset, disjointly."""
        seen: list[Product] = []
        for version in available_versions(self.store):
            seen.extend(select_version(self.store, version))
        self.assertEqual(len(seen), len(self.store))
        self.assertEqual(set(seen), set(self.store.products))

    def test_unknown_version_empty(self) -> None:
        """An unknown version gives an empty result, not an error."""
        self.assertEqual(select_version(self.store, "42"), ())

    def test_none_version_empty(self) -> None:
        """No version gives an empty result."""
        self.assertEqual(select_version(self.store, None), ())


if __name__ == "__main__":
    unittest.main()
