# src/filters/view_selector.py

"""Version partition selection over the catalog store."""

import logging

from src.models.product import Product
from src.storage.catalog_store import CatalogStore

logger = logging.getLogger("assort_catalog.filters")


def _version_sort_key(version: str) -> tuple[int, int, str]:
    """Numeric identifiers first, in numeric order, then the rest."""
    if version.isdecimal():
        return (0, int(version), version)
    return (1, 0, version)


def available_versions(store: CatalogStore) -> list[str]:
    """Return the distinct version identifiers, sorted ascending."""
    return sorted(store.versions(), key=_version_sort_key)


def resolve_version(
    selected: str | None, versions: list[str],
) -> str | None:
    """Return the version to show.

    An explicit selection wins, even when it is unknown. With nothing
    selected the first available version is used; an empty catalog
    yields ``None``.
    """
    if selected:
        return selected
    return versions[0] if versions else None


def select_version(
    store: CatalogStore, version: str | None,
) -> tuple[Product, ...]:
    """Return the products of one version partition, in load order.

    Unknown or missing versions give an empty tuple.
    """
    if version is None:
        return ()
    selected = tuple(p for p in store.products if p.version == version)
    if not selected:
        logger.debug("No products for version %r", version)
    return selected
