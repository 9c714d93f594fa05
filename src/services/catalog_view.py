# src/services/catalog_view.py

"""Composes version selection, filtering and sorting into one view."""

import logging
from dataclasses import dataclass, field

from src.config.settings import Settings
from src.filters.product_filter import ProductFilter
from src.filters.product_sorter import sort_products
from src.filters.view_selector import (
    available_versions,
    resolve_version,
    select_version,
)
from src.models.product import Product
from src.models.view_state import FACET_FIELDS, FilterCriteria, SortSpec
from src.storage.catalog_store import CatalogStore

logger = logging.getLogger("assort_catalog.view")


@dataclass
class ViewResult:
    """One rendered projection of the catalog."""

    version: str | None
    versions: list[str]
    products: tuple[Product, ...] = ()
    total_in_version: int = 0
    facets: dict[str, list[str]] = field(
        default_factory=lambda: dict[str, list[str]]()
    )

    @property
    def is_empty(self) -> bool:
        """True when the table should show the empty-state message."""
        return not self.products


def default_sort() -> SortSpec:
    """The sort order a fresh view starts with."""
    return SortSpec(Settings.DEFAULT_SORT_COLUMN)


class CatalogView:
    """Runs ``select version → filter → sort`` over a catalog store."""

    def __init__(self, store: CatalogStore) -> None:
        self.store = store
        self.versions: list[str] = available_versions(store)

    def render(
        self,
        version: str | None = None,
        criteria: FilterCriteria | None = None,
        sort: SortSpec | None = None,
    ) -> ViewResult:
        """Compute the derived view for the given view state.

        The store is never modified; every call starts from the raw
        version partition.
        """
        criteria = criteria or FilterCriteria()
        resolved = resolve_version(version, self.versions)
        partition = select_version(self.store, resolved)

        facets = {
            facet: ProductFilter.facet_values(partition, facet)
            for facet in FACET_FIELDS
        }
        filtered = ProductFilter.apply(partition, criteria)
        ordered = sort_products(filtered, sort)

        logger.debug(
            "Rendered version=%s rows=%d/%d sort=%s",
            resolved,
            len(ordered),
            len(partition),
            sort,
        )
        return ViewResult(
            version=resolved,
            versions=list(self.versions),
            products=ordered,
            total_in_version=len(partition),
            facets=facets,
        )
