# src/filters/product_filter.py

"""Name search and multi-select field filtering of catalog products."""

import logging
from collections.abc import Iterable

from src.models.product import Product
from src.models.view_state import FACET_FIELDS, FilterCriteria

logger = logging.getLogger("assort_catalog.filters")


class ProductFilter:
    """Apply the active filter predicates to a product sequence."""

    @staticmethod
    def matches(product: Product, criteria: FilterCriteria) -> bool:
        """True when *product* satisfies every active predicate."""
        if criteria.name and (
            criteria.name.lower() not in product.name.lower()
        ):
            return False
        for facet in FACET_FIELDS:
            allowed = criteria.allowed(facet)
            if allowed and product.value_of(facet) not in allowed:
                return False
        return True

    @staticmethod
    def apply(
        products: Iterable[Product],
        criteria: FilterCriteria,
    ) -> tuple[Product, ...]:
        """Return the products matching *criteria*, keeping input order.

        Empty criteria return the input unchanged. An empty result is a
        valid outcome, not an error.
        """
        products = tuple(products)
        if criteria.is_empty:
            return products

        kept = tuple(
            p for p in products if ProductFilter.matches(p, criteria)
        )
        logger.debug(
            "Filter kept %d of %d products (%s)",
            len(kept),
            len(products),
            criteria,
        )
        return kept

    @staticmethod
    def facet_values(
        products: Iterable[Product], facet: str,
    ) -> list[str]:
        """Sorted distinct values of *facet* across *products*."""
        if facet not in FACET_FIELDS:
            msg = f"Unknown filter field: {facet!r}"
            raise ValueError(msg)
        return sorted({p.value_of(facet) for p in products})
