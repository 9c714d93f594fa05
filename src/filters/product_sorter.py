# src/filters/product_sorter.py

"""Single-column ordering of a derived product view."""

from collections.abc import Iterable

from src.models.product import PRODUCT_COLUMNS, Product
from src.models.view_state import SortSpec


def sort_products(
    products: Iterable[Product], spec: SortSpec | None,
) -> tuple[Product, ...]:
    """Return a new tuple ordered by ``spec.column``.

    The sort is stable in both directions: equal keys keep their input
    order. ``spec=None`` keeps the input order.

    Raises:
        ValueError: For a column products do not have.
    """
    products = tuple(products)
    if spec is None:
        return products
    if spec.column not in PRODUCT_COLUMNS:
        msg = f"Cannot sort by unknown column: {spec.column!r}"
        raise ValueError(msg)
    return tuple(
        sorted(
            products,
            key=lambda p: p.value_of(spec.column),
            reverse=spec.descending,
        )
    )


def next_sort(current: SortSpec | None, column: str) -> SortSpec | None:
    """Cycle a header click: ascending, then descending, then unsorted.

    Clicking a column other than the sorted one starts it ascending.
    """
    if current is None or current.column != column:
        return SortSpec(column)
    if not current.descending:
        return SortSpec(column, descending=True)
    return None
