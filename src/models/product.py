# src/models/product.py

"""Product data model shared by the store, the view pipeline and the UI."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A single standard product inside one catalog version."""

    id: str
    name: str
    category: str = ""
    size_range: str = ""
    gender: str = ""
    version: str = ""

    def value_of(self, column: str) -> str:
        """Return the string value shown in *column*."""
        if column not in PRODUCT_COLUMNS:
            msg = f"Unknown product column: {column!r}"
            raise ValueError(msg)
        value: str = getattr(self, column)
        return value


# Columns that can be displayed, sorted or filtered on
PRODUCT_COLUMNS: tuple[str, ...] = (
    "id",
    "name",
    "category",
    "size_range",
    "gender",
)
