# src/storage/catalog_store.py

"""Loads the bundled catalog document and normalises it into Products.

Two on-disk shapes exist for the same logical dataset:

* mapping variant: ``{"version": {"<key>": [product, ...]}}`` where the
  version is the mapping key and records use ``category``/``sizeRange``;
* field variant: ``{"standardProducts": [product, ...]}`` where every
  record carries its own integer ``version`` and uses
  ``categoryName``/``sizeRangeName``.

Both are turned into one tuple of frozen :class:`Product` records at load
time. The raw document is kept alongside for the snapshot exporter.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("assort_catalog.store")


class CatalogLoadError(ValueError):
    """The catalog document cannot be read or has an unknown shape."""


def _require_str(record: dict[str, Any], key: str, where: str) -> str:
    """Return ``record[key]`` as a string, or raise if it is missing."""
    value = record.get(key)
    if value is None or value == "":
        msg = f"{where}: missing required field '{key}'"
        raise CatalogLoadError(msg)
    return str(value)


def _optional_str(record: dict[str, Any], *keys: str) -> str:
    """Return the first present key's value as a string, else ``""``."""
    for key in keys:
        value = record.get(key)
        if value is not None:
            return str(value)
    return ""


def _normalise_record(
    record: Any, version: str | None, where: str,
) -> Product:
    if not isinstance(record, dict):
        msg = f"{where}: expected an object, got {type(record).__name__}"
        raise CatalogLoadError(msg)

    if version is None:
        version = _require_str(record, "version", where)

    return Product(
        id=_require_str(record, "id", where),
        name=_require_str(record, "name", where),
        category=_optional_str(record, "category", "categoryName"),
        size_range=_optional_str(record, "sizeRange", "sizeRangeName"),
        gender=_optional_str(record, "gender"),
        version=version,
    )


def normalise_document(document: Any) -> tuple[Product, ...]:
    """Convert either on-disk shape into a flat tuple of Products.

    Raises:
        CatalogLoadError: When the document matches neither shape or a
            record lacks a required field.
    """
    if not isinstance(document, dict):
        msg = "Catalog document must be a JSON object"
        raise CatalogLoadError(msg)

    products: list[Product] = []

    if "version" in document:
        partitions = document["version"]
        if not isinstance(partitions, dict):
            msg = "'version' must map version keys to product lists"
            raise CatalogLoadError(msg)
        for key, records in partitions.items():
            if not isinstance(records, list):
                msg = f"version {key!r}: expected a list of products"
                raise CatalogLoadError(msg)
            for idx, record in enumerate(records):
                products.append(
                    _normalise_record(
                        record, str(key), f"version {key!r}[{idx}]",
                    )
                )
    elif "standardProducts" in document:
        records = document["standardProducts"]
        if not isinstance(records, list):
            msg = "'standardProducts' must be a list of products"
            raise CatalogLoadError(msg)
        for idx, record in enumerate(records):
            products.append(
                _normalise_record(record, None, f"standardProducts[{idx}]")
            )
    else:
        msg = (
            "Unknown catalog shape: expected a 'version' mapping "
            "or a 'standardProducts' list"
        )
        raise CatalogLoadError(msg)

    return tuple(products)


class CatalogStore:
    """Immutable in-memory catalog, loaded once per session."""

    def __init__(
        self,
        products: tuple[Product, ...],
        document: Any = None,
        source: Path | None = None,
    ) -> None:
        self._products = products
        self._document = document
        self.source = source

    @classmethod
    def from_document(
        cls, document: Any, source: Path | None = None,
    ) -> "CatalogStore":
        """Build a store from an already-parsed JSON document."""
        products = normalise_document(document)
        return cls(products, copy.deepcopy(document), source)

    @classmethod
    def load(cls, path: Path | None = None) -> "CatalogStore":
        """Read and normalise the catalog file at *path*.

        Defaults to ``Settings.DATA_PATH``.
        """
        path = Path(path) if path is not None else Settings.DATA_PATH
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except OSError as exc:
            msg = f"Cannot read catalog file {path}: {exc}"
            raise CatalogLoadError(msg) from exc
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in catalog file {path}: {exc}"
            raise CatalogLoadError(msg) from exc

        try:
            store = cls.from_document(document, path)
        except CatalogLoadError as exc:
            msg = f"{path}: {exc}"
            raise CatalogLoadError(msg) from exc

        logger.info(
            "Loaded %d products across %d versions from %s",
            len(store.products),
            len(store.versions()),
            path,
        )
        return store

    @property
    def products(self) -> tuple[Product, ...]:
        """Every product in load order."""
        return self._products

    @property
    def document(self) -> Any:
        """A copy of the raw on-disk document.

        Stores built straight from Products get a mapping-variant document
        rebuilt from their records.
        """
        if self._document is None:
            return self._mapping_document()
        return copy.deepcopy(self._document)

    def _mapping_document(self) -> dict[str, Any]:
        partitions: dict[str, list[dict[str, str]]] = {}
        for p in self._products:
            partitions.setdefault(p.version, []).append(
                {
                    "id": p.id,
                    "name": p.name,
                    "category": p.category,
                    "sizeRange": p.size_range,
                    "gender": p.gender,
                }
            )
        return {"version": partitions}

    def versions(self) -> list[str]:
        """Distinct version identifiers in first-seen order."""
        seen: dict[str, None] = {}
        for product in self._products:
            seen.setdefault(product.version, None)
        return list(seen)

    def __len__(self) -> int:
        return len(self._products)
