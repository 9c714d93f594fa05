# src/models/view_state.py

"""Transient view-state value objects: active filters and sort order."""

from dataclasses import dataclass, field, replace

# FilterCriteria attribute for each multi-select product field
_FACET_ATTRS: dict[str, str] = {
    "category": "categories",
    "size_range": "size_ranges",
    "gender": "genders",
}


@dataclass(frozen=True)
class FilterCriteria:
    """The set of active filter predicates.

    An empty name or an empty value set means "no restriction" for that
    field.
    """

    name: str = ""
    categories: frozenset[str] = field(default_factory=frozenset)
    size_ranges: frozenset[str] = field(default_factory=frozenset)
    genders: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        """True when no predicate restricts the result."""
        return not (
            self.name
            or self.categories
            or self.size_ranges
            or self.genders
        )

    def allowed(self, facet: str) -> frozenset[str]:
        """Return the allowed values for a facet field."""
        value: frozenset[str] = getattr(self, _facet_attr(facet))
        return value

    def with_facet(
        self, facet: str, values: frozenset[str] | set[str],
    ) -> "FilterCriteria":
        """Return a copy with *facet* restricted to *values*."""
        return replace(self, **{_facet_attr(facet): frozenset(values)})

    def toggled(self, facet: str, value: str) -> "FilterCriteria":
        """Return a copy with *value* added to or removed from *facet*."""
        current = self.allowed(facet)
        if value in current:
            return self.with_facet(facet, current - {value})
        return self.with_facet(facet, current | {value})

    def with_name(self, name: str) -> "FilterCriteria":
        """Return a copy with a new name search term."""
        return replace(self, name=name)


@dataclass(frozen=True)
class SortSpec:
    """A single (column, direction) sort order."""

    column: str
    descending: bool = False


def _facet_attr(facet: str) -> str:
    try:
        return _FACET_ATTRS[facet]
    except KeyError:
        msg = f"Unknown filter field: {facet!r}"
        raise ValueError(msg) from None


FACET_FIELDS: tuple[str, ...] = tuple(_FACET_ATTRS)
