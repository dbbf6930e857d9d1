"""Data models for catalog items, signed selections and match results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence


class DimensionMismatchError(ValueError):
    """Raised when vectors of differing lengths are combined or compared."""

    def __init__(self, expected: int, actual: int, name: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        self.name = name
        where = f" for '{name}'" if name else ""
        super().__init__(
            f"Vector dimension mismatch{where}: expected {expected}, got {actual}"
        )


class Sign(Enum):
    """Operator applied to a selected item's vector."""

    PLUS = 1
    MINUS = -1

    @property
    def symbol(self) -> str:
        return "+" if self is Sign.PLUS else "-"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Sign":
        """Convert '+' or '-' to a Sign.

        Raises:
            ValueError: For any other operator
        """
        if symbol == "+":
            return cls.PLUS
        if symbol == "-":
            return cls.MINUS
        raise ValueError(f"Invalid operator: {symbol!r} (expected '+' or '-')")

    def flipped(self) -> "Sign":
        return Sign.MINUS if self is Sign.PLUS else Sign.PLUS


@dataclass(frozen=True)
class CatalogItem:
    """A named food with its principal-component coordinates."""

    name: str
    vector: tuple[float, ...]

    @property
    def dimension(self) -> int:
        return len(self.vector)


@dataclass(frozen=True)
class SignedEntry:
    """One (item, sign) pair of a signed selection."""

    item: CatalogItem
    sign: Sign = Sign.PLUS

    @property
    def name(self) -> str:
        return self.item.name


# A signed selection is an ordered list owned by the caller.
SignedSelection = list[SignedEntry]


@dataclass(frozen=True)
class Match:
    """A catalog item together with its similarity to a query vector."""

    item: CatalogItem
    similarity: float

    @property
    def name(self) -> str:
        return self.item.name


class Catalog:
    """Read-only, ordered collection of catalog items with name lookup.

    All items must share the same vector dimension. When a name occurs
    more than once, the first occurrence is the one returned by lookups;
    every occurrence still takes part in matching.
    """

    def __init__(self, items: Iterable[CatalogItem]):
        self._items: tuple[CatalogItem, ...] = tuple(items)
        self._by_name: dict[str, CatalogItem] = {}

        dimension: Optional[int] = None
        for item in self._items:
            if dimension is None:
                dimension = item.dimension
            elif item.dimension != dimension:
                raise DimensionMismatchError(dimension, item.dimension, item.name)
            self._by_name.setdefault(item.name, item)

        self._dimension = dimension

    @property
    def items(self) -> tuple[CatalogItem, ...]:
        return self._items

    @property
    def dimension(self) -> Optional[int]:
        """Shared vector dimension, or None for an empty catalog."""
        return self._dimension

    def get(self, name: str) -> Optional[CatalogItem]:
        """Look up an item by exact, case-sensitive name."""
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [item.name for item in self._items]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> CatalogItem:
        return self._items[index]


def index_by_name(catalog: Sequence[CatalogItem] | Catalog) -> dict[str, CatalogItem]:
    """Build a name -> item mapping, first occurrence wins."""
    index: dict[str, CatalogItem] = {}
    for item in catalog:
        index.setdefault(item.name, item)
    return index
