"""Pure helpers for editing a signed selection.

The selection is owned by the caller (a CLI invocation, a web handler).
Every helper returns a new list and leaves its input untouched.
"""

from __future__ import annotations

from typing import Sequence

from nutrivec.engine.models import CatalogItem, Sign, SignedEntry


def add_item(
    selection: Sequence[SignedEntry],
    item: CatalogItem,
    sign: Sign = Sign.PLUS,
) -> list[SignedEntry]:
    """Append an item to the end of the selection."""
    return [*selection, SignedEntry(item=item, sign=sign)]


def remove_at(selection: Sequence[SignedEntry], index: int) -> list[SignedEntry]:
    """Remove the entry at a position.

    Raises:
        IndexError: If index is out of range
    """
    entries = list(selection)
    del entries[index]
    return entries


def set_sign(selection: Sequence[SignedEntry], index: int, sign: Sign) -> list[SignedEntry]:
    """Replace the sign of the entry at a position.

    Raises:
        IndexError: If index is out of range
    """
    entries = list(selection)
    entries[index] = SignedEntry(item=entries[index].item, sign=sign)
    return entries


def toggle_sign(selection: Sequence[SignedEntry], index: int) -> list[SignedEntry]:
    """Flip the sign of the entry at a position between + and -."""
    return set_sign(selection, index, selection[index].sign.flipped())


def merge_selections(
    existing: Sequence[SignedEntry],
    additions: Sequence[SignedEntry],
) -> list[SignedEntry]:
    """Grow-only merge: additions are appended after the existing entries."""
    return [*existing, *additions]


def describe_selection(selection: Sequence[SignedEntry]) -> list[str]:
    """Render each entry as "+ Name" or "- Name"."""
    return [f"{entry.sign.symbol} {entry.item.name}" for entry in selection]
