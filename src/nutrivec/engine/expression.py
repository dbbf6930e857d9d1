"""Compact string encoding of signed selections.

An expression looks like ``Apple+Banana-Milk``: names joined by ``+`` or
``-``, with the leading ``+`` omitted. The same string is carried in the
``expr`` query-string parameter of shareable links.

Parsing is lenient. Names that are not in the catalog are dropped, so a
link built against an older catalog still yields the items that survive.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Sequence
from urllib.parse import parse_qs, urlencode

from nutrivec.engine.models import Catalog, CatalogItem, Sign, SignedEntry, index_by_name

QUERY_PARAM = "expr"

_TOKEN_RE = re.compile(r"[+-]|[^+-]+")


@dataclass
class ParseResult:
    """Outcome of parsing an expression string."""

    selection: list[SignedEntry] = field(default_factory=list)
    unknown_names: list[str] = field(default_factory=list)


def serialize_expression(selection: Sequence[SignedEntry]) -> str:
    """Encode a signed selection as an expression string.

    The first item gets no prefix when positive; every later item is
    prefixed with its operator. An empty selection gives "".
    """
    tokens = []
    for i, entry in enumerate(selection):
        if entry.sign is Sign.MINUS:
            prefix = "-"
        elif i == 0:
            prefix = ""
        else:
            prefix = "+"
        tokens.append(prefix + entry.item.name)
    return "".join(tokens)


def tokenize_expression(text: str) -> list[str]:
    """Split an expression into single-character operators and name runs."""
    return _TOKEN_RE.findall(text or "")


def parse_expression_report(
    text: str,
    catalog: Catalog | Sequence[CatalogItem],
) -> ParseResult:
    """Parse an expression and report names missing from the catalog.

    The operator immediately before a name sets its sign; a name with no
    preceding operator is positive. The pending sign resets to ``+`` after
    every name, whether or not the name was found.

    Args:
        text: Expression string, e.g. "Apple+Banana-Milk"
        catalog: Catalog used to resolve names (exact, case-sensitive)

    Returns:
        ParseResult with the resolved selection and the dropped names
    """
    if isinstance(catalog, Catalog):
        lookup = catalog.get
    else:
        lookup = index_by_name(catalog).get

    result = ParseResult()
    pending = Sign.PLUS
    for token in tokenize_expression(text):
        if token in ("+", "-"):
            pending = Sign.from_symbol(token)
            continue

        item = lookup(token)
        if item is None:
            result.unknown_names.append(token)
        else:
            result.selection.append(SignedEntry(item=item, sign=pending))
        pending = Sign.PLUS

    return result


def parse_expression(
    text: str,
    catalog: Catalog | Sequence[CatalogItem],
) -> list[SignedEntry]:
    """Parse an expression string into a signed selection.

    Unknown names are dropped silently. See parse_expression_report().
    """
    return parse_expression_report(text, catalog).selection


def to_query_string(selection: Sequence[SignedEntry]) -> str:
    """Build the URL-encoded ``expr=...`` query string for a selection."""
    return urlencode({QUERY_PARAM: serialize_expression(selection)})


def expression_from_query_string(query: str) -> str:
    """Extract the raw expression from a query string ("" if absent).

    Accepts the query with or without a leading ``?``.
    """
    params = parse_qs(query.lstrip("?"), keep_blank_values=True)
    values = params.get(QUERY_PARAM)
    return values[0] if values else ""


def from_query_string(
    query: str,
    catalog: Catalog | Sequence[CatalogItem],
) -> list[SignedEntry]:
    """Restore a signed selection from a query string."""
    return parse_expression(expression_from_query_string(query), catalog)
