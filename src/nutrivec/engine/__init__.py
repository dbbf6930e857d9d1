"""Vector-combination and nearest-match engine."""

from nutrivec.engine.expression import (
    ParseResult,
    from_query_string,
    parse_expression,
    parse_expression_report,
    serialize_expression,
    to_query_string,
)
from nutrivec.engine.matching import (
    combine_selection,
    find_closest,
    find_closest_match,
    rank_matches,
)
from nutrivec.engine.models import (
    Catalog,
    CatalogItem,
    DimensionMismatchError,
    Match,
    Sign,
    SignedEntry,
)

__all__ = [
    "Catalog",
    "CatalogItem",
    "DimensionMismatchError",
    "Match",
    "Sign",
    "SignedEntry",
    "ParseResult",
    "combine_selection",
    "find_closest",
    "find_closest_match",
    "rank_matches",
    "parse_expression",
    "parse_expression_report",
    "serialize_expression",
    "to_query_string",
    "from_query_string",
]
