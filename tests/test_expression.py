"""Tests for expression string serialization."""

from __future__ import annotations

from nutrivec.engine.expression import (
    expression_from_query_string,
    from_query_string,
    parse_expression,
    parse_expression_report,
    serialize_expression,
    to_query_string,
    tokenize_expression,
)
from nutrivec.engine.models import Sign, SignedEntry


def pairs(selection):
    return [(e.item.name, e.sign) for e in selection]


def make(catalog, *entries):
    return [SignedEntry(item=catalog.get(name), sign=sign) for name, sign in entries]


class TestSerializeExpression:
    """Tests for selection -> string."""

    def test_empty(self):
        assert serialize_expression([]) == ""

    def test_mixed_signs(self, catalog):
        selection = make(
            catalog, ("Apple", Sign.PLUS), ("Banana", Sign.PLUS), ("Milk", Sign.MINUS)
        )
        assert serialize_expression(selection) == "Apple+Banana-Milk"

    def test_leading_minus_kept(self, catalog):
        selection = make(catalog, ("Milk", Sign.MINUS), ("Apple", Sign.PLUS))
        assert serialize_expression(selection) == "-Milk+Apple"

    def test_names_with_spaces(self, catalog):
        selection = make(catalog, ("Fruit salad", Sign.PLUS), ("Yogurt", Sign.PLUS))
        assert serialize_expression(selection) == "Fruit salad+Yogurt"


class TestParseExpression:
    """Tests for string -> selection."""

    def test_tokenize(self):
        assert tokenize_expression("-Milk+Apple") == ["-", "Milk", "+", "Apple"]
        assert tokenize_expression("") == []

    def test_roundtrip(self, catalog):
        selection = make(
            catalog, ("Apple", Sign.PLUS), ("Banana", Sign.PLUS), ("Milk", Sign.MINUS)
        )
        restored = parse_expression(serialize_expression(selection), catalog)
        assert restored == selection

    def test_roundtrip_leading_minus_and_duplicates(self, catalog):
        selection = make(
            catalog, ("Milk", Sign.MINUS), ("Milk", Sign.MINUS), ("Fruit salad", Sign.PLUS)
        )
        assert parse_expression(serialize_expression(selection), catalog) == selection

    def test_unknown_names_dropped(self, catalog):
        result = parse_expression("Apple+Unicorn-Milk", catalog)
        assert pairs(result) == [("Apple", Sign.PLUS), ("Milk", Sign.MINUS)]

    def test_report_lists_unknown_names(self, catalog):
        report = parse_expression_report("Apple+Unicorn-Dragonfruit", catalog)
        assert pairs(report.selection) == [("Apple", Sign.PLUS)]
        assert report.unknown_names == ["Unicorn", "Dragonfruit"]

    def test_dropped_name_consumes_its_sign(self, catalog):
        """The operator in front of an unknown name goes away with it."""
        result = parse_expression("-Unicorn+Milk", catalog)
        assert pairs(result) == [("Milk", Sign.PLUS)]
        result = parse_expression("Apple-Unicorn", catalog)
        assert pairs(result) == [("Apple", Sign.PLUS)]

    def test_spaces_belong_to_the_name(self, catalog):
        """Whitespace is part of a name token, so "-Unicorn Apple" is one unknown name."""
        report = parse_expression_report("-Unicorn Apple", catalog)
        assert report.selection == []
        assert report.unknown_names == ["Unicorn Apple"]

    def test_last_operator_wins(self, catalog):
        assert pairs(parse_expression("Apple+-Milk", catalog)) == [
            ("Apple", Sign.PLUS),
            ("Milk", Sign.MINUS),
        ]
        assert pairs(parse_expression("Apple-+Milk", catalog)) == [
            ("Apple", Sign.PLUS),
            ("Milk", Sign.PLUS),
        ]

    def test_case_sensitive(self, catalog):
        assert parse_expression("apple", catalog) == []

    def test_empty_and_operator_only(self, catalog):
        assert parse_expression("", catalog) == []
        assert parse_expression("+-+", catalog) == []

    def test_plain_list_catalog(self, catalog):
        result = parse_expression("Banana-Yogurt", list(catalog))
        assert pairs(result) == [("Banana", Sign.PLUS), ("Yogurt", Sign.MINUS)]


class TestQueryString:
    """Tests for the expr= query parameter."""

    def test_plus_is_percent_encoded(self, catalog):
        selection = make(
            catalog, ("Apple", Sign.PLUS), ("Banana", Sign.PLUS), ("Milk", Sign.MINUS)
        )
        assert to_query_string(selection) == "expr=Apple%2BBanana-Milk"

    def test_roundtrip(self, catalog):
        selection = make(catalog, ("Fruit salad", Sign.PLUS), ("Milk", Sign.MINUS))
        assert from_query_string("?" + to_query_string(selection), catalog) == selection

    def test_missing_param(self, catalog):
        assert expression_from_query_string("other=1") == ""
        assert from_query_string("", catalog) == []
