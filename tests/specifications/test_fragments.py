"""Tests for the optional predicate fragments and their composition."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from catalog_search.specifications import (
    AndSpecification,
    AttributeSpecification,
    SpecificationOperator,
    all_of,
    at_least,
    contains_ignore_case,
    equals,
    equals_ignore_case,
    equals_trimmed,
    in_range,
)

# -- absent input yields no fragment -------------------------------------------


@pytest.mark.parametrize("blank", [None, "", " ", "\t\n  "])
@pytest.mark.parametrize(
    "fragment", [contains_ignore_case, equals_ignore_case, equals_trimmed]
)
def test_string_fragments_skip_absent_or_blank(fragment, blank) -> None:
    assert fragment("name", blank) is None


def test_range_and_threshold_skip_when_absent() -> None:
    assert in_range("price", None, None) is None
    assert at_least("rating", None) is None
    assert equals("special_offer", None) is None


# -- fragment shape ------------------------------------------------------------


def test_contains_ignore_case_trims_value() -> None:
    spec = contains_ignore_case("title", "  museum ")
    assert isinstance(spec, AttributeSpecification)
    assert spec.to_dict() == {"op": "icontains", "attr": "title", "val": "museum"}


def test_equals_trimmed_keeps_case() -> None:
    spec = equals_trimmed("zip", " 10115 ")
    assert spec is not None
    assert spec.to_dict() == {"op": "=", "attr": "zip", "val": "10115"}


def test_equals_ignore_case() -> None:
    spec = equals_ignore_case("currency", "eur")
    assert spec is not None
    assert spec.op == SpecificationOperator.IEQ
    assert spec.is_satisfied_by(SimpleNamespace(currency="EUR"))


def test_equals_false_is_a_real_filter() -> None:
    spec = equals("special_offer", False)
    assert spec is not None
    assert spec.is_satisfied_by(SimpleNamespace(special_offer=False))
    assert not spec.is_satisfied_by(SimpleNamespace(special_offer=True))


@pytest.mark.parametrize(
    ("minimum", "maximum", "expected"),
    [
        (40, None, {"op": ">=", "attr": "price", "val": 40}),
        (None, 60, {"op": "<=", "attr": "price", "val": 60}),
        (40, 60, {"op": "between", "attr": "price", "val": [40, 60]}),
    ],
)
def test_in_range_shapes(minimum, maximum, expected) -> None:
    spec = in_range("price", minimum, maximum)
    assert spec is not None
    assert spec.to_dict() == expected


def test_in_range_includes_both_bounds() -> None:
    spec = in_range("price", 40, 60)
    assert spec is not None
    matched = [
        p for p in range(30, 71) if spec.is_satisfied_by(SimpleNamespace(price=p))
    ]
    assert matched == list(range(40, 61))


def test_at_least_is_inclusive() -> None:
    spec = at_least("rating", 4.5)
    assert spec is not None
    assert spec.is_satisfied_by(SimpleNamespace(rating=4.5))
    assert not spec.is_satisfied_by(SimpleNamespace(rating=4.49))


# -- relationship paths ----------------------------------------------------------


def test_dotted_path_reaches_through_relation() -> None:
    spec = contains_ignore_case("supplier.name", "berlin")
    assert spec is not None
    with_supplier = SimpleNamespace(
        supplier=SimpleNamespace(name="Berlin Tours GmbH")
    )
    assert spec.is_satisfied_by(with_supplier)


def test_absent_relation_never_matches() -> None:
    spec = contains_ignore_case("supplier.name", "berlin")
    assert spec is not None
    assert not spec.is_satisfied_by(SimpleNamespace(supplier=None))


# -- composition -------------------------------------------------------------------


def test_all_of_drops_absent_fragments_in_order() -> None:
    spec = all_of(
        contains_ignore_case("title", "museum"),
        None,
        at_least("rating", 4),
    )
    assert isinstance(spec, AndSpecification)
    assert [c["attr"] for c in spec.to_dict()["conditions"]] == ["title", "rating"]


def test_all_of_without_fragments_matches_everything() -> None:
    spec = all_of(None, None)
    assert spec.to_dict() == {"op": "and", "conditions": []}
    assert spec.is_satisfied_by(SimpleNamespace())
    assert spec.is_satisfied_by(None)


def test_blank_filter_is_the_same_as_omitting_it() -> None:
    with_blank = all_of(contains_ignore_case("title", "   "), at_least("rating", 4))
    without = all_of(at_least("rating", 4))
    assert with_blank.to_dict() == without.to_dict()
