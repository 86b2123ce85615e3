"""
In-memory evaluation of leaf operators.

Each predicate receives the value resolved from the candidate and the
value stored in the specification. Apart from plain equality, an absent
(``None``) candidate value never matches, the same way a comparison
against NULL never holds in SQL.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from .exceptions import OperatorNotFoundError
from .operators import SpecificationOperator

MemoryPredicate = Callable[[Any, Any], bool]


def _absent_never_matches(predicate: MemoryPredicate) -> MemoryPredicate:
    @functools.wraps(predicate)
    def wrapper(actual: Any, expected: Any) -> bool:
        return actual is not None and predicate(actual, expected)

    return wrapper


def _equals(actual: Any, expected: Any) -> bool:
    return bool(actual == expected)


@_absent_never_matches
def _at_least(actual: Any, expected: Any) -> bool:
    return bool(actual >= expected)


@_absent_never_matches
def _at_most(actual: Any, expected: Any) -> bool:
    return bool(actual <= expected)


@_absent_never_matches
def _within(actual: Any, bounds: Any) -> bool:
    low, high = bounds
    return bool(low <= actual <= high)


@_absent_never_matches
def _equals_ignore_case(actual: Any, expected: Any) -> bool:
    return str(actual).lower() == str(expected).lower()


@_absent_never_matches
def _contains_ignore_case(actual: Any, expected: Any) -> bool:
    return str(expected).lower() in str(actual).lower()


DEFAULT_PREDICATES: Mapping[SpecificationOperator, MemoryPredicate] = MappingProxyType(
    {
        SpecificationOperator.EQ: _equals,
        SpecificationOperator.GE: _at_least,
        SpecificationOperator.LE: _at_most,
        SpecificationOperator.BETWEEN: _within,
        SpecificationOperator.IEQ: _equals_ignore_case,
        SpecificationOperator.ICONTAINS: _contains_ignore_case,
    }
)


class MemoryOperatorRegistry:
    """
    Read-only table from operator to in-memory predicate.

    ``InMemoryEntityStore`` filters through ``is_satisfied_by``, which ends
    up here; the SQL side has the same table of clause builders. Pass a
    different mapping to evaluate with other semantics::

        strict = MemoryOperatorRegistry({SpecificationOperator.EQ: operator.is_})
    """

    def __init__(
        self, predicates: Mapping[SpecificationOperator, MemoryPredicate]
    ) -> None:
        self._predicates = dict(predicates)

    @property
    def operators(self) -> frozenset[SpecificationOperator]:
        return frozenset(self._predicates)

    def evaluate(
        self, op: SpecificationOperator, actual: Any, expected: Any
    ) -> bool:
        """
        Raises:
            OperatorNotFoundError: *op* has no predicate in this table.
        """
        predicate = self._predicates.get(op)
        if predicate is None:
            raise OperatorNotFoundError(op.value, (o.value for o in self.operators))
        return predicate(actual, expected)


def build_default_registry() -> MemoryOperatorRegistry:
    """Registry covering every operator the fragment builders emit."""
    return MemoryOperatorRegistry(DEFAULT_PREDICATES)
