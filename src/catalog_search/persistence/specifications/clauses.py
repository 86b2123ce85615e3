"""
SQL clause builders for the leaf operators.

Each builder takes a column (plain or aliased) and the value from the
specification AST. Case-insensitive operators lower both sides.
Containment escapes ``%`` and ``_`` in the value, so user input is
always matched literally.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import func

from ...specifications.exceptions import OperatorNotFoundError
from ...specifications.operators import SpecificationOperator

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

ClauseBuilder = Callable[[Any, Any], "ColumnElement[bool]"]


def _equals(column: Any, value: Any) -> ColumnElement[bool]:
    return cast("ColumnElement[bool]", column == value)


def _at_least(column: Any, value: Any) -> ColumnElement[bool]:
    return cast("ColumnElement[bool]", column >= value)


def _at_most(column: Any, value: Any) -> ColumnElement[bool]:
    return cast("ColumnElement[bool]", column <= value)


def _within(column: Any, bounds: Any) -> ColumnElement[bool]:
    low, high = bounds
    return cast("ColumnElement[bool]", column.between(low, high))


def _equals_ignore_case(column: Any, value: Any) -> ColumnElement[bool]:
    return cast("ColumnElement[bool]", func.lower(column) == str(value).lower())


def _contains_ignore_case(column: Any, value: Any) -> ColumnElement[bool]:
    return cast(
        "ColumnElement[bool]",
        func.lower(column).contains(str(value).lower(), autoescape=True),
    )


DEFAULT_CLAUSES: Mapping[SpecificationOperator, ClauseBuilder] = MappingProxyType(
    {
        SpecificationOperator.EQ: _equals,
        SpecificationOperator.GE: _at_least,
        SpecificationOperator.LE: _at_most,
        SpecificationOperator.BETWEEN: _within,
        SpecificationOperator.IEQ: _equals_ignore_case,
        SpecificationOperator.ICONTAINS: _contains_ignore_case,
    }
)


class SQLAlchemyOperatorRegistry:
    """Read-only table from operator to SQL clause builder."""

    def __init__(
        self, clauses: Mapping[SpecificationOperator, ClauseBuilder] = DEFAULT_CLAUSES
    ) -> None:
        self._clauses = dict(clauses)

    @property
    def operators(self) -> frozenset[SpecificationOperator]:
        return frozenset(self._clauses)

    def apply(
        self, op: SpecificationOperator, column: Any, value: Any
    ) -> ColumnElement[bool]:
        """
        Raises:
            OperatorNotFoundError: *op* has no clause builder in this table.
        """
        build = self._clauses.get(op)
        if build is None:
            raise OperatorNotFoundError(op.value, (o.value for o in self.operators))
        return build(column, value)


DEFAULT_SQLA_REGISTRY = SQLAlchemyOperatorRegistry()
