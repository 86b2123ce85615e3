"""
Compile a specification dictionary (AST) into a SQLAlchemy filter.

The compiler walks the AST; each leaf is handed to a
``SQLAlchemyOperatorRegistry``, which maps the operator to a clause
builder in ``clauses.py``.

Relationship traversal
----------------------
A dotted attribute (``supplier.name``) reaches through a relationship.

- Scalar (many-to-one) relationships are LEFT OUTER JOINed through an
  alias, and the leaf compares against the aliased column. Rows whose
  relation is NULL stay in the row set; the leaf comparison against a
  NULL column is never true, so such rows only drop out for the filter
  that traverses the relation.
- Collection (one-to-many) relationships compile to ``EXISTS`` via
  ``.any()``, so the outer row set is never multiplied.

Each relationship path is joined at most once per statement.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple, cast

from sqlalchemy import and_, false, inspect, not_, or_, true
from sqlalchemy.orm import RelationshipProperty, aliased

from ...specifications.exceptions import FieldNotFoundError, OperatorNotFoundError
from ...specifications.operators import SpecificationOperator
from .clauses import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Select

    from .clauses import SQLAlchemyOperatorRegistry


class SQLAlchemyFilter(NamedTuple):
    """A compiled WHERE clause plus the outer joins it depends on."""

    clause: ColumnElement[bool]
    joins: tuple[Any, ...]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_sqla_filter(
    model: type[Any],
    data: dict[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> SQLAlchemyFilter:
    """
    Build a SQLAlchemy filter from a specification dictionary.

    Args:
        model: The SQLAlchemy model class.
        data: Specification dictionary (AST produced by ``spec.to_dict()``).
        registry: Optional custom operator registry. Falls back to
            ``DEFAULT_SQLA_REGISTRY``.

    Returns:
        The boolean clause and the relationship targets that must be
        outer-joined for the clause to be valid.
    """
    compiler = _FilterCompiler(model, registry or DEFAULT_SQLA_REGISTRY)
    clause = compiler.compile(data)
    return SQLAlchemyFilter(clause=clause, joins=tuple(compiler.joins))


def apply_sqla_filter(
    stmt: Select[Any],
    model: type[Any],
    data: dict[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> Select[Any]:
    """
    Apply a specification dictionary to a ``Select`` statement.

    A match-all specification (empty dict or an AND without conditions)
    leaves the statement untouched.
    """
    if is_match_all(data):
        return stmt

    compiled = build_sqla_filter(model, data, registry=registry)
    for target in compiled.joins:
        stmt = stmt.outerjoin(target)
    return stmt.where(compiled.clause)


def is_match_all(data: dict[str, Any]) -> bool:
    """True for ``{}`` and for an AND node with no conditions."""
    if not data:
        return True
    return (
        str(data.get("op", "")).lower() == SpecificationOperator.AND
        and not data.get("conditions")
    )


# ---------------------------------------------------------------------------
# Internal compilation
# ---------------------------------------------------------------------------


class _FilterCompiler:
    """Walks one AST; collects the aliases and joins it needs along the way."""

    def __init__(
        self,
        model: type[Any],
        registry: SQLAlchemyOperatorRegistry,
        *,
        correlated: bool = False,
    ) -> None:
        self._model = model
        self._registry = registry
        # Inside EXISTS subqueries scalar relationships use .has() instead
        # of joins on the outer statement.
        self._correlated = correlated
        self._aliases: dict[str, Any] = {}
        self.joins: list[Any] = []

    def compile(self, data: dict[str, Any]) -> ColumnElement[bool]:
        op_str = str(data.get("op", "")).lower()

        if op_str == SpecificationOperator.AND:
            conditions = [self.compile(c) for c in data.get("conditions", [])]
            return and_(*conditions) if conditions else true()

        if op_str == SpecificationOperator.OR:
            conditions = [self.compile(c) for c in data.get("conditions", [])]
            return or_(*conditions) if conditions else false()

        if op_str == SpecificationOperator.NOT:
            conditions = data.get("conditions", [])
            if not conditions:
                raise ValueError("Logical operator 'not' requires a condition")
            inner = (
                self.compile(conditions[0])
                if len(conditions) == 1
                else and_(*[self.compile(c) for c in conditions])
            )
            return not_(inner)

        return self._compile_leaf(data, op_str)

    def _compile_leaf(self, data: dict[str, Any], op_str: str) -> ColumnElement[bool]:
        attr: str | None = data.get("attr")
        if not attr:
            raise ValueError(f"Specification missing 'attr': {data}")

        try:
            op = SpecificationOperator(op_str)
        except ValueError as exc:
            raise OperatorNotFoundError(
                op_str, (o.value for o in self._registry.operators)
            ) from exc

        return self._compile_path(
            self._model, attr.split("."), op, data.get("val"), attr, ()
        )

    def _compile_path(
        self,
        entity: Any,
        parts: list[str],
        op: SpecificationOperator,
        val: Any,
        full_path: str,
        prefix: tuple[str, ...],
    ) -> ColumnElement[bool]:
        head, rest = parts[0], parts[1:]

        if not rest:
            column = self._column(entity, head, full_path)
            return self._registry.apply(op, column, val)

        rel_attr = self._relationship(entity, head, full_path)
        rel_prop = rel_attr.property

        if rel_prop.uselist or self._correlated:
            target = rel_prop.mapper.class_
            inner = _FilterCompiler(target, self._registry, correlated=True)
            nested = inner._compile_path(target, rest, op, val, full_path, ())
            if rel_prop.uselist:
                return cast("ColumnElement[bool]", rel_attr.any(nested))
            return cast("ColumnElement[bool]", rel_attr.has(nested))

        path = (*prefix, head)
        alias = self._join(".".join(path), rel_attr)
        return self._compile_path(alias, rest, op, val, full_path, path)

    def _join(self, key: str, rel_attr: Any) -> Any:
        alias = self._aliases.get(key)
        if alias is None:
            alias = aliased(rel_attr.property.mapper.class_)
            self._aliases[key] = alias
            self.joins.append(rel_attr.of_type(alias))
        return alias

    @staticmethod
    def _relationship(entity: Any, name: str, full_path: str) -> Any:
        mapper = inspect(entity).mapper
        rel_attr = getattr(entity, name, None)
        if not isinstance(getattr(rel_attr, "property", None), RelationshipProperty):
            raise FieldNotFoundError(
                name,
                mapper.class_.__name__,
                list(mapper.relationships.keys()),
                path=full_path,
            )
        return rel_attr

    @staticmethod
    def _column(entity: Any, name: str, full_path: str) -> Any:
        mapper = inspect(entity).mapper
        if name not in mapper.column_attrs:
            raise FieldNotFoundError(
                name,
                mapper.class_.__name__,
                list(mapper.column_attrs.keys()),
                path=full_path,
            )
        return getattr(entity, name)
