"""
Specification-to-SQLAlchemy compilation.

Public API:
    - ``build_sqla_filter(model, data)``: compile a spec dict to a
      WHERE clause plus the outer joins it needs
    - ``apply_sqla_filter(stmt, model, data)``: apply a spec dict to a
      ``Select`` statement
    - ``SQLAlchemyOperatorRegistry``: operator to clause-builder table;
      ``DEFAULT_SQLA_REGISTRY`` covers every operator the fragments emit
"""

from .clauses import DEFAULT_SQLA_REGISTRY, SQLAlchemyOperatorRegistry
from .compiler import (
    SQLAlchemyFilter,
    apply_sqla_filter,
    build_sqla_filter,
    is_match_all,
)

__all__ = [
    "build_sqla_filter",
    "apply_sqla_filter",
    "is_match_all",
    "SQLAlchemyFilter",
    "DEFAULT_SQLA_REGISTRY",
    "SQLAlchemyOperatorRegistry",
]
