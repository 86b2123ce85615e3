"""SQLAlchemy persistence adapter."""

from __future__ import annotations

from .models import Activity, Base, Supplier
from .specifications import (
    SQLAlchemyOperatorRegistry,
    apply_sqla_filter,
    build_sqla_filter,
)
from .store import SQLAlchemyEntityStore

__all__ = [
    # Models
    "Base",
    "Activity",
    "Supplier",
    # Store
    "SQLAlchemyEntityStore",
    # Specifications / Compiler
    "build_sqla_filter",
    "apply_sqla_filter",
    "SQLAlchemyOperatorRegistry",
]
