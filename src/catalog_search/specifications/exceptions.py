"""Errors raised while evaluating or compiling a specification AST."""

from __future__ import annotations

from collections.abc import Iterable
from difflib import get_close_matches
from typing import Any

from ..exceptions import CatalogSearchError


class SpecificationError(CatalogSearchError):
    """A specification that cannot be evaluated or compiled."""


class OperatorNotFoundError(SpecificationError):
    """An operator with no in-memory predicate or SQL clause behind it."""

    def __init__(self, operator: str, supported: Iterable[str]) -> None:
        self.operator = operator
        self.supported = sorted(supported)
        super().__init__(
            f"Operator {operator!r} is not supported "
            f"(supported: {', '.join(self.supported)})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "message": str(self),
            "operator": self.operator,
            "supported": self.supported,
        }


class FieldNotFoundError(SpecificationError):
    """
    An attribute path names a column or relationship the model lacks.

    Paths are written by the ``has_*`` builders, so a miss is almost
    always a typo there; the message names the closest existing field.
    """

    def __init__(
        self,
        field_name: str,
        model_name: str,
        available: Iterable[str],
        *,
        path: str | None = None,
    ) -> None:
        self.field_name = field_name
        self.model_name = model_name
        self.path = path or field_name
        self.available = sorted(available)

        close = get_close_matches(field_name, self.available, n=1)
        self.suggestion = close[0] if close else None

        message = f"{model_name} has no field {field_name!r} (path {self.path!r})"
        if self.suggestion is not None:
            message += f"; did you mean {self.suggestion!r}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "message": str(self),
            "field": self.field_name,
            "model": self.model_name,
            "path": self.path,
            "suggestion": self.suggestion,
        }
