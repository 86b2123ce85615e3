"""Exception hierarchy for catalog-search.

Every exception provides ``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class CatalogSearchError(Exception):
    """Root exception for the entire catalog-search package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class NotFoundError(CatalogSearchError):
    """Raised when a requested resource does not exist."""


class EntityNotFoundError(NotFoundError):
    """Raised when a specific entity cannot be found by ID."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id={entity_id!r} not found")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "NOT_FOUND",
            "message": str(self),
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
        }


class InvalidCriteriaError(CatalogSearchError):
    """Raised when search criteria violate one or more constraints.

    Carries every violation found, not just the first: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_CRITERIA",
            "message": "Search criteria failed validation",
            "errors": self.errors,
        }


class InfrastructureError(CatalogSearchError):
    """Base class for all infrastructure-related errors."""


class StoreError(InfrastructureError):
    """Raised when the backing store cannot execute a query."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "STORE_FAILURE",
            "message": str(self),
        }


__all__: list[str] = [
    "CatalogSearchError",
    "EntityNotFoundError",
    "InfrastructureError",
    "InvalidCriteriaError",
    "NotFoundError",
    "StoreError",
]
