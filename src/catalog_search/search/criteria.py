"""Criteria base class: an immutable bag of optional filters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
from typing_extensions import Self

from ..exceptions import InvalidCriteriaError
from ..validation import ValidationResult


class SearchCriteria(BaseModel):
    """Base class for search criteria.

    Every field is optional; ``None`` means "do not filter on this
    field". A criteria object with every field ``None`` matches all
    entities. Field names are snake_case in Python and camelCase on the
    wire (``min_price`` / ``minPrice``); both spellings are accepted on
    input and unknown keys are ignored.

    Subclasses add cross-field rules by overriding
    :meth:`validate_constraints`.

    Calling the constructor directly runs field validation only and
    raises pydantic's ``ValidationError``. Use :meth:`create` or
    :meth:`from_params` to get an :class:`InvalidCriteriaError` for
    field and cross-field violations alike.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def is_empty(self) -> bool:
        """True when no filter field is set."""
        return all(getattr(self, name) is None for name in type(self).model_fields)

    def validate_constraints(self) -> ValidationResult:
        """Cross-field checks. Returns every violation, not just the first."""
        return ValidationResult.success()

    def ensure_valid(self) -> None:
        self.validate_constraints().raise_if_invalid()

    @classmethod
    def create(cls, **values: Any) -> Self:
        """
        Build and fully validate criteria.

        Every field-level error is reported in one
        :class:`InvalidCriteriaError`, keyed by snake_case field name;
        cross-field rules run once all fields parse.
        """
        try:
            criteria = cls.model_validate(values)
        except ValidationError as exc:
            raise InvalidCriteriaError(cls._collect_errors(exc)) from exc

        criteria.ensure_valid()
        return criteria

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> Self:
        """Build criteria from a query-parameter mapping; blank values are absent."""
        return cls.create(
            **{
                key: value
                for key, value in params.items()
                if not (isinstance(value, str) and not value.strip())
            }
        )

    @classmethod
    def _collect_errors(cls, exc: ValidationError) -> dict[str, list[str]]:
        """Group pydantic errors by snake_case field name."""
        names = {
            field.alias: name
            for name, field in cls.model_fields.items()
            if field.alias
        }
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            loc = [str(part) for part in error["loc"]]
            if loc:
                loc[0] = names.get(loc[0], loc[0])
            field_name = ".".join(loc) or "__root__"
            errors.setdefault(field_name, []).append(error["msg"])
        return errors
