"""ValidationResult: constraint violations collected from search criteria."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import InvalidCriteriaError


@dataclass
class ValidationResult:
    """Field-level violations, all of them, keyed by snake_case field name.

    Usage::

        result = ValidationResult.success()
        result.check(low <= high, "min_price", "must not be greater than max_price")
        result.raise_if_invalid()
    """

    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    def add_error(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)

    def check(self, condition: bool, field_name: str, message: str) -> None:
        """Record *message* against *field_name* unless *condition* holds."""
        if not condition:
            self.add_error(field_name, message)

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result holding the errors of both, in order."""
        merged = {name: list(messages) for name, messages in self.errors.items()}
        for field_name, messages in other.errors.items():
            merged.setdefault(field_name, []).extend(messages)
        return ValidationResult(errors=merged)

    def raise_if_invalid(self) -> None:
        if self.errors:
            raise InvalidCriteriaError(self.errors)

    def __bool__(self) -> bool:
        return self.is_valid
