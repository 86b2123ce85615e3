from .ast import AttributeSpecification
from .base import (
    AndSpecification,
    BaseSpecification,
    ISpecification,
    NotSpecification,
    OrSpecification,
)
from .evaluator import (
    DEFAULT_PREDICATES,
    MemoryOperatorRegistry,
    MemoryPredicate,
    build_default_registry,
)
from .exceptions import (
    FieldNotFoundError,
    OperatorNotFoundError,
    SpecificationError,
)
from .fragments import (
    all_of,
    at_least,
    contains_ignore_case,
    equals,
    equals_ignore_case,
    equals_trimmed,
    in_range,
)
from .operators import SpecificationOperator

__all__ = [
    # Core types
    "SpecificationOperator",
    "ISpecification",
    "AttributeSpecification",
    "BaseSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    # Fragments
    "all_of",
    "at_least",
    "contains_ignore_case",
    "equals",
    "equals_ignore_case",
    "equals_trimmed",
    "in_range",
    # In-memory evaluation
    "MemoryPredicate",
    "DEFAULT_PREDICATES",
    "MemoryOperatorRegistry",
    "build_default_registry",
    # Exceptions
    "SpecificationError",
    "OperatorNotFoundError",
    "FieldNotFoundError",
]
