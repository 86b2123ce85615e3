"""
Optional predicate fragments.

Each function turns one optional filter value into either a
specification or ``None``. ``None`` means "do not filter on this
field"; it is never a predicate that matches nothing. :func:`all_of`
drops the ``None`` results and ANDs whatever remains, so a criteria
object with nothing set composes to a specification that matches
every candidate.

Example::

    spec = all_of(
        contains_ignore_case("title", criteria.title),
        in_range("price", criteria.min_price, criteria.max_price),
        equals("special_offer", criteria.special_offer),
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .ast import AttributeSpecification
from .base import AndSpecification
from .evaluator import build_default_registry
from .operators import SpecificationOperator

if TYPE_CHECKING:
    from .base import ISpecification
    from .evaluator import MemoryOperatorRegistry

_DEFAULT_REGISTRY = build_default_registry()

Fragment = Optional[AttributeSpecification[Any]]


def _clean(value: str | None) -> str | None:
    """Trim *value*; blank or absent input yields ``None``."""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def _attribute(
    attr: str,
    op: SpecificationOperator,
    val: Any,
    registry: MemoryOperatorRegistry | None,
) -> AttributeSpecification[Any]:
    return AttributeSpecification(
        attr, op, val, registry=registry or _DEFAULT_REGISTRY
    )


def contains_ignore_case(
    attr: str,
    value: str | None,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> Fragment:
    """Case-insensitive substring match on the trimmed value."""
    cleaned = _clean(value)
    if cleaned is None:
        return None
    return _attribute(attr, SpecificationOperator.ICONTAINS, cleaned, registry)


def equals_ignore_case(
    attr: str,
    value: str | None,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> Fragment:
    """Case-insensitive equality on the trimmed value."""
    cleaned = _clean(value)
    if cleaned is None:
        return None
    return _attribute(attr, SpecificationOperator.IEQ, cleaned, registry)


def equals_trimmed(
    attr: str,
    value: str | None,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> Fragment:
    """Exact equality on the trimmed value; no case folding, no substring."""
    cleaned = _clean(value)
    if cleaned is None:
        return None
    return _attribute(attr, SpecificationOperator.EQ, cleaned, registry)


def equals(
    attr: str,
    value: Any,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> Fragment:
    """Plain equality. ``False`` and ``0`` are real filters; only ``None`` skips."""
    if value is None:
        return None
    return _attribute(attr, SpecificationOperator.EQ, value, registry)


def at_least(
    attr: str,
    threshold: float | None,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> Fragment:
    if threshold is None:
        return None
    return _attribute(attr, SpecificationOperator.GE, threshold, registry)


def in_range(
    attr: str,
    minimum: float | None,
    maximum: float | None,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> Fragment:
    """
    Inclusive range built from two independent optional bounds.

    Only ``minimum`` gives ``>=``, only ``maximum`` gives ``<=``, both give
    ``BETWEEN``.
    """
    if minimum is None and maximum is None:
        return None
    if minimum is not None and maximum is not None:
        return _attribute(
            attr, SpecificationOperator.BETWEEN, [minimum, maximum], registry
        )
    if minimum is not None:
        return _attribute(attr, SpecificationOperator.GE, minimum, registry)
    return _attribute(attr, SpecificationOperator.LE, maximum, registry)


def all_of(*fragments: ISpecification[Any] | None) -> AndSpecification[Any]:
    """AND the present fragments in argument order; none present matches all."""
    return AndSpecification(*(f for f in fragments if f is not None))
