# amort/core/finance/errors.py
"""
Typed errors for the amortization core.

Exports
-------
- AmortizationError   (base, subclasses ValueError)
- InvalidInput        (field / value / bound of the violated constraint)
- require(...)        (raise InvalidInput unless a condition holds)
"""

from __future__ import annotations


class AmortizationError(ValueError):
    """Base class for amortization core failures."""


class InvalidInput(AmortizationError):
    """
    A loan term violates its allowed range.

    Attributes:
        field: Name of the offending input (e.g. "period_count").
        value: The rejected value.
        bound: Human-readable constraint that was violated (e.g. ">= 1").
    """

    def __init__(self, field: str, value: object, bound: str) -> None:
        self.field = field
        self.value = value
        self.bound = bound
        super().__init__(f"{field} must be {bound} (got {value!r})")


def require(ok: bool, field: str, value: object, bound: str) -> None:
    """Raise InvalidInput for `field` unless `ok`."""
    if not ok:
        raise InvalidInput(field, value, bound)


__all__ = ["AmortizationError", "InvalidInput", "require"]
