# amort/core/finance/__init__.py

from .amortization import (
    Loan,
    PeriodRecord,
    Schedule,
    amortize_period,
    build_schedule,
    generate_schedule,
    normalize_rate,
    payment,
)
from .errors import AmortizationError, InvalidInput
from .invariants import validate_schedule

__all__ = [
    "Loan",
    "PeriodRecord",
    "Schedule",
    "amortize_period",
    "build_schedule",
    "generate_schedule",
    "normalize_rate",
    "payment",
    "validate_schedule",
    "AmortizationError",
    "InvalidInput",
]
