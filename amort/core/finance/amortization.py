# amort/core/finance/amortization.py
"""
Fixed-rate monthly amortization.

Model
-----
- The annual rate is normalized once into a monthly rate (see normalize_rate()).
- The level payment comes from the standard annuity formula:
      PMT = P * ( r * (1+r)^n ) / ( (1+r)^n - 1 ) = P * r / ( 1 - (1+r)^-n )
  evaluated in the second form, and degenerates to P / n when r == 0.
- The schedule is a left fold over months 1..n: each step takes the running balance
  and returns (new_balance, PeriodRecord). The Loan itself is never mutated.

Everything here is pure: no I/O, no logging, no rounding to cents.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Iterator
from dataclasses import dataclass, field

from .errors import InvalidInput, require

TERMINAL_EPSILON = 0.01  # accepted |ending balance| after the final period
MONTHS_PER_YEAR = 12


def normalize_rate(rate: float) -> float:
    """
    Convert a user-supplied annual rate into a monthly fraction.

    Values above 1 are read as percentages (5 -> 5%), anything else as an annual
    fraction (0.05 -> 5%). The threshold is literal: 0.5 means 50%/year and 1.0 means
    100%/year, while 1.5 means 1.5%/year.
    """
    require(math.isfinite(rate) and rate >= 0, "rate", rate, "a finite number >= 0")
    annual = rate / 100.0 if rate > 1 else rate
    return annual / MONTHS_PER_YEAR


def _as_count(period_count: int) -> int:
    if isinstance(period_count, bool):
        raise InvalidInput("period_count", period_count, "an integer >= 1")
    try:
        n = operator.index(period_count)
    except TypeError:
        raise InvalidInput("period_count", period_count, "an integer >= 1") from None
    require(n >= 1, "period_count", period_count, ">= 1")
    return n


def payment(principal: float, monthly_rate: float, period_count: int) -> float:
    """
    Level monthly payment that retires `principal` in `period_count` payments.

    Args:
        principal: Starting balance (>= 0).
        monthly_rate: Periodic rate as a fraction (>= 0).
        period_count: Number of monthly payments (>= 1).

    Raises:
        InvalidInput: when any argument is outside its range.
    """
    require(math.isfinite(principal) and principal >= 0, "principal", principal, "a finite number >= 0")
    require(math.isfinite(monthly_rate) and monthly_rate >= 0, "monthly_rate", monthly_rate, "a finite number >= 0")
    n = _as_count(period_count)

    r = monthly_rate
    if r == 0:
        return principal / n

    # (1+r)^-n underflows to 0.0 on long horizons, so the payment tends to P * r
    discount = (1.0 + r) ** (-n)
    if discount == 1.0:
        # r below float resolution at this horizon; same limit as r == 0
        return principal / n
    return principal * r / (1.0 - discount)


@dataclass(frozen=True)
class Loan:
    """
    Loan terms for one schedule build. `payment` is derived at construction.

    Attributes:
        principal: Initial unpaid balance.
        monthly_rate: Periodic rate in [0, 1).
        period_count: Number of monthly periods (>= 1).
        payment: Level payment for every period.
    """

    principal: float
    monthly_rate: float
    period_count: int
    payment: float = field(init=False)

    def __post_init__(self) -> None:
        require(self.monthly_rate < 1, "monthly_rate", self.monthly_rate, "< 1")
        object.__setattr__(self, "payment", payment(self.principal, self.monthly_rate, self.period_count))

    @classmethod
    def from_terms(cls, principal: float, rate: float, period_count: int) -> Loan:
        """Build a Loan from an annual rate (percentage or fraction, see normalize_rate())."""
        return cls(principal=principal, monthly_rate=normalize_rate(rate), period_count=period_count)


@dataclass(frozen=True)
class PeriodRecord:
    """
    Immutable breakdown of a single monthly payment.

    Attributes:
        month: 1-based period index.
        starting_balance: Balance owed entering the period.
        interest_amount: Interest accrued this period.
        principal_amount: Part of the payment that reduces the balance (negative
            under negative amortization).
        ending_balance: starting_balance - principal_amount.
    """

    month: int
    starting_balance: float
    interest_amount: float
    principal_amount: float
    ending_balance: float


@dataclass(frozen=True)
class Schedule:
    """Ordered PeriodRecords plus the Loan summary they were generated from."""

    loan: Loan
    records: tuple[PeriodRecord, ...]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[PeriodRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> PeriodRecord:
        return self.records[index]

    def last(self) -> PeriodRecord | None:
        return self.records[-1] if self.records else None


def amortize_period(balance: float, month: int, monthly_rate: float, pmt: float) -> tuple[float, PeriodRecord]:
    """One step of the fold: split `pmt` into interest and principal against `balance`."""
    interest = balance * monthly_rate
    principal_paid = pmt - interest
    new_balance = balance - principal_paid
    return new_balance, PeriodRecord(
        month=month,
        starting_balance=balance,
        interest_amount=interest,
        principal_amount=principal_paid,
        ending_balance=new_balance,
    )


def generate_schedule(loan: Loan) -> Schedule:
    """
    Fold the loan over months 1..period_count.

    Payments below the first month's interest grow the balance (negative
    amortization); that outcome is reproduced as-is.
    """
    require(loan.monthly_rate >= 0, "monthly_rate", loan.monthly_rate, ">= 0")
    n = _as_count(loan.period_count)

    balance = float(loan.principal)
    records: list[PeriodRecord] = []
    for month in range(1, n + 1):
        balance, record = amortize_period(balance, month, loan.monthly_rate, loan.payment)
        records.append(record)
    return Schedule(loan=loan, records=tuple(records))


def build_schedule(principal: float, rate: float, periods: int) -> Schedule:
    """Pure entry point: (principal, annual rate, periods) -> Schedule."""
    return generate_schedule(Loan.from_terms(principal, rate, periods))
