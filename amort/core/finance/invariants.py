# amort/core/finance/invariants.py
"""
Schedule sanity checks.

Each check returns a list of human-readable violations; an empty list means the
schedule satisfies that property. validate_schedule() runs them all.
"""

from __future__ import annotations

from .amortization import TERMINAL_EPSILON, Schedule


def check_length(schedule: Schedule) -> list[str]:
    expected = schedule.loan.period_count
    if len(schedule) != expected:
        return [f"schedule has {len(schedule)} records, expected {expected}"]
    return []


def check_months(schedule: Schedule) -> list[str]:
    """Months run 1, 2, ..., n with no gaps or repeats."""
    out: list[str] = []
    for i, rec in enumerate(schedule, start=1):
        if rec.month != i:
            out.append(f"record {i} has month {rec.month}")
    return out


def check_payment_conservation(schedule: Schedule, *, eps: float = TERMINAL_EPSILON) -> list[str]:
    """interest + principal == payment for every period."""
    pmt = schedule.loan.payment
    out: list[str] = []
    for rec in schedule:
        total = rec.interest_amount + rec.principal_amount
        if abs(total - pmt) > eps:
            out.append(f"month {rec.month}: interest + principal = {total} != payment {pmt}")
    return out


def check_balance_continuity(schedule: Schedule) -> list[str]:
    """Each period starts exactly where the previous one ended; month 1 starts at the principal."""
    out: list[str] = []
    first = schedule.records[0] if schedule.records else None
    if first is not None and first.starting_balance != schedule.loan.principal:
        out.append(f"month 1 starts at {first.starting_balance}, principal is {schedule.loan.principal}")
    for prev, cur in zip(schedule.records, schedule.records[1:]):
        if cur.starting_balance != prev.ending_balance:
            out.append(f"month {cur.month} starts at {cur.starting_balance}, month {prev.month} ended at {prev.ending_balance}")
    return out


def check_terminal_balance(schedule: Schedule, *, eps: float = TERMINAL_EPSILON) -> list[str]:
    """Final ending balance within eps of zero."""
    last = schedule.last()
    if last is None:
        return ["schedule is empty"]
    if abs(last.ending_balance) > eps:
        return [f"final balance {last.ending_balance} not within {eps} of zero"]
    return []


def validate_schedule(schedule: Schedule, *, eps: float = TERMINAL_EPSILON) -> list[str]:
    """Run every check; negative-amortization schedules will fail the terminal check."""
    return [
        *check_length(schedule),
        *check_months(schedule),
        *check_payment_conservation(schedule, eps=eps),
        *check_balance_continuity(schedule),
        *check_terminal_balance(schedule, eps=eps),
    ]


__all__ = [
    "check_length",
    "check_months",
    "check_payment_conservation",
    "check_balance_continuity",
    "check_terminal_balance",
    "validate_schedule",
]
