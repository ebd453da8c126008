# amort/reports/generator.py
from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from amort.core.finance.amortization import Loan, PeriodRecord, Schedule
from amort.core.logs import child
from amort.schemas.models import FileOutput, OutputTarget, StdoutOutput

log = child("reports")


class IoFailure(OSError):
    """The output destination could not be created or written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Couldn't write to {path}: {reason}")


def _fmt_amount(x: float, decimals: int | None) -> str:
    """
    Format a money column.

    Example:
        _fmt_amount(416.6666, 2)    -> "416.67"
        _fmt_amount(416.6666, None) -> "416.6666"
    """
    if decimals is None:
        return repr(float(x))
    return f"{x:.{decimals}f}"


def format_loan(loan: Loan, decimals: int | None = 2) -> str:
    """
    One-line loan summary: principal, monthly rate, period count, payment.
    The monthly rate is always printed at full precision.
    """
    return (
        f"principal: {_fmt_amount(loan.principal, decimals)}, "
        f"rate: {loan.monthly_rate!r}, "
        f"period: {loan.period_count}, "
        f"payment: {_fmt_amount(loan.payment, decimals)}"
    )


def format_period(rec: PeriodRecord, decimals: int | None = 2) -> str:
    """One-line period row: month, starting UPB, interest, principal, ending UPB."""
    return (
        f"month: {rec.month}, "
        f"starting UPB: {_fmt_amount(rec.starting_balance, decimals)}, "
        f"interest payment: {_fmt_amount(rec.interest_amount, decimals)}, "
        f"principal payment: {_fmt_amount(rec.principal_amount, decimals)}, "
        f"ending UPB: {_fmt_amount(rec.ending_balance, decimals)}"
    )


def render_schedule(schedule: Schedule, decimals: int | None = 2) -> str:
    """Every period row followed by a newline, in month order."""
    return "".join(format_period(rec, decimals) + "\n" for rec in schedule)


def write_schedule(
    target: OutputTarget,
    schedule: Schedule,
    *,
    decimals: int | None = 2,
    stream: TextIO | None = None,
) -> str:
    """
    Render the schedule and send it to `target`.

    The text is rendered in full before the destination is opened, so a failed write
    never leaves a partially computed schedule behind.

    Returns:
        The rendered schedule text.

    Raises:
        IoFailure: when a file destination cannot be created or written.
    """
    text = render_schedule(schedule, decimals)

    if isinstance(target, FileOutput):
        path = Path(target.path)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise IoFailure(target.path, e.strerror or str(e)) from e
        log.info("wrote %d rows to %s", len(schedule), path)
        return text

    if not isinstance(target, StdoutOutput):
        raise TypeError(f"unsupported output target: {target!r}")

    out = stream if stream is not None else sys.stdout
    out.write(text)
    out.flush()
    log.info("wrote %d rows to stdout", len(schedule))
    return text
