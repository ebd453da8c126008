# tests/utils.py
"""
Single source of truth for test data and factories.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from amort.core.finance import Loan, Schedule, generate_schedule

# -----------------------------
# Global defaults (edit once)
# -----------------------------

DEFAULT_PRINCIPAL = 100_000.0
DEFAULT_RATE = 0.05
DEFAULT_PERIODS = 360
EPS = 0.01


def make_loan(
    principal: float = DEFAULT_PRINCIPAL,
    rate: float = DEFAULT_RATE,
    periods: int = DEFAULT_PERIODS,
) -> Loan:
    return Loan.from_terms(principal, rate, periods)


def make_schedule(
    principal: float = DEFAULT_PRINCIPAL,
    rate: float = DEFAULT_RATE,
    periods: int = DEFAULT_PERIODS,
) -> Schedule:
    return generate_schedule(make_loan(principal, rate, periods))


def loan_payload(**overrides: Any) -> dict[str, Any]:
    """Structured AppInputs payload."""
    payload: dict[str, Any] = {
        "loan": {"principal": DEFAULT_PRINCIPAL, "rate": DEFAULT_RATE, "periods": DEFAULT_PERIODS},
        "run": {},
    }
    for k, v in overrides.items():
        section = "loan" if k in payload["loan"] else "run"
        payload[section][k] = v
    return payload


def write_config(path: Path, payload: dict[str, Any]) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
