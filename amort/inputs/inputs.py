# amort/inputs/inputs.py
"""
Inputs loader for the amortization CLI.

Goals
-----
- File-first inputs with validation via Pydantic.
- Accept a flat shorthand (loan terms at the root) as well as the structured shape.
- Minimal environment-variable overrides for CI/CLI convenience.

Supported JSON shapes
---------------------
1) Flat (root = LoanRequest)
   { "principal": 100000, "rate": 0.05, "periods": 360 }

2) Structured (root = AppInputs)
   {
     "loan": { "principal": 100000, "rate": 0.05, "periods": 360 },
     "run":  { "output": "schedule.txt", "decimals": 2, "summary": true }
   }

Environment overrides (optional)
--------------------------------
- AMORT_OUTPUT    -> AppInputs.run.output
- AMORT_DECIMALS  -> AppInputs.run.decimals (int, or "none" for full precision)

Public API
----------
- class InputsLoader:
    - load(path) -> AppInputs
    - load_json(text) -> AppInputs
    - from_values(...) -> AppInputs
    - with_overrides(cfg, **kwargs) -> AppInputs (non-destructive copies)
- function load_inputs(path) -> AppInputs  (convenience)
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from pydantic import ValidationError

from amort.core.logs import child
from amort.schemas.models import AppInputs

log = child("inputs")

_LOAN_KEYS = ("principal", "rate", "periods")
_UNSET: Any = object()


@dataclass(frozen=True)
class InputsLoader:
    """
    File-first inputs loader with light env overrides.

    Responsibilities:
        - Read JSON from a file or string
        - Accept both the flat and structured shapes
        - Validate with Pydantic
        - Apply environment overrides for run options
    """

    env_prefix: str = "AMORT_"

    # ---------- Public API ----------

    def load(self, path: str | Path) -> AppInputs:
        """Load inputs from a JSON file and apply environment overrides."""
        p = self._resolve_path(path)
        log.debug("loading inputs from %s", p)
        raw = self._read_json_file(p)
        return self._finish(raw)

    def load_json(self, text: str) -> AppInputs:
        """Load inputs from a JSON string (flat or structured)."""
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON payload: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError("Invalid JSON payload: expected an object at the root")
        return self._finish(raw)

    def from_values(
        self,
        *,
        principal: float | None,
        rate: float | None,
        periods: int | None,
        output: str | None = None,
    ) -> AppInputs:
        """
        Build AppInputs from CLI values; missing loan terms are reported together.
        An explicit `output` wins over AMORT_OUTPUT.
        """
        missing = [k for k, v in zip(_LOAN_KEYS, (principal, rate, periods)) if v is None]
        if missing:
            raise ValueError(f"Missing required loan terms: {', '.join(missing)}")
        cfg = self._finish({"loan": {"principal": principal, "rate": rate, "periods": periods}})
        return self.with_overrides(cfg, output=output)

    def with_overrides(
        self,
        cfg: AppInputs,
        *,
        principal: float | None = None,
        rate: float | None = None,
        periods: int | None = None,
        output: str | None = None,
        decimals: int | None = _UNSET,
        summary: bool | None = None,
    ) -> AppInputs:
        """
        Return a *new* AppInputs with provided non-null overrides applied.
        `decimals` accepts None explicitly (full precision), so it uses a sentinel.
        Does not mutate the original instance.
        """
        loan_updates = {
            k: v for k, v in zip(_LOAN_KEYS, (principal, rate, periods)) if v is not None
        }
        run_updates: dict[str, Any] = {}
        if output is not None:
            run_updates["output"] = output
        if decimals is not _UNSET:
            run_updates["decimals"] = decimals
        if summary is not None:
            run_updates["summary"] = summary

        if not loan_updates and not run_updates:
            return cfg

        log.debug("applying overrides loan=%s run=%s", loan_updates, run_updates)
        data = cfg.model_dump()
        data["loan"].update(loan_updates)
        data["run"].update(run_updates)
        return self._parse_root(data)

    # ---------- Internals ----------

    def _finish(self, raw: dict[str, Any]) -> AppInputs:
        cfg = self._parse_root(self._maybe_wrap_flat(raw))
        return self._apply_env_overrides(cfg)

    def _resolve_path(self, path: str | Path) -> Path:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Inputs file not found: {p}")
        return p

    def _read_json_file(self, p: Path) -> dict[str, Any]:
        if p.suffix.lower() != ".json":
            raise ValueError(f"Unsupported inputs format for {p.name}; only .json is supported.")
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {p}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read {p}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid JSON in {p}: expected an object at the root")
        return cast(dict[str, Any], data)

    def _maybe_wrap_flat(self, raw: dict[str, Any]) -> dict[str, Any]:
        """Flat shape: loan terms (and optionally run keys) at the root."""
        if "loan" in raw:
            return raw
        loan = {k: raw[k] for k in _LOAN_KEYS if k in raw}
        run = {k: v for k, v in raw.items() if k not in _LOAN_KEYS}
        return {"loan": loan, "run": run}

    def _parse_root(self, data: dict[str, Any]) -> AppInputs:
        try:
            return AppInputs.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Inputs validation failed:\n{e}") from e

    def _apply_env_overrides(self, cfg: AppInputs) -> AppInputs:
        prefix = self.env_prefix
        updates: dict[str, Any] = {}

        output = os.getenv(f"{prefix}OUTPUT")
        if output:
            updates["output"] = output

        decimals = os.getenv(f"{prefix}DECIMALS")
        if decimals:
            value = decimals.strip().lower()
            if value == "none":
                updates["decimals"] = None
            else:
                try:
                    updates["decimals"] = int(value)
                except ValueError:
                    # Ignore bad value; keep validated cfg.run.decimals
                    log.warning("ignoring %sDECIMALS=%r (not an integer)", prefix, decimals)

        if not updates:
            return cfg

        log.debug("environment overrides: %s", updates)
        data = cfg.model_dump()
        data["run"].update(updates)
        return self._parse_root(data)


# ----------------------------
# Convenience function
# ----------------------------


def load_inputs(path: str | Path) -> AppInputs:
    """Convenience wrapper for one-shot callers."""
    return InputsLoader().load(path)
