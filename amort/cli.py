# amort/cli.py
"""
Entry Point — Fixed-rate amortization schedule

Purpose
-------
Compute the level monthly payment for a loan and emit its period-by-period schedule:
  1) Load loan terms (CLI flags or --config JSON, flags override the file).
  2) Build the schedule (pure core: amort.core.finance).
  3) Write one line per period to stdout or to --output.

Usage
-----
    amort -p 100000 -r 0.05 -n 360
    amort -p 100000 -r 5 -n 360 -o schedule.txt
    amort --config loan.json --decimals none

Exit codes
----------
    0  success
    1  output destination could not be written
    2  invalid arguments or loan terms
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from amort import __version__
from amort.core.finance import InvalidInput, build_schedule, validate_schedule
from amort.core.logs import get_logger
from amort.inputs.inputs import InputsLoader
from amort.reports.generator import IoFailure, format_loan, write_schedule
from amort.schemas.models import AppInputs, FileOutput

EXIT_OK = 0
EXIT_IO = 1
EXIT_INVALID = 2


def _decimals(val: str) -> int | None:
    if val.strip().lower() == "none":
        return None
    try:
        return int(val)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid decimals: {val!r} (integer or 'none')") from e


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="amort", description="Fixed-rate loan amortization schedule")
    p.add_argument("-p", "--principal", type=float, default=None, help="principal amount of the loan")
    p.add_argument(
        "-r",
        "--interest-rate",
        dest="rate",
        type=float,
        default=None,
        help="the annual interest rate (0.05 or 5 both mean 5%%; values above 1 are percentages)",
    )
    p.add_argument("-n", "--periods", type=int, default=None, help="length of loan in terms of months")
    p.add_argument("-o", "--output", type=str, default=None, help="write the schedule to this file instead of stdout")
    p.add_argument("--config", type=str, default=None, help="Path to JSON config (loan terms and run options).")
    p.add_argument(
        "--decimals",
        type=_decimals,
        default=argparse.SUPPRESS,
        help="decimal places for money columns, or 'none' for full precision (default 2)",
    )
    p.add_argument("--no-summary", action="store_true", help="do not print the loan summary line")
    p.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def load_config(args: argparse.Namespace) -> AppInputs:
    """Resolve AppInputs from --config and/or CLI flags (flags win)."""
    loader = InputsLoader()
    overrides = {}
    if hasattr(args, "decimals"):
        overrides["decimals"] = args.decimals
    if args.no_summary:
        overrides["summary"] = False

    if args.config:
        cfg = loader.load(args.config)
        return loader.with_overrides(
            cfg,
            principal=args.principal,
            rate=args.rate,
            periods=args.periods,
            output=args.output,
            **overrides,
        )

    cfg = loader.from_values(principal=args.principal, rate=args.rate, periods=args.periods, output=args.output)
    return loader.with_overrides(cfg, **overrides)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one schedule build; returns the process exit code."""
    args = build_parser().parse_args(argv)
    log = get_logger(force_debug=args.verbose)

    try:
        cfg = load_config(args)
        loan = cfg.loan
        schedule = build_schedule(loan.principal, loan.rate, loan.periods)
    except InvalidInput as e:
        print(f"error: invalid {e.field}: must be {e.bound} (got {e.value!r})", file=sys.stderr)
        return EXIT_INVALID
    except (ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    if log.isEnabledFor(logging.DEBUG):
        for problem in validate_schedule(schedule):
            log.debug("schedule check: %s", problem)

    target = cfg.run.target
    if isinstance(target, FileOutput):
        print(f"Using output file: {target.path!r}")
    print(f"output type: {target}")
    if cfg.run.summary:
        print(format_loan(schedule.loan, cfg.run.decimals))

    try:
        write_schedule(target, schedule, decimals=cfg.run.decimals)
    except IoFailure as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_IO

    if isinstance(target, FileOutput):
        print(f"Successfully wrote to {target.path}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
