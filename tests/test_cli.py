# tests/test_cli.py
from __future__ import annotations

from pathlib import Path

import pytest

from amort import __version__
from amort.cli import EXIT_INVALID, EXIT_IO, EXIT_OK, main
from tests.utils import loan_payload, write_config


def test_cli_file_output(tmp_path: Path, capsys) -> None:
    out = tmp_path / "sched.txt"
    code = main(["-p", "100", "-r", ".0123", "-n", "360", "-o", str(out)])
    assert code == EXIT_OK
    assert len(out.read_text(encoding="utf-8").splitlines()) == 360
    stdout = capsys.readouterr().out
    assert f"output type: File: {out}" in stdout
    assert f"Successfully wrote to {out}" in stdout


def test_cli_stdout(capsys) -> None:
    code = main(["--principal", "100000", "--interest-rate", "5", "--periods", "12"])
    assert code == EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "output type: stdout"
    assert lines[1].startswith("principal: 100000.00, rate: ")
    rows = [l for l in lines if l.startswith("month: ")]
    assert len(rows) == 12
    assert rows[-1].endswith("ending UPB: 0.00") or rows[-1].endswith("ending UPB: -0.00")


def test_cli_no_summary_full_precision(capsys) -> None:
    assert main(["-p", "1000", "-r", "0", "-n", "4", "--no-summary", "--decimals", "none"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "principal: " not in out.split("month: 1")[0]
    assert "month: 1, starting UPB: 1000.0, interest payment: 0.0, principal payment: 250.0, ending UPB: 750.0" in out


def test_cli_config_with_flag_override(tmp_path: Path, capsys) -> None:
    cfg = write_config(tmp_path / "loan.json", loan_payload(periods=24))
    out = tmp_path / "o.txt"
    assert main(["--config", str(cfg), "-n", "6", "-o", str(out)]) == EXIT_OK
    assert len(out.read_text(encoding="utf-8").splitlines()) == 6


@pytest.mark.parametrize(
    "argv",
    [
        ["-p", "100", "-r", "0.05", "-n", "0"],
        ["-p", "-100", "-r", "0.05", "-n", "12"],
        ["-p", "100", "-r", "-0.05", "-n", "12"],
        ["-p", "100", "-n", "12"],
    ],
)
def test_cli_invalid_terms(argv, capsys) -> None:
    assert main(argv) == EXIT_INVALID
    captured = capsys.readouterr()
    assert captured.err.startswith("error:")
    assert "month: " not in captured.out


def test_cli_rate_out_of_range(capsys) -> None:
    assert main(["-p", "100", "-r", "1500", "-n", "12"]) == EXIT_INVALID
    assert "monthly_rate" in capsys.readouterr().err


def test_cli_unparsable_number_exits() -> None:
    with pytest.raises(SystemExit) as ei:
        main(["-p", "abc", "-r", "0.05", "-n", "12"])
    assert ei.value.code == 2


def test_cli_unwritable_output(tmp_path: Path, capsys) -> None:
    out = tmp_path / "no-such-dir" / "x.txt"
    assert main(["-p", "100", "-r", "0.05", "-n", "12", "-o", str(out)]) == EXIT_IO
    assert "Couldn't write to" in capsys.readouterr().err
    assert not out.exists()


def test_cli_version(capsys) -> None:
    with pytest.raises(SystemExit) as ei:
        main(["--version"])
    assert ei.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_cli_long_horizon_high_rate(tmp_path: Path) -> None:
    out = tmp_path / "long.txt"
    assert main(["-p", "1000", "-r", "1100", "-n", "1200", "-o", str(out)]) == EXIT_OK
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1200
    assert "nan" not in lines[-1]


@pytest.mark.parametrize("principal", ["inf", "nan"])
def test_cli_non_finite_principal(principal, capsys) -> None:
    assert main(["-p", principal, "-r", "0.05", "-n", "2", "--decimals", "none"]) == EXIT_INVALID
    captured = capsys.readouterr()
    assert captured.err.startswith("error:")
    assert "month: " not in captured.out


def test_cli_config_directory(tmp_path: Path, capsys) -> None:
    d = tmp_path / "d.json"
    d.mkdir()
    assert main(["--config", str(d)]) == EXIT_INVALID
    assert "Cannot read" in capsys.readouterr().err


def test_cli_schedule_checks_only_when_verbose(monkeypatch, capsys) -> None:
    calls = []

    def _record(schedule):
        calls.append(len(schedule))
        return ["month 1: forced"]

    monkeypatch.setattr("amort.cli.validate_schedule", _record)
    assert main(["-p", "100", "-r", "0.05", "-n", "3"]) == EXIT_OK
    assert calls == []

    assert main(["-p", "100", "-r", "0.05", "-n", "3", "--verbose"]) == EXIT_OK
    assert calls == [3]
    assert "schedule check: month 1: forced" in capsys.readouterr().err
