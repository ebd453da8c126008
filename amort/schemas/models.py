# amort/schemas/models.py

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =========================
# Loan inputs
# =========================


class LoanRequest(BaseModel):
    """
    Raw loan terms as supplied on the command line or in a config file.
    The annual rate is normalized later (values above 1 are percentages).
    """

    model_config = ConfigDict(allow_inf_nan=False)

    principal: float = Field(..., gt=0, description="Amount borrowed (currency units).")
    rate: float = Field(
        ...,
        ge=0,
        description="Annual interest rate, either a fraction (0.05) or a percentage (5). Values > 1 are percentages.",
    )
    periods: int = Field(..., ge=1, description="Loan length in monthly periods.")


# =========================
# Output destinations
# =========================


class FileOutput(BaseModel):
    """Write the full schedule text to a named file."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: str = Field(..., min_length=1, description="Destination file path.")

    def __str__(self) -> str:
        return f"File: {self.path}"


class StdoutOutput(BaseModel):
    """Write the schedule to standard output."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["stdout"] = "stdout"

    def __str__(self) -> str:
        return "stdout"


OutputTarget = Annotated[FileOutput | StdoutOutput, Field(discriminator="kind")]


def output_target(path: str | None) -> FileOutput | StdoutOutput:
    """None (or blank) selects stdout, anything else a file."""
    if path is None or not path.strip():
        return StdoutOutput()
    return FileOutput(path=path)


# =========================
# Run options
# =========================


class RunOptions(BaseModel):
    """Non-financial options controlling one run."""

    output: str | None = Field(None, description="Output file path; None writes to stdout.")
    decimals: int | None = Field(
        2, ge=0, le=12, description="Decimal places for money columns; None prints full float precision."
    )
    summary: bool = Field(True, description="Print the loan summary line before the schedule.")

    @field_validator("output")
    @classmethod
    def _blank_output_is_stdout(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def target(self) -> FileOutput | StdoutOutput:
        return output_target(self.output)


class AppInputs(BaseModel):
    """
    Full input payload.

    Attributes:
        loan: Validated loan terms.
        run:  Runtime options for the current execution.
    """

    loan: LoanRequest
    run: RunOptions = RunOptions()
