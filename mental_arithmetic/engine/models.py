"""
Value objects produced by the calculation engine.

Both models are frozen: once an algorithm hands back a result, nothing
downstream (UI, scoring, persistence) can alter its steps.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mental_arithmetic.core.formulas import FormulaType


class CalculationStep(BaseModel):
    """One entry of a step trace."""

    model_config = ConfigDict(frozen=True)

    step_number: int = Field(..., ge=1)
    description: str
    operation: str
    explanation: str
    current_value: int = Field(..., description="Value on the abacus after this step")
    working_digit: int | None = Field(
        None, description="Column being worked, 0 = units, 1 = tens, ..."
    )
    carry: int | None = Field(None, description="Carry or borrow moved to the next column")


class CalculationResult(BaseModel):
    """Outcome of one traced calculation."""

    model_config = ConfigDict(frozen=True)

    formula: FormulaType
    operand1: int
    operand2: int | None = None
    result: int
    remainder: int | None = Field(None, description="Set for division formulas")
    steps: tuple[CalculationStep, ...]
    formula_used: str

    @property
    def final_step(self) -> CalculationStep:
        return self.steps[-1]

    @property
    def is_exact(self) -> bool:
        """False only for a division that left a remainder."""
        return not self.remainder
