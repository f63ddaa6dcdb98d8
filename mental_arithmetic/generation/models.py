"""
Problem models shared by the generators and the example bank.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from mental_arithmetic.core.formulas import DifficultyLevel, FormulaType


class Problem(BaseModel):
    """One practice exercise, ready to be shown and scored by a front-end."""

    model_config = ConfigDict(frozen=True)

    id: str
    formula: FormulaType
    operand1: int = Field(..., ge=0)
    operand2: int | None = Field(None, ge=0)
    operator: str = Field(..., description="One of + - × ÷")
    expected_result: int = Field(..., ge=0)
    difficulty: DifficultyLevel
    question: str
    hint: str | None = None

    def check(self, answer: int | str) -> bool:
        """Score a learner's answer; unparseable input is simply wrong."""
        try:
            return int(str(answer).strip()) == self.expected_result
        except ValueError:
            return False


# ============================================================================
# CHAINED SEQUENCES
# ============================================================================


class SequenceMethod(str, Enum):
    """Bead technique a chained add/subtract move needs."""

    DIRECT = "direct"  # beads move straight up or down
    SMALL_FRIEND = "small_friend"  # swap through the 5 bead
    BIG_FRIEND = "big_friend"  # carry to or borrow from the next rod

    @property
    def display_name(self) -> str:
        return {
            SequenceMethod.DIRECT: "Direct",
            SequenceMethod.SMALL_FRIEND: "Small friend (5)",
            SequenceMethod.BIG_FRIEND: "Big friend (10)",
        }[self]


class SequenceConfig(BaseModel):
    """Shape of one chained sequence."""

    digits: int = Field(1, ge=1, le=4, description="Digits in the starting number")
    terms: int = Field(8, ge=2, le=25, description="Numbers shown, starting number included")
    methods: tuple[SequenceMethod, ...] = Field((SequenceMethod.DIRECT,), min_length=1)
    non_negative: bool = Field(
        True, description="Keep every running total in [0, 10^(digits+1))"
    )


class SequenceOperation(BaseModel):
    model_config = ConfigDict(frozen=True)

    delta: int = Field(..., gt=0)
    is_add: bool
    method: SequenceMethod
    is_carry: bool = False

    @property
    def signed(self) -> int:
        return self.delta if self.is_add else -self.delta


class SequenceProblem(BaseModel):
    """
    A column of numbers read top to bottom and summed on the rods.

    `terms` is what a sheet prints: the starting number followed by the
    signed deltas.
    """

    model_config = ConfigDict(frozen=True)

    start: int
    operations: tuple[SequenceOperation, ...]
    answer: int

    @property
    def terms(self) -> list[int]:
        return [self.start, *(operation.signed for operation in self.operations)]

    def check(self, answer: int | str) -> bool:
        try:
            return int(str(answer).strip()) == self.answer
        except ValueError:
            return False
