"""
Trace building and renumbering.

Algorithms record steps through a TraceBuilder. When one algorithm reuses
another, the child's steps are spliced in with TraceBuilder.extend, which
renumbers them so the final trace always reads 1..N with no resets.
"""

from __future__ import annotations

from typing import Iterable

from mental_arithmetic.core.formulas import FormulaType
from mental_arithmetic.engine.models import CalculationResult, CalculationStep


def renumber_steps(
    steps: Iterable[CalculationStep],
    start: int = 1,
    prefix: str | None = None,
) -> list[CalculationStep]:
    """
    Return copies of steps numbered consecutively from start.

    Args:
        steps: Steps to renumber (any numbering)
        start: Number given to the first step
        prefix: Optional phase label prepended to each description

    Returns:
        New list of steps; the input is left untouched
    """
    renumbered = []
    for offset, step in enumerate(steps):
        update: dict = {"step_number": start + offset}
        if prefix:
            update["description"] = f"{prefix}: {step.description}"
        renumbered.append(step.model_copy(update=update))
    return renumbered


class TraceBuilder:
    """Accumulates the steps of one calculation."""

    def __init__(self) -> None:
        self._steps: list[CalculationStep] = []

    def __len__(self) -> int:
        return len(self._steps)

    def add(
        self,
        description: str,
        operation: str,
        current_value: int,
        explanation: str,
        working_digit: int | None = None,
        carry: int | None = None,
    ) -> CalculationStep:
        step = CalculationStep(
            step_number=len(self._steps) + 1,
            description=description,
            operation=operation,
            explanation=explanation,
            current_value=current_value,
            working_digit=working_digit,
            carry=carry,
        )
        self._steps.append(step)
        return step

    def extend(self, child: CalculationResult, prefix: str | None = None) -> int:
        """
        Splice a sub-calculation's trace onto this one.

        Returns:
            The child's result, so compositions can chain on it
        """
        self._steps.extend(renumber_steps(child.steps, start=len(self._steps) + 1, prefix=prefix))
        return child.result

    def build(
        self,
        formula: FormulaType,
        operand1: int,
        result: int,
        formula_used: str,
        operand2: int | None = None,
        remainder: int | None = None,
    ) -> CalculationResult:
        return CalculationResult(
            formula=formula,
            operand1=operand1,
            operand2=operand2,
            result=result,
            remainder=remainder,
            steps=tuple(self._steps),
            formula_used=formula_used,
        )
