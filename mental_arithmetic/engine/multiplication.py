"""
Multiplication formulas.

Every multiplier is reached through 10: append a zero, then halve,
subtract or add to land on the target. multiply_10 is the only one that
is not decomposed further.
"""

from __future__ import annotations

from mental_arithmetic.core.formulas import FormulaType
from mental_arithmetic.engine.addition import add_complement
from mental_arithmetic.engine.division import divide_2
from mental_arithmetic.engine.models import CalculationResult
from mental_arithmetic.engine.subtraction import subtract_complement
from mental_arithmetic.engine.trace import TraceBuilder


def _start(trace: TraceBuilder, a: int, explanation: str) -> None:
    trace.add(
        description="Starting value",
        operation=f"{a}",
        current_value=a,
        explanation=explanation,
    )


def multiply_2(a: int) -> CalculationResult:
    """n × 2 = n + n."""
    trace = TraceBuilder()
    _start(trace, a, f"{a} × 2 = {a} + {a}")
    result = trace.extend(add_complement(a, a), prefix=f"Add {a}")
    return trace.build(FormulaType.MULTIPLY_2, a, result, f"{a} × 2 = {a} + {a}", operand2=2)


def multiply_10(a: int) -> CalculationResult:
    """n × 10: append a zero."""
    trace = TraceBuilder()
    _start(trace, a, f"{a} × 10")
    result = a * 10
    trace.add(
        description="Append a zero",
        operation=f"{a} × 10 = {result}",
        current_value=result,
        explanation=f"Multiplying by 10 moves every digit one rod left and adds a 0: {a} × 10 = {result}.",
        working_digit=0,
    )
    return trace.build(FormulaType.MULTIPLY_10, a, result, f"{a} × 10", operand2=10)


def _times_power_of_ten(trace: TraceBuilder, a: int, zeros: int) -> int:
    value = a
    for _ in range(zeros):
        value = trace.extend(multiply_10(value), prefix="Multiply by 10")
    return value


def _halve(trace: TraceBuilder, value: int, times: int) -> int:
    for round_number in range(times):
        value = trace.extend(divide_2(value), prefix=f"Halving {round_number + 1}")
    return value


def multiply_5(a: int) -> CalculationResult:
    """n × 5 = (n × 10) ÷ 2."""
    trace = TraceBuilder()
    _start(trace, a, f"{a} × 5 = ({a} × 10) ÷ 2")
    tens = _times_power_of_ten(trace, a, 1)
    result = _halve(trace, tens, 1)
    return trace.build(FormulaType.MULTIPLY_5, a, result, f"{a} × 5 = ({a} × 10) ÷ 2", operand2=5)


def multiply_9(a: int) -> CalculationResult:
    """n × 9 = (n × 10) - n, using full column subtraction."""
    trace = TraceBuilder()
    _start(trace, a, f"{a} × 9 = ({a} × 10) - {a}")
    tens = _times_power_of_ten(trace, a, 1)
    result = trace.extend(subtract_complement(tens, a), prefix=f"Subtract {a}")
    return trace.build(FormulaType.MULTIPLY_9, a, result, f"{a} × 9 = ({a} × 10) - {a}", operand2=9)


def multiply_11(a: int) -> CalculationResult:
    """n × 11 = (n × 10) + n."""
    trace = TraceBuilder()
    _start(trace, a, f"{a} × 11 = ({a} × 10) + {a}")
    tens = _times_power_of_ten(trace, a, 1)
    result = trace.extend(add_complement(tens, a), prefix=f"Add {a}")
    return trace.build(FormulaType.MULTIPLY_11, a, result, f"{a} × 11 = ({a} × 10) + {a}", operand2=11)


def multiply_25(a: int) -> CalculationResult:
    """n × 25 = (n × 100) ÷ 4."""
    trace = TraceBuilder()
    _start(trace, a, f"{a} × 25 = ({a} × 100) ÷ 4")
    hundreds = _times_power_of_ten(trace, a, 2)
    result = _halve(trace, hundreds, 2)
    return trace.build(FormulaType.MULTIPLY_25, a, result, f"{a} × 25 = ({a} × 100) ÷ 4", operand2=25)


def multiply_125(a: int) -> CalculationResult:
    """n × 125 = (n × 1000) ÷ 8."""
    trace = TraceBuilder()
    _start(trace, a, f"{a} × 125 = ({a} × 1000) ÷ 8")
    thousands = _times_power_of_ten(trace, a, 3)
    result = _halve(trace, thousands, 3)
    return trace.build(
        FormulaType.MULTIPLY_125, a, result, f"{a} × 125 = ({a} × 1000) ÷ 8", operand2=125
    )
