"""
Division formulas.

divide_2 is real long division on the digits; 4 and 8 halve repeatedly and
5 goes through 10. Every result carries the remainder explicitly so an
inexact division never silently loses information.
"""

from __future__ import annotations

from mental_arithmetic.core.digits import digits_to_number, split_into_digits, trim_leading_zeros
from mental_arithmetic.core.formulas import FormulaType
from mental_arithmetic.engine.addition import add_simple
from mental_arithmetic.engine.models import CalculationResult
from mental_arithmetic.engine.trace import TraceBuilder


def divide_2(a: int) -> CalculationResult:
    """n ÷ 2 by long division, most significant digit first."""
    trace = TraceBuilder()
    digits = split_into_digits(a)
    trace.add(
        description="Starting value",
        operation=f"{a} ÷ 2",
        current_value=a,
        explanation=f"Halve {a} digit by digit, passing any remainder to the right.",
    )

    quotient_digits: list[int] = []
    remainder = 0
    width = len(digits)
    for position, digit in enumerate(digits):
        current = remainder * 10 + digit
        quotient, remainder = divmod(current, 2)
        quotient_digits.append(quotient)
        passed = "passes to the next digit" if position < width - 1 else "is left over"
        trace.add(
            description=f"Digit {position + 1}: {current} ÷ 2",
            operation=f"{current} ÷ 2 = {quotient} (remainder {remainder})",
            current_value=digits_to_number(quotient_digits),
            explanation=f"{current} ÷ 2 = {quotient}; remainder {remainder} {passed}.",
            working_digit=width - 1 - position,
            carry=remainder or None,
        )

    result = digits_to_number(trim_leading_zeros(quotient_digits))
    return trace.build(FormulaType.DIVIDE_2, a, result, f"{a} ÷ 2", operand2=2, remainder=remainder)


def divide_10(a: int) -> CalculationResult:
    """n ÷ 10: drop the trailing zero, or report what is left on the units rod."""
    trace = TraceBuilder()
    trace.add(
        description="Starting value",
        operation=f"{a}",
        current_value=a,
        explanation=f"{a} ÷ 10 shifts every digit one rod to the right.",
    )
    result, remainder = divmod(a, 10)
    if remainder:
        trace.add(
            description="Divide by 10",
            operation=f"{a} ÷ 10 = {result} (remainder {remainder})",
            current_value=result,
            explanation=f"The units digit {remainder} does not fit: {a} ÷ 10 = {result} remainder {remainder}.",
            working_digit=0,
            carry=remainder,
        )
    else:
        trace.add(
            description="Drop the trailing zero",
            operation=f"{a} ÷ 10 = {result}",
            current_value=result,
            explanation=f"Dividing by 10 removes the final 0: {a} ÷ 10 = {result}.",
            working_digit=0,
        )
    return trace.build(FormulaType.DIVIDE_10, a, result, f"{a} ÷ 10", operand2=10, remainder=remainder)


def _repeated_halving(trace: TraceBuilder, a: int, times: int) -> tuple[int, int]:
    """Halve a number `times` times; returns (quotient, total remainder)."""
    value = a
    remainder = 0
    for round_number in range(times):
        halved = divide_2(value)
        value = trace.extend(halved, prefix=f"Halving {round_number + 1}")
        # A remainder in round k is worth 2^k units of the dividend.
        remainder += (halved.remainder or 0) << round_number
    return value, remainder


def divide_4(a: int) -> CalculationResult:
    """n ÷ 4 = (n ÷ 2) ÷ 2."""
    trace = TraceBuilder()
    trace.add(
        description="Starting value",
        operation=f"{a}",
        current_value=a,
        explanation=f"{a} ÷ 4 = ({a} ÷ 2) ÷ 2",
    )
    result, remainder = _repeated_halving(trace, a, 2)
    return trace.build(
        FormulaType.DIVIDE_4, a, result, f"{a} ÷ 4 = ({a} ÷ 2) ÷ 2", operand2=4, remainder=remainder
    )


def divide_8(a: int) -> CalculationResult:
    """n ÷ 8 = ((n ÷ 2) ÷ 2) ÷ 2."""
    trace = TraceBuilder()
    trace.add(
        description="Starting value",
        operation=f"{a}",
        current_value=a,
        explanation=f"{a} ÷ 8 = (({a} ÷ 2) ÷ 2) ÷ 2",
    )
    result, remainder = _repeated_halving(trace, a, 3)
    return trace.build(
        FormulaType.DIVIDE_8,
        a,
        result,
        f"{a} ÷ 8 = (({a} ÷ 2) ÷ 2) ÷ 2",
        operand2=8,
        remainder=remainder,
    )


def divide_5(a: int) -> CalculationResult:
    """
    n ÷ 5 = (n ÷ 10) × 2.

    Each ten holds two fives. A leftover of 5..9 after dividing by 10 holds
    one more five, which is added on afterwards; the rest is the remainder.
    """
    # multiplication imports divide_2 from this module
    from mental_arithmetic.engine.multiplication import multiply_2

    trace = TraceBuilder()
    trace.add(
        description="Starting value",
        operation=f"{a}",
        current_value=a,
        explanation=f"{a} ÷ 5 = ({a} ÷ 10) × 2",
    )
    tenths = divide_10(a)
    tens = trace.extend(tenths, prefix="Divide by 10")
    result = trace.extend(multiply_2(tens), prefix="Multiply by 2")

    leftover = tenths.remainder or 0
    extra_fives, remainder = divmod(leftover, 5)
    if extra_fives:
        result = trace.extend(add_simple(result, extra_fives), prefix=f"One more five in {leftover}")

    return trace.build(
        FormulaType.DIVIDE_5, a, result, f"{a} ÷ 5 = ({a} ÷ 10) × 2", operand2=5, remainder=remainder
    )
