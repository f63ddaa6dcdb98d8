"""
Subtraction formulas.

Mirror images of the addition formulas, built on borrow_chain. The
dispatcher guarantees operand1 >= the amount taken away, so no algorithm
here ever produces a negative number.
"""

from __future__ import annotations

from mental_arithmetic.core.digits import digits_to_number, split_into_digits, trim_leading_zeros
from mental_arithmetic.core.formulas import FormulaType
from mental_arithmetic.engine.models import CalculationResult
from mental_arithmetic.engine.primitives import borrow_chain, place_name
from mental_arithmetic.engine.trace import TraceBuilder


def _simple_explanation(digit: int, amount: int) -> str:
    """Bead-level wording for taking 1-4 from one rod."""
    if digit < amount:
        return (
            f"Big friend of {amount} is {10 - amount}: take 10 from the next rod and "
            f"give back {10 - amount} here. 10 + {digit} - {amount} = {10 + digit - amount}."
        )
    if amount <= digit - 5 or digit < 5:
        return f"Lower {amount} bead(s). {digit} - {amount} = {digit - amount}."
    return (
        f"Small friend of {amount} is {5 - amount}: add {5 - amount} lower beads and "
        f"raise the upper bead. {digit} - {amount} = {digit - amount}."
    )


def subtract_simple(a: int, b: int) -> CalculationResult:
    """n - 1..4 on the units rod."""
    trace = TraceBuilder()
    digits = split_into_digits(a)
    trace.add(
        description="Starting value",
        operation=f"{a}",
        current_value=a,
        explanation=f"Set {a} on the abacus, then take away {b}.",
    )
    borrow_chain(trace, digits, b, explanation=_simple_explanation(digits[-1], b))
    result = digits_to_number(digits)
    return trace.build(
        FormulaType.SUBTRACT_SIMPLE, a, result, f"{a} - {b} (simple subtraction)", operand2=b
    )


def subtract_5(a: int) -> CalculationResult:
    """n - 5 through the upper bead."""
    trace = TraceBuilder()
    digits = split_into_digits(a)
    trace.add(
        description="Starting value",
        operation=f"{a}",
        current_value=a,
        explanation=f"Take 5 from {a} using the upper bead.",
    )
    digit = digits[-1]
    if digit >= 5:
        explanation = f"Raise the upper bead (5). {digit} - 5 = {digit - 5}."
    else:
        explanation = (
            f"The upper bead is not down, so take 10 from the next rod and "
            f"give back 5 here. 10 + {digit} - 5 = {digit + 5}."
        )
    borrow_chain(trace, digits, 5, explanation=explanation)
    result = digits_to_number(digits)
    return trace.build(FormulaType.SUBTRACT_5, a, result, f"{a} - 5 (subtract via 5)", operand2=5)


def subtract_6_to_9(a: int, b: int) -> CalculationResult:
    """n - 6..9 = n - 5 - (b - 5)."""
    rest = b - 5
    trace = TraceBuilder()
    trace.add(
        description="Starting value",
        operation=f"{a} - {b} = {a} - 5 - {rest}",
        current_value=a,
        explanation=f"Split {b} into 5 and {rest}: first the upper bead, then the lower beads.",
    )
    partial = trace.extend(subtract_5(a), prefix="Subtract 5")
    result = trace.extend(subtract_simple(partial, rest), prefix=f"Subtract {rest}")
    return trace.build(
        FormulaType.SUBTRACT_6_TO_9, a, result, f"{a} - {b} = {a} - 5 - {rest}", operand2=b
    )


def subtract_10(a: int) -> CalculationResult:
    """n - 10: one bead off the tens rod, borrowing from hundreds if it is empty."""
    trace = TraceBuilder()
    digits = split_into_digits(a)
    trace.add(
        description="Starting value",
        operation=f"{a}",
        current_value=a,
        explanation=f"{a} - 10 leaves the units rod alone and takes 1 from the tens.",
    )
    borrow_chain(trace, digits, 1, column=1)
    result = digits_to_number(digits)
    return trace.build(FormulaType.SUBTRACT_10, a, result, f"{a} - 10", operand2=10)


def subtract_complement(a: int, b: int) -> CalculationResult:
    """Column subtraction of b from a (a >= b), right to left, borrowing from 10."""
    trace = TraceBuilder()
    digits_a = split_into_digits(a)
    digits_b = split_into_digits(b)
    width = len(digits_a)
    digits_b = [0] * (width - len(digits_b)) + digits_b

    trace.add(
        description="Starting values",
        operation=f"{a} - {b}",
        current_value=a,
        explanation=f"Take {b} from {a} column by column, starting from the units.",
    )

    result_digits: list[int] = []
    borrow = 0
    for column in range(width):
        digit_a = digits_a[width - 1 - column]
        digit_b = digits_b[width - 1 - column]
        owed = digit_b + borrow
        terms = f"{digit_a} - {digit_b}" + (f" - {borrow}" if borrow else "")
        place = place_name(column)

        if digit_a >= owed:
            digit = digit_a - owed
            borrow = 0
            operation = f"{terms} = {digit}"
            explanation = f"{place.capitalize()}: {terms} = {digit}. No borrow."
        else:
            digit = 10 + digit_a - owed
            borrow = 1
            operation = f"10 + {terms} = {digit} (borrow 1)"
            explanation = (
                f"{place.capitalize()}: cannot take {owed} from {digit_a}, borrow 10 "
                f"from the {place_name(column + 1)}. 10 + {terms} = {digit}."
            )
        result_digits.insert(0, digit)
        trace.add(
            description=f"Column {column + 1} ({place}): {digit_a} - {digit_b}",
            operation=operation,
            current_value=digits_to_number(result_digits),
            explanation=explanation,
            working_digit=column,
            carry=borrow or None,
        )

    result = digits_to_number(trim_leading_zeros(result_digits))
    return trace.build(
        FormulaType.SUBTRACT_COMPLEMENT, a, result, f"{a} - {b} (column subtraction)", operand2=b
    )
