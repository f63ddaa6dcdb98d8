"""
Addition formulas.

add_simple and add_5 are single-column moves on the units rod; add_6_to_9
splits the addend into 5 + (1..4) and chains the two; add_complement is the
full column-by-column method every multi-digit formula falls back on.

Operands are assumed to satisfy the catalog contract; the dispatcher checks
that before any of these run.
"""

from __future__ import annotations

from mental_arithmetic.core.digits import digits_to_number, split_into_digits
from mental_arithmetic.core.formulas import FormulaType
from mental_arithmetic.engine.models import CalculationResult
from mental_arithmetic.engine.primitives import carry_chain, place_name
from mental_arithmetic.engine.trace import TraceBuilder


def _simple_explanation(digit: int, amount: int) -> str:
    """Bead-level wording for adding 1-4 to one rod."""
    total = digit + amount
    if total >= 10:
        return (
            f"Big friend of {amount} is {10 - amount}: add 10 on the next rod and "
            f"take {10 - amount} away here. {digit} + {amount} = {total}."
        )
    if digit < 5 <= total:
        return (
            f"Small friend of {amount} is {5 - amount}: lower the upper bead and "
            f"take {5 - amount} lower beads away. {digit} + {amount} = {total}."
        )
    return f"Raise {amount} lower bead(s). {digit} + {amount} = {total}."


def add_simple(a: int, b: int) -> CalculationResult:
    """n + 1..4 on the units rod."""
    trace = TraceBuilder()
    digits = split_into_digits(a)
    trace.add(
        description="Starting value",
        operation=f"{a}",
        current_value=a,
        explanation=f"Set {a} on the abacus, then add {b}.",
    )
    carry_chain(trace, digits, b, explanation=_simple_explanation(digits[-1], b))
    result = digits_to_number(digits)
    return trace.build(
        FormulaType.ADD_SIMPLE, a, result, f"{a} + {b} (simple addition)", operand2=b
    )


def add_5(a: int) -> CalculationResult:
    """n + 5 through the upper bead."""
    trace = TraceBuilder()
    digits = split_into_digits(a)
    trace.add(
        description="Starting value",
        operation=f"{a}",
        current_value=a,
        explanation=f"Add 5 to {a} using the upper bead.",
    )
    digit = digits[-1]
    if digit < 5:
        explanation = f"Lower the upper bead (5). {digit} + 5 = {digit + 5}."
    else:
        explanation = (
            f"The upper bead is already down, so add 10 on the next rod and "
            f"take 5 away here. {digit} + 5 = {digit + 5}."
        )
    carry_chain(trace, digits, 5, explanation=explanation)
    result = digits_to_number(digits)
    return trace.build(FormulaType.ADD_5, a, result, f"{a} + 5 (add via 5)", operand2=5)


def add_6_to_9(a: int, b: int) -> CalculationResult:
    """n + 6..9 = n + 5 + (b - 5)."""
    rest = b - 5
    trace = TraceBuilder()
    trace.add(
        description="Starting value",
        operation=f"{a} + {b} = {a} + 5 + {rest}",
        current_value=a,
        explanation=f"Split {b} into 5 and {rest}: first the upper bead, then the lower beads.",
    )
    partial = trace.extend(add_5(a), prefix="Add 5")
    result = trace.extend(add_simple(partial, rest), prefix=f"Add {rest}")
    return trace.build(
        FormulaType.ADD_6_TO_9, a, result, f"{a} + {b} = {a} + 5 + {rest}", operand2=b
    )


def add_10(a: int) -> CalculationResult:
    """n + 10: one bead on the tens rod."""
    trace = TraceBuilder()
    trace.add(
        description="Starting value",
        operation=f"{a}",
        current_value=a,
        explanation=f"{a} + 10 moves one bead on the tens rod.",
    )
    result = a + 10
    trace.add(
        description="Add 10",
        operation=f"{a} + 10 = {result}",
        current_value=result,
        explanation=f"Adding 10 leaves the units rod alone and adds 1 to the tens. {a} + 10 = {result}.",
        working_digit=1,
    )
    return trace.build(FormulaType.ADD_10, a, result, f"{a} + 10", operand2=10)


def add_complement(a: int, b: int) -> CalculationResult:
    """Column addition of two numbers, right to left, carrying past 10."""
    trace = TraceBuilder()
    digits_a = split_into_digits(a)
    digits_b = split_into_digits(b)
    width = max(len(digits_a), len(digits_b))
    digits_a = [0] * (width - len(digits_a)) + digits_a
    digits_b = [0] * (width - len(digits_b)) + digits_b

    trace.add(
        description="Starting values",
        operation=f"{a} + {b}",
        current_value=a,
        explanation=f"Add {a} and {b} column by column, starting from the units.",
    )

    result_digits: list[int] = []
    carry = 0
    for column in range(width):
        digit_a = digits_a[width - 1 - column]
        digit_b = digits_b[width - 1 - column]
        incoming = carry
        total = digit_a + digit_b + incoming
        carry = total // 10
        result_digits.insert(0, total % 10)

        terms = f"{digit_a} + {digit_b}" + (f" + {incoming}" if incoming else "")
        place = place_name(column)
        if carry:
            operation = f"{terms} = {total} = {total % 10} carry {carry}"
            explanation = (
                f"{place.capitalize()}: {terms} = {total}. Write {total % 10}, "
                f"carry {carry} to the {place_name(column + 1)}."
            )
        else:
            operation = f"{terms} = {total}"
            explanation = f"{place.capitalize()}: {terms} = {total}. No carry."
        trace.add(
            description=f"Column {column + 1} ({place}): {digit_a} + {digit_b}",
            operation=operation,
            current_value=digits_to_number(result_digits),
            explanation=explanation,
            working_digit=column,
            carry=carry or None,
        )

    if carry:
        result_digits.insert(0, carry)
        trace.add(
            description="Start a new rod",
            operation=f"Carry: {carry}",
            current_value=digits_to_number(result_digits),
            explanation=f"The last carry {carry} opens the {place_name(width)} column.",
            working_digit=width,
        )

    result = digits_to_number(result_digits)
    return trace.build(
        FormulaType.ADD_COMPLEMENT, a, result, f"{a} + {b} (column addition)", operand2=b
    )
