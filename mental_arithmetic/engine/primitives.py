"""
Column primitives shared by every additive formula.

carry_chain and borrow_chain work on a most-significant-first digit list in
place and narrate each rod they touch into a TraceBuilder. Columns are
counted from the right: 0 = units, 1 = tens, and so on.
"""

from __future__ import annotations

from mental_arithmetic.core.digits import digits_to_number, trim_leading_zeros
from mental_arithmetic.engine.trace import TraceBuilder

_PLACE_NAMES = (
    "units",
    "tens",
    "hundreds",
    "thousands",
    "ten-thousands",
    "hundred-thousands",
    "millions",
    "ten-millions",
    "hundred-millions",
)


def place_name(column: int) -> str:
    """Name of a column counted from the right."""
    if column < len(_PLACE_NAMES):
        return _PLACE_NAMES[column]
    return f"10^{column}"


def carry_chain(
    trace: TraceBuilder,
    digits: list[int],
    amount: int,
    column: int = 0,
    explanation: str | None = None,
) -> list[int]:
    """
    Add a single-digit amount into one column and propagate carries left.

    Args:
        trace: Trace receiving one step per rod touched
        digits: Digits to update in place (most significant first)
        amount: Value added to the column (0-9)
        column: Target column, 0 = units
        explanation: Overrides the explanation of the first step

    Returns:
        The same digits list, now holding the sum
    """
    while len(digits) <= column:
        digits.insert(0, 0)

    index = len(digits) - 1 - column
    digit = digits[index]
    total = digit + amount
    digits[index] = total % 10
    carry = total // 10
    place = place_name(column)

    if not carry:
        trace.add(
            description=f"Add {amount} to the {place} digit",
            operation=f"{digit} + {amount} = {total}",
            current_value=digits_to_number(digits),
            explanation=explanation or f"{digit} + {amount} = {total}. No carry.",
            working_digit=column,
        )
        return digits

    trace.add(
        description=f"Add {amount} to the {place} digit",
        operation=f"{digit} + {amount} = {total} = {total % 10} carry {carry}",
        current_value=digits_to_number(digits),
        explanation=explanation
        or f"{digit} + {amount} = {total}. Write {total % 10}, carry {carry} to the {place_name(column + 1)}.",
        working_digit=column,
        carry=carry,
    )

    index -= 1
    column += 1
    while carry and index >= 0:
        digit = digits[index]
        incoming = carry
        total = digit + incoming
        digits[index] = total % 10
        carry = total // 10
        place = place_name(column)
        if carry:
            trace.add(
                description=f"Carry ripples through the {place}",
                operation=f"{digit} + {incoming} = {total} = {total % 10} carry {carry}",
                current_value=digits_to_number(digits),
                explanation=f"The {place} rod is full: {digit} + {incoming} = {total}. Carry again.",
                working_digit=column,
                carry=carry,
            )
        else:
            trace.add(
                description=f"Add the carry to the {place} digit",
                operation=f"{digit} + {incoming} = {total}",
                current_value=digits_to_number(digits),
                explanation=f"Carry {incoming} absorbed. Value is now {digits_to_number(digits)}.",
                working_digit=column,
            )
        index -= 1
        column += 1

    if carry:
        digits.insert(0, carry)
        trace.add(
            description="Start a new rod",
            operation=f"New digit: {carry}",
            current_value=digits_to_number(digits),
            explanation=f"The carry {carry} opens the {place_name(column)} column.",
            working_digit=column,
        )
    return digits


def borrow_chain(
    trace: TraceBuilder,
    digits: list[int],
    amount: int,
    column: int = 0,
    explanation: str | None = None,
) -> list[int]:
    """
    Subtract a single-digit amount from one column, borrowing leftwards.

    A run of zeros to the left turns into nines until a nonzero digit pays
    back the borrow. The caller guarantees the number is large enough.

    Args:
        trace: Trace receiving one step per rod touched
        digits: Digits to update in place (most significant first)
        amount: Value taken from the column (0-9)
        column: Target column, 0 = units
        explanation: Overrides the explanation of the first step

    Returns:
        The same digits list, holding the difference without leading zeros

    Raises:
        ValueError: If the borrow runs past the most significant digit
    """
    index = len(digits) - 1 - column
    if index < 0:
        raise ValueError(f"no {place_name(column)} digit to subtract from")

    digit = digits[index]
    place = place_name(column)

    if digit >= amount:
        digits[index] = digit - amount
        trace.add(
            description=f"Subtract {amount} from the {place} digit",
            operation=f"{digit} - {amount} = {digit - amount}",
            current_value=digits_to_number(digits),
            explanation=explanation or f"{digit} - {amount} = {digit - amount}. No borrow.",
            working_digit=column,
        )
        return trim_leading_zeros(digits)

    digits[index] = 10 + digit - amount
    trace.add(
        description=f"Borrow 10 for the {place} digit",
        operation=f"10 + {digit} - {amount} = {digits[index]}",
        current_value=digits_to_number(digits),
        explanation=explanation
        or (
            f"Cannot take {amount} from {digit}, so borrow 10 from the "
            f"{place_name(column + 1)}: 10 + {digit} - {amount} = {digits[index]}."
        ),
        working_digit=column,
        carry=1,
    )

    index -= 1
    column += 1
    while index >= 0 and digits[index] == 0:
        digits[index] = 9
        trace.add(
            description="Borrow chain",
            operation=f"{place_name(column)}: 0 - 1 = 9 (borrow again)",
            current_value=digits_to_number(digits),
            explanation=f"The {place_name(column)} rod is empty; it becomes 9 and borrows further left.",
            working_digit=column,
            carry=1,
        )
        index -= 1
        column += 1

    if index < 0:
        raise ValueError("borrow ran past the most significant digit")

    digits[index] -= 1
    trace.add(
        description="Pay back the borrow",
        operation=f"{place_name(column)}: {digits[index] + 1} - 1 = {digits[index]}",
        current_value=digits_to_number(digits),
        explanation=f"Take 1 from the {place_name(column)} rod to settle the borrow.",
        working_digit=column,
    )
    return trim_leading_zeros(digits)
