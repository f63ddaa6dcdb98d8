"""
Digit codec: integers to and from most-significant-first digit lists.

Column helpers (has_carry, has_borrow) look at the same right-aligned
columns a student lines up on the abacus.
"""

from __future__ import annotations


def split_into_digits(n: int) -> list[int]:
    """
    Decompose |n| into its base-10 digits, most significant first.

    Args:
        n: Integer to decompose

    Returns:
        List of digits; zero yields [0]
    """
    n = abs(n)
    if n == 0:
        return [0]
    digits: list[int] = []
    while n > 0:
        n, digit = divmod(n, 10)
        digits.append(digit)
    digits.reverse()
    return digits


def digits_to_number(digits: list[int] | tuple[int, ...]) -> int:
    """Fold digits back into an integer (leading zeros are ignored)."""
    acc = 0
    for digit in digits:
        acc = acc * 10 + digit
    return acc


def get_digit_count(n: int) -> int:
    """Number of decimal digits in |n|; zero has one digit."""
    return len(split_into_digits(n))


def trim_leading_zeros(digits: list[int]) -> list[int]:
    """Drop leading zeros in place, keeping at least one digit."""
    while len(digits) > 1 and digits[0] == 0:
        del digits[0]
    return digits


def _columns(a: int, b: int) -> list[tuple[int, int]]:
    """Pair up digits of a and b from the units column leftwards."""
    digits_a = split_into_digits(a)[::-1]
    digits_b = split_into_digits(b)[::-1]
    width = max(len(digits_a), len(digits_b))
    digits_a += [0] * (width - len(digits_a))
    digits_b += [0] * (width - len(digits_b))
    return list(zip(digits_a, digits_b))


def has_carry(a: int, b: int) -> bool:
    """True if column addition of a + b carries at least once."""
    carry = 0
    for digit_a, digit_b in _columns(a, b):
        carry = (digit_a + digit_b + carry) // 10
        if carry:
            return True
    return False


def has_borrow(a: int, b: int) -> bool:
    """True if column subtraction of a - b (a >= b) borrows at least once."""
    # The first borrow settles it, so no borrow needs to be tracked.
    return any(digit_a < digit_b for digit_a, digit_b in _columns(a, b))
