"""
Unit tests for the division formulas.

Run: pytest tests/unit/test_division.py -v
"""

import pytest

from mental_arithmetic.engine.division import divide_2, divide_4, divide_5, divide_8, divide_10


def assert_trace_integrity(result):
    assert [step.step_number for step in result.steps] == list(range(1, len(result.steps) + 1))
    assert result.final_step.current_value == result.result


class TestDivide2:
    """Test long division by 2."""

    def test_one_step_per_digit(self):
        result = divide_2(24)
        assert result.result == 12
        assert result.remainder == 0
        assert len(result.steps) == 3

    def test_remainder_passes_right(self):
        result = divide_2(16)
        assert result.result == 8
        # 1 ÷ 2 = 0 remainder 1, passed to the units
        assert result.steps[1].carry == 1
        assert_trace_integrity(result)

    def test_odd_number_reports_remainder(self):
        result = divide_2(37)
        assert (result.result, result.remainder) == (18, 1)
        assert not result.is_exact


class TestDivide10:
    """Test divide_10."""

    def test_exact(self):
        result = divide_10(250)
        assert (result.result, result.remainder) == (25, 0)
        assert result.is_exact
        assert result.steps[1].description == "Drop the trailing zero"

    def test_inexact(self):
        result = divide_10(47)
        assert (result.result, result.remainder) == (4, 7)
        assert result.steps[1].carry == 7


class TestDivide5:
    """Test divide_5 = (n ÷ 10) × 2."""

    def test_exact(self):
        result = divide_5(150)
        assert result.result == 30
        assert result.remainder == 0
        assert_trace_integrity(result)

    def test_leftover_holds_another_five(self):
        """In 37 the leftover 7 holds one more five, leaving 2."""
        result = divide_5(37)
        assert (result.result, result.remainder) == (7, 2)
        assert result.final_step.description.startswith("One more five in 7: ")
        assert_trace_integrity(result)


class TestRepeatedHalving:
    """Test divide_4 and divide_8."""

    def test_divide_4(self):
        result = divide_4(100)
        assert result.result == 25
        assert any(step.description.startswith("Halving 2: ") for step in result.steps)

    def test_divide_8_below_catalog_digits(self):
        assert divide_8(64).result == 8

    def test_remainders_weighted_by_round(self):
        """13 ÷ 8: remainders 1, 0, 1 are worth 1 + 0 + 4 units."""
        result = divide_8(13)
        assert (result.result, result.remainder) == (1, 5)


class TestAllDivisors:
    """Every divisor agrees with divmod."""

    @pytest.mark.parametrize("a", [0, 1, 4, 9, 10, 37, 64, 99, 100, 1001, 98765])
    @pytest.mark.parametrize(
        "algorithm,divisor",
        [(divide_2, 2), (divide_4, 4), (divide_5, 5), (divide_8, 8), (divide_10, 10)],
    )
    def test_matches_divmod(self, algorithm, divisor, a):
        result = algorithm(a)
        assert (result.result, result.remainder) == divmod(a, divisor)
        assert result.operand2 == divisor
        assert_trace_integrity(result)
