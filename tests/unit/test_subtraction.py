"""
Unit tests for the subtraction formulas.

Run: pytest tests/unit/test_subtraction.py -v
"""

import pytest

from mental_arithmetic.engine.subtraction import (
    subtract_5,
    subtract_6_to_9,
    subtract_10,
    subtract_complement,
    subtract_simple,
)


def assert_trace_integrity(result):
    assert [step.step_number for step in result.steps] == list(range(1, len(result.steps) + 1))
    assert result.final_step.current_value == result.result


class TestSubtractSimple:
    """Test subtract_simple (n - 1..4)."""

    def test_basic(self):
        result = subtract_simple(18, 3)
        assert result.result == 15
        assert len(result.steps) == 2

    def test_borrow(self):
        result = subtract_simple(21, 4)
        assert result.result == 17
        assert "Big friend" in result.steps[1].explanation
        assert_trace_integrity(result)

    def test_borrow_through_zeros(self):
        result = subtract_simple(1000, 1)
        assert result.result == 999
        assert_trace_integrity(result)

    def test_down_to_zero(self):
        assert subtract_simple(4, 4).result == 0

    @pytest.mark.parametrize("a", [4, 10, 25, 100, 7003])
    @pytest.mark.parametrize("b", [1, 2, 3, 4])
    def test_matches_direct_difference(self, a, b):
        result = subtract_simple(a, b)
        assert result.result == a - b
        assert_trace_integrity(result)


class TestSubtract5:
    """Test subtract_5 (upper bead)."""

    def test_raise_the_bead(self):
        result = subtract_5(27)
        assert result.result == 22
        assert "Raise the upper bead" in result.steps[1].explanation

    def test_borrow_from_tens(self):
        assert subtract_5(12).result == 7

    @pytest.mark.parametrize("a", [5, 9, 10, 48, 100, 5000])
    def test_matches_direct_difference(self, a):
        result = subtract_5(a)
        assert result.result == a - 5
        assert_trace_integrity(result)


class TestSubtract6To9:
    """Test subtract_6_to_9 composition."""

    def test_worked_example(self):
        result = subtract_6_to_9(34, 7)
        assert result.result == 27
        assert_trace_integrity(result)
        assert any(step.description.startswith("Subtract 5: ") for step in result.steps)
        assert any(step.description.startswith("Subtract 2: ") for step in result.steps)

    @pytest.mark.parametrize("a", [9, 15, 56, 100, 1006])
    @pytest.mark.parametrize("b", [6, 7, 8, 9])
    def test_matches_direct_difference(self, a, b):
        result = subtract_6_to_9(a, b)
        assert result.result == a - b
        assert_trace_integrity(result)


class TestSubtract10:
    """Test subtract_10 on the tens rod."""

    @pytest.mark.parametrize(
        "a,expected",
        [(10, 0), (47, 37), (100, 90), (105, 95), (1003, 993)],
    )
    def test_results(self, a, expected):
        result = subtract_10(a)
        assert result.result == expected
        assert_trace_integrity(result)

    def test_works_on_tens_column(self):
        result = subtract_10(47)
        assert result.steps[1].working_digit == 1


class TestSubtractComplement:
    """Test column subtraction."""

    def test_borrows(self):
        result = subtract_complement(120, 12)
        assert result.result == 108
        assert result.steps[1].carry == 1
        assert_trace_integrity(result)

    def test_equal_operands(self):
        assert subtract_complement(555, 555).result == 0

    @pytest.mark.parametrize("a,b", [(0, 0), (1000, 1), (5432, 1234), (90210, 90209), (700, 699)])
    def test_matches_direct_difference(self, a, b):
        result = subtract_complement(a, b)
        assert result.result == a - b
        assert_trace_integrity(result)
