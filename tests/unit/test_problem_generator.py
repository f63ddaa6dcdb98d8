"""
Unit tests for the problem generator.

All tests use a seeded random source so failures are reproducible.

Run: pytest tests/unit/test_problem_generator.py -v
"""

import random
import re

import pytest

from mental_arithmetic.core.digits import get_digit_count, has_borrow, has_carry
from mental_arithmetic.core.formulas import (
    FORMULAS,
    DifficultyLevel,
    FormulaType,
    OperationCategory,
)
from mental_arithmetic.engine.dispatcher import calculate_by_formula
from mental_arithmetic.generation.problem_generator import (
    GENERATORS,
    ProblemGenerator,
    evaluate,
    generate_problems,
    generate_problems_by_level,
)
from mental_arithmetic.generation.sampling import digit_range_for, number_with_digits

ID_PATTERN = re.compile(r"^[a-z0-9_]+_\d+_[0-9a-f]{8}$")


class TestRegistry:
    """Test generator registration."""

    def test_every_formula_has_a_generator(self):
        assert set(GENERATORS) == set(FormulaType)

    def test_generators_bound_to_their_formula(self):
        for formula_type, generator in GENERATORS.items():
            assert generator.formula.id is formula_type


class TestSampling:
    """Test tier digit ranges."""

    def test_beginner_is_two_digits(self):
        assert digit_range_for(DifficultyLevel.BEGINNER) == (2, 2)

    def test_intersects_catalog_range(self):
        assert digit_range_for(DifficultyLevel.EXPERT, FORMULAS[FormulaType.MULTIPLY_125]) == (4, 4)
        assert digit_range_for(DifficultyLevel.EXPERT, FORMULAS[FormulaType.MULTIPLY_11]) == (4, 5)

    def test_string_tier(self):
        assert digit_range_for("advanced") == (3, 4)

    def test_empty_intersection(self):
        assert digit_range_for(DifficultyLevel.BEGINNER, FORMULAS[FormulaType.DIVIDE_8]) is None

    def test_number_with_digits(self, rng):
        for _ in range(200):
            value = number_with_digits(2, 3, rng)
            assert 10 <= value <= 999


class TestGenerateProblems:
    """Test generate_problems for single formulas."""

    @pytest.mark.parametrize("formula_type", list(FormulaType))
    @pytest.mark.parametrize("level", list(DifficultyLevel))
    def test_problems_pass_the_dispatcher(self, formula_type, level, rng):
        """Every generated problem is in contract and its answer matches the engine."""
        problems = generate_problems(formula_type, 8, level, rng)
        if digit_range_for(level, FORMULAS[formula_type]) is None:
            assert problems == []
            return

        assert len(problems) == 8
        for problem in problems:
            result = calculate_by_formula(problem.formula, problem.operand1, problem.operand2)
            assert result.result == problem.expected_result
            assert problem.expected_result >= 0
            assert problem.difficulty is level

    def test_question_and_id_format(self, rng):
        problem = generate_problems(FormulaType.ADD_SIMPLE, 1, DifficultyLevel.BEGINNER, rng)[0]
        assert problem.question == f"{problem.operand1} + {problem.operand2} = ?"
        assert ID_PATTERN.match(problem.id)
        assert problem.id.startswith("add_simple_0_")
        assert problem.operator == "+"

    def test_ids_are_unique(self, rng):
        problems = generate_problems(FormulaType.MULTIPLY_2, 30, DifficultyLevel.EXPERT, rng)
        assert len({problem.id for problem in problems}) == 30

    def test_beginner_operands_are_two_digit(self, rng):
        problems = generate_problems(FormulaType.ADD_5, 50, DifficultyLevel.BEGINNER, rng)
        assert all(10 <= problem.operand1 <= 99 for problem in problems)

    def test_unary_carries_fixed_operand(self, rng):
        problems = generate_problems(FormulaType.MULTIPLY_9, 10, DifficultyLevel.INTERMEDIATE, rng)
        assert all(problem.operand2 == 9 for problem in problems)

    def test_binary_operand2_in_range(self, rng):
        problems = generate_problems(FormulaType.ADD_6_TO_9, 40, DifficultyLevel.INTERMEDIATE, rng)
        assert all(6 <= problem.operand2 <= 9 for problem in problems)
        assert "+ 5 +" in problems[0].hint

    def test_complement_addition_carries(self, rng):
        problems = generate_problems(FormulaType.ADD_COMPLEMENT, 25, DifficultyLevel.ADVANCED, rng)
        for problem in problems:
            assert has_carry(problem.operand1, problem.operand2)
            assert problem.expected_result > problem.operand1
            assert problem.expected_result > problem.operand2

    def test_complement_subtraction_borrows(self, rng):
        problems = generate_problems(FormulaType.SUBTRACT_COMPLEMENT, 25, DifficultyLevel.ADVANCED, rng)
        for problem in problems:
            assert problem.operand1 >= problem.operand2
            assert has_borrow(problem.operand1, problem.operand2)

    def test_subtraction_never_negative(self, rng):
        for formula in FORMULAS.values():
            if formula.category is not OperationCategory.SUBTRACTION:
                continue
            for problem in generate_problems(formula.id, 20, DifficultyLevel.BEGINNER, rng):
                assert problem.expected_result >= 0

    @pytest.mark.parametrize(
        "formula_type,divisor",
        [
            (FormulaType.DIVIDE_2, 2),
            (FormulaType.DIVIDE_4, 4),
            (FormulaType.DIVIDE_5, 5),
            (FormulaType.DIVIDE_8, 8),
            (FormulaType.DIVIDE_10, 10),
        ],
    )
    def test_division_is_exact(self, formula_type, divisor, rng):
        problems = generate_problems(formula_type, 20, DifficultyLevel.EXPERT, rng)
        for problem in problems:
            assert problem.operand1 % divisor == 0
            assert problem.expected_result * divisor == problem.operand1

    def test_division_samples_quotient_digits(self, rng):
        """The quotient, not the dividend, follows the tier's digit range."""
        problems = generate_problems(FormulaType.DIVIDE_2, 30, DifficultyLevel.BEGINNER, rng)
        assert all(get_digit_count(problem.expected_result) == 2 for problem in problems)

    def test_reproducible_with_seed(self):
        first = generate_problems(FormulaType.ADD_SIMPLE, 10, DifficultyLevel.EXPERT, random.Random(7))
        second = generate_problems(FormulaType.ADD_SIMPLE, 10, DifficultyLevel.EXPERT, random.Random(7))
        assert [p.question for p in first] == [p.question for p in second]

    def test_accepts_string_id(self, rng):
        assert len(generate_problems("divide_10", 3, DifficultyLevel.BEGINNER, rng)) == 3

    def test_accepts_string_tier(self, rng):
        problems = generate_problems(FormulaType.ADD_5, 5, "Intermediate", rng)
        assert len(problems) == 5
        assert all(problem.difficulty is DifficultyLevel.INTERMEDIATE for problem in problems)

    def test_unknown_tier_raises(self, rng):
        with pytest.raises(ValueError):
            generate_problems(FormulaType.ADD_5, 5, "grandmaster", rng)

    def test_unknown_formula_is_empty(self, rng):
        assert generate_problems("multiply_7", 5, DifficultyLevel.BEGINNER, rng) == []

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count_is_empty(self, count, rng):
        assert generate_problems(FormulaType.ADD_5, count, DifficultyLevel.BEGINNER, rng) == []

    def test_without_rng(self):
        """Falls back to the module-level random source."""
        assert len(generate_problems(FormulaType.ADD_5, 3, DifficultyLevel.BEGINNER)) == 3


class TestSamplingBudget:
    """Test bounded rejection sampling."""

    def test_exhausted_budget_returns_short_batch(self, rng, warnings_sink, fresh_settings):
        fresh_settings.setenv("MENTAL_ARITH_MAX_SAMPLING_ATTEMPTS", "3")
        never = ProblemGenerator(FormulaType.ADD_COMPLEMENT, lambda formula, digits, rng: None, lambda a, b: "")

        assert never.generate(4, DifficultyLevel.ADVANCED, rng) == []
        assert any("0/4" in message and "12 attempts" in message for message in warnings_sink)


class TestGenerateByLevel:
    """Test generate_problems_by_level."""

    def test_only_eligible_formulas(self, rng):
        problems = generate_problems_by_level(DifficultyLevel.BEGINNER, 5, rng)
        assert len(problems) == 8 * 5
        for problem in problems:
            assert FORMULAS[problem.formula].difficulty <= DifficultyLevel.BEGINNER

    def test_includes_every_eligible_formula(self, rng):
        problems = generate_problems_by_level(DifficultyLevel.INTERMEDIATE, 2, rng)
        assert {problem.formula for problem in problems} == {
            formula_type
            for formula_type, formula in FORMULAS.items()
            if formula.difficulty <= DifficultyLevel.INTERMEDIATE
        }

    def test_mixed_order(self, rng):
        """Shuffled, so the batch is not grouped formula by formula."""
        problems = generate_problems_by_level(DifficultyLevel.EXPERT, 5, rng)
        formulas_in_order = [problem.formula for problem in problems]
        grouped = sorted(formulas_in_order, key=list(FORMULAS).index)
        assert formulas_in_order != grouped

    def test_accepts_string_tier(self, rng):
        """A plain tier string drills the same formulas as the enum member."""
        problems = generate_problems_by_level("beginner", 1, rng)
        assert len(problems) == 8
        for problem in problems:
            assert problem.difficulty is DifficultyLevel.BEGINNER
            assert FORMULAS[problem.formula].difficulty <= DifficultyLevel.BEGINNER

    def test_default_per_formula_from_settings(self, rng, fresh_settings):
        fresh_settings.setenv("MENTAL_ARITH_DEFAULT_PROBLEMS_PER_FORMULA", "2")
        problems = generate_problems_by_level(DifficultyLevel.BEGINNER, rng=rng)
        assert len(problems) == 8 * 2


class TestEvaluate:
    """Test the answer key."""

    @pytest.mark.parametrize(
        "operator,a,b,expected",
        [("+", 2, 3, 5), ("-", 9, 4, 5), ("×", 6, 7, 42), ("÷", 17, 5, 3)],
    )
    def test_operators(self, operator, a, b, expected):
        assert evaluate(operator, a, b) == expected

    def test_unknown_operator(self):
        with pytest.raises(ValueError):
            evaluate("^", 2, 3)
