"""
Unit tests for the formula catalog.

Run: pytest tests/unit/test_formulas.py -v
"""

import pytest

from mental_arithmetic.core.formulas import (
    FORMULAS,
    DifficultyLevel,
    FormulaType,
    OperationCategory,
    formulas_by_category,
    formulas_for_level,
    get_formula,
)


class TestCatalog:
    """Test the catalog table itself."""

    def test_every_formula_type_has_an_entry(self):
        assert set(FORMULAS) == set(FormulaType)
        assert len(FORMULAS) == 22

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            FORMULAS[FormulaType.ADD_5] = FORMULAS[FormulaType.ADD_10]

    def test_entries_are_frozen(self):
        entry = FORMULAS[FormulaType.ADD_5]
        with pytest.raises(AttributeError):
            entry.name = "changed"

    def test_exactly_one_operand_contract(self, all_formulas):
        """Each entry is either unary (fixed operand) or binary (range)."""
        for formula in all_formulas:
            assert (formula.fixed_operand is None) != (formula.operand2_range is None), formula.id

    def test_digit_ranges_are_sane(self, all_formulas):
        for formula in all_formulas:
            assert 1 <= formula.min_digits <= formula.max_digits, formula.id

    @pytest.mark.parametrize(
        "formula_type,operator",
        [
            (FormulaType.ADD_SIMPLE, "+"),
            (FormulaType.SUBTRACT_COMPLEMENT, "-"),
            (FormulaType.MULTIPLY_125, "×"),
            (FormulaType.DIVIDE_8, "÷"),
        ],
    )
    def test_operator_symbol(self, formula_type, operator):
        assert FORMULAS[formula_type].operator == operator

    def test_fixed_operands(self):
        assert FORMULAS[FormulaType.MULTIPLY_125].fixed_operand == 125
        assert FORMULAS[FormulaType.SUBTRACT_10].fixed_operand == 10
        assert FORMULAS[FormulaType.ADD_SIMPLE].operand2_range == (1, 4)
        assert FORMULAS[FormulaType.ADD_6_TO_9].operand2_range == (6, 9)

    def test_contract_text(self):
        assert "fixed at 5" in FORMULAS[FormulaType.ADD_5].contract_text()
        assert "between 1 and 4" in FORMULAS[FormulaType.ADD_SIMPLE].contract_text()
        assert "operand1" in FORMULAS[FormulaType.SUBTRACT_COMPLEMENT].contract_text()


class TestDifficultyLevel:
    """Test tier ordering."""

    def test_ordering(self):
        assert DifficultyLevel.BEGINNER < DifficultyLevel.INTERMEDIATE
        assert DifficultyLevel.INTERMEDIATE < DifficultyLevel.ADVANCED
        assert DifficultyLevel.ADVANCED < DifficultyLevel.EXPERT
        assert DifficultyLevel.EXPERT >= DifficultyLevel.EXPERT

    def test_sorted_by_rank_not_alphabet(self):
        """Alphabetically 'advanced' < 'beginner'; by rank it is not."""
        tiers = sorted([DifficultyLevel.EXPERT, DifficultyLevel.ADVANCED, DifficultyLevel.BEGINNER])
        assert tiers == [DifficultyLevel.BEGINNER, DifficultyLevel.ADVANCED, DifficultyLevel.EXPERT]

    def test_display_name(self):
        assert DifficultyLevel.INTERMEDIATE.display_name == "Intermediate"

    def test_compares_with_plain_strings_by_rank(self):
        assert DifficultyLevel.ADVANCED > "beginner"
        assert not DifficultyLevel.ADVANCED <= "beginner"
        assert DifficultyLevel.BEGINNER <= "Expert"

    def test_coerce(self):
        assert DifficultyLevel.coerce("Advanced") is DifficultyLevel.ADVANCED
        assert DifficultyLevel.coerce(DifficultyLevel.EXPERT) is DifficultyLevel.EXPERT
        with pytest.raises(ValueError):
            DifficultyLevel.coerce("grandmaster")


class TestLookups:
    """Test get_formula and the filtered views."""

    def test_get_by_enum(self):
        assert get_formula(FormulaType.DIVIDE_4).id is FormulaType.DIVIDE_4

    def test_get_by_string_case_insensitive(self):
        assert get_formula("Multiply_9").id is FormulaType.MULTIPLY_9

    def test_unknown_raises_key_error(self):
        with pytest.raises(KeyError):
            get_formula("multiply_7")

    def test_beginner_formulas(self):
        ids = {formula.id for formula in formulas_for_level(DifficultyLevel.BEGINNER)}
        assert ids == {
            FormulaType.ADD_SIMPLE,
            FormulaType.ADD_5,
            FormulaType.SUBTRACT_SIMPLE,
            FormulaType.SUBTRACT_5,
            FormulaType.MULTIPLY_2,
            FormulaType.MULTIPLY_10,
            FormulaType.DIVIDE_2,
            FormulaType.DIVIDE_10,
        }

    def test_levels_are_cumulative(self):
        previous = 0
        for tier in DifficultyLevel:
            eligible = formulas_for_level(tier)
            assert all(formula.difficulty <= tier for formula in eligible)
            assert len(eligible) > previous
            previous = len(eligible)
        assert previous == len(FORMULAS)

    @pytest.mark.parametrize("tier", list(DifficultyLevel))
    def test_level_accepts_string_value(self, tier):
        """A plain string filters by rank, same as the enum member."""
        assert formulas_for_level(tier.value) == formulas_for_level(tier)

    def test_string_beginner_excludes_higher_tiers(self):
        ids = {formula.id for formula in formulas_for_level("beginner")}
        assert FormulaType.ADD_COMPLEMENT not in ids
        assert FormulaType.MULTIPLY_25 not in ids

    def test_catalog_order_preserved(self):
        eligible = formulas_for_level(DifficultyLevel.EXPERT)
        assert [formula.id for formula in eligible] == list(FORMULAS)

    def test_by_category(self):
        division = formulas_by_category(OperationCategory.DIVISION)
        assert len(division) == 5
        assert all(formula.operator == "÷" for formula in division)
