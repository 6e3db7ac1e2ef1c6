"""Tests for budgetbook.domain.categories lookups."""

import pytest

from budgetbook.domain.categories import Category, category_named, category_of, code_of, parse_category
from budgetbook.domain.errors import UnknownCategory


class TestCodeOf:
    """Tests for code_of."""

    def test_codes_are_stable(self) -> None:
        """Should map each category name to its menu code."""
        assert code_of("FOOD") == 1
        assert code_of("CLOTHES") == 2
        assert code_of("ENTERTAINMENT") == 3
        assert code_of("OTHER") == 4

    def test_case_insensitive(self) -> None:
        """Should match names regardless of case."""
        assert code_of("food") == 1
        assert code_of("Entertainment") == 3

    def test_unknown_name_raises(self) -> None:
        """Should raise UnknownCategory rather than defaulting."""
        with pytest.raises(UnknownCategory):
            code_of("SNACKS")

    def test_total_is_not_a_category(self) -> None:
        """Should reject the synthetic TOTAL key."""
        with pytest.raises(UnknownCategory):
            code_of("TOTAL")


class TestCategoryOf:
    """Tests for category_of."""

    def test_round_trip_with_code_of(self) -> None:
        """Should invert code_of for every category."""
        for category in Category:
            assert category_of(code_of(category.name)) is category

    @pytest.mark.parametrize("code", [0, 5, -1, 100])
    def test_unknown_code_raises(self, code: int) -> None:
        """Should raise UnknownCategory for codes outside 1-4."""
        with pytest.raises(UnknownCategory) as exc_info:
            category_of(code)
        assert exc_info.value.value == code

    def test_bool_is_not_a_code(self) -> None:
        """Should not treat True as code 1."""
        with pytest.raises(UnknownCategory):
            category_of(True)

    def test_unknown_category_is_value_error(self) -> None:
        """Should be catchable as ValueError."""
        with pytest.raises(ValueError):
            category_of(9)


class TestParseCategory:
    """Tests for parse_category."""

    def test_accepts_code(self) -> None:
        """Should resolve numeric input as a code."""
        assert parse_category("2") is Category.CLOTHES

    def test_accepts_name_with_whitespace(self) -> None:
        """Should resolve names with surrounding whitespace."""
        assert parse_category("  other ") is Category.OTHER

    def test_rejects_unknown(self) -> None:
        """Should raise UnknownCategory for anything else."""
        with pytest.raises(UnknownCategory):
            parse_category("7")
        with pytest.raises(UnknownCategory):
            parse_category("")


class TestCategory:
    """Tests for Category properties."""

    def test_title(self) -> None:
        """Should capitalize the name for display."""
        assert Category.ENTERTAINMENT.title == "Entertainment"

    def test_category_named_returns_member(self) -> None:
        """Should return the enum member."""
        assert category_named("food") is Category.FOOD
