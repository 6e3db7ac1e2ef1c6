"""The fixed spending taxonomy.

Codes are stable: they appear in the menu and category names appear in the
ledger file, so neither may change.
"""

from enum import Enum

from budgetbook.domain.errors import UnknownCategory


class Category(Enum):
    """Spending category with its menu code."""

    FOOD = 1
    CLOTHES = 2
    ENTERTAINMENT = 3
    OTHER = 4

    @property
    def code(self) -> int:
        return self.value

    @property
    def title(self) -> str:
        """Display name, e.g. "Entertainment"."""
        return self.name.capitalize()


_BY_NAME: dict[str, Category] = {category.name: category for category in Category}
_BY_CODE: dict[int, Category] = {category.value: category for category in Category}


def category_named(name: str) -> Category:
    """Look up a category by name, ignoring case and surrounding whitespace.

    Raises:
        UnknownCategory: If the name is not in the taxonomy.
    """
    category = _BY_NAME.get(name.strip().upper()) if isinstance(name, str) else None
    if category is None:
        raise UnknownCategory(name)
    return category


def code_of(name: str) -> int:
    """Get the menu code for a category name."""
    return category_named(name).code


def category_of(code: int) -> Category:
    """Get the category for a menu code.

    Raises:
        UnknownCategory: If the code is not in the taxonomy.
    """
    # bool is an int subclass; True must not resolve to FOOD
    category = None if isinstance(code, bool) else _BY_CODE.get(code)
    if category is None:
        raise UnknownCategory(code)
    return category


def parse_category(value: str) -> Category:
    """Resolve user input that is either a menu code ("2") or a name ("clothes")."""
    text = value.strip()
    if text.isdigit():
        return category_of(int(text))
    return category_named(text)
