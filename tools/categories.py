"""Category list operations on a MonthState."""

from dataclasses import replace
from decimal import Decimal
from typing import Any

from models.category import Category
from models.month_state import MonthState
from tools.amounts import coerce_amount

CATEGORY_FIELDS = ("name", "budget")

PLACEHOLDER_NAMES = {
    "expenses": "New Expense",
    "income": "New Income",
}


def set_category_field(
    state: MonthState, list_name: str, index: int, field: str, value: Any
) -> MonthState:
    """Update the name or budget of one category.

    Renaming does not touch transactions: those still carrying the old name
    stop counting toward any category total.

    Args:
        state: Current month state.
        list_name: 'expenses' or 'income'.
        index: Position of the category in its list.
        field: 'name' or 'budget'.
        value: New value. Budgets are coerced, invalid input becomes 0.

    Returns:
        New state, or `state` if index is out of range.

    Raises:
        ValueError: If list_name or field is unknown.
    """
    if field not in CATEGORY_FIELDS:
        raise ValueError(f"Unknown category field: {field}")

    categories = state.categories(list_name)
    if not 0 <= index < len(categories):
        return state

    if field == "budget":
        value = coerce_amount(value)
    else:
        value = "" if value is None else str(value)

    updated = list(categories)
    updated[index] = replace(categories[index], **{field: value})
    return replace(state, **{list_name: updated})


def add_category(state: MonthState, list_name: str) -> MonthState:
    """Append a placeholder category with a zero budget.

    Raises:
        ValueError: If list_name is unknown.
    """
    categories = state.categories(list_name)
    placeholder = Category(name=PLACEHOLDER_NAMES[list_name], budget=Decimal("0"))
    return replace(state, **{list_name: list(categories) + [placeholder]})


def remove_category(state: MonthState, list_name: str, index: int) -> MonthState:
    """Remove the category at `index`. No-op if out of range.

    Raises:
        ValueError: If list_name is unknown.
    """
    categories = state.categories(list_name)
    if not 0 <= index < len(categories):
        return state
    remaining = [c for i, c in enumerate(categories) if i != index]
    return replace(state, **{list_name: remaining})


def set_beginning_balance(state: MonthState, value: Any) -> MonthState:
    """Set the month's beginning balance. Invalid input becomes 0."""
    return replace(state, beginning_balance=coerce_amount(value))
