"""Derived totals for a month.

Totals are always computed from the given state; nothing is cached.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List

from models.category import Category
from models.month_state import MonthState
from models.transaction import Transaction


@dataclass
class Totals:
    """Summary of a month's transactions.

    Attributes:
        total_expenses: Sum of all expense transactions, orphaned ones included.
        total_income: Sum of all income transactions, orphaned ones included.
        current_balance: beginning_balance + total_income - total_expenses.
        per_category_spent: Expense sum per live expense category name.
        per_category_received: Income sum per live income category name.
    """

    total_expenses: Decimal
    total_income: Decimal
    current_balance: Decimal
    per_category_spent: Dict[str, Decimal] = field(default_factory=dict)
    per_category_received: Dict[str, Decimal] = field(default_factory=dict)


def _sum_by_type(transactions: List[Transaction], kind: str) -> Decimal:
    return sum((t.amount for t in transactions if t.type == kind), Decimal("0"))


def _per_category(
    categories: List[Category], transactions: List[Transaction], kind: str
) -> Dict[str, Decimal]:
    # Exact name match; duplicate names all map to the same sum
    result = {}
    for category in categories:
        result[category.name] = sum(
            (
                t.amount
                for t in transactions
                if t.type == kind and t.category == category.name
            ),
            Decimal("0"),
        )
    return result


def compute_totals(state: MonthState) -> Totals:
    """Compute overall and per-category totals for a month."""
    total_expenses = _sum_by_type(state.transactions, "expense")
    total_income = _sum_by_type(state.transactions, "income")

    return Totals(
        total_expenses=total_expenses,
        total_income=total_income,
        current_balance=state.beginning_balance + total_income - total_expenses,
        per_category_spent=_per_category(
            state.expenses, state.transactions, "expense"
        ),
        per_category_received=_per_category(
            state.income, state.transactions, "income"
        ),
    )


def find_orphaned_transactions(state: MonthState) -> List[Transaction]:
    """Get transactions whose category matches no live category of their type."""
    live_names = {
        "expense": {c.name for c in state.expenses},
        "income": {c.name for c in state.income},
    }
    return [
        t
        for t in state.transactions
        if t.category not in live_names.get(t.type, set())
    ]
