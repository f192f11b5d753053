"""MonthState model: the unit persisted per month key."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List

from models.category import Category
from models.quick_add import QuickAdd
from models.transaction import Transaction

# (name, budget) pairs seeded into every new month
DEFAULT_EXPENSES = [
    ("Groceries/Store", "300"),
    ("Rent", "1184"),
    ("Electricity", "250"),
    ("Gas", "200"),
    ("Dates & Eating Out", "50"),
    ("Subscriptions", "46"),
    ("Tithe", "80"),
    ("Shopping/Wants", "50"),
    ("Savings", "0"),
    ("Unexpected Health", "150"),
    ("Insurance", "0"),
    ("Gift/Birthday/Holiday", "50"),
    ("Other Purchases", "0"),
]

DEFAULT_INCOME = [
    ("GSA", "0"),
    ("Intramurals", "0"),
    ("Bank Interest", "0"),
    ("Gifts", "0"),
    ("Other", "0"),
]

CATEGORY_LISTS = ("expenses", "income")


def default_expenses() -> List[Category]:
    return [Category(name, Decimal(budget)) for name, budget in DEFAULT_EXPENSES]


def default_income() -> List[Category]:
    return [Category(name, Decimal(budget)) for name, budget in DEFAULT_INCOME]


def empty_quick_adds() -> Dict[str, List[QuickAdd]]:
    return {"expense": [], "income": []}


@dataclass
class MonthState:
    """All budget data for one month.

    Attributes:
        expenses: Ordered expense categories.
        income: Ordered income categories.
        transactions: Transactions, newest first by insertion.
        beginning_balance: Balance carried into the month.
        quick_adds: Quick add templates keyed by transaction type.
    """

    expenses: List[Category] = field(default_factory=default_expenses)
    income: List[Category] = field(default_factory=default_income)
    transactions: List[Transaction] = field(default_factory=list)
    beginning_balance: Decimal = Decimal("0")
    quick_adds: Dict[str, List[QuickAdd]] = field(default_factory=empty_quick_adds)

    @classmethod
    def default(cls) -> "MonthState":
        """Create the state used for a month with nothing stored."""
        return cls()

    def categories(self, list_name: str) -> List[Category]:
        """Get a category list by name ('expenses' or 'income').

        Raises:
            ValueError: If list_name is not a known category list.
        """
        if list_name not in CATEGORY_LISTS:
            raise ValueError(f"Unknown category list: {list_name}")
        return getattr(self, list_name)

    def to_dict(self) -> dict:
        """Convert the month to its document form.

        Keys match the exported budget document: expenses, income,
        transactions, beginningBalance, quickAdds.
        """
        return {
            "expenses": [c.to_dict() for c in self.expenses],
            "income": [c.to_dict() for c in self.income],
            "transactions": [t.to_dict() for t in self.transactions],
            "beginningBalance": float(self.beginning_balance),
            "quickAdds": {
                kind: [q.to_dict() for q in self.quick_adds.get(kind, [])]
                for kind in ("expense", "income")
            },
        }
