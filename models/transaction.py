from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional

TRANSACTION_TYPES = ("expense", "income")


@dataclass
class Transaction:
    id: int  # creation-time timestamp in milliseconds
    type: str  # 'expense' or 'income'
    category: str  # category name reference, not enforced
    description: str
    amount: Decimal
    transaction_date: date

    def to_dict(self) -> dict:
        """Convert transaction to dictionary for document storage."""
        return {
            "id": self.id,
            "type": self.type,
            "category": self.category,
            "description": self.description,
            "amount": float(self.amount),
            "date": self.transaction_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Build a transaction from its stored dictionary form."""
        return cls(
            id=int(data["id"]),
            type=data["type"],
            category=data["category"],
            description=data.get("description") or "",
            amount=Decimal(str(data["amount"])),
            transaction_date=date.fromisoformat(data["date"]),
        )


@dataclass
class TransactionDraft:
    """Unvalidated user input for a new transaction.

    Attributes:
        type: 'expense' or 'income'.
        category: Category name; empty means the draft is rejected.
        description: Optional free text.
        amount: Raw amount as entered (string or number).
        date: ISO date string; empty means today.
    """

    type: str = "expense"
    category: str = ""
    description: str = ""
    amount: Any = ""
    date: Optional[str] = ""
