"""QuickAdd model: a reusable transaction template."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class QuickAdd:
    category: str
    description: str
    amount: Decimal

    def to_dict(self) -> dict:
        """Convert quick add to dictionary for document storage."""
        return {
            "category": self.category,
            "description": self.description,
            "amount": float(self.amount),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QuickAdd":
        """Build a quick add from its stored dictionary form."""
        return cls(
            category=data["category"],
            description=data.get("description") or "",
            amount=Decimal(str(data["amount"])),
        )
