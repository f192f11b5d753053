"""Category model for budget buckets."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Category:
    """Represents a named budget bucket within a month.

    Attributes:
        name: Category name. Expected to be unique within its list, not enforced.
        budget: Budgeted amount for the month. Sign is not enforced.
    """

    name: str
    budget: Decimal = Decimal("0")

    def to_dict(self) -> dict:
        """Convert category to dictionary for document storage."""
        return {"name": self.name, "budget": float(self.budget)}

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        """Build a category from its stored dictionary form."""
        return cls(name=data["name"], budget=Decimal(str(data.get("budget", 0))))
