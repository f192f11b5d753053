"""Budget document encoding and decoding.

A budget document is the JSON form of one month:

    {
        "expenses": [{"name": "Rent", "budget": 1184}, ...],
        "income": [{"name": "GSA", "budget": 0}, ...],
        "transactions": [
            {"id": 1704412800000, "type": "expense", "category": "Rent",
             "description": "", "amount": 1184, "date": "2024-01-05"},
        ],
        "beginningBalance": 0,
        "quickAdds": {"expense": [...], "income": [...]}
    }

The same format is used for stored months and for exported files. Every
top-level field is optional when decoding; absent (or null) fields are left
out of the parsed result so callers can merge.
"""

import datetime
import json
from dataclasses import replace
from decimal import Decimal
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from models.category import Category
from models.month_state import MonthState
from models.quick_add import QuickAdd
from models.transaction import Transaction


class ImportDocumentError(ValueError):
    """Raised when a budget document cannot be parsed."""


# Entry amounts written as null (NaN in older documents) count as 0
Amount = Annotated[float, BeforeValidator(lambda value: 0 if value is None else value)]


class _Entry(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)


class CategoryEntry(_Entry):
    name: str
    budget: Amount = 0


class TransactionEntry(_Entry):
    id: int
    type: Literal["expense", "income"]
    category: str
    description: Optional[str] = ""
    amount: Amount
    date: datetime.date


class QuickAddEntry(_Entry):
    category: str
    description: Optional[str] = ""
    amount: Amount


class QuickAddsEntry(_Entry):
    expense: List[QuickAddEntry] = []
    income: List[QuickAddEntry] = []


class BudgetDocument(_Entry):
    """Validation model for a whole budget document."""

    model_config = ConfigDict(allow_inf_nan=False, populate_by_name=True)

    expenses: Optional[List[CategoryEntry]] = None
    income: Optional[List[CategoryEntry]] = None
    transactions: Optional[List[TransactionEntry]] = None
    beginning_balance: Optional[float] = Field(default=None, alias="beginningBalance")
    quick_adds: Optional[QuickAddsEntry] = Field(default=None, alias="quickAdds")


def export_filename(key: str) -> str:
    """Get the download filename for a month's export."""
    return f"{key}-budget.json"


def serialize_state(state: MonthState) -> str:
    """Compact JSON used for storage. Identical states give identical output."""
    return json.dumps(state.to_dict())


def export_document(state: MonthState) -> str:
    """Pretty-printed JSON used for exported files."""
    return json.dumps(state.to_dict(), indent=2)


def parse_document(text) -> dict:
    """Parse a budget document into MonthState field values.

    Args:
        text: JSON document as str or bytes.

    Returns:
        Dictionary keyed by MonthState field name, containing only the fields
        present in the document.

    Raises:
        ImportDocumentError: If the text is not valid JSON or a present field
            has the wrong shape.
    """
    try:
        document = BudgetDocument.model_validate_json(text)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        detail = f"{location}: {first['msg']}" if location else first["msg"]
        raise ImportDocumentError(f"Invalid budget document ({detail})") from e

    fields = {}
    if document.expenses is not None:
        fields["expenses"] = [Category.from_dict(c.model_dump()) for c in document.expenses]
    if document.income is not None:
        fields["income"] = [Category.from_dict(c.model_dump()) for c in document.income]
    if document.transactions is not None:
        fields["transactions"] = [
            Transaction.from_dict(t.model_dump(mode="json"))
            for t in document.transactions
        ]
    if document.beginning_balance is not None:
        fields["beginning_balance"] = Decimal(str(document.beginning_balance))
    if document.quick_adds is not None:
        fields["quick_adds"] = {
            "expense": [QuickAdd.from_dict(q.model_dump()) for q in document.quick_adds.expense],
            "income": [QuickAdd.from_dict(q.model_dump()) for q in document.quick_adds.income],
        }
    return fields


def import_document(state: MonthState, text) -> MonthState:
    """Merge the fields present in a document into a month.

    Raises:
        ImportDocumentError: If the document cannot be parsed. `state` is not
            modified either way.
    """
    return replace(state, **parse_document(text))
