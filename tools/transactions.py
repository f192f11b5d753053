"""Transaction and quick-add operations on a MonthState.

Every function returns a MonthState and leaves its input untouched. Rejected
input returns the given state object itself, so callers can detect a no-op
with an identity check.
"""

import time
from dataclasses import replace
from datetime import date
from typing import List, Optional

from models.month_state import MonthState
from models.quick_add import QuickAdd
from models.transaction import TRANSACTION_TYPES, Transaction, TransactionDraft
from tools.amounts import amount_text, parse_amount

SORT_KEYS = ("date", "amount", "category", "description")
FILTER_TYPES = ("all",) + TRANSACTION_TYPES


def _next_id(state: MonthState) -> int:
    """Millisecond timestamp, bumped past existing ids so ids stay unique."""
    now_ms = time.time_ns() // 1_000_000
    existing = [t.id for t in state.transactions]
    if existing and max(existing) >= now_ms:
        return max(existing) + 1
    return now_ms


def _parse_draft_date(value: Optional[str], today: date) -> Optional[date]:
    if not value:
        return today
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def _prepend(state: MonthState, transaction: Transaction) -> MonthState:
    return replace(state, transactions=[transaction] + list(state.transactions))


def add_transaction(
    state: MonthState, draft: TransactionDraft, today: Optional[date] = None
) -> MonthState:
    """Prepend a transaction built from a draft.

    Args:
        state: Current month state.
        draft: Raw user input.
        today: Fallback date when the draft has none. Defaults to date.today().

    Returns:
        New state with the transaction first, or `state` unchanged when the
        draft has no category, an empty or non-numeric amount, an unknown
        type, or an unparsable date.
    """
    if not draft.category or draft.type not in TRANSACTION_TYPES:
        return state

    amount = parse_amount(draft.amount)
    if amount is None:
        return state

    transaction_date = _parse_draft_date(draft.date, today or date.today())
    if transaction_date is None:
        return state

    transaction = Transaction(
        id=_next_id(state),
        type=draft.type,
        category=draft.category,
        description=draft.description or "",
        amount=amount,
        transaction_date=transaction_date,
    )
    return _prepend(state, transaction)


def delete_transaction(state: MonthState, transaction_id: int) -> MonthState:
    """Remove the transaction with the given id. No-op if not found."""
    remaining = [t for t in state.transactions if t.id != transaction_id]
    if len(remaining) == len(state.transactions):
        return state
    return replace(state, transactions=remaining)


def create_quick_add(
    state: MonthState, kind: str, draft: TransactionDraft
) -> MonthState:
    """Append a quick add template to the `kind` list.

    The description defaults to the category name. Drafts without a category
    or with an invalid amount are rejected.

    Raises:
        ValueError: If kind is not 'expense' or 'income'.
    """
    if kind not in TRANSACTION_TYPES:
        raise ValueError(f"Unknown quick add type: {kind}")

    amount = parse_amount(draft.amount)
    if not draft.category or amount is None:
        return state

    quick_add = QuickAdd(
        category=draft.category,
        description=draft.description or draft.category,
        amount=amount,
    )
    quick_adds = dict(state.quick_adds)
    quick_adds[kind] = list(quick_adds.get(kind, [])) + [quick_add]
    return replace(state, quick_adds=quick_adds)


def delete_quick_add(state: MonthState, kind: str, index: int) -> MonthState:
    """Remove the quick add at `index` from the `kind` list. No-op if out of range.

    Raises:
        ValueError: If kind is not 'expense' or 'income'.
    """
    if kind not in TRANSACTION_TYPES:
        raise ValueError(f"Unknown quick add type: {kind}")

    current = state.quick_adds.get(kind, [])
    if not 0 <= index < len(current):
        return state

    quick_adds = dict(state.quick_adds)
    quick_adds[kind] = [q for i, q in enumerate(current) if i != index]
    return replace(state, quick_adds=quick_adds)


def apply_quick_add(
    state: MonthState, quick_add: QuickAdd, kind: str, today: Optional[date] = None
) -> MonthState:
    """Prepend a transaction from a quick add template, dated today.

    Category budgets are left as they are.

    Raises:
        ValueError: If kind is not 'expense' or 'income'.
    """
    if kind not in TRANSACTION_TYPES:
        raise ValueError(f"Unknown quick add type: {kind}")

    transaction = Transaction(
        id=_next_id(state),
        type=kind,
        category=quick_add.category,
        description=quick_add.description or "",
        amount=quick_add.amount,
        transaction_date=today or date.today(),
    )
    return _prepend(state, transaction)


def _matches_search(transaction: Transaction, needle: str) -> bool:
    haystacks = (
        transaction.description,
        transaction.category,
        amount_text(transaction.amount),
    )
    return any(needle in (text or "").lower() for text in haystacks)


def filter_sort_transactions(
    state: MonthState,
    search_text: str = "",
    sort_key: str = "date",
    filter_type: str = "all",
) -> List[Transaction]:
    """Build a filtered, sorted view of the month's transactions.

    Args:
        state: Month state to read from. Never modified.
        search_text: Case-insensitive substring matched against description,
            category and the plain string form of the amount.
        sort_key: 'date' (newest first), 'amount' (largest first),
            'category' or 'description' (ascending). Any other key keeps
            stored order.
        filter_type: 'all', 'expense' or 'income'.

    Returns:
        New list of transactions. Ties keep stored order.

    Raises:
        ValueError: If filter_type is unknown.
    """
    if filter_type not in FILTER_TYPES:
        raise ValueError(f"Unknown filter type: {filter_type}")

    view = [
        t
        for t in state.transactions
        if filter_type == "all" or t.type == filter_type
    ]

    if search_text:
        needle = search_text.lower()
        view = [t for t in view if _matches_search(t, needle)]

    if sort_key == "date":
        view.sort(key=lambda t: t.transaction_date, reverse=True)
    elif sort_key == "amount":
        view.sort(key=lambda t: t.amount, reverse=True)
    elif sort_key == "category":
        view.sort(key=lambda t: (t.category.casefold(), t.category))
    elif sort_key == "description":
        view.sort(key=lambda t: (t.description.casefold(), t.description))

    return view
