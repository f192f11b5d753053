"""Ledger service: owns the active month and persists every change."""

from dataclasses import replace
from datetime import date
from typing import Any, List, Optional

from models.month_state import MonthState
from models.transaction import Transaction, TransactionDraft
from tools import categories as category_ops
from tools import documents
from tools import transactions as transaction_ops
from tools.months import is_month_key, month_key, parse_month_key, shift_month
from tools.totals import Totals, compute_totals, find_orphaned_transactions
from logger import get_logger

logger = get_logger()

LAST_MONTH_KEY = "lastMonth"


class LedgerService:
    """Service for reading and changing month budgets.

    Holds the state of one active month. Each change goes through the pure
    operations in `tools`, replaces the active state, and is written back to
    the store before the method returns.

    Args:
        store: Key-value store implementing get/set.
    """

    def __init__(self, store):
        """Initialize the ledger service.

        Args:
            store: KeyValueStore used for month documents and the last month.
        """
        self.store = store
        self.current_month: Optional[str] = None
        self.state: Optional[MonthState] = None

    # ===== PERSISTENCE =====

    def load_month(self, key: str) -> MonthState:
        """Load the stored state for a month.

        Args:
            key: Month key (YYYY-MM).

        Returns:
            The stored MonthState, with defaults for any field the stored
            document lacks. A missing or unparsable document gives
            MonthState.default().
        """
        raw = self.store.get(key)
        if raw is None:
            logger.debug(f"No stored data for {key}, using defaults")
            return MonthState.default()

        try:
            fields = documents.parse_document(raw)
        except documents.ImportDocumentError as e:
            logger.warning(f"Stored data for {key} is unreadable, using defaults: {e}")
            return MonthState.default()

        return replace(MonthState.default(), **fields)

    def save_month(self, key: str, state: MonthState) -> None:
        """Write the whole state for a month to the store."""
        self.store.set(key, documents.serialize_state(state))
        logger.debug(f"Saved {key} ({len(state.transactions)} transactions)")

    def stored_months(self) -> List[str]:
        """Get the keys of all months with stored data, oldest first."""
        return [key for key in self.store.keys() if is_month_key(key)]

    def last_month(self) -> Optional[str]:
        """Get the remembered month key, if it is valid."""
        key = self.store.get(LAST_MONTH_KEY)
        return key if key and is_month_key(key) else None

    # ===== MONTH SELECTION =====

    def open_month(self, key: Optional[str] = None) -> MonthState:
        """Make a month the active one and load its state.

        Args:
            key: Month key. Defaults to the remembered month, then the
                current calendar month.

        Returns:
            The active MonthState.

        Raises:
            ValueError: If key is not a valid month key.
        """
        key = key or self.last_month() or month_key(date.today())
        parse_month_key(key)

        self.current_month = key
        self.state = self.load_month(key)
        self.store.set(LAST_MONTH_KEY, key)
        logger.debug(f"Opened month {key}")
        return self.state

    def navigate(self, offset: int) -> MonthState:
        """Open the month `offset` months away from the active one."""
        self._require_open()
        return self.open_month(shift_month(self.current_month, offset))

    def totals(self) -> Totals:
        """Compute totals for the active month."""
        self._require_open()
        return compute_totals(self.state)

    def transactions_view(
        self, search_text: str = "", sort_key: str = "date", filter_type: str = "all"
    ) -> List[Transaction]:
        """Get a filtered, sorted view of the active month's transactions."""
        self._require_open()
        return transaction_ops.filter_sort_transactions(
            self.state, search_text, sort_key, filter_type
        )

    def orphaned_transactions(self) -> List[Transaction]:
        """Get active-month transactions that match no live category."""
        self._require_open()
        return find_orphaned_transactions(self.state)

    # ===== CHANGES =====

    def add_transaction(
        self, draft: TransactionDraft, today: Optional[date] = None
    ) -> Optional[Transaction]:
        """Add a transaction to the active month.

        Returns:
            The created Transaction, or None if the draft was rejected.
        """
        if not self._apply(transaction_ops.add_transaction, draft, today):
            return None
        return self.state.transactions[0]

    def delete_transaction(self, transaction_id: int) -> bool:
        """Delete a transaction by ID. Returns False if not found."""
        return self._apply(transaction_ops.delete_transaction, transaction_id)

    def create_quick_add(self, kind: str, draft: TransactionDraft) -> bool:
        return self._apply(transaction_ops.create_quick_add, kind, draft)

    def delete_quick_add(self, kind: str, index: int) -> bool:
        return self._apply(transaction_ops.delete_quick_add, kind, index)

    def apply_quick_add(
        self, kind: str, index: int, today: Optional[date] = None
    ) -> Optional[Transaction]:
        """Add a transaction from the quick add at `index` in the `kind` list.

        Returns:
            The created Transaction, or None if there is no such quick add.
        """
        self._require_open()
        quick_adds = self.state.quick_adds.get(kind, [])
        if not 0 <= index < len(quick_adds):
            return None
        self._apply(transaction_ops.apply_quick_add, quick_adds[index], kind, today)
        return self.state.transactions[0]

    def set_category_field(
        self, list_name: str, index: int, field: str, value: Any
    ) -> bool:
        return self._apply(category_ops.set_category_field, list_name, index, field, value)

    def add_category(self, list_name: str) -> bool:
        return self._apply(category_ops.add_category, list_name)

    def remove_category(self, list_name: str, index: int) -> bool:
        return self._apply(category_ops.remove_category, list_name, index)

    def set_beginning_balance(self, value: Any) -> bool:
        return self._apply(category_ops.set_beginning_balance, value)

    def import_document(self, text) -> bool:
        """Merge an imported document into the active month.

        Raises:
            ImportDocumentError: If the document is invalid. The active month
                is left unchanged.
        """
        return self._apply(documents.import_document, text)

    def export_document(self) -> str:
        """Get the active month as a pretty-printed budget document."""
        self._require_open()
        return documents.export_document(self.state)

    def _apply(self, operation, *args) -> bool:
        """Run an operation on the active state and save if it changed anything.

        Returns:
            True if the operation produced a new state.
        """
        self._require_open()
        new_state = operation(self.state, *args)
        if new_state is self.state:
            logger.debug(f"{operation.__name__}: no change")
            return False

        self.state = new_state
        self.save_month(self.current_month, new_state)
        return True

    def _require_open(self) -> None:
        if self.state is None:
            raise RuntimeError("No month is open. Call open_month() first.")
