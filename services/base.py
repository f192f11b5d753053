"""Base services container for dependency injection."""

from config import Config
from db.manager import DatabaseManager


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject an in-memory store for testing.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager. If None, one is created from config.
        store: Optional key-value store. If None, a SqliteStore over db_manager is used.
    """

    def __init__(self, config: Config, db_manager=None, store=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from services.ledger import LedgerService
        from storage import SqliteStore

        self.store = store or SqliteStore(self.db_manager)
        self.ledger = LedgerService(self.store)
