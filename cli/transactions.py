#!/usr/bin/env python3

import sys
from cli.formatting import format_currency
from models.transaction import TRANSACTION_TYPES, TransactionDraft
from tools.transactions import FILTER_TYPES, SORT_KEYS
from logger import get_logger

logger = get_logger()


def _log_transactions(transactions):
    for t in transactions:
        logger.info(
            f"{t.id}  {t.transaction_date.isoformat()}  {t.type:<7}  "
            f"{t.category[:24]:<24}  {t.description[:30]:<30}  "
            f"{format_currency(t.amount):>12}"
        )


def cmd_add(args, services):
    """Add a transaction to the active month.

    Args:
        args: Parsed command-line arguments with type, category, amount,
            description and date
        services: Services container with the ledger service
    """
    draft = TransactionDraft(
        type=args.type,
        category=args.category,
        description=args.description or "",
        amount=args.amount,
        date=args.date or "",
    )

    transaction = services.ledger.add_transaction(draft)
    if transaction is None:
        logger.error(
            "Transaction not added: a category, a numeric amount and a "
            "YYYY-MM-DD date (or none) are required."
        )
        sys.exit(1)

    logger.info(
        f"✓ Added {transaction.type} of {format_currency(transaction.amount)} "
        f"to '{transaction.category}' (ID: {transaction.id})"
    )

    list_name = "expenses" if transaction.type == "expense" else "income"
    names = {c.name for c in services.ledger.state.categories(list_name)}
    if transaction.category not in names:
        logger.warning(
            f"'{transaction.category}' is not a current {transaction.type} "
            f"category; it will not appear in category totals."
        )


def cmd_list(args, services):
    """List transactions in the active month."""
    transactions = services.ledger.transactions_view(
        search_text=args.search or "",
        sort_key=args.sort,
        filter_type=args.type,
    )

    if not transactions:
        logger.info("No transactions found.")
        return

    logger.info(f"\nTransactions for {services.ledger.current_month}:")
    logger.info("=" * 80)
    _log_transactions(transactions)
    logger.info(f"\nTotal transactions: {len(transactions)}")


def cmd_delete(args, services):
    """Delete a transaction by ID."""
    if services.ledger.delete_transaction(args.transaction_id):
        logger.info(f"✓ Transaction {args.transaction_id} deleted successfully.")
    else:
        logger.error(f"Transaction with ID {args.transaction_id} not found.")
        sys.exit(1)


def cmd_orphans(args, services):
    """List transactions whose category no longer exists."""
    orphans = services.ledger.orphaned_transactions()

    if not orphans:
        logger.info("No orphaned transactions.")
        return

    logger.info("\nTransactions not matching any current category:")
    logger.info("=" * 80)
    _log_transactions(orphans)
    logger.info(f"\nTotal orphaned: {len(orphans)}")


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Manage transactions",
        description="Add, list and delete transactions in the active month",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    # transactions add
    add_parser = transactions_subparsers.add_parser("add", help="Add a transaction")
    add_parser.add_argument(
        "--type",
        choices=TRANSACTION_TYPES,
        default="expense",
        help="Transaction type (default: expense)",
    )
    add_parser.add_argument("--category", required=True, help="Category name")
    add_parser.add_argument("--amount", required=True, help="Amount, e.g. 12.50")
    add_parser.add_argument("--description", help="Optional description")
    add_parser.add_argument("--date", help="Date in YYYY-MM-DD format (default: today)")
    add_parser.set_defaults(func=cmd_add)

    # transactions list
    list_parser = transactions_subparsers.add_parser("list", help="List transactions")
    list_parser.add_argument(
        "--search", help="Case-insensitive text to match description, category or amount"
    )
    list_parser.add_argument(
        "--sort", choices=SORT_KEYS, default="date", help="Sort order (default: date)"
    )
    list_parser.add_argument(
        "--type", choices=FILTER_TYPES, default="all", help="Filter by type"
    )
    list_parser.set_defaults(func=cmd_list)

    # transactions delete
    delete_parser = transactions_subparsers.add_parser(
        "delete", help="Delete a transaction by ID"
    )
    delete_parser.add_argument(
        "transaction_id", type=int, help="ID of the transaction to delete"
    )
    delete_parser.set_defaults(func=cmd_delete)

    # transactions orphans
    orphans_parser = transactions_subparsers.add_parser(
        "orphans", help="List transactions whose category no longer exists"
    )
    orphans_parser.set_defaults(func=cmd_orphans)
