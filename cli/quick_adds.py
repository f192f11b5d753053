#!/usr/bin/env python3

import sys
from cli.formatting import format_currency, parse_position
from models.transaction import TRANSACTION_TYPES, TransactionDraft
from logger import get_logger

logger = get_logger()


def _index(args, services) -> int:
    quick_adds = services.ledger.state.quick_adds.get(args.type, [])
    try:
        return parse_position(args.position, len(quick_adds))
    except ValueError as e:
        logger.error(f"Invalid {args.type} quick add position: {e}")
        sys.exit(1)


def cmd_list(args, services):
    """List quick add templates of the active month."""
    for kind in TRANSACTION_TYPES:
        quick_adds = services.ledger.state.quick_adds.get(kind, [])
        logger.info(f"\n{kind.capitalize()} quick adds:")
        logger.info("=" * 80)
        if not quick_adds:
            logger.info("None.")
            continue
        for position, q in enumerate(quick_adds, start=1):
            logger.info(
                f"{position:>3}. {q.description} - {format_currency(q.amount)} "
                f"({q.category})"
            )


def cmd_create(args, services):
    """Create a quick add template."""
    draft = TransactionDraft(
        type=args.type,
        category=args.category,
        description=args.description or "",
        amount=args.amount,
    )
    if not services.ledger.create_quick_add(args.type, draft):
        logger.error("Quick add not created: a category and a numeric amount are required.")
        sys.exit(1)

    q = services.ledger.state.quick_adds[args.type][-1]
    logger.info(f"✓ Created {args.type} quick add '{q.description}' ({format_currency(q.amount)})")


def cmd_apply(args, services):
    """Add a transaction dated today from a quick add."""
    index = _index(args, services)
    transaction = services.ledger.apply_quick_add(args.type, index)
    logger.info(
        f"✓ Added {transaction.type} '{transaction.description}' of "
        f"{format_currency(transaction.amount)} (ID: {transaction.id})"
    )


def cmd_delete(args, services):
    """Delete a quick add template."""
    index = _index(args, services)
    q = services.ledger.state.quick_adds[args.type][index]
    services.ledger.delete_quick_add(args.type, index)
    logger.info(f"✓ Quick add '{q.description}' deleted successfully.")


def setup_parser(subparsers):
    """Setup quick-adds subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "quick-adds",
        help="Manage quick add templates",
        description="Create, apply and delete quick add templates",
    )

    quick_adds_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available quick add commands",
        dest="subcommand",
        required=True,
    )

    list_parser = quick_adds_subparsers.add_parser("list", help="List quick adds")
    list_parser.set_defaults(func=cmd_list)

    create_parser = quick_adds_subparsers.add_parser(
        "create", help="Create a quick add"
    )
    create_parser.add_argument(
        "--type", choices=TRANSACTION_TYPES, default="expense", help="Transaction type"
    )
    create_parser.add_argument("--category", required=True, help="Category name")
    create_parser.add_argument("--amount", required=True, help="Amount")
    create_parser.add_argument(
        "--description", help="Label (defaults to the category name)"
    )
    create_parser.set_defaults(func=cmd_create)

    apply_parser = quick_adds_subparsers.add_parser(
        "apply", help="Add a transaction from a quick add"
    )
    apply_parser.add_argument("type", choices=TRANSACTION_TYPES)
    apply_parser.add_argument("position", type=int, help="Position shown by 'list'")
    apply_parser.set_defaults(func=cmd_apply)

    delete_parser = quick_adds_subparsers.add_parser(
        "delete", help="Delete a quick add"
    )
    delete_parser.add_argument("type", choices=TRANSACTION_TYPES)
    delete_parser.add_argument("position", type=int, help="Position shown by 'list'")
    delete_parser.set_defaults(func=cmd_delete)
