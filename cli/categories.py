#!/usr/bin/env python3

import sys
from cli.formatting import format_currency, parse_position
from models.month_state import CATEGORY_LISTS
from models.transaction import TRANSACTION_TYPES
from logger import get_logger

logger = get_logger()

# Transaction type counted by each category list
LIST_TYPES = dict(zip(CATEGORY_LISTS, TRANSACTION_TYPES))


def _index(args, services) -> int:
    categories = services.ledger.state.categories(args.kind)
    try:
        return parse_position(args.position, len(categories))
    except ValueError as e:
        logger.error(f"Invalid {args.kind} category position: {e}")
        sys.exit(1)


def cmd_list(args, services):
    """List categories of the active month."""
    kinds = [args.kind] if args.kind else list(CATEGORY_LISTS)

    for kind in kinds:
        categories = services.ledger.state.categories(kind)
        logger.info(f"\n{kind.capitalize()} categories:")
        logger.info("=" * 80)
        if not categories:
            logger.info("No categories found.")
            continue
        for position, category in enumerate(categories, start=1):
            logger.info(
                f"{position:>3}. {category.name:<40} {format_currency(category.budget):>12}"
            )


def cmd_add(args, services):
    """Append a placeholder category."""
    services.ledger.add_category(args.kind)
    categories = services.ledger.state.categories(args.kind)
    logger.info(
        f"✓ Added '{categories[-1].name}' at position {len(categories)}. "
        f"Use 'rename' and 'set-budget' to edit it."
    )


def cmd_rename(args, services):
    """Rename a category.

    Transactions keep the old name and stop counting toward this category.
    """
    index = _index(args, services)
    old_name = services.ledger.state.categories(args.kind)[index].name

    services.ledger.set_category_field(args.kind, index, "name", args.name)
    logger.info(f"✓ Renamed '{old_name}' to '{args.name}'")

    orphaned = [
        t
        for t in services.ledger.orphaned_transactions()
        if t.category == old_name and t.type == LIST_TYPES[args.kind]
    ]
    if orphaned:
        logger.warning(
            f"{len(orphaned)} transaction(s) still use '{old_name}' and no longer "
            f"count toward a category."
        )


def cmd_set_budget(args, services):
    """Set the budget of a category. Invalid amounts become 0."""
    index = _index(args, services)
    services.ledger.set_category_field(args.kind, index, "budget", args.amount)
    category = services.ledger.state.categories(args.kind)[index]
    logger.info(f"✓ Budget for '{category.name}' set to {format_currency(category.budget)}")


def cmd_delete(args, services):
    """Delete a category by position."""
    index = _index(args, services)
    category = services.ledger.state.categories(args.kind)[index]

    if not args.yes:
        confirm = (
            input(f"\nDelete category '{category.name}'? (yes/no): ").strip().lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    services.ledger.remove_category(args.kind, index)
    logger.info(f"✓ Category '{category.name}' deleted successfully.")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Add, rename, budget and delete categories in the active month",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List categories")
    list_parser.add_argument("kind", nargs="?", choices=CATEGORY_LISTS)
    list_parser.set_defaults(func=cmd_list)

    # categories add
    add_parser = categories_subparsers.add_parser(
        "add", help="Add a placeholder category"
    )
    add_parser.add_argument("kind", choices=CATEGORY_LISTS)
    add_parser.set_defaults(func=cmd_add)

    # categories rename
    rename_parser = categories_subparsers.add_parser("rename", help="Rename a category")
    rename_parser.add_argument("kind", choices=CATEGORY_LISTS)
    rename_parser.add_argument("position", type=int, help="Position shown by 'list'")
    rename_parser.add_argument("name", help="New category name")
    rename_parser.set_defaults(func=cmd_rename)

    # categories set-budget
    budget_parser = categories_subparsers.add_parser(
        "set-budget", help="Set a category budget"
    )
    budget_parser.add_argument("kind", choices=CATEGORY_LISTS)
    budget_parser.add_argument("position", type=int, help="Position shown by 'list'")
    budget_parser.add_argument("amount", help="Budget amount")
    budget_parser.set_defaults(func=cmd_set_budget)

    # categories delete
    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category"
    )
    delete_parser.add_argument("kind", choices=CATEGORY_LISTS)
    delete_parser.add_argument("position", type=int, help="Position shown by 'list'")
    delete_parser.add_argument(
        "--yes", "-y", action="store_true", help="Skip the confirmation prompt"
    )
    delete_parser.set_defaults(func=cmd_delete)
