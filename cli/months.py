#!/usr/bin/env python3

import sys
from pathlib import Path
from cli.formatting import format_currency, month_label
from tools.documents import ImportDocumentError, export_filename
from logger import get_logger

logger = get_logger()


def cmd_show(args, services):
    """Show the active month's balances and category totals."""
    ledger = services.ledger
    state = ledger.state
    totals = ledger.totals()

    logger.info(f"\nMonthly Budget - {month_label(ledger.current_month)}")
    logger.info("=" * 80)
    logger.info(f"Beginning Balance: {format_currency(state.beginning_balance)}")
    logger.info(f"Current Balance:   {format_currency(totals.current_balance)}")
    logger.info(f"Total Income:      {format_currency(totals.total_income)}")
    logger.info(f"Total Expenses:    {format_currency(totals.total_expenses)}")

    logger.info("\nExpenses:")
    logger.info("-" * 80)
    for position, category in enumerate(state.expenses, start=1):
        spent = totals.per_category_spent.get(category.name, 0)
        logger.info(
            f"{position:>3}. {category.name:<30} "
            f"budget {format_currency(category.budget):>12}  "
            f"spent {format_currency(spent):>12}"
        )

    logger.info("\nIncome:")
    logger.info("-" * 80)
    for position, category in enumerate(state.income, start=1):
        received = totals.per_category_received.get(category.name, 0)
        logger.info(
            f"{position:>3}. {category.name:<30} "
            f"budget {format_currency(category.budget):>12}  "
            f"received {format_currency(received):>12}"
        )


def cmd_next(args, services):
    """Move to the following month and show it."""
    services.ledger.navigate(1)
    cmd_show(args, services)


def cmd_prev(args, services):
    """Move to the previous month and show it."""
    services.ledger.navigate(-1)
    cmd_show(args, services)


def cmd_list(args, services):
    """List months that have stored data."""
    months = services.ledger.stored_months()

    if not months:
        logger.info("No stored months found.")
        return

    logger.info("\nStored months:")
    logger.info("=" * 80)
    for key in months:
        marker = "*" if key == services.ledger.current_month else " "
        logger.info(f"{marker} {key}  {month_label(key)}")


def cmd_balance(args, services):
    """Set the beginning balance of the active month."""
    services.ledger.set_beginning_balance(args.amount)
    logger.info(
        f"✓ Beginning balance set to "
        f"{format_currency(services.ledger.state.beginning_balance)}"
    )


def cmd_export(args, services):
    """Export the active month to a JSON budget document."""
    filename = export_filename(services.ledger.current_month)
    output_path = Path(args.output) if args.output else services.config.export_dir
    if output_path.is_dir() or not output_path.suffix:
        output_path = output_path / filename

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(services.ledger.export_document())
    except OSError as e:
        logger.error(f"Error writing export: {e}")
        sys.exit(1)

    logger.info(f"✓ Exported {services.ledger.current_month} to {output_path}")


def cmd_import(args, services):
    """Import a JSON budget document into the active month."""
    input_path = Path(args.file)
    if not input_path.exists():
        logger.error(f"File not found: {args.file}")
        sys.exit(1)

    try:
        services.ledger.import_document(input_path.read_text())
    except ImportDocumentError as e:
        logger.error(f"Invalid JSON file: {e}")
        sys.exit(1)

    logger.info(f"✓ Imported {input_path.name} into {services.ledger.current_month}")


def setup_parser(subparsers):
    """Setup month subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "month",
        help="Show and navigate months",
        description="Show totals, move between months, import and export",
    )

    month_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available month commands",
        dest="subcommand",
        required=True,
    )

    show_parser = month_subparsers.add_parser("show", help="Show the active month")
    show_parser.set_defaults(func=cmd_show)

    next_parser = month_subparsers.add_parser("next", help="Go to the next month")
    next_parser.set_defaults(func=cmd_next)

    prev_parser = month_subparsers.add_parser("prev", help="Go to the previous month")
    prev_parser.set_defaults(func=cmd_prev)

    list_parser = month_subparsers.add_parser("list", help="List stored months")
    list_parser.set_defaults(func=cmd_list)

    balance_parser = month_subparsers.add_parser(
        "balance", help="Set the beginning balance"
    )
    balance_parser.add_argument("amount", help="Beginning balance amount")
    balance_parser.set_defaults(func=cmd_balance)

    export_parser = month_subparsers.add_parser(
        "export", help="Export the month to a JSON file"
    )
    export_parser.add_argument(
        "--output",
        "-o",
        help="Output file or directory (default: configured export directory)",
    )
    export_parser.set_defaults(func=cmd_export)

    import_parser = month_subparsers.add_parser(
        "import", help="Import a JSON budget file into the month"
    )
    import_parser.add_argument("file", help="Path to the JSON budget file")
    import_parser.set_defaults(func=cmd_import)
