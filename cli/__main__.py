#!/usr/bin/env python3
"""
Budgetbook CLI - Monthly budget ledger from the command line.

Usage:
    python -m cli [--month YYYY-MM] <command> <subcommand> [options]

Commands:
    month        Show, navigate, import and export months
    transactions Add, list and delete transactions
    categories   Manage expense and income categories
    quick-adds   Manage quick add templates
    migrate      Database migrations

Examples:
    python -m cli month show
    python -m cli --month 2024-01 transactions add --category Rent --amount 1184
    python -m cli transactions list --type income --sort amount
    python -m cli quick-adds apply expense 1
    python -m cli month export -o ~/Downloads
"""

import sys
import argparse
from cli import categories, migrate, months, quick_adds, transactions
from config import load_config
from services.base import Services
from db.manager import DatabaseManager, apply_pending_migrations
from logger import setup_logging

LEDGER_COMMANDS = ("month", "transactions", "categories", "quick-adds")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with every command registered."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Budgetbook - Monthly budget ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--month",
        help="Month to work on (YYYY-MM). Defaults to the last month used.",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    months.setup_parser(subparsers)
    transactions.setup_parser(subparsers)
    categories.setup_parser(subparsers)
    quick_adds.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    return parser


def main():
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            db_manager = DatabaseManager(config)

            if args.command in LEDGER_COMMANDS:
                apply_pending_migrations(db_manager)
                services = Services(config, db_manager=db_manager)
                services.ledger.open_month(args.month)
                args.func(args, services)
            elif args.command == "migrate":
                args.func(args, db_manager)
            else:
                args.func(args)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
