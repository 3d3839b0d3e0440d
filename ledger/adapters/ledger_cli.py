"""Command-line adapter for the ledger.

This module parses arguments, wires the use cases through the composition
root, and prints results. Every invocation initializes the store first so a
fresh ledger file is usable right away.
"""

import argparse
import sys

from ledger.domain.errors import (
    InvalidAmountError,
    InvalidRangeError,
    LedgerValidationError,
    StorageError,
)
from ledger.domain.models import EntryKind
from ledger.domain.services import current_year_month
from ledger.infrastructure.container import (
    build_add_entry_use_case,
    build_category_totals_use_case,
    build_database_adapter,
    build_delete_entry_use_case,
    build_entry_repository,
    build_export_entries_use_case,
    build_initialize_store_use_case,
    build_list_entries_use_case,
    build_month_summary_use_case,
    build_range_summary_use_case,
)
from ledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from ledger.infrastructure.settings import LedgerSettings


EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_STORAGE_FAILURE = 2


def _parse_amount(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidAmountError(f"Invalid amount: {raw}") from exc


def _add_period_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--month", help="Only entries of this month (YYYY-MM)")
    parser.add_argument(
        "--from",
        dest="start_month",
        help="First month of an inclusive range (YYYY-MM)",
    )
    parser.add_argument(
        "--to",
        dest="end_month",
        help="Last month of an inclusive range (YYYY-MM)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``ledger`` command."""
    parser = argparse.ArgumentParser(
        prog="ledger",
        description="Record expenses and income and report on them.",
    )
    parser.add_argument(
        "--db",
        help="Ledger database file (defaults to LEDGER_DB_PATH or ledger.db)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="Record an expense or income")
    add.add_argument("kind", help="expense or income")
    add.add_argument("amount", help="Positive integer amount (e.g. cents)")
    add.add_argument("category")
    add.add_argument("note", nargs="*", help="Optional note")

    list_cmd = commands.add_parser("list", help="List entries, newest first")
    _add_period_options(list_cmd)

    delete = commands.add_parser("delete", help="Delete an entry by id")
    delete.add_argument("id", type=int)

    report = commands.add_parser("report", help="Summaries and breakdowns")
    reports = report.add_subparsers(dest="report", required=True)

    month = reports.add_parser("month", help="Income/expense for a month")
    month.add_argument("month", nargs="?", help="YYYY-MM (default: current)")

    range_cmd = reports.add_parser("range", help="Income/expense over months")
    range_cmd.add_argument("start")
    range_cmd.add_argument("end")

    category = reports.add_parser("category", help="Totals per category")
    category.add_argument(
        "month",
        nargs="?",
        help="YYYY-MM (default: current)",
    )
    category.add_argument(
        "--to",
        dest="end_month",
        help="Extend the breakdown to an inclusive range ending here",
    )
    which = category.add_mutually_exclusive_group()
    which.add_argument(
        "--expense",
        dest="kinds",
        action="store_const",
        const=(EntryKind.EXPENSE,),
    )
    which.add_argument(
        "--income",
        dest="kinds",
        action="store_const",
        const=(EntryKind.INCOME,),
    )
    which.add_argument(
        "--both",
        dest="kinds",
        action="store_const",
        const=(EntryKind.EXPENSE, EntryKind.INCOME),
    )
    category.set_defaults(kinds=(EntryKind.EXPENSE,))

    export = commands.add_parser("export", help="Export entries to CSV")
    export.add_argument("path")
    _add_period_options(export)
    return parser


def _resolve_period(args) -> tuple[str | None, str | None]:
    if args.month and (args.start_month or args.end_month):
        raise InvalidRangeError("Use either --month or --from/--to, not both")
    if args.month:
        return args.month, None
    if args.start_month or args.end_month:
        start = args.start_month or args.end_month
        end = args.end_month or args.start_month
        return start, end
    return None, None


def _run_add(args, repository) -> int:
    note = " ".join(args.note) if args.note else None
    entry = build_add_entry_use_case(repository).execute(
        args.kind,
        _parse_amount(args.amount),
        args.category,
        note,
    )
    print(f"Entry added successfully (id={entry.id}).")
    return EXIT_OK


def _run_list(args, repository) -> int:
    use_case = build_list_entries_use_case(repository)
    start, end = _resolve_period(args)
    if start is None:
        entries = use_case.execute()
    elif end is None:
        entries = use_case.execute_month(start)
    else:
        entries = use_case.execute_range(start, end)
    for entry in entries:
        print(
            f"{entry.created_at}: {entry.kind.label.capitalize()} "
            f"{entry.amount} {entry.category} {entry.note or ''} [{entry.id}]"
        )
    return EXIT_OK


def _run_delete(args, repository) -> int:
    removed = build_delete_entry_use_case(repository).execute(args.id)
    if removed:
        print("Entry deleted successfully.")
    else:
        print(f"No entry found with ID: {args.id}")
    return EXIT_OK


def _print_totals(title: str, income: int, expense: int, balance: int) -> None:
    print(f"== Summary {title} ==")
    print(f"Income : {income}")
    print(f"Expense: {expense}")
    print(f"Balance: {balance}")


def _run_report(args, repository) -> int:
    if args.report == "month":
        summary = build_month_summary_use_case(repository).execute(
            args.month or current_year_month()
        )
        _print_totals(
            summary.month,
            summary.income,
            summary.expense,
            summary.balance,
        )
        return EXIT_OK

    if args.report == "range":
        summary = build_range_summary_use_case(repository).execute(
            args.start,
            args.end,
        )
        _print_totals(
            f"{summary.start_month}..{summary.end_month}",
            summary.income,
            summary.expense,
            summary.balance,
        )
        return EXIT_OK

    use_case = build_category_totals_use_case(repository)
    start = args.month or current_year_month()
    period = f"{start}..{args.end_month}" if args.end_month else start
    for index, kind in enumerate(args.kinds):
        if args.end_month:
            rows = use_case.execute_range(start, args.end_month, kind)
        else:
            rows = use_case.execute(start, kind)
        if index:
            print()
        print(f"== Category Totals ({kind.label.capitalize()}) {period} ==")
        if not rows:
            print("(no data)")
        for row in rows:
            print(f"{row.category:12} {row.total}")
    return EXIT_OK


def _run_export(args, repository) -> int:
    start, end = _resolve_period(args)
    count = build_export_entries_use_case(repository).execute(
        args.path,
        start_month=start,
        end_month=end,
    )
    print(f"Exported {count} entries to {args.path}")
    return EXIT_OK


_HANDLERS = {
    "add": _run_add,
    "list": _run_list,
    "delete": _run_delete,
    "report": _run_report,
    "export": _run_export,
}


def main(argv: list[str] | None = None) -> int:
    """Run one ledger command.

    Args:
        argv: Optional argument list (defaults to ``sys.argv[1:]``).

    Returns:
        int: Process exit code.
    """
    args = build_parser().parse_args(argv)
    logger = get_app_logger()
    raw_args = argv if argv is not None else sys.argv[1:]
    get_usage_logger().info(f"command={args.command} argv={raw_args}")

    if args.db:
        settings = LedgerSettings.from_path(args.db)
    else:
        settings = LedgerSettings.from_env()
    db_adapter = build_database_adapter(settings)
    repository = build_entry_repository(db_adapter)

    try:
        build_initialize_store_use_case(repository).execute()
        return _HANDLERS[args.command](args, repository)
    except LedgerValidationError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID_INPUT
    except StorageError as exc:
        logger.error(f"Command {args.command} failed: {exc}")
        print(f"Storage error: {exc}", file=sys.stderr)
        return EXIT_STORAGE_FAILURE
    finally:
        db_adapter.dispose()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
