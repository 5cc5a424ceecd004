"""
SplitLedger
- Settle a group's shared expenses: who paid what, how it was split, who already paid whom.
- Prints each member's balance and a short list of payments that settles everyone.

Run:
  python split_ledger.py path/to/ledger.json [--excel report.xlsx] [--csv payments.csv]

Dependencies:
  pip install openpyxl
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from computations import compute_group_balances
from config import default_ledger_path, load_ledger
from csv_handler import export_debts_to_csv
from excel_export import export_excel
from utils import format_cents, parse_date

logger = logging.getLogger("split_ledger")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="split-ledger", description="Settle a shared-expense ledger")
    parser.add_argument("ledger", nargs="?", help="ledger JSON file (default: ledger in the data directory)")
    parser.add_argument("--from", dest="start", type=parse_date, help="first day to include, YYYY-MM-DD")
    parser.add_argument("--to", dest="end", type=parse_date, help="last day to include, YYYY-MM-DD")
    parser.add_argument("--excel", help="write an Excel report to this path")
    parser.add_argument("--csv", help="write suggested payments as CSV to this path")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application"""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    path = args.ledger or default_ledger_path()
    try:
        ledger = load_ledger(path)
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
        # json.JSONDecodeError is a ValueError
        logger.error("Cannot read ledger %s: %s", path, exc)
        print(f"error: cannot read ledger {path}: {exc}", file=sys.stderr)
        return 1

    result = compute_group_balances(ledger, args.start, args.end)

    print(f"Balances for {result.group_name}")
    for b in result.member_balances:
        status = "is owed" if b.net_balance > 0 else "owes" if b.net_balance < 0 else "is settled"
        print(f"  {b.member_name:<20} {format_cents(b.net_balance):>12}  {status}")

    print("Suggested payments")
    if not result.simplified_debts:
        print("  none, everyone is settled up")
    for d in result.simplified_debts:
        print(f"  {d.from_member_name} pays {d.to_member_name} {format_cents(d.amount)}")

    if args.excel:
        export_excel(ledger, args.excel, args.start, args.end)
        logger.info("Wrote Excel report to %s", args.excel)
    if args.csv:
        export_debts_to_csv(result.simplified_debts, args.csv)
        logger.info("Wrote payments to %s", args.csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
