"""
CSV export and import functionality for SplitLedger
"""
from __future__ import annotations
import csv
from typing import List

from models import Expense, SimplifiedDebt, SplitDetail

EXPENSE_COLUMNS = [
    'id', 'group_id', 'created_at', 'description', 'amount',
    'paid_by_member_id', 'split_type', 'split_details',
]


def _format_details(details: List[SplitDetail]) -> str:
    return ';'.join(f"{d.member_id}:{d.value}" for d in details)


def _parse_value(s: str):
    s = s.strip()
    try:
        return int(s)
    except ValueError:
        return float(s)


def _parse_details(s: str) -> List[SplitDetail]:
    details = []
    for pair in s.split(';'):
        if ':' in pair:
            k, v = pair.rsplit(':', 1)
            details.append(SplitDetail(member_id=k.strip(), value=_parse_value(v)))
    return details


def export_expenses_to_csv(expenses: List[Expense], filepath: str) -> None:
    """
    Export expenses list to CSV file
    Amounts are in cents; split details are written as member:value pairs joined by ';'
    """
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(EXPENSE_COLUMNS)
        for e in expenses:
            writer.writerow([
                e.id,
                e.group_id,
                e.created_at,
                e.description,
                e.amount,
                e.paid_by_member_id,
                e.split_type,
                _format_details(e.split_details),
            ])


def import_expenses_from_csv(filepath: str) -> List[Expense]:
    """
    Import expenses list from CSV file
    Returns list of Expense objects
    """
    expenses = []
    with open(filepath, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for row in reader:
            expenses.append(Expense(
                id=row['id'],
                group_id=row['group_id'],
                description=row['description'],
                amount=int(row['amount']),
                paid_by_member_id=row['paid_by_member_id'],
                split_type=row['split_type'],
                split_details=_parse_details(row['split_details'] or ''),
                created_at=row.get('created_at') or '',
            ))
    return expenses


def export_debts_to_csv(debts: List[SimplifiedDebt], filepath: str) -> None:
    """Export suggested payments: from, to, amount in cents"""
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(['from_member_id', 'from_member_name', 'to_member_id', 'to_member_name', 'amount'])
        for d in debts:
            writer.writerow([d.from_member_id, d.from_member_name, d.to_member_id, d.to_member_name, d.amount])
