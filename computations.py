"""
Business logic and computations for SplitLedger.

All amounts are integers in cents. Three stages, all pure:
  calculate_shares   -> split one expense into exact integer shares
  calculate_balances -> net position of each member over a group's records
  simplify_debts     -> small set of payments that zeroes every balance
"""
from __future__ import annotations
import logging
from datetime import date
from fractions import Fraction
from typing import Dict, Iterable, List, Optional, TypeVar

from models import (
    SPLIT_EQUAL,
    SPLIT_PERCENTAGE,
    SPLIT_SHARES,
    Expense,
    GroupBalances,
    Ledger,
    Member,
    MemberBalance,
    Settlement,
    SimplifiedDebt,
    SplitDetail,
)
from utils import exact_value, parse_date

logger = logging.getLogger(__name__)

R = TypeVar("R", Expense, Settlement)


def _equal_shares(amount: int, split_details: List[SplitDetail]) -> Dict[str, int]:
    base, remainder = divmod(amount, len(split_details))
    shares: Dict[str, int] = {}
    for i, d in enumerate(split_details):
        shares[d.member_id] = shares.get(d.member_id, 0) + base + (1 if i < remainder else 0)
    return shares


def _weighted_shares(amount: int, split_details: List[SplitDetail], total: Fraction) -> Dict[str, int]:
    """Floor every entry but the last; the last entry absorbs the remainder."""
    shares: Dict[str, int] = {}
    distributed = 0
    last = len(split_details) - 1
    for i, d in enumerate(split_details):
        if i < last:
            share = (amount * exact_value(d.value)) // total
        else:
            share = amount - distributed
        shares[d.member_id] = shares.get(d.member_id, 0) + share
        distributed += share
    return shares


def calculate_shares(amount: int, split_type: str, split_details: List[SplitDetail]) -> Dict[str, int]:
    """
    Compute each member's share of an expense.

    Shares always sum to ``amount`` exactly. The order of ``split_details``
    decides who absorbs rounding: the first entries for ``equal``, the last
    entry for ``shares`` and ``percentage``.
    """
    if split_type == SPLIT_EQUAL:
        return _equal_shares(amount, split_details)
    if split_type == SPLIT_SHARES:
        total = sum((exact_value(d.value) for d in split_details), Fraction(0))
        if total == 0:
            logger.warning("Total share weight is 0 for %d members; splitting equally", len(split_details))
            return _equal_shares(amount, split_details)
        return _weighted_shares(amount, split_details, total)
    if split_type == SPLIT_PERCENTAGE:
        return _weighted_shares(amount, split_details, Fraction(100))
    raise ValueError(f"Unknown split type: {split_type!r}")


def calculate_balances(
    expenses: Iterable[Expense],
    settlements: Iterable[Settlement],
    members: List[Member],
) -> List[MemberBalance]:
    """
    Net balance of each member: paid - owed + settlements sent - settlements received.
    Positive -> member is owed money; negative -> member owes money.
    Output follows the order of ``members``; ids not in ``members`` are tracked but not reported.
    """
    balances = {m.id: 0 for m in members}

    def add(member_id: str, delta: int) -> None:
        balances[member_id] = balances.get(member_id, 0) + delta

    for e in expenses:
        add(e.paid_by_member_id, e.amount)
        for member_id, share in calculate_shares(e.amount, e.split_type, e.split_details).items():
            add(member_id, -share)

    for s in settlements:
        add(s.from_member_id, s.amount)
        add(s.to_member_id, -s.amount)

    unknown = len(balances) - len({m.id for m in members})
    if unknown:
        logger.debug("Ignoring %d member ids not in the member list", unknown)

    return [MemberBalance(m.id, m.name, balances[m.id]) for m in members]


def simplify_debts(balances: List[MemberBalance]) -> List[SimplifiedDebt]:
    """
    Greedy settlement: largest debtor pays largest creditor, as much as possible.
    Produces at most creditors + debtors - 1 payments.
    Balances must sum to zero; calculate_balances guarantees this.
    """
    creditors = [[b, b.net_balance] for b in balances if b.net_balance > 0]
    debtors = [[b, -b.net_balance] for b in balances if b.net_balance < 0]
    creditors.sort(key=lambda x: x[1], reverse=True)
    debtors.sort(key=lambda x: x[1], reverse=True)

    debts = []
    i = j = 0
    while i < len(debtors) and j < len(creditors):
        debtor, creditor = debtors[i], creditors[j]
        x = min(debtor[1], creditor[1])
        if x > 0:
            debts.append(SimplifiedDebt(
                from_member_id=debtor[0].member_id,
                from_member_name=debtor[0].member_name,
                to_member_id=creditor[0].member_id,
                to_member_name=creditor[0].member_name,
                amount=x,
            ))
        debtor[1] -= x
        creditor[1] -= x
        if debtor[1] == 0:
            i += 1
        if creditor[1] == 0:
            j += 1

    logger.debug("Simplified %d balances into %d payments", len(balances), len(debts))
    return debts


def verify_simplified_debts(balances: List[MemberBalance], debts: List[SimplifiedDebt]) -> bool:
    """Check that paying every debt brings every balance to exactly zero"""
    remaining = {b.member_id: b.net_balance for b in balances}
    for d in debts:
        remaining[d.from_member_id] = remaining.get(d.from_member_id, 0) + d.amount
        remaining[d.to_member_id] = remaining.get(d.to_member_id, 0) - d.amount
    return all(v == 0 for v in remaining.values())


def total_paid_by_member(member_id: str, expenses: Iterable[Expense]) -> int:
    """Total amount a member fronted"""
    return sum(e.amount for e in expenses if e.paid_by_member_id == member_id)


def total_owed_by_member(member_id: str, expenses: Iterable[Expense]) -> int:
    """Total of a member's shares across expenses"""
    total = 0
    for e in expenses:
        if any(d.member_id == member_id for d in e.split_details):
            total += calculate_shares(e.amount, e.split_type, e.split_details)[member_id]
    return total


def filter_by_date(records: Iterable[R], start: Optional[date], end: Optional[date]) -> List[R]:
    """Filter expenses or settlements by created_at date range (inclusive)"""
    if start is None and end is None:
        return list(records)
    out = []
    for r in records:
        if r.created_at:
            d = parse_date(r.created_at)
            if start and d < start:
                continue
            if end and d > end:
                continue
        out.append(r)
    return out


def compute_summary(
    ledger: Ledger,
    start: Optional[date] = None,
    end: Optional[date] = None
) -> Dict[str, dict]:
    """
    Compute summary figures for each member.
    Returns dict mapping member id -> {paid, owed, sent, received, net}
    """
    exps = filter_by_date(ledger.expenses, start, end)
    sets = filter_by_date(ledger.settlements, start, end)

    summary = {}
    for m in ledger.members:
        paid = total_paid_by_member(m.id, exps)
        owed = total_owed_by_member(m.id, exps)
        sent = sum(s.amount for s in sets if s.from_member_id == m.id)
        received = sum(s.amount for s in sets if s.to_member_id == m.id)
        summary[m.id] = {
            "paid": paid,
            "owed": owed,
            "sent": sent,
            "received": received,
            "net": paid - owed + sent - received,
        }
    return summary


def compute_group_balances(
    ledger: Ledger,
    start: Optional[date] = None,
    end: Optional[date] = None
) -> GroupBalances:
    """Balances and suggested payments for the ledger's group"""
    balances = calculate_balances(
        filter_by_date(ledger.expenses, start, end),
        filter_by_date(ledger.settlements, start, end),
        ledger.members,
    )
    return GroupBalances(
        group_id=ledger.group.id,
        group_name=ledger.group.name,
        member_balances=balances,
        simplified_debts=simplify_debts(balances),
    )
