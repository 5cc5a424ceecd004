"""
Data models for SplitLedger application
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Union

Number = Union[int, float]

SPLIT_EQUAL = "equal"
SPLIT_SHARES = "shares"
SPLIT_PERCENTAGE = "percentage"
SPLIT_TYPES = (SPLIT_EQUAL, SPLIT_SHARES, SPLIT_PERCENTAGE)


@dataclass
class Member:
    """Person taking part in a group"""
    id: str
    name: str
    created_at: str = ""


@dataclass
class Group:
    """Group of members sharing expenses"""
    id: str
    name: str
    member_ids: List[str] = field(default_factory=list)
    created_at: str = ""


@dataclass(frozen=True)
class SplitDetail:
    """One member's entry in an expense split"""
    member_id: str
    value: Number = 1  # ignored for equal, weight for shares, points for percentage


@dataclass(frozen=True)
class Expense:
    """Single expense, amounts in cents"""
    id: str
    group_id: str
    description: str
    amount: int
    paid_by_member_id: str
    split_type: str
    split_details: List[SplitDetail]
    created_at: str = ""


@dataclass(frozen=True)
class Settlement:
    """Payment from one member to another, amount in cents"""
    id: str
    group_id: str
    from_member_id: str
    to_member_id: str
    amount: int
    created_at: str = ""


@dataclass
class MemberBalance:
    member_id: str
    member_name: str
    net_balance: int  # positive -> is owed; negative -> owes


@dataclass
class SimplifiedDebt:
    from_member_id: str
    from_member_name: str
    to_member_id: str
    to_member_name: str
    amount: int


@dataclass
class GroupBalances:
    """Result of a balance query for one group"""
    group_id: str
    group_name: str
    member_balances: List[MemberBalance]
    simplified_debts: List[SimplifiedDebt]


@dataclass
class Ledger:
    """Snapshot of one group with all its records"""
    group: Group
    members: List[Member]
    expenses: List[Expense]
    settlements: List[Settlement]
    version: int = 2
