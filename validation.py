"""
Validation of records before they are stored.

The computations trust their input; everything here runs first, where
expenses and settlements are created or edited.
"""
from __future__ import annotations
from fractions import Fraction
from typing import List

from models import SPLIT_PERCENTAGE, SPLIT_SHARES, SPLIT_TYPES, Expense, Group, Settlement, SplitDetail
from utils import exact_value

PERCENT_TOLERANCE = Fraction(1, 100)
MAX_DESCRIPTION = 200


class ValidationError(ValueError):
    """Invalid record; ``code`` is a short machine-readable reason"""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


def convert_to_split_details(member_ids: List[str]) -> List[SplitDetail]:
    """Equal split over member ids"""
    return [SplitDetail(member_id=m, value=1) for m in member_ids]


def _check_amount(amount) -> None:
    """Amounts are positive integer cents"""
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise ValidationError("invalid_amount", f"Amount must be a positive number of cents, got {amount!r}")


def validate_split_details(split_type: str, details: List[SplitDetail]) -> None:
    """Raise ValidationError unless the split can be allocated as entered"""
    if split_type not in SPLIT_TYPES:
        raise ValidationError("invalid_split_type", f"Unknown split type: {split_type!r}")
    if not details:
        raise ValidationError("empty_split", "At least one member must share the expense")

    ids = [d.member_id for d in details]
    if len(set(ids)) != len(ids):
        raise ValidationError("duplicate_member", "A member appears more than once in the split")
    values = [exact_value(d.value) for d in details]
    if any(v < 0 for v in values):
        raise ValidationError("negative_value", "Split values must not be negative")

    if split_type == SPLIT_SHARES and sum(values) == 0:
        raise ValidationError("zero_total_weight", "At least one member needs a share greater than 0")
    if split_type == SPLIT_PERCENTAGE:
        total = sum(values)
        if abs(total - 100) > PERCENT_TOLERANCE:
            raise ValidationError("percentage_total", f"Percentages must add up to 100, got {float(total):g}")


def validate_expense(expense: Expense, group: Group) -> None:
    """Raise ValidationError unless the expense can be stored in the group"""
    _check_amount(expense.amount)
    desc = expense.description.strip()
    if not desc or len(desc) > MAX_DESCRIPTION:
        raise ValidationError("invalid_description", f"Description must be 1-{MAX_DESCRIPTION} characters")
    if expense.paid_by_member_id not in group.member_ids:
        raise ValidationError("payer_not_in_group", "Payer must be a member of the group")

    validate_split_details(expense.split_type, expense.split_details)
    outsiders = [d.member_id for d in expense.split_details if d.member_id not in group.member_ids]
    if outsiders:
        raise ValidationError("split_member_not_in_group", "All split members must be members of the group")


def validate_settlement(settlement: Settlement, group: Group) -> None:
    """Raise ValidationError unless the settlement can be stored in the group"""
    _check_amount(settlement.amount)
    if settlement.from_member_id == settlement.to_member_id:
        raise ValidationError("self_settlement", "A member cannot settle with themselves")
    for member_id in (settlement.from_member_id, settlement.to_member_id):
        if member_id not in group.member_ids:
            raise ValidationError("member_not_in_group", f"Member {member_id} is not in the group")
