"""
Configuration and data loading/saving for SplitLedger
"""
from __future__ import annotations
import json
import logging
import os
import uuid
from dataclasses import asdict

from models import SPLIT_EQUAL, Expense, Group, Ledger, Member, Settlement, SplitDetail
from utils import app_dir
from validation import convert_to_split_details

logger = logging.getLogger(__name__)

LEDGER_FILENAME = "ledger.json"


def default_ledger_path() -> str:
    """Ledger file inside the application data directory"""
    return os.path.join(app_dir(), LEDGER_FILENAME)


def get_default_ledger() -> Ledger:
    """Create an empty ledger for a new group"""
    return Ledger(
        group=Group(id=str(uuid.uuid4()), name="My Group"),
        members=[],
        expenses=[],
        settlements=[],
    )


def migrate_expense(raw: dict) -> dict:
    """
    Bring an expense record to the current shape.
    Old records listed split_between_member_ids and were always split evenly.
    """
    if raw.get("split_type") and raw.get("split_details") is not None:
        return raw
    if "split_between_member_ids" in raw:
        migrated = {k: v for k, v in raw.items() if k != "split_between_member_ids"}
        migrated["split_type"] = SPLIT_EQUAL
        migrated["split_details"] = [asdict(d) for d in convert_to_split_details(raw["split_between_member_ids"])]
        logger.info("Migrated legacy expense %s to equal split", raw.get("id"))
        return migrated
    return raw


def expense_from_dict(d: dict) -> Expense:
    """Build an Expense from its JSON form, migrating legacy records"""
    d = migrate_expense(d)
    details = [SplitDetail(**s) for s in d["split_details"]]
    return Expense(**{**d, "split_details": details})


def ledger_to_dict(ledger: Ledger) -> dict:
    """Convert Ledger object to dictionary for JSON serialization"""
    return {
        "version": ledger.version,
        "group": asdict(ledger.group),
        "members": [asdict(m) for m in ledger.members],
        "expenses": [asdict(e) for e in ledger.expenses],
        "settlements": [asdict(s) for s in ledger.settlements],
    }


def dict_to_ledger(d: dict) -> Ledger:
    """Convert dictionary from JSON to Ledger object"""
    members = [Member(**m) for m in d.get("members", [])]
    group = Group(**d["group"]) if "group" in d else Group(id=str(uuid.uuid4()), name="My Group")
    if not group.member_ids:
        group.member_ids = [m.id for m in members]

    return Ledger(
        version=2,
        group=group,
        members=members,
        expenses=[expense_from_dict(e) for e in d.get("expenses", [])],
        settlements=[Settlement(**s) for s in d.get("settlements", [])],
    )


def load_ledger(path: str) -> Ledger:
    """Load ledger from JSON file, or a new empty ledger if the file does not exist"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("No ledger at %s, starting empty", path)
        return get_default_ledger()
    ledger = dict_to_ledger(data)
    logger.info(
        "Loaded %s: %d members, %d expenses, %d settlements",
        path, len(ledger.members), len(ledger.expenses), len(ledger.settlements),
    )
    return ledger


def save_ledger(ledger: Ledger, path: str) -> None:
    """Write ledger to JSON file"""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(ledger_to_dict(ledger), f, ensure_ascii=False, indent=2)
    logger.info("Saved ledger to %s", path)
