"""
Excel export functionality for SplitLedger
"""
from __future__ import annotations
from datetime import date
from typing import Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from models import Ledger
from computations import calculate_shares, compute_group_balances, compute_summary, filter_by_date
from utils import cents_to_dollars

MONEY_FORMAT = "0.00"
MAX_TITLE = 31


def _style_header(ws, row=1):
    """Apply header styling to worksheet row"""
    thin = Side(style="thin", color="A0A0A0")
    for cell in ws[row]:
        cell.font = Font(bold=True, color="FFFFFF")
        cell.fill = PatternFill("solid", fgColor="4F81BD")
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.border = Border(left=thin, right=thin, top=thin, bottom=thin)
    ws.freeze_panes = f"A{row + 1}"


def _money_columns(ws, first_col, last_col, first_row=2):
    for r in range(first_row, ws.max_row + 1):
        for c in range(first_col, last_col + 1):
            ws.cell(r, c).number_format = MONEY_FORMAT


def _autosize_columns(ws, min_width=10, max_width=45):
    """Size each column to its longest value"""
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        longest = max((len(str(c.value)) for c in ws[letter] if c.value is not None), default=0)
        ws.column_dimensions[letter].width = max(min_width, min(max_width, longest + 2))


def _sheet_title(wb, name: str) -> str:
    for ch in '[]:*?/\\':
        name = name.replace(ch, "_")
    title = f"{name}_paid"[:MAX_TITLE]
    n = 2
    while title in wb.sheetnames:
        suffix = f"_{n}"
        title = f"{name}_paid"[:MAX_TITLE - len(suffix)] + suffix
        n += 1
    return title


def export_excel(
    ledger: Ledger,
    filepath: str,
    start: Optional[date] = None,
    end: Optional[date] = None
) -> None:
    """
    Export ledger to Excel file with multiple sheets:
    - One sheet per payer, each expense with every member's share
    - Summary sheet
    - Transfers sheet
    Amounts are written in dollars.
    """
    wb = Workbook()
    wb.remove(wb.active)

    members = ledger.members
    exps = filter_by_date(ledger.expenses, start, end)

    payers = [m for m in members if any(e.paid_by_member_id == m.id for e in exps)]
    for payer in payers:
        ws = wb.create_sheet(_sheet_title(wb, payer.name))
        ws.append(["date", "description", "split", "amount"] + [m.name for m in members])
        _style_header(ws)

        payer_exps = sorted((e for e in exps if e.paid_by_member_id == payer.id), key=lambda e: e.created_at)
        for e in payer_exps:
            shares = calculate_shares(e.amount, e.split_type, e.split_details)
            ws.append(
                [e.created_at[:10], e.description, e.split_type, cents_to_dollars(e.amount)]
                + [cents_to_dollars(shares.get(m.id, 0)) for m in members]
            )

        ws.append(["TOTALS"])
        trow = ws.max_row
        ws.cell(trow, 1).font = Font(bold=True)
        if trow > 2:
            for col in range(4, 5 + len(members)):
                letter = get_column_letter(col)
                ws.cell(trow, col).value = f"=SUM({letter}2:{letter}{trow - 1})"

        _money_columns(ws, 4, 4 + len(members))
        _autosize_columns(ws)

    ws = wb.create_sheet("Summary")
    ws.append(["Member", "Paid", "Owed", "Settlements Sent", "Settlements Received", "Net"])
    _style_header(ws)
    summary = compute_summary(ledger, start, end)
    for m in members:
        s = summary[m.id]
        ws.append([m.name] + [cents_to_dollars(s[k]) for k in ("paid", "owed", "sent", "received", "net")])
    _money_columns(ws, 2, 6)
    _autosize_columns(ws)

    ws = wb.create_sheet("Transfers")
    ws.append(["From (Debtor)", "To (Creditor)", "Amount"])
    _style_header(ws)
    for d in compute_group_balances(ledger, start, end).simplified_debts:
        ws.append([d.from_member_name, d.to_member_name, cents_to_dollars(d.amount)])
    _money_columns(ws, 3, 3)
    _autosize_columns(ws)

    wb.save(filepath)
