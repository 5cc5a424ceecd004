from datetime import date

from openpyxl import load_workbook

from excel_export import export_excel


def test_export_sheets(tmp_path, ledger):
    path = str(tmp_path / "report.xlsx")
    export_excel(ledger, path)
    wb = load_workbook(path)
    assert wb.sheetnames == ["Alice_paid", "Bob_paid", "Summary", "Transfers"]

    alice = wb["Alice_paid"]
    assert [c.value for c in alice[1]] == ["date", "description", "split", "amount", "Alice", "Bob", "Charlie"]
    assert [c.value for c in alice[2]] == ["2024-01-01", "Dinner", "equal", 60, 20, 20, 20]
    assert alice["A3"].value == "TOTALS"
    assert alice["D3"].value == "=SUM(D2:D2)"

    summary = wb["Summary"]
    assert [c.value for c in summary[2]] == ["Alice", 60, 25, 0, 20, 15]
    assert [c.value for c in summary[4]] == ["Charlie", 0, 20, 20, 0, 0]

    transfers = wb["Transfers"]
    assert [[c.value for c in row] for row in transfers.iter_rows(min_row=2)] == [["Bob", "Alice", 15]]


def test_export_date_range(tmp_path, ledger):
    path = str(tmp_path / "report.xlsx")
    export_excel(ledger, path, end=date(2024, 1, 31))
    wb = load_workbook(path)
    assert "Bob_paid" not in wb.sheetnames
    assert [[c.value for c in row] for row in wb["Transfers"].iter_rows(min_row=2)] == [["Bob", "Alice", 20]]


def test_export_empty_ledger(tmp_path, ledger):
    ledger.expenses = []
    ledger.settlements = []
    path = str(tmp_path / "report.xlsx")
    export_excel(ledger, path)
    wb = load_workbook(path)
    assert wb.sheetnames == ["Summary", "Transfers"]
    assert wb["Transfers"].max_row == 1
