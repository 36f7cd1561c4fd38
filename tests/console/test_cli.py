from __future__ import annotations

import run
from src.console.controller import EmployeeConsole

from test_controller import FakeEmployeeApi, existing


def answers(*values):
    it = iter(values)
    return lambda prompt: next(it, "")


def test_list_marks_search_hits(capsys):
    console = EmployeeConsole(FakeEmployeeApi([existing(1, name="Nusrat"), existing(2, name="Karim")]))

    assert run.main(["list", "--search", "kar"], console=console) == 0

    out = capsys.readouterr().out
    assert "[Kar]im" in out
    assert "Nusrat" not in out
    assert "Page 1 of 1" in out


def test_delete_asks_before_deleting(capsys):
    api = FakeEmployeeApi([existing(1)])

    assert run.main(["delete", "1"], console=EmployeeConsole(api), ask=answers("n")) == 0
    assert len(api.records) == 1
    assert "Cancelled." in capsys.readouterr().out

    assert run.main(["delete", "1"], console=EmployeeConsole(api), ask=answers("y")) == 0
    assert api.records == []


def test_edit_prompts_and_saves(capsys):
    api = FakeEmployeeApi([existing(1)])

    # empty answers keep the current values; only the name changes
    code = run.main(["edit", "1"], console=EmployeeConsole(api), ask=answers("", "", "", "Nusrat Jahan"))

    assert code == 0
    assert api.records[0]["name"] == "Nusrat Jahan"
    assert "Employee updated successfully!" in capsys.readouterr().out


def test_add_picks_select_options_by_number(capsys):
    api = FakeEmployeeApi()
    replies = [
        "20240009",      # Employee ID
        "2",             # Type -> Contract
        "0009",          # ID Number
        "1",             # Title -> Mr.
        "Tanvir Ahmed",  # Full Name
        "4",             # Designation -> Intern
        "1",             # Directory -> DIT
        "2",             # Division -> SDD
        "2023-07-01",    # Date of Joining
        "",              # Date of Present Post
        "",              # Qualification
        "",              # Discipline
        "1",             # Sex -> Male
        "",              # Blood Group
        "0191234567",    # Phone
        "Dhaka",         # Address
        "Khulna",        # Permanent Address
        "1999-09-09",    # Date of Birth
    ]

    assert run.main(["add"], console=EmployeeConsole(api), ask=answers(*replies)) == 0

    row = api.records[0]
    assert row["type"] == "Contract"
    assert row["designation"] == "Intern"
    assert row["directory"] == "DIT"
    assert row["division"] == "SDD"
    assert "Employee added successfully!" in capsys.readouterr().out


def test_export_with_no_records_still_writes_both_files(tmp_path, capsys):
    console = EmployeeConsole(FakeEmployeeApi())

    assert run.main(["export", "pdf", "--out", str(tmp_path)], console=console) == 0
    assert run.main(["export", "xlsx", "--out", str(tmp_path)], console=console) == 0

    assert (tmp_path / "Employee_Report.pdf").read_bytes().startswith(b"%PDF")
    assert (tmp_path / "EmployeeData.xlsx").exists()
    assert "Report generated" in capsys.readouterr().out
