from __future__ import annotations

from src.console.listing import clamp_page, filter_records, highlight, page_count, paginate

RECORDS = [
    {"id": 1, "empId": "20240001", "name": "Rahim Uddin", "designation": "Director", "division": "SDD"},
    {"id": 2, "empId": "20240002", "name": "Karim", "designation": "Intern", "division": "Development"},
    {"id": 3, "empId": "30240003", "name": "Nusrat", "designation": "Software Engineer", "division": "CND"},
]


def test_empty_search_keeps_everything_in_order():
    assert filter_records(RECORDS, "") == RECORDS


def test_search_is_case_insensitive_over_name_id_designation_division():
    assert [r["id"] for r in filter_records(RECORDS, "rAhIm")] == [1]
    assert [r["id"] for r in filter_records(RECORDS, "2024")] == [1, 2]
    assert [r["id"] for r in filter_records(RECORDS, "intern")] == [2]
    assert [r["id"] for r in filter_records(RECORDS, "dev")] == [2]


def test_search_ignores_other_fields():
    records = [{"id": 9, "name": "A", "phone": "0171234567"}]
    assert filter_records(records, "0171") == []


def test_highlight_marks_every_occurrence():
    assert highlight("Ana and ANA", "ana") == [("Ana", True), (" and ", False), ("ANA", True)]


def test_highlight_without_term():
    assert highlight("Karim", "") == [("Karim", False)]
    assert highlight(None, "x") == []


def test_highlight_escapes_regex_characters():
    assert highlight("Mr. X", ".") == [("Mr", False), (".", True), (" X", False)]


def test_page_count_never_below_one():
    assert page_count(0, 5) == 1
    assert page_count(5, 5) == 1
    assert page_count(6, 5) == 2


def test_paginate_slices_and_runs_out():
    rows = [{"id": i} for i in range(12)]
    assert [r["id"] for r in paginate(rows, 1, 5)] == [0, 1, 2, 3, 4]
    assert [r["id"] for r in paginate(rows, 3, 5)] == [10, 11]
    assert paginate(rows, 4, 5) == []


def test_clamp_page():
    assert clamp_page(0, 12, 5) == 1
    assert clamp_page(9, 12, 5) == 3
    assert clamp_page(2, 0, 5) == 1
