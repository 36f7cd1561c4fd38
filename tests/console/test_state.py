from __future__ import annotations

import pytest

from src.console.state import (
    Alert,
    AlertClosed,
    AlertKind,
    AlertShown,
    ConsoleState,
    DivisionsLoaded,
    EditStarted,
    FieldChanged,
    FormReset,
    PageChanged,
    RecordDeleted,
    RecordsLoaded,
    SearchChanged,
    SubmitAttempted,
    current_page,
    division_disabled,
    reduce,
    required_markers,
    total_pages,
)

RECORD = {
    "id": 7,
    "empId": "20240007",
    "type": "Contract",
    "name": "Nusrat",
    "directory": "DOI",
    "division": "CND",
    "dateOfPost": None,
    "gender": "Female",
}


def run(state, *actions):
    for action in actions:
        state = reduce(state, action)
    return state


def test_initial_state():
    state = ConsoleState()

    assert state.edit_target is None
    assert state.page == 1
    assert state.page_size == 5
    assert state.alert is None
    assert all(v == "" for v in state.form.values())
    assert division_disabled(state)


def test_field_change_sanitizes_digits():
    state = run(ConsoleState(), FieldChanged("phone", "017-123"))
    assert state.form["phone"] == "017123"


def test_directory_change_clears_division_and_options():
    state = run(
        ConsoleState(),
        FieldChanged("directory", "DIT"),
        DivisionsLoaded(("Development", "SDD")),
        FieldChanged("division", "SDD"),
        FieldChanged("directory", "DOI"),
    )

    assert state.form["directory"] == "DOI"
    assert state.form["division"] == ""
    assert state.divisions == ()
    assert not division_disabled(state)


def test_clearing_directory_disables_division():
    state = run(ConsoleState(), FieldChanged("directory", "DIT"), FieldChanged("directory", ""))
    assert division_disabled(state)


def test_required_markers_appear_after_submit_attempt():
    state = ConsoleState()
    assert required_markers(state) == []

    state = reduce(state, SubmitAttempted())
    assert "empId" in required_markers(state)
    assert "dateOfPost" not in required_markers(state)


def test_edit_started_copies_record_into_form():
    state = run(ConsoleState(), SubmitAttempted(), EditStarted(RECORD))

    assert state.edit_target == 7
    assert state.form["name"] == "Nusrat"
    assert state.form["type"] == "Contract"
    assert state.form["dateOfPost"] == ""
    assert state.form["sex"] == "Female"
    assert state.touched == frozenset()


def test_clear_keeps_edit_target_and_cancel_drops_it():
    editing = run(ConsoleState(), EditStarted(RECORD))

    cleared = reduce(editing, FormReset(keep_edit_target=True))
    assert cleared.edit_target == 7
    assert cleared.form["name"] == ""

    cancelled = reduce(editing, FormReset())
    assert cancelled.edit_target is None


def test_deleting_the_edited_record_resets_the_form():
    state = run(
        ConsoleState(),
        RecordsLoaded((RECORD, {"id": 8, "name": "Karim"})),
        EditStarted(RECORD),
        RecordDeleted(7),
    )

    assert state.edit_target is None
    assert state.form["name"] == ""
    assert [r["id"] for r in state.records] == [8]


def test_deleting_another_record_keeps_editing():
    state = run(
        ConsoleState(),
        RecordsLoaded((RECORD, {"id": 8, "name": "Karim"})),
        EditStarted(RECORD),
        RecordDeleted(8),
    )

    assert state.edit_target == 7
    assert state.form["name"] == "Nusrat"


def test_search_keeps_page_and_empty_page_shows_nothing():
    records = tuple({"id": i, "name": f"Person {i}"} for i in range(1, 13))
    state = run(ConsoleState(), RecordsLoaded(records), PageChanged(3))
    assert [r["id"] for r in current_page(state)] == [11, 12]

    state = reduce(state, SearchChanged("Person 1"))

    assert state.page == 3
    assert current_page(state) == []
    assert total_pages(state) == 1


def test_page_change_is_clamped():
    records = tuple({"id": i, "name": "x"} for i in range(1, 8))
    state = run(ConsoleState(), RecordsLoaded(records), PageChanged(99))
    assert state.page == 2

    state = reduce(state, PageChanged(0))
    assert state.page == 1


def test_alert_show_and_close():
    alert = Alert(AlertKind.CONFIRM, "sure?", pending_delete=3)
    state = run(ConsoleState(), AlertShown(alert))
    assert state.alert == alert

    assert reduce(state, AlertClosed()).alert is None


def test_unknown_action_is_rejected():
    with pytest.raises(TypeError):
        reduce(ConsoleState(), object())
