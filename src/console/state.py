# src/console/state.py
"""
Console view state and the reducer that updates it.

``ConsoleState`` is never mutated: every user event or store response is an
action, and ``reduce(state, action)`` returns the next state.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple, Union

from src.console import listing
from src.console.fields import REQUIRED_KEYS, empty_form, form_from_record
from src.console.validation import missing_required, sanitize_input


class AlertKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    CONFIRM = "confirm"


@dataclass(frozen=True)
class Alert:
    kind: AlertKind
    message: str
    # record id waiting for the user's Proceed on a delete confirmation
    pending_delete: Optional[int] = None


@dataclass(frozen=True)
class ConsoleState:
    form: Mapping[str, str] = field(default_factory=empty_form)
    touched: FrozenSet[str] = frozenset()
    edit_target: Optional[int] = None
    records: Tuple[Dict[str, Any], ...] = ()
    directories: Tuple[str, ...] = ()
    divisions: Tuple[str, ...] = ()
    search: str = ""
    page: int = 1
    page_size: int = listing.DEFAULT_PAGE_SIZE
    alert: Optional[Alert] = None


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class RecordsLoaded:
    records: Tuple[Dict[str, Any], ...]


@dataclass(frozen=True)
class DirectoriesLoaded:
    directories: Tuple[str, ...]


@dataclass(frozen=True)
class DivisionsLoaded:
    divisions: Tuple[str, ...]


@dataclass(frozen=True)
class FieldChanged:
    key: str
    value: str


@dataclass(frozen=True)
class SubmitAttempted:
    pass


@dataclass(frozen=True)
class EditStarted:
    record: Mapping[str, Any]


@dataclass(frozen=True)
class FormReset:
    # Clear keeps the edit target, Cancel Edit drops it
    keep_edit_target: bool = False


@dataclass(frozen=True)
class RecordDeleted:
    record_id: int


@dataclass(frozen=True)
class SearchChanged:
    term: str


@dataclass(frozen=True)
class PageChanged:
    page: int


@dataclass(frozen=True)
class AlertShown:
    alert: Alert


@dataclass(frozen=True)
class AlertClosed:
    pass


Action = Union[
    RecordsLoaded,
    DirectoriesLoaded,
    DivisionsLoaded,
    FieldChanged,
    SubmitAttempted,
    EditStarted,
    FormReset,
    RecordDeleted,
    SearchChanged,
    PageChanged,
    AlertShown,
    AlertClosed,
]


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------
def _change_field(state: ConsoleState, key: str, value: str) -> ConsoleState:
    form = dict(state.form)
    form[key] = sanitize_input(key, value, form.get(key, ""))
    if key != "directory":
        return replace(state, form=form)

    # a new directory invalidates the division and its option list;
    # the controller fetches the new options when the directory is non-empty
    form["division"] = ""
    return replace(state, form=form, divisions=())


def reduce(state: ConsoleState, action: Action) -> ConsoleState:
    if isinstance(action, RecordsLoaded):
        return replace(state, records=tuple(action.records))

    if isinstance(action, DirectoriesLoaded):
        return replace(state, directories=tuple(action.directories))

    if isinstance(action, DivisionsLoaded):
        return replace(state, divisions=tuple(action.divisions))

    if isinstance(action, FieldChanged):
        return _change_field(state, action.key, action.value)

    if isinstance(action, SubmitAttempted):
        return replace(state, touched=frozenset(REQUIRED_KEYS))

    if isinstance(action, EditStarted):
        return replace(
            state,
            form=form_from_record(action.record),
            edit_target=action.record.get("id"),
            touched=frozenset(),
        )

    if isinstance(action, FormReset):
        return replace(
            state,
            form=empty_form(),
            touched=frozenset(),
            edit_target=state.edit_target if action.keep_edit_target else None,
        )

    if isinstance(action, RecordDeleted):
        records = tuple(r for r in state.records if r.get("id") != action.record_id)
        state = replace(state, records=records)
        if state.edit_target == action.record_id:
            state = replace(state, form=empty_form(), touched=frozenset(), edit_target=None)
        return state

    if isinstance(action, SearchChanged):
        # page is kept; a page past the end simply shows no rows
        return replace(state, search=action.term)

    if isinstance(action, PageChanged):
        total = len(visible_records(state))
        return replace(state, page=listing.clamp_page(action.page, total, state.page_size))

    if isinstance(action, AlertShown):
        return replace(state, alert=action.alert)

    if isinstance(action, AlertClosed):
        return replace(state, alert=None)

    raise TypeError(f"Unknown console action: {action!r}")


# ---------------------------------------------------------------------------
# Derived views
# ---------------------------------------------------------------------------
def visible_records(state: ConsoleState) -> List[Dict[str, Any]]:
    return listing.filter_records(state.records, state.search)


def current_page(state: ConsoleState) -> List[Dict[str, Any]]:
    return listing.paginate(visible_records(state), state.page, state.page_size)


def total_pages(state: ConsoleState) -> int:
    return listing.page_count(len(visible_records(state)), state.page_size)


def required_markers(state: ConsoleState) -> List[str]:
    """Touched required fields that are still blank."""
    return [k for k in missing_required(state.form) if k in state.touched]


def division_disabled(state: ConsoleState) -> bool:
    return not state.form.get("directory")
