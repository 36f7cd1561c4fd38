# src/console/controller.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.backend.config import settings
from src.console import export
from src.console.api import EmployeeApiClient, StoreError
from src.console.state import (
    Action,
    Alert,
    AlertClosed,
    AlertKind,
    AlertShown,
    ConsoleState,
    DirectoriesLoaded,
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
    reduce,
)
from src.console.validation import validate_form

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load employee records."
SAVE_FAILED = "Error saving employee."
DELETE_FAILED = "Error deleting employee."
DELETE_CONFIRM = "Are you sure you want to delete this employee record? This action cannot be undone."


class EmployeeConsole:
    """
    Drives the console: turns user intents into store calls and reducer actions.

    One call at a time; nothing guards against a second submit while the
    first is still in flight.
    """

    def __init__(self, api: EmployeeApiClient, *, strict: bool = True, page_size: Optional[int] = None):
        self.api = api
        self.strict = strict
        self.state = ConsoleState(page_size=page_size or settings.CONSOLE_PAGE_SIZE)

    def dispatch(self, action: Action) -> ConsoleState:
        self.state = reduce(self.state, action)
        return self.state

    def _alert(self, kind: AlertKind, message: str, pending_delete: Optional[int] = None) -> None:
        self.dispatch(AlertShown(Alert(kind, message, pending_delete)))

    # -------------------------
    # loading
    # -------------------------
    def load(self) -> bool:
        """Initial fetch of records and directory options."""
        try:
            self.dispatch(DirectoriesLoaded(tuple(self.api.list_directories())))
        except StoreError as e:
            logger.error("Error loading directories: %s", e)
        return self.refresh()

    def refresh(self) -> bool:
        try:
            records = self.api.list_employees()
        except StoreError as e:
            logger.error("Error loading employees: %s", e)
            self._alert(AlertKind.ERROR, LOAD_FAILED)
            return False
        self.dispatch(RecordsLoaded(tuple(records)))
        return True

    def _load_divisions(self, directory: str) -> None:
        try:
            divisions = self.api.list_divisions(directory)
        except StoreError as e:
            logger.error("Error loading divisions for %s: %s", directory, e)
            return
        # ignore a late answer for a directory the user already left
        if self.state.form.get("directory") == directory:
            self.dispatch(DivisionsLoaded(tuple(divisions)))

    # -------------------------
    # form
    # -------------------------
    def change(self, key: str, value: str) -> None:
        self.dispatch(FieldChanged(key, value))
        if key == "directory" and self.state.form.get("directory"):
            self._load_divisions(self.state.form["directory"])

    def submit(self) -> bool:
        if self.state.alert is not None:
            return False

        self.dispatch(SubmitAttempted())
        problem = validate_form(self.state.form, strict=self.strict)
        if problem:
            self._alert(AlertKind.ERROR, problem)
            return False

        fields: Dict[str, Any] = dict(self.state.form)
        editing = self.state.edit_target
        try:
            if editing is not None:
                self.api.update_employee(editing, fields)
            else:
                self.api.create_employee(fields)
        except StoreError as e:
            logger.error("Error saving employee: %s", e)
            self._alert(AlertKind.ERROR, SAVE_FAILED)
            return False

        self.dispatch(FormReset())
        self._alert(
            AlertKind.SUCCESS,
            "Employee updated successfully!" if editing is not None else "Employee added successfully!",
        )
        self.refresh()
        return True

    def edit(self, record_id: int) -> bool:
        record = next((r for r in self.state.records if r.get("id") == record_id), None)
        if record is None:
            self._alert(AlertKind.ERROR, "Employee not found.")
            return False
        self.dispatch(EditStarted(record))
        if self.state.form.get("directory"):
            self._load_divisions(self.state.form["directory"])
        return True

    def cancel_edit(self) -> None:
        self.dispatch(FormReset())

    def clear(self) -> None:
        self.dispatch(FormReset(keep_edit_target=True))

    # -------------------------
    # delete with confirmation
    # -------------------------
    def request_delete(self, record_id: int) -> None:
        self._alert(AlertKind.CONFIRM, DELETE_CONFIRM, pending_delete=record_id)

    def confirm(self) -> bool:
        alert = self.state.alert
        if alert is None or alert.kind is not AlertKind.CONFIRM or alert.pending_delete is None:
            return False
        record_id = alert.pending_delete
        self.dispatch(AlertClosed())

        try:
            self.api.delete_employee(record_id)
        except StoreError as e:
            logger.error("Error deleting employee %s: %s", record_id, e)
            self._alert(AlertKind.ERROR, DELETE_FAILED)
            return False

        self.dispatch(RecordDeleted(record_id))
        self._alert(AlertKind.SUCCESS, "Employee deleted.")
        self.refresh()
        return True

    def close_alert(self) -> None:
        self.dispatch(AlertClosed())

    # Cancel on a confirmation is the same as dismissing it
    cancel = close_alert

    # -------------------------
    # list view
    # -------------------------
    def search(self, term: str) -> None:
        self.dispatch(SearchChanged(term))

    def go_to_page(self, page: int) -> None:
        self.dispatch(PageChanged(page))

    def next_page(self) -> None:
        self.go_to_page(self.state.page + 1)

    def prev_page(self) -> None:
        self.go_to_page(self.state.page - 1)

    def page_rows(self) -> List[Dict[str, Any]]:
        return current_page(self.state)

    # -------------------------
    # export
    # -------------------------
    def export(self, kind: str, directory: Path | str = ".") -> Path:
        return export.write_export(kind, self.state.records, directory)
