# src/backend/utils/errors.py
from __future__ import annotations


class StoreError(Exception):
    """Base class for failures raised by the CRUD layer."""


class UnknownDivisionError(StoreError):
    def __init__(self, directory: str, division: str):
        super().__init__(f"Division '{division}' is not registered for directory '{directory}'")
        self.directory = directory
        self.division = division
