# src/backend/models/org/__init__.py
from .directory_info import DirectoryInfo
from .division_info import DivisionInfo

__all__ = ["DirectoryInfo", "DivisionInfo"]
