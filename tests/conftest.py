from __future__ import annotations

import os
import tempfile

# The engine is built at import time, so point it at a throwaway SQLite file
# before anything imports the backend.
_DB_DIR = tempfile.mkdtemp(prefix="employee-records-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ.setdefault("AUTO_INIT_DB", "true")
os.environ.setdefault("AUTO_SEED_DB", "true")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from src.backend.app import app  # noqa: E402

API = "/api/employees"


def employee_payload(**overrides):
    data = {
        "empId": "20240001",
        "type": "Staff",
        "idNo": "0001",
        "title": "Mr.",
        "name": "Rahim Uddin",
        "designation": "Software Engineer",
        "directory": "DIT",
        "division": "Development",
        "dateOfJoin": "2020-01-15",
        "dateOfPost": "2022-03-01",
        "qualification": "BSc",
        "discipline": "Computer Science",
        "sex": "Male",
        "bloodGroup": "B+",
        "phone": "0171234567",
        "address": "House 12, Road 3, Dhaka",
        "permanentAddress": "Village Rampur, Cumilla",
        "dob": "1990-05-20",
    }
    data.update(overrides)
    return data


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
        # leave an empty employees table for the next test
        for row in c.get(API).json():
            c.delete(f"{API}/{row['id']}")
