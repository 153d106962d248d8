from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import jwt
import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from school_duty.config import API_PREFIX, JWT_ALGORITHM, JWT_SECRET
from school_duty.database import get_db
from school_duty.main import app


def make_token(sub, role="student", school_id=None, expires_in=timedelta(hours=1)):
    payload = {
        "sub": str(sub),
        "role": role,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    if school_id:
        payload["schoolId"] = school_id
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def auth(token):
    return {"Authorization": f"Bearer {token}"}


def url(path):
    return f"{API_PREFIX}{path}"


@pytest.fixture
def db():
    return AsyncMongoMockClient()[f"school_duty_{uuid.uuid4().hex}"]


@pytest.fixture
async def client(db):
    app.dependency_overrides[get_db] = lambda: db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return auth(make_token(ObjectId(), role="admin"))


@pytest.fixture
async def seeded(db):
    """
    Three groups (C has no members), four users (dave has no group),
    seven duties (one points at a deleted group) and mixed attendance.
    """
    ids = {name: ObjectId() for name in ("alice", "bob", "carol", "dave", "group_a", "group_b", "group_c", "gone")}

    await db.users.insert_many([
        {
            "_id": ids["alice"], "schoolId": "S-001", "username": "alice", "name": "Alice Cruz",
            "email": "alice@school.test", "year": 3, "section": "A", "role": "student",
            "password": "hashed", "group": ids["group_a"],
            "fathersName": "", "address": "12 Oak St", "guardian": "Uncle Sam",
        },
        {
            "_id": ids["bob"], "schoolId": "S-002", "username": "bob", "name": "Bob Reyes",
            "email": "bob@school.test", "year": 3, "section": "A", "role": "student",
            "password": "hashed", "group": ids["group_a"],
        },
        {
            "_id": ids["carol"], "schoolId": "S-003", "username": "carol", "name": "Carol Lim",
            "email": "carol@school.test", "year": 2, "section": "B", "role": "student",
            "password": "hashed", "group": ids["group_b"],
        },
        {
            "_id": ids["dave"], "schoolId": "S-004", "username": "dave", "name": "Dave Santos",
            "email": "dave@school.test", "year": 1, "section": "C", "role": "student",
            "password": "hashed",
        },
    ])

    await db.groups.insert_many([
        {"_id": ids["group_a"], "name": "Group A", "members": [ids["alice"], ids["bob"]]},
        {"_id": ids["group_b"], "name": "Group B", "members": [ids["carol"]]},
        {"_id": ids["group_c"], "name": "Group C", "members": []},
    ])

    duties = [
        {"group": ids["gone"], "date": datetime(2025, 1, 1), "area": "Canteen"},
        {"group": ids["group_a"], "date": datetime(2025, 1, 5)},
        {"group": ids["group_b"], "date": datetime(2025, 1, 7), "area": ""},
        {"group": ids["group_a"], "date": datetime(2025, 1, 10), "area": "Gate"},
        {"group": ids["group_b"], "date": datetime(2025, 1, 15), "area": "Gate"},
        {"group": ids["group_a"], "date": datetime(2025, 1, 20), "area": "Library", "__v": 0},
        {"group": ids["group_b"], "date": datetime(2025, 1, 25), "area": None},
    ]
    # stored out of date order on purpose
    result = await db.duties.insert_many(list(reversed(duties)))
    ids["duties"] = list(reversed(result.inserted_ids))

    await db.attendances.insert_many([
        {"user": ids["alice"], "schoolId": "S-001", "date": datetime(2025, 2, 3), "attendanceType": "Class", "__v": 0},
        {"user": ids["alice"], "schoolId": "S-001", "date": datetime(2025, 2, 10), "attendanceType": "Class", "__v": 0},
        {"user": ids["bob"], "schoolId": "S-002", "date": datetime(2025, 2, 5), "attendanceType": "Class", "__v": 0},
        {"user": ids["alice"], "schoolId": "S-001", "date": datetime(2025, 2, 7), "attendanceType": "Duty",
         "group": ids["group_a"], "__v": 0},
        {"user": ids["carol"], "schoolId": "S-003", "date": datetime(2025, 2, 12), "attendanceType": "Duty",
         "group": ids["group_b"], "__v": 0},
        {"user": ids["alice"], "schoolId": "S-001", "date": datetime(2025, 2, 1), "attendanceType": "Duty",
         "group": ids["group_a"], "__v": 0},
    ])
    return ids
