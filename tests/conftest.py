import os

# must be set before config.settings is imported anywhere
os.environ["DATABASE_URL_OVERRIDE"] = "sqlite://"
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient

from database.db import Base, build_engine, get_db
from database.init_db import init_db
from main import app
from sqlalchemy.orm import sessionmaker

test_engine = build_engine("sqlite://")
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def tables():
    init_db(test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    # no `with`: startup would create tables on the configured engine
    return TestClient(app)


# ==========================================================
# API helpers
# ==========================================================

def create_student(client, first_name="Ada", last_name="Lovelace", **extra):
    res = client.post("/api/students", json={"firstName": first_name, "lastName": last_name, **extra})
    assert res.status_code == 200, res.text
    return res.json()


def create_subject(client, student_id, name="Math"):
    res = client.post(f"/api/students/{student_id}/subjects", json={"name": name})
    assert res.status_code == 200, res.text
    return res.json()


def create_term(client, student_id, name="Term 1", start="2024-01-01", end="2024-06-30", active=True):
    res = client.post(
        f"/api/students/{student_id}/terms",
        json={"name": name, "startDate": start, "endDate": end, "isActive": active},
    )
    assert res.status_code == 200, res.text
    return res.json()


def create_assignment(client, subject_id, term_id, category="Homework", max_points=100, title="Worksheet"):
    res = client.post(
        f"/api/subjects/{subject_id}/assignments",
        json={"termId": term_id, "title": title, "category": category, "maxPoints": max_points},
    )
    assert res.status_code == 200, res.text
    return res.json()


def create_grade(client, assignment_id, points):
    res = client.post(f"/api/assignments/{assignment_id}/grades", json={"pointsEarned": points})
    assert res.status_code == 200, res.text
    return res.json()


def record_attendance(client, student_id, day, status="Present", **extra):
    res = client.post(f"/api/students/{student_id}/attendance", json={"date": day, "status": status, **extra})
    assert res.status_code == 200, res.text
    return res.json()
