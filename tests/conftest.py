import datetime
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app
from routers.fee_ledger import get_today


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def today():
    """Mutable holder so a test can move the clock: today['value'] = date(...)."""
    return {"value": datetime.date(2024, 7, 10)}


@pytest.fixture
def client(db_session, today):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: today["value"]
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def student(client):
    r = client.post("/api/v1/students/", json={
        "srn": "HCS0001",
        "student_name": "Test Student",
        "class_name": "10",
        "section": "A",
        "father_name": "Test Father",
    })
    assert r.status_code == 201
    return r.json()


@pytest.fixture
def ledger(client, student):
    """2024-2025 ledger with April-June paid."""
    r = client.post("/api/v1/fee-ledger/provision", json={"student_id": student["id"], "session": "2024-2025"})
    assert r.status_code == 200
    for month in ("April", "May", "June"):
        r = client.put("/api/v1/fee-ledger/status", json={
            "student_id": student["id"],
            "session": "2024-2025",
            "month": month,
            "payment_state": "paid",
        })
        assert r.status_code == 200
    return student
