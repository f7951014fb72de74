import itertools

import pytest

from medtrack import create_app
from medtrack.extensions import db as _db

_emails = itertools.count(1)


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        # in-memory SQLite runs on a single static connection, no pool sizing
        "SQLALCHEMY_ENGINE_OPTIONS": {},
        "JWT_SECRET_KEY": "test-secret-key-that-is-long-enough-for-hs256",
    })
    with app.app_context():
        _db.create_all()
    yield app
    with app.app_context():
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(client):
    """Register and log in a fresh user; returns id, credentials and auth headers."""
    def _make_user(email=None, password="s3cret-pass"):
        email = email or f"user{next(_emails)}@example.com"
        resp = client.post("/api/auth/register", json={
            "firstName": "Test",
            "lastName": "User",
            "email": email,
            "password": password,
            "dateOfBirth": "1980-05-01",
            "phone": "555-0100",
        })
        assert resp.status_code == 201, resp.get_json()
        login = client.post("/api/auth/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.get_json()
        data = login.get_json()["data"]
        return {
            "id": data["userId"],
            "email": email,
            "password": password,
            "headers": {"Authorization": f"Bearer {data['token']}"},
        }
    return _make_user


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def other_user(make_user):
    return make_user()


@pytest.fixture
def make_medication(client):
    def _make_medication(owner, **fields):
        body = {
            "medicineName": "Metformin",
            "genericName": "metformin hydrochloride",
            "dosage": "500",
            "dosageUnit": "mg",
            "frequency": "BID",
            "stockQuantity": 30,
            "reorderThreshold": 10,
        }
        body.update(fields)
        resp = client.post("/api/medications", json=body, headers=owner["headers"])
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]["medicationId"]
    return _make_medication


@pytest.fixture
def make_schedule(client):
    def _make_schedule(owner, medication_id, scheduled_time="08:00", days_of_week="Mon,Tue,Wed,Thu,Fri,Sat,Sun"):
        resp = client.post("/api/schedules", json={
            "medicationId": medication_id,
            "scheduledTime": scheduled_time,
            "daysOfWeek": days_of_week,
        }, headers=owner["headers"])
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]["scheduleId"]
    return _make_schedule


@pytest.fixture
def log_dose(client):
    def _log_dose(owner, schedule_id, status="taken", notes=None):
        return client.post("/api/adherence", json={
            "scheduleId": schedule_id,
            "takenStatus": status,
            "notes": notes,
        }, headers=owner["headers"])
    return _log_dose
