import pytest

from medtrack.extensions import db
from medtrack.models import User
from medtrack.services import MedicationService, get_gateway


def test_health_endpoint(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"database": "connected"}


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/does-not-exist")
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_unexpected_error_is_generic_500(client, user, monkeypatch):
    def boom(self, user_id):
        raise RuntimeError("SELECT secret FROM internals")

    monkeypatch.setattr(MedicationService, "list", boom)
    resp = client.get("/api/medications", headers=user["headers"])
    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Failed to fetch medications"}
    assert b"secret" not in resp.data


def test_transaction_rolls_back_on_error(app):
    with app.app_context():
        gateway = get_gateway()
        with pytest.raises(RuntimeError):
            with gateway.transaction():
                gateway.add(User(first_name="Tmp", last_name="User", email="tmp@example.com",
                                 password_hash="x"))
                gateway.flush()
                raise RuntimeError("abort")
        assert User.query.filter_by(email="tmp@example.com").first() is None


def test_transaction_commits_on_success(app):
    with app.app_context():
        gateway = get_gateway()
        with gateway.transaction():
            gateway.add(User(first_name="Kept", last_name="User", email="kept@example.com",
                             password_hash="x"))
    with app.app_context():
        assert db.session.query(User).filter_by(email="kept@example.com").count() == 1


def test_services_take_an_injected_gateway(app, user, make_medication):
    make_medication(user, medicineName="Injected")
    with app.app_context():
        meds = MedicationService(get_gateway()).list(user["id"])
    assert [m["medicine_name"] for m in meds] == ["Injected"]
