from medtrack.extensions import db
from medtrack.models import Schedule


def test_create_schedule_for_own_medication(app, client, user, make_medication):
    medication_id = make_medication(user)
    resp = client.post("/api/schedules", json={
        "medicationId": medication_id,
        "scheduledTime": "07:30",
        "daysOfWeek": ["Mon", "Wed", "Fri"],
    }, headers=user["headers"])
    assert resp.status_code == 201
    schedule_id = resp.get_json()["data"]["scheduleId"]

    with app.app_context():
        schedule = db.session.get(Schedule, schedule_id)
        assert schedule.medication_id == medication_id
        assert schedule.scheduled_time.isoformat() == "07:30:00"
        assert schedule.days_of_week == "Mon,Wed,Fri"


def test_create_schedule_for_foreign_medication_is_not_found(app, client, user, other_user, make_medication):
    theirs = make_medication(other_user)
    resp = client.post("/api/schedules", json={"medicationId": theirs, "scheduledTime": "07:30"},
                       headers=user["headers"])
    assert resp.status_code == 404
    with app.app_context():
        assert Schedule.query.count() == 0


def test_create_schedule_rejects_bad_time(client, user, make_medication):
    medication_id = make_medication(user)
    resp = client.post("/api/schedules", json={"medicationId": medication_id, "scheduledTime": "half past"},
                       headers=user["headers"])
    assert resp.status_code == 400


def test_create_schedule_rejects_time_with_offset(app, client, user, make_medication):
    medication_id = make_medication(user)
    resp = client.post("/api/schedules", json={"medicationId": medication_id, "scheduledTime": "08:00+05:00"},
                       headers=user["headers"])
    assert resp.status_code == 400
    with app.app_context():
        assert Schedule.query.count() == 0



def test_today_defaults_to_pending_ordered_by_time(client, user, make_medication, make_schedule):
    metformin = make_medication(user)
    aspirin = make_medication(user, medicineName="Aspirin", dosage="81")
    evening = make_schedule(user, metformin, "20:00")
    morning = make_schedule(user, aspirin, "06:45")

    resp = client.get("/api/schedules/today", headers=user["headers"])
    assert resp.status_code == 200
    rows = resp.get_json()["data"]
    assert [r["schedule_id"] for r in rows] == [morning, evening]
    assert all(r["status"] == "pending" for r in rows)
    assert rows[0]["medicine_name"] == "Aspirin"
    assert rows[0]["scheduled_time"] == "06:45:00"
    assert rows[0]["days_of_week"] == "Mon,Tue,Wed,Thu,Fri,Sat,Sun"


def test_today_reflects_latest_log(client, user, make_medication, make_schedule, log_dose):
    medication_id = make_medication(user)
    schedule_id = make_schedule(user, medication_id)

    log_dose(user, schedule_id, "skipped")
    rows = client.get("/api/schedules/today", headers=user["headers"]).get_json()["data"]
    assert rows[0]["status"] == "skipped"

    log_dose(user, schedule_id, "taken")
    rows = client.get("/api/schedules/today", headers=user["headers"]).get_json()["data"]
    assert len(rows) == 1
    assert rows[0]["status"] == "taken"
    assert rows[0]["actual_time"] is not None


def test_today_skips_inactive_and_foreign_schedules(app, client, user, other_user, make_medication, make_schedule):
    mine = make_medication(user)
    paused = make_schedule(user, mine, "09:00")
    make_schedule(other_user, make_medication(other_user), "10:00")
    with app.app_context():
        db.session.get(Schedule, paused).is_active = False
        db.session.commit()

    rows = client.get("/api/schedules/today", headers=user["headers"]).get_json()["data"]
    assert rows == []
