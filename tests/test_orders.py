from medtrack.extensions import db
from medtrack.models import Notification, Order, OrderItem


def _place(client, owner, items, **extra):
    body = {"items": items, "pharmacyName": "Corner Pharmacy", "deliveryAddress": "1 Main St"}
    body.update(extra)
    return client.post("/api/orders", json=body, headers=owner["headers"])


def test_create_order_totals_items_and_notifies(app, client, user, make_medication):
    first = make_medication(user, medicineName="Metformin")
    second = make_medication(user, medicineName="Lisinopril")

    resp = _place(client, user, [
        {"medicationId": first, "quantity": 3, "unitPrice": 2.5},
        {"medicationId": second, "quantity": 1, "unitPrice": 9.0},
    ])
    assert resp.status_code == 201
    order_id = resp.get_json()["data"]["orderId"]

    with app.app_context():
        order = db.session.get(Order, order_id)
        assert order.user_id == user["id"]
        assert order.status == "pending"
        assert order.total_items == 4
        assert order.pharmacy_name == "Corner Pharmacy"
        assert OrderItem.query.filter_by(order_id=order_id).count() == 2

        notifications = Notification.query.filter_by(user_id=user["id"]).all()
        assert len(notifications) == 1
        assert notifications[0].notification_type == "order_update"
        assert notifications[0].title == "Order Placed"
        assert f"#{order_id}" in notifications[0].message


def test_list_orders_newest_first_with_items(client, user, make_medication):
    medication_id = make_medication(user, medicineName="Metformin", dosage="500")
    older = _place(client, user, [{"medicationId": medication_id, "quantity": 1, "unitPrice": 4}])
    newer = _place(client, user, [{"medicationId": medication_id, "quantity": 2, "unitPrice": 2.5}])

    orders = client.get("/api/orders", headers=user["headers"]).get_json()["data"]
    assert [o["id"] for o in orders] == [
        newer.get_json()["data"]["orderId"],
        older.get_json()["data"]["orderId"],
    ]
    item = orders[0]["items"][0]
    assert item["medicine_name"] == "Metformin"
    assert item["dosage"] == "500"
    assert item["quantity_ordered"] == 2
    assert item["unit_price"] == 2.5


def test_list_orders_scoped_to_owner(client, user, other_user, make_medication):
    _place(client, other_user, [{"medicationId": make_medication(other_user), "quantity": 1}])
    assert client.get("/api/orders", headers=user["headers"]).get_json()["data"] == []


def test_order_with_foreign_medication_writes_nothing(app, client, user, other_user, make_medication):
    mine = make_medication(user)
    theirs = make_medication(other_user)

    resp = _place(client, user, [
        {"medicationId": mine, "quantity": 2},
        {"medicationId": theirs, "quantity": 1},
    ])
    assert resp.status_code == 404
    with app.app_context():
        assert Order.query.count() == 0
        assert OrderItem.query.count() == 0
        assert Notification.query.count() == 0


def test_order_requires_items(client, user):
    assert _place(client, user, []).status_code == 400
    assert client.post("/api/orders", json={}, headers=user["headers"]).status_code == 400


def test_order_rejects_non_positive_quantity(app, client, user, make_medication):
    resp = _place(client, user, [{"medicationId": make_medication(user), "quantity": 0}])
    assert resp.status_code == 400
    with app.app_context():
        assert Order.query.count() == 0


def test_update_status(app, client, user, make_medication):
    order_id = _place(client, user, [{"medicationId": make_medication(user), "quantity": 1}]).get_json()["data"]["orderId"]

    resp = client.patch(f"/api/orders/{order_id}/status", json={"status": "delivered"}, headers=user["headers"])
    assert resp.status_code == 200
    # no transition rules: a delivered order can go straight back to pending
    resp = client.patch(f"/api/orders/{order_id}/status", json={"status": "pending"}, headers=user["headers"])
    assert resp.status_code == 200
    with app.app_context():
        assert db.session.get(Order, order_id).status == "pending"


def test_update_status_not_owned(app, client, user, other_user, make_medication):
    order_id = _place(client, other_user, [{"medicationId": make_medication(other_user), "quantity": 1}]) \
        .get_json()["data"]["orderId"]

    resp = client.patch(f"/api/orders/{order_id}/status", json={"status": "cancelled"}, headers=user["headers"])
    assert resp.status_code == 404
    with app.app_context():
        assert db.session.get(Order, order_id).status == "pending"


def test_update_status_unknown_value(client, user, make_medication):
    order_id = _place(client, user, [{"medicationId": make_medication(user), "quantity": 1}]).get_json()["data"]["orderId"]
    resp = client.patch(f"/api/orders/{order_id}/status", json={"status": "teleported"}, headers=user["headers"])
    assert resp.status_code == 400


def test_order_rejects_fractional_quantity(app, client, user, make_medication):
    resp = _place(client, user, [{"medicationId": make_medication(user), "quantity": 2.9}])
    assert resp.status_code == 400
    with app.app_context():
        assert Order.query.count() == 0
        assert Notification.query.count() == 0


def test_order_accepts_whole_float_quantity(app, client, user, make_medication):
    resp = _place(client, user, [{"medicationId": make_medication(user), "quantity": 2.0}])
    assert resp.status_code == 201
    with app.app_context():
        assert db.session.get(Order, resp.get_json()["data"]["orderId"]).total_items == 2
