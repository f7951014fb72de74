# medtrack/services/order_service.py
from medtrack.errors import NotFound, ValidationFailure
from medtrack.helpers import to_json_value
from medtrack.models import Medication, Notification, Order, OrderItem
from medtrack.models.order import ORDER_STATUSES
from medtrack.utils.parsing import parse_int


def _unit_price(value):
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationFailure(f"Invalid unitPrice: {value}")


class OrderService:
    def __init__(self, gateway):
        self.gateway = gateway

    def list(self, user_id):
        orders = (
            self.gateway.query(Order)
            .filter(Order.user_id == user_id)
            .order_by(Order.order_date.desc(), Order.id.desc())
            .all()
        )
        if not orders:
            return []

        items_by_order = {o.id: [] for o in orders}
        rows = (
            self.gateway.query(OrderItem, Medication.medicine_name, Medication.dosage)
            .join(Medication, OrderItem.medication_id == Medication.id)
            .filter(OrderItem.order_id.in_(list(items_by_order)))
            .order_by(OrderItem.id)
            .all()
        )
        for item, medicine_name, dosage in rows:
            items_by_order[item.order_id].append({
                "id": item.id,
                "order_id": item.order_id,
                "medication_id": item.medication_id,
                "quantity_ordered": item.quantity_ordered,
                "unit_price": to_json_value(item.unit_price),
                "medicine_name": medicine_name,
                "dosage": dosage,
            })

        result = []
        for order in orders:
            payload = order.to_dict()
            payload["items"] = items_by_order[order.id]
            result.append(payload)
        return result

    def create(self, user_id, items, pharmacy_name=None, delivery_address=None) -> int:
        """
        Place an order: the order row, its items, the total_items tally and
        the "order_update" notification are written in one transaction.
        """
        if not isinstance(items, list) or not items:
            raise ValidationFailure("items must be a non-empty list")

        with self.gateway.transaction():
            order = self.gateway.add(Order(
                user_id=user_id,
                pharmacy_name=pharmacy_name,
                delivery_address=delivery_address,
                status="pending",
            ))
            self.gateway.flush()

            total_items = 0
            for item in items:
                if not isinstance(item, dict):
                    raise ValidationFailure("Each item must be an object")
                medication_id = parse_int(item.get("medicationId"), "medicationId")
                quantity = parse_int(item.get("quantity"), "quantity", minimum=1)
                owned = (
                    self.gateway.query(Medication.id)
                    .filter(Medication.id == medication_id, Medication.user_id == user_id)
                    .first()
                )
                if not owned:
                    raise NotFound("Medication not found")

                self.gateway.add(OrderItem(
                    order_id=order.id,
                    medication_id=medication_id,
                    quantity_ordered=quantity,
                    unit_price=_unit_price(item.get("unitPrice")),
                ))
                total_items += quantity

            order.total_items = total_items
            self.gateway.add(Notification(
                user_id=user_id,
                notification_type="order_update",
                title="Order Placed",
                message=f"Your medication order #{order.id} has been placed successfully",
            ))
            self.gateway.flush()
            order_id = order.id
        return order_id

    def update_status(self, user_id, order_id, status):
        if status not in ORDER_STATUSES:
            raise ValidationFailure(f"status must be one of {list(ORDER_STATUSES)}")
        with self.gateway.transaction():
            order = (
                self.gateway.query(Order)
                .filter(Order.id == order_id, Order.user_id == user_id)
                .first()
            )
            if not order:
                raise NotFound("Order not found")
            order.status = status
