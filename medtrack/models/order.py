from datetime import datetime
from medtrack.extensions import db
from medtrack.helpers import to_json_value

ORDER_STATUSES = ("pending", "confirmed", "processing", "shipped", "delivered", "cancelled")

class Order(db.Model):
    __tablename__ = "orders"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    order_date = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    status = db.Column(db.String(20), nullable=False, default="pending")
    pharmacy_name = db.Column(db.String(120), nullable=True)
    delivery_address = db.Column(db.Text, nullable=True)
    total_items = db.Column(db.Integer, nullable=False, default=0)

    user = db.relationship("User", back_populates="orders")
    items = db.relationship("OrderItem", back_populates="order", cascade="all,delete-orphan",
                            order_by="OrderItem.id")

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "order_date": to_json_value(self.order_date),
            "status": self.status,
            "pharmacy_name": self.pharmacy_name,
            "delivery_address": self.delivery_address,
            "total_items": self.total_items,
        }


class OrderItem(db.Model):
    __tablename__ = "order_items"
    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    medication_id = db.Column(db.Integer, db.ForeignKey("medications.id"), nullable=False, index=True)

    quantity_ordered = db.Column(db.Integer, nullable=False)
    unit_price = db.Column(db.Numeric(10, 2, asdecimal=False), nullable=True)

    order = db.relationship("Order", back_populates="items")
