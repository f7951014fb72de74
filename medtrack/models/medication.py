from datetime import datetime
from medtrack.extensions import db
from medtrack.helpers import to_json_value

class Medication(db.Model):
    __tablename__ = "medications"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    medicine_name = db.Column(db.String(120), nullable=False)
    generic_name = db.Column(db.String(120), nullable=True)
    dosage = db.Column(db.String(60), nullable=True)      # e.g., "500"
    dosage_unit = db.Column(db.String(20), nullable=True) # e.g., "mg"
    frequency = db.Column(db.String(60), nullable=True)   # e.g., "BID"

    stock_quantity = db.Column(db.Integer, nullable=False, default=0)
    reorder_threshold = db.Column(db.Integer, nullable=False, default=10)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    user = db.relationship("User", back_populates="medications")
    schedules = db.relationship("Schedule", back_populates="medication", cascade="all,delete-orphan")

    __table_args__ = (db.Index("ix_medications_user_name", "user_id", "medicine_name"),)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "medicine_name": self.medicine_name,
            "generic_name": self.generic_name,
            "dosage": self.dosage,
            "dosage_unit": self.dosage_unit,
            "frequency": self.frequency,
            "stock_quantity": self.stock_quantity,
            "reorder_threshold": self.reorder_threshold,
            "is_active": self.is_active,
            "created_at": to_json_value(self.created_at),
        }
