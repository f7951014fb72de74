from datetime import datetime
from medtrack.extensions import db
from medtrack.helpers import to_json_value

class HealthCondition(db.Model):
    __tablename__ = "health_conditions"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    condition_name = db.Column(db.String(120), nullable=False)
    diagnosis_date = db.Column(db.Date, nullable=True)
    notes = db.Column(db.Text, nullable=True)
    is_primary = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "condition_name": self.condition_name,
            "diagnosis_date": to_json_value(self.diagnosis_date),
            "notes": self.notes,
            "is_primary": self.is_primary,
            "created_at": to_json_value(self.created_at),
        }
