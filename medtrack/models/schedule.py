from datetime import datetime
from medtrack.extensions import db
from medtrack.helpers import to_json_value

class Schedule(db.Model):
    __tablename__ = "schedules"
    id = db.Column(db.Integer, primary_key=True)
    medication_id = db.Column(db.Integer, db.ForeignKey("medications.id", ondelete="CASCADE"), nullable=False, index=True)

    scheduled_time = db.Column(db.Time(timezone=False), nullable=False)
    days_of_week = db.Column(db.String(60), nullable=True)  # informational, e.g. "Mon,Wed,Fri"
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    medication = db.relationship("Medication", back_populates="schedules")

    def to_dict(self):
        return {
            "id": self.id,
            "medication_id": self.medication_id,
            "scheduled_time": to_json_value(self.scheduled_time),
            "days_of_week": self.days_of_week,
            "is_active": self.is_active,
            "created_at": to_json_value(self.created_at),
        }
