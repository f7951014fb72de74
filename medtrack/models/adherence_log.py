from datetime import datetime
from medtrack.extensions import db

TAKEN_STATUSES = ("taken", "skipped", "missed", "pending")

class AdherenceLog(db.Model):
    __tablename__ = "adherence_log"
    id = db.Column(db.Integer, primary_key=True)
    schedule_id = db.Column(db.Integer, db.ForeignKey("schedules.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    taken_status = db.Column(db.String(10), nullable=False, default="pending")
    scheduled_time = db.Column(db.DateTime, nullable=False, index=True)
    actual_time = db.Column(db.DateTime, nullable=True)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint(
            "taken_status IN ('taken', 'skipped', 'missed', 'pending')",
            name="ck_adherence_log_taken_status",
        ),
        db.Index("ix_adherence_log_user_time", "user_id", "scheduled_time"),
    )
