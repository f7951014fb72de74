# medtrack/services/schedule_service.py
from sqlalchemy import func

from medtrack.errors import NotFound, ValidationFailure
from medtrack.helpers import row_to_dict
from medtrack.models import AdherenceLog, Medication, Schedule
from medtrack.utils.dates import today_bounds
from medtrack.utils.parsing import parse_time


def _days_to_text(days_of_week):
    if days_of_week is None:
        return None
    if isinstance(days_of_week, (list, tuple)):
        return ",".join(str(d).strip() for d in days_of_week if str(d).strip())
    if isinstance(days_of_week, str):
        return days_of_week.strip() or None
    raise ValidationFailure("daysOfWeek must be a string or a list of day names")


class ScheduleService:
    def __init__(self, gateway):
        self.gateway = gateway

    def today(self, user_id):
        """
        Active schedules of the user's medications with the status of the
        most recent dose logged for them today ("pending" if none).
        """
        start, end = today_bounds()
        latest = (
            self.gateway.query(
                AdherenceLog.schedule_id.label("schedule_id"),
                func.max(AdherenceLog.id).label("log_id"),
            )
            .filter(
                AdherenceLog.user_id == user_id,
                AdherenceLog.scheduled_time >= start,
                AdherenceLog.scheduled_time < end,
            )
            .group_by(AdherenceLog.schedule_id)
            .subquery()
        )

        rows = (
            self.gateway.query(
                Schedule.id.label("schedule_id"),
                Medication.id.label("medication_id"),
                Medication.medicine_name,
                Medication.dosage,
                Medication.dosage_unit,
                Schedule.scheduled_time,
                Schedule.days_of_week,
                func.coalesce(AdherenceLog.taken_status, "pending").label("status"),
                AdherenceLog.actual_time,
            )
            .join(Medication, Schedule.medication_id == Medication.id)
            .outerjoin(latest, latest.c.schedule_id == Schedule.id)
            .outerjoin(AdherenceLog, AdherenceLog.id == latest.c.log_id)
            .filter(Medication.user_id == user_id, Schedule.is_active.is_(True))
            .order_by(Schedule.scheduled_time, Schedule.id)
            .all()
        )
        return [row_to_dict(r) for r in rows]

    def create(self, user_id, medication_id, scheduled_time, days_of_week=None) -> int:
        owned = (
            self.gateway.query(Medication.id)
            .filter(Medication.id == medication_id, Medication.user_id == user_id)
            .first()
        )
        if not owned:
            raise NotFound("Medication not found")

        schedule = Schedule(
            medication_id=medication_id,
            scheduled_time=parse_time(scheduled_time, "scheduledTime"),
            days_of_week=_days_to_text(days_of_week),
        )
        with self.gateway.transaction():
            self.gateway.add(schedule)
            self.gateway.flush()
            schedule_id = schedule.id
        return schedule_id
