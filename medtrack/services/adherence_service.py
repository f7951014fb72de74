# medtrack/services/adherence_service.py
from datetime import datetime

from sqlalchemy import case, func

from medtrack.errors import NotFound, ValidationFailure
from medtrack.helpers import row_to_dict
from medtrack.models import AdherenceLog, Medication, Schedule
from medtrack.models.adherence_log import TAKEN_STATUSES
from medtrack.utils.dates import days_ago, today_bounds

STATS_WINDOW_DAYS = 30
MAX_HISTORY_DAYS = 36500


def _status_count(status):
    return func.count(case((AdherenceLog.taken_status == status, 1)))


def adherence_percentage(taken, total):
    """Taken share of all logged doses, or None when nothing was logged."""
    if not total:
        return None
    return round(taken * 100.0 / total, 2)


class AdherenceService:
    def __init__(self, gateway):
        self.gateway = gateway

    def log_dose(self, user_id, schedule_id, taken_status, notes=None) -> int:
        """
        Append one adherence row for the schedule. A "taken" dose also
        records the actual time and takes one unit off the medication's
        stock (which may go negative) in the same transaction.
        """
        if taken_status not in TAKEN_STATUSES:
            raise ValidationFailure(f"takenStatus must be one of {list(TAKEN_STATUSES)}")

        schedule = (
            self.gateway.query(Schedule)
            .join(Medication, Schedule.medication_id == Medication.id)
            .filter(Schedule.id == schedule_id, Medication.user_id == user_id)
            .first()
        )
        if not schedule:
            raise NotFound("Schedule not found")

        now = datetime.utcnow()
        entry = AdherenceLog(
            schedule_id=schedule.id,
            user_id=user_id,
            taken_status=taken_status,
            scheduled_time=now,
            actual_time=now if taken_status == "taken" else None,
            notes=notes,
        )
        with self.gateway.transaction():
            self.gateway.add(entry)
            if taken_status == "taken":
                # single UPDATE so concurrent doses never lose a decrement
                (
                    self.gateway.query(Medication)
                    .filter(Medication.id == schedule.medication_id)
                    .update(
                        {Medication.stock_quantity: Medication.stock_quantity - 1},
                        synchronize_session=False,
                    )
                )
            self.gateway.flush()
            entry_id = entry.id
        return entry_id

    def history(self, user_id, days=STATS_WINDOW_DAYS):
        rows = (
            self.gateway.query(
                AdherenceLog.id,
                AdherenceLog.schedule_id,
                AdherenceLog.taken_status,
                AdherenceLog.actual_time,
                AdherenceLog.scheduled_time,
                AdherenceLog.notes,
                Medication.medicine_name,
                Medication.dosage,
            )
            .join(Schedule, AdherenceLog.schedule_id == Schedule.id)
            .join(Medication, Schedule.medication_id == Medication.id)
            .filter(AdherenceLog.user_id == user_id, AdherenceLog.scheduled_time >= days_ago(days))
            .order_by(AdherenceLog.scheduled_time.desc(), AdherenceLog.id.desc())
            .all()
        )
        return [row_to_dict(r) for r in rows]

    def _counts(self, user_id, since, until=None):
        q = self.gateway.query(
            func.count(AdherenceLog.id).label("total_doses"),
            _status_count("taken").label("taken_count"),
            _status_count("skipped").label("skipped_count"),
            _status_count("missed").label("missed_count"),
        ).filter(AdherenceLog.user_id == user_id, AdherenceLog.scheduled_time >= since)
        if until is not None:
            q = q.filter(AdherenceLog.scheduled_time < until)
        return q.one()

    def stats(self, user_id):
        row = self._counts(user_id, days_ago(STATS_WINDOW_DAYS))
        return {
            "total_doses": row.total_doses,
            "taken_count": row.taken_count,
            "skipped_count": row.skipped_count,
            "missed_count": row.missed_count,
            "adherence_percentage": adherence_percentage(row.taken_count, row.total_doses),
        }

    def today_counts(self, user_id):
        start, end = today_bounds()
        row = self._counts(user_id, start, end)
        return {
            "taken_count": row.taken_count,
            "skipped_count": row.skipped_count,
            "missed_count": row.missed_count,
        }
