# medtrack/services/health_condition_service.py
from medtrack.models import HealthCondition
from medtrack.utils.parsing import parse_date


class HealthConditionService:
    def __init__(self, gateway):
        self.gateway = gateway

    def list(self, user_id):
        conditions = (
            self.gateway.query(HealthCondition)
            .filter(HealthCondition.user_id == user_id)
            .order_by(
                HealthCondition.is_primary.desc(),
                HealthCondition.diagnosis_date.desc(),
                HealthCondition.id.desc(),
            )
            .all()
        )
        return [c.to_dict() for c in conditions]

    def primary_name(self, user_id):
        row = (
            self.gateway.query(HealthCondition.condition_name)
            .filter(HealthCondition.user_id == user_id, HealthCondition.is_primary.is_(True))
            .order_by(HealthCondition.id.desc())
            .first()
        )
        return row.condition_name if row else None

    def create(self, user_id, fields) -> int:
        is_primary = fields.get("isPrimary") or False
        if isinstance(is_primary, str):
            is_primary = is_primary.strip().lower() in ("true", "1", "yes")
        is_primary = bool(is_primary)
        condition = HealthCondition(
            user_id=user_id,
            condition_name=fields["conditionName"],
            diagnosis_date=parse_date(fields.get("diagnosisDate"), "diagnosisDate"),
            notes=fields.get("notes"),
            is_primary=is_primary,
        )
        with self.gateway.transaction():
            if is_primary:
                # only one primary condition per user; the newest one wins
                (
                    self.gateway.query(HealthCondition)
                    .filter(HealthCondition.user_id == user_id, HealthCondition.is_primary.is_(True))
                    .update({HealthCondition.is_primary: False}, synchronize_session=False)
                )
            self.gateway.add(condition)
            self.gateway.flush()
            condition_id = condition.id
        return condition_id
