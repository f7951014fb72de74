# medtrack/services/medication_service.py
from medtrack.errors import NotFound
from medtrack.models import Medication, Schedule
from medtrack.utils.parsing import parse_int


class MedicationService:
    def __init__(self, gateway):
        self.gateway = gateway

    def _owned(self, user_id, medication_id):
        medication = (
            self.gateway.query(Medication)
            .filter(Medication.id == medication_id, Medication.user_id == user_id)
            .first()
        )
        if not medication:
            raise NotFound("Medication not found")
        return medication

    def list(self, user_id):
        medications = (
            self.gateway.query(Medication)
            .filter(Medication.user_id == user_id, Medication.is_active.is_(True))
            .order_by(Medication.medicine_name, Medication.id)
            .all()
        )
        return [m.to_dict() for m in medications]

    def get(self, user_id, medication_id):
        medication = self._owned(user_id, medication_id)
        schedules = (
            self.gateway.query(Schedule)
            .filter(Schedule.medication_id == medication.id, Schedule.is_active.is_(True))
            .order_by(Schedule.scheduled_time, Schedule.id)
            .all()
        )
        payload = medication.to_dict()
        payload["schedules"] = [s.to_dict() for s in schedules]
        return payload

    def create(self, user_id, fields) -> int:
        medication = Medication(
            user_id=user_id,
            medicine_name=fields["medicineName"],
            generic_name=fields.get("genericName"),
            dosage=None if fields.get("dosage") is None else str(fields["dosage"]),
            dosage_unit=fields.get("dosageUnit"),
            frequency=fields.get("frequency"),
            stock_quantity=parse_int(fields.get("stockQuantity"), "stockQuantity", default=0),
            reorder_threshold=parse_int(fields.get("reorderThreshold"), "reorderThreshold", default=10),
        )
        with self.gateway.transaction():
            self.gateway.add(medication)
            self.gateway.flush()
            medication_id = medication.id
        return medication_id

    def update_stock(self, user_id, medication_id, quantity):
        with self.gateway.transaction():
            medication = self._owned(user_id, medication_id)
            medication.stock_quantity = quantity
