# medtrack/services/dashboard_service.py
from medtrack.models import Medication
from medtrack.services.adherence_service import AdherenceService
from medtrack.services.health_condition_service import HealthConditionService
from medtrack.services.schedule_service import ScheduleService

NO_CONDITION = "No condition recorded"


class DashboardService:
    def __init__(self, gateway):
        self.gateway = gateway

    def low_stock(self, user_id):
        rows = (
            self.gateway.query(
                Medication.id,
                Medication.medicine_name,
                Medication.stock_quantity,
                Medication.reorder_threshold,
            )
            .filter(
                Medication.user_id == user_id,
                Medication.stock_quantity <= Medication.reorder_threshold,
            )
            .order_by(Medication.stock_quantity, Medication.id)
            .all()
        )
        return [r._asdict() for r in rows]

    def get(self, user_id):
        return {
            "todayMedications": ScheduleService(self.gateway).today(user_id),
            "primaryCondition": HealthConditionService(self.gateway).primary_name(user_id) or NO_CONDITION,
            "lowStockMedications": self.low_stock(user_id),
            "adherenceStats": AdherenceService(self.gateway).today_counts(user_id),
        }
