from .gateway import PersistenceGateway, get_gateway
from .credential_store import CredentialStore
from .token_service import TokenService
from .medication_service import MedicationService
from .schedule_service import ScheduleService
from .adherence_service import AdherenceService
from .order_service import OrderService
from .health_condition_service import HealthConditionService
from .notification_service import NotificationService
from .dashboard_service import DashboardService
