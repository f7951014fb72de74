# medtrack/models/__init__.py
from .user import User
from .medication import Medication
from .schedule import Schedule
from .adherence_log import AdherenceLog
from .order import Order, OrderItem
from .health_condition import HealthCondition
from .notification import Notification
