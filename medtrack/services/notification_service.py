# medtrack/services/notification_service.py
from medtrack.models import Notification

RECENT_LIMIT = 20


class NotificationService:
    def __init__(self, gateway):
        self.gateway = gateway

    def list(self, user_id, limit=RECENT_LIMIT):
        notifications = (
            self.gateway.query(Notification)
            .filter(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .limit(limit)
            .all()
        )
        return [n.to_dict() for n in notifications]

    def mark_read(self, user_id, notification_id):
        """Mark as read; returns the number of rows touched (0 when not owned)."""
        with self.gateway.transaction():
            return (
                self.gateway.query(Notification)
                .filter(Notification.id == notification_id, Notification.user_id == user_id)
                .update({Notification.is_read: True}, synchronize_session=False)
            )
