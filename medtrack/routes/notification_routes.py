# medtrack/routes/notification_routes.py
from flask import Blueprint
from medtrack.controllers import notification_controller

notification_bp = Blueprint("notifications", __name__, url_prefix="/api/notifications")

notification_bp.route("", methods=["GET"])(notification_controller.list_notifications)
notification_bp.route("/<int:notification_id>/read", methods=["PATCH"])(notification_controller.mark_read)
