# medtrack/controllers/notification_controller.py
from flask import current_app
from flask_jwt_extended import jwt_required

from medtrack.helpers import api_response, handles_errors
from medtrack.services import NotificationService, TokenService, get_gateway


@jwt_required()
@handles_errors("Failed to fetch notifications")
def list_notifications():
    user_id = TokenService.current_user_id()
    return api_response(True, "Notifications loaded", NotificationService(get_gateway()).list(user_id))


@jwt_required()
@handles_errors("Failed to update notification")
def mark_read(notification_id):
    user_id = TokenService.current_user_id()
    touched = NotificationService(get_gateway()).mark_read(user_id, notification_id)
    if not touched:
        current_app.logger.debug("mark_read matched no notification %s for user %s", notification_id, user_id)
    return api_response(True, "Notification marked as read")
