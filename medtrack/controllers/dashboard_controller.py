# medtrack/controllers/dashboard_controller.py
from flask_jwt_extended import jwt_required

from medtrack.helpers import api_response, handles_errors
from medtrack.services import DashboardService, TokenService, get_gateway


@jwt_required()
@handles_errors("Failed to fetch dashboard data")
def get_dashboard():
    user_id = TokenService.current_user_id()
    data = DashboardService(get_gateway()).get(user_id)
    return api_response(True, "Dashboard loaded", data)
