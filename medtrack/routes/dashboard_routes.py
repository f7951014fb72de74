# medtrack/routes/dashboard_routes.py
from flask import Blueprint
from medtrack.controllers import dashboard_controller

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")

dashboard_bp.route("", methods=["GET"])(dashboard_controller.get_dashboard)
