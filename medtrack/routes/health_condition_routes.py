# medtrack/routes/health_condition_routes.py
from flask import Blueprint
from medtrack.controllers import health_condition_controller

health_condition_bp = Blueprint("health_conditions", __name__, url_prefix="/api/health-conditions")

health_condition_bp.route("", methods=["GET"])(health_condition_controller.list_conditions)
health_condition_bp.route("", methods=["POST"])(health_condition_controller.create_condition)
