# medtrack/routes/health_routes.py
from flask import Blueprint
from medtrack.controllers import health_controller

health_bp = Blueprint("health", __name__)

health_bp.route("/health", methods=["GET"])(health_controller.health)
