# medtrack/routes/adherence_routes.py
from flask import Blueprint
from medtrack.controllers import adherence_controller

adherence_bp = Blueprint("adherence", __name__, url_prefix="/api/adherence")

adherence_bp.route("", methods=["POST"])(adherence_controller.log_dose)
adherence_bp.route("/history", methods=["GET"])(adherence_controller.get_history)
adherence_bp.route("/stats", methods=["GET"])(adherence_controller.get_stats)
