# medtrack/routes/medication_routes.py
from flask import Blueprint
from medtrack.controllers import medication_controller

medication_bp = Blueprint("medications", __name__, url_prefix="/api/medications")

medication_bp.route("", methods=["GET"])(medication_controller.list_medications)
medication_bp.route("", methods=["POST"])(medication_controller.create_medication)
medication_bp.route("/<int:medication_id>", methods=["GET"])(medication_controller.get_medication)
medication_bp.route("/<int:medication_id>/stock", methods=["PATCH"])(medication_controller.update_stock)
