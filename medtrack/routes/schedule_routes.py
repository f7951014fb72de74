# medtrack/routes/schedule_routes.py
from flask import Blueprint
from medtrack.controllers import schedule_controller

schedule_bp = Blueprint("schedules", __name__, url_prefix="/api/schedules")

schedule_bp.route("/today", methods=["GET"])(schedule_controller.list_today)
schedule_bp.route("", methods=["POST"])(schedule_controller.create_schedule)
