# medtrack/controllers/schedule_controller.py
from flask_jwt_extended import jwt_required

from medtrack.helpers import api_response, handles_errors
from medtrack.services import ScheduleService, TokenService, get_gateway
from medtrack.utils.parsing import json_body, parse_int, require_fields


@jwt_required()
@handles_errors("Failed to fetch schedules")
def list_today():
    user_id = TokenService.current_user_id()
    return api_response(True, "Schedules loaded", ScheduleService(get_gateway()).today(user_id))


@jwt_required()
@handles_errors("Failed to create schedule")
def create_schedule():
    user_id = TokenService.current_user_id()
    data = json_body()
    require_fields(data, ["medicationId", "scheduledTime"])

    schedule_id = ScheduleService(get_gateway()).create(
        user_id,
        parse_int(data["medicationId"], "medicationId"),
        data["scheduledTime"],
        data.get("daysOfWeek"),
    )
    return api_response(True, "Schedule created successfully", {"scheduleId": schedule_id}, 201)
