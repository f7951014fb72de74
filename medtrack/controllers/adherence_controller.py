# medtrack/controllers/adherence_controller.py
from flask import request
from flask_jwt_extended import jwt_required

from medtrack.helpers import api_response, handles_errors
from medtrack.services import AdherenceService, TokenService, get_gateway
from medtrack.services.adherence_service import MAX_HISTORY_DAYS, STATS_WINDOW_DAYS
from medtrack.utils.parsing import json_body, parse_int, require_fields


@jwt_required()
@handles_errors("Failed to log adherence")
def log_dose():
    user_id = TokenService.current_user_id()
    data = json_body()
    require_fields(data, ["scheduleId", "takenStatus"])

    adherence_id = AdherenceService(get_gateway()).log_dose(
        user_id,
        parse_int(data["scheduleId"], "scheduleId"),
        data["takenStatus"],
        data.get("notes"),
    )
    return api_response(True, "Adherence logged successfully", {"adherenceId": adherence_id}, 201)


@jwt_required()
@handles_errors("Failed to fetch adherence history")
def get_history():
    user_id = TokenService.current_user_id()
    days = parse_int(request.args.get("days"), "days", default=STATS_WINDOW_DAYS,
                     minimum=0, maximum=MAX_HISTORY_DAYS)
    return api_response(True, "Adherence history loaded", AdherenceService(get_gateway()).history(user_id, days))


@jwt_required()
@handles_errors("Failed to fetch statistics")
def get_stats():
    user_id = TokenService.current_user_id()
    return api_response(True, "Adherence statistics loaded", AdherenceService(get_gateway()).stats(user_id))
