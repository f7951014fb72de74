# medtrack/controllers/health_condition_controller.py
from flask_jwt_extended import jwt_required

from medtrack.helpers import api_response, handles_errors
from medtrack.services import HealthConditionService, TokenService, get_gateway
from medtrack.utils.parsing import json_body, require_fields


@jwt_required()
@handles_errors("Failed to fetch health conditions")
def list_conditions():
    user_id = TokenService.current_user_id()
    return api_response(True, "Health conditions loaded", HealthConditionService(get_gateway()).list(user_id))


@jwt_required()
@handles_errors("Failed to add health condition")
def create_condition():
    user_id = TokenService.current_user_id()
    data = json_body()
    require_fields(data, ["conditionName"])

    condition_id = HealthConditionService(get_gateway()).create(user_id, data)
    return api_response(True, "Health condition added successfully", {"conditionId": condition_id}, 201)
