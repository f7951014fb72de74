# medtrack/controllers/medication_controller.py
from flask_jwt_extended import jwt_required

from medtrack.helpers import api_response, handles_errors
from medtrack.services import MedicationService, TokenService, get_gateway
from medtrack.utils.parsing import json_body, parse_int, require_fields


@jwt_required()
@handles_errors("Failed to fetch medications")
def list_medications():
    user_id = TokenService.current_user_id()
    return api_response(True, "Medications loaded", MedicationService(get_gateway()).list(user_id))


@jwt_required()
@handles_errors("Failed to fetch medication")
def get_medication(medication_id):
    user_id = TokenService.current_user_id()
    return api_response(True, "Medication loaded", MedicationService(get_gateway()).get(user_id, medication_id))


@jwt_required()
@handles_errors("Failed to add medication")
def create_medication():
    user_id = TokenService.current_user_id()
    data = json_body()
    require_fields(data, ["medicineName"])

    medication_id = MedicationService(get_gateway()).create(user_id, data)
    return api_response(True, "Medication added successfully", {"medicationId": medication_id}, 201)


@jwt_required()
@handles_errors("Failed to update stock")
def update_stock(medication_id):
    user_id = TokenService.current_user_id()
    data = json_body()
    quantity = parse_int(data.get("stockQuantity"), "stockQuantity")

    MedicationService(get_gateway()).update_stock(user_id, medication_id, quantity)
    return api_response(True, "Stock updated successfully")
