# medtrack/controllers/auth_controller.py
from flask import current_app

from medtrack.helpers import api_response, handles_errors
from medtrack.services import CredentialStore, TokenService, get_gateway
from medtrack.utils.parsing import json_body, parse_date, require_fields, require_strings


@handles_errors("Registration failed")
def register():
    data = json_body()
    require_fields(data, ["firstName", "lastName", "email", "password"])
    require_strings(data, ["firstName", "lastName", "email", "password", "phone"])

    user_id = CredentialStore(get_gateway()).register(
        first_name=data["firstName"],
        last_name=data["lastName"],
        email=data["email"],
        password=data["password"],
        date_of_birth=parse_date(data.get("dateOfBirth"), "dateOfBirth"),
        phone=data.get("phone"),
    )
    current_app.logger.info("Registered user %s", user_id)
    return api_response(True, "User registered successfully", {"userId": user_id}, 201)


@handles_errors("Login failed")
def login():
    data = json_body()
    require_fields(data, ["email", "password"])
    require_strings(data, ["email", "password"])

    user_id = CredentialStore(get_gateway()).verify(data["email"], data["password"])
    token = TokenService.issue(user_id)
    return api_response(True, "Login successful", {"token": token, "userId": user_id})
