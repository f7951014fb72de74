# medtrack/controllers/order_controller.py
from flask_jwt_extended import jwt_required

from medtrack.helpers import api_response, handles_errors
from medtrack.services import OrderService, TokenService, get_gateway
from medtrack.utils.parsing import json_body, require_fields


@jwt_required()
@handles_errors("Failed to fetch orders")
def list_orders():
    user_id = TokenService.current_user_id()
    return api_response(True, "Orders loaded", OrderService(get_gateway()).list(user_id))


@jwt_required()
@handles_errors("Failed to create order")
def create_order():
    user_id = TokenService.current_user_id()
    data = json_body()
    require_fields(data, ["items"])

    order_id = OrderService(get_gateway()).create(
        user_id,
        data["items"],
        pharmacy_name=data.get("pharmacyName"),
        delivery_address=data.get("deliveryAddress"),
    )
    return api_response(True, "Order created successfully", {"orderId": order_id}, 201)


@jwt_required()
@handles_errors("Failed to update order")
def update_status(order_id):
    user_id = TokenService.current_user_id()
    data = json_body()
    require_fields(data, ["status"])

    OrderService(get_gateway()).update_status(user_id, order_id, data["status"])
    return api_response(True, "Order status updated")
