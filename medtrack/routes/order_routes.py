# medtrack/routes/order_routes.py
from flask import Blueprint
from medtrack.controllers import order_controller

order_bp = Blueprint("orders", __name__, url_prefix="/api/orders")

order_bp.route("", methods=["GET"])(order_controller.list_orders)
order_bp.route("", methods=["POST"])(order_controller.create_order)
order_bp.route("/<int:order_id>/status", methods=["PATCH"])(order_controller.update_status)
