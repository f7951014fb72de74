# medtrack/services/token_service.py
from flask_jwt_extended import create_access_token, get_jwt_identity

from medtrack.errors import Unauthorized


class TokenService:
    """
    Issues and reads signed access tokens.

    Signing, expiry (JWT_ACCESS_TOKEN_EXPIRES) and header extraction are
    handled by flask-jwt-extended; the user id travels as the string
    subject of the token.
    """

    @staticmethod
    def issue(user_id: int) -> str:
        return create_access_token(identity=str(user_id))

    @staticmethod
    def current_user_id() -> int:
        identity = get_jwt_identity()
        try:
            return int(identity)
        except (TypeError, ValueError):
            raise Unauthorized("Invalid token")
