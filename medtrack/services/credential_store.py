# medtrack/services/credential_store.py
from sqlalchemy.exc import IntegrityError

from medtrack.errors import DuplicateResource, Unauthorized
from medtrack.models import User


class CredentialStore:
    """Creates users and checks their passwords."""

    def __init__(self, gateway):
        self.gateway = gateway

    def email_exists(self, email: str) -> bool:
        return self.gateway.query(User.id).filter(User.email == email).first() is not None

    def register(self, first_name, last_name, email, password, date_of_birth=None, phone=None) -> int:
        if self.email_exists(email):
            raise DuplicateResource("Email already registered")

        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            date_of_birth=date_of_birth,
            phone=phone,
        )
        user.set_password(password)
        try:
            with self.gateway.transaction():
                self.gateway.add(user)
                self.gateway.flush()
                user_id = user.id
        except IntegrityError:
            # lost a race against a concurrent registration of the same email
            raise DuplicateResource("Email already registered")
        return user_id

    def verify(self, email: str, password: str) -> int:
        """Return the user id for a matching email/password pair."""
        user = self.gateway.query(User).filter(User.email == email).first()
        if not isinstance(password, str) or not user or not user.check_password(password):
            raise Unauthorized("Invalid credentials")
        return user.id
