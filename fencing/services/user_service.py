import logging
import re
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..exceptions import AuthenticationError, ValidationError
from ..models import Role, User
from ..repositories import UserRepository

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class UserService:
    """Accounts used to log in. Passwords are only ever stored hashed."""

    def __init__(self, user_repository: UserRepository):
        self.users = user_repository

    def find_by_username(self, username: str) -> Optional[User]:
        if not username:
            return None
        return self.users.find_by_username(username)

    def register_user(self, username: str, password: str, email: str, role: Role = Role.USER) -> User:
        if not username or not password or not email:
            raise ValidationError("Username, password and email are required")
        if not isinstance(email, str) or not EMAIL_PATTERN.match(email.strip()):
            raise ValidationError("Email should be valid")
        if self.users.find_by_username(username) is not None:
            raise ValidationError(f"Username '{username}' is already taken")

        user = User(
            username=username,
            password_hash=generate_password_hash(password),
            email=email,
            role=role,
        )
        self.users.save(user)
        logger.info("Registered %s user %s", role.value, username)
        return user

    def authenticate(self, username: str, password: str) -> User:
        user = self.find_by_username(username)
        if user is None or not check_password_hash(user.password_hash, password or ''):
            logger.warning("Failed login for %s", username)
            raise AuthenticationError("Invalid username or password")
        return user
