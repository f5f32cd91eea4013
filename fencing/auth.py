"""
Bearer token authentication and role checks.

Tokens are HS256 JWTs whose subject is the username. Flask-Login resolves the
``Authorization: Bearer <token>`` header on every request into a
``Principal``; routes then guard themselves with ``login_required`` (any
valid token) or ``admin_required`` (role ADMIN).
"""
import base64
import logging
from datetime import datetime, timedelta, timezone
from functools import wraps
from typing import Optional

import jwt
from flask import current_app, request
from flask_login import LoginManager, UserMixin, current_user, login_required

from .exceptions import AuthenticationError, AuthorizationError
from .models import Role, User

logger = logging.getLogger(__name__)

login_manager = LoginManager()
# Tokens are stateless; nothing is kept in the cookie session
login_manager.session_protection = None

__all__ = [
    'Principal', 'login_manager', 'login_required', 'admin_required', 'require_admin',
    'has_role', 'can_mutate', 'issue_token', 'decode_token',
]


class Principal(UserMixin):
    """The authenticated caller for the current request."""

    def __init__(self, user_id: int, username: str, role: Role):
        self.id = user_id
        self.username = username
        self.role = role

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        return cls(user.id, user.username, user.role)

    def to_dict(self):
        return {'id': self.id, 'username': self.username, 'role': self.role.value}


def has_role(principal, role: Role) -> bool:
    if principal is None or not getattr(principal, 'is_authenticated', False):
        return False
    return getattr(principal, 'role', None) == role


def can_mutate(principal) -> bool:
    """Only administrators may create, change or delete records."""
    return has_role(principal, Role.ADMIN)


def _signing_key() -> bytes:
    return base64.b64decode(current_app.config['JWT_SECRET_KEY'])


def issue_token(user: User, now: datetime = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(hours=current_app.config['JWT_EXPIRATION_HOURS'])
    payload = {
        'sub': user.username,
        'iat': issued_at,
        'exp': expires_at,
    }
    return jwt.encode(payload, _signing_key(), algorithm=current_app.config['JWT_ALGORITHM'])


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(
            token,
            _signing_key(),
            algorithms=[current_app.config['JWT_ALGORITHM']],
            options={'require': ['sub', 'exp']},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(f"Invalid token: {e}")


def bearer_token(header: Optional[str]) -> Optional[str]:
    if not header or not header.startswith('Bearer '):
        return None
    token = header[len('Bearer '):].strip()
    return token or None


@login_manager.request_loader
def load_principal_from_request(request) -> Optional[Principal]:
    token = bearer_token(request.headers.get('Authorization'))
    if token is None:
        return None

    try:
        claims = decode_token(token)
    except AuthenticationError as e:
        logger.debug("Rejected bearer token: %s", e.message)
        return None

    user = current_app.services.users.find_by_username(claims.get('sub'))
    if user is None:
        return None
    return Principal.from_user(user)


@login_manager.unauthorized_handler
def unauthorized():
    raise AuthenticationError()


def require_admin(action: str = None) -> None:
    """Raise unless the authenticated principal may mutate data."""
    if not can_mutate(current_user):
        logger.warning("User %s denied %s", getattr(current_user, 'username', None), action or request.endpoint)
        raise AuthorizationError()


def admin_required(func):
    """Require a valid token belonging to an ADMIN."""
    @wraps(func)
    def decorated_view(*args, **kwargs):
        if not current_user.is_authenticated:
            return login_manager.unauthorized()
        require_admin(func.__name__)
        return func(*args, **kwargs)
    return decorated_view
