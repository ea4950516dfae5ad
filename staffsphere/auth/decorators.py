from functools import wraps
from typing import Optional

from flask import abort, current_app, g, request

from ..constants import BEARER_PREFIX
from ..enums.role import Role
from ..exceptions import (
    ForbiddenException,
    InvalidTokenException,
    UnauthenticatedException,
)
from .helpers import CallerIdentity, check_role, get_current_user
from .tokens import TokenService


def _extract_token() -> Optional[str]:
    """Bearer header first, then the auth cookie. Empty values count as absent."""
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith(BEARER_PREFIX):
        token = auth_header[len(BEARER_PREFIX) :].strip()
        if token:
            return token

    cookie_name = current_app.config.get("AUTH_COOKIE_NAME", "token")
    token = request.cookies.get(cookie_name)
    return token or None


def _authenticate_request() -> CallerIdentity:
    """
    Core authentication logic
    Returns: CallerIdentity derived from the presented token
    Raises: UnauthenticatedException if no token, InvalidTokenException if it fails verification
    """
    token = _extract_token()
    if token is None:
        raise UnauthenticatedException("No credential presented")

    token_service: TokenService = current_app.token_service
    return token_service.verify(token)


def _set_user_context(identity: CallerIdentity):
    """Set user context in Flask g object"""
    g.auth_identity = identity
    g.auth_user_id = identity.id
    g.auth_role = identity.role


def _clear_user_context():
    """Clear user context from Flask g object"""
    g.auth_identity = None
    g.auth_user_id = None
    g.auth_role = None


def _authenticate_or_abort():
    try:
        identity = _authenticate_request()
    except InvalidTokenException as e:
        current_app.logger.warning(f"Invalid token on {request.method} {request.path}: {e}")
        abort(401, description="Not authenticated")
    except UnauthenticatedException as e:
        current_app.logger.warning(f"Unauthenticated request to {request.method} {request.path}: {e}")
        abort(401, description="Not authenticated")

    _set_user_context(identity)
    return identity


def auth_required(f):
    """
    Decorator that requires a valid credential.
    Aborts with 401 if the caller is not authenticated.

    Sets the following in Flask g:
    - g.auth_identity: CallerIdentity(id, role)
    - g.auth_user_id: User ID from token
    - g.auth_role: Role from token
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        _authenticate_or_abort()
        return f(*args, **kwargs)

    return decorated_function


def role_required(role: Role):
    """
    Decorator that requires a valid credential whose role equals ``role``.
    Aborts with 401 if not authenticated, 403 on a role mismatch.
    """
    required_role = role.value if isinstance(role, Role) else role

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            _authenticate_or_abort()

            try:
                check_role(get_current_user(), required_role)
            except ForbiddenException as e:
                current_app.logger.warning(
                    f"Role mismatch on {request.method} {request.path}: has {g.auth_role}, needs {required_role}"
                )
                abort(403, description=e.message)
            except UnauthenticatedException:
                abort(401, description="Not authenticated")

            return f(*args, **kwargs)

        return decorated_function

    return decorator


def auth_optional(f):
    """
    Decorator that optionally authenticates callers.
    Sets user context if authenticated, but doesn't require it.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            _set_user_context(_authenticate_request())
        except UnauthenticatedException as e:
            # For optional auth, we don't abort on errors
            current_app.logger.debug(f"Optional authentication failed: {e}")
            _clear_user_context()

        return f(*args, **kwargs)

    return decorated_function
