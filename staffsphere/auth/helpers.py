from dataclasses import dataclass
from typing import Any, Optional

from flask import g

from ..exceptions import ForbiddenException, UnauthenticatedException


@dataclass(frozen=True)
class CallerIdentity:
    id: Any
    role: str


def check_role(identity: Optional[CallerIdentity], required_role: str) -> CallerIdentity:
    """
    Role gate: the caller's role must equal the required role exactly.
    Raises: UnauthenticatedException when no identity is attached,
            ForbiddenException on a role mismatch
    """
    if identity is None or not identity.role:
        raise UnauthenticatedException()

    if identity.role != required_role:
        raise ForbiddenException(f"{required_role} role required")

    return identity


def get_current_user() -> Optional[CallerIdentity]:
    """
    Helper function to get the caller identity for this request.
    Returns None if not authenticated.
    """
    return getattr(g, "auth_identity", None)


def get_current_user_id():
    user = get_current_user()
    return user.id if user else None


def is_authenticated():
    """
    Helper function to check if current request is authenticated.
    Returns True if authenticated, False otherwise.
    """
    return get_current_user() is not None
