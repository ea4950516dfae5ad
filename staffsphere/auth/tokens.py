from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from ..constants import DEFAULT_TOKEN_LIFETIME_SECONDS, JWT_ALGORITHM
from ..exceptions import InvalidTokenException
from .helpers import CallerIdentity


class TokenService:
    """Issues and verifies the signed credentials handed out at login.

    The secret is passed in explicitly; ``create_app`` builds one instance from
    the app config and attaches it as ``app.token_service``.
    """

    def __init__(self, secret: str, expires_in_seconds: int = DEFAULT_TOKEN_LIFETIME_SECONDS):
        if not secret:
            raise ValueError("A signing secret is required")
        self.secret = secret
        self.expires_in = timedelta(seconds=expires_in_seconds)

    def issue(self, user_id, role: str, now: Optional[datetime] = None) -> str:
        """Sign a token asserting {id, role} that expires after the configured lifetime."""
        if now is None:
            now = datetime.now(timezone.utc)

        payload = {
            "id": user_id,
            "role": role,
            "iat": int(now.timestamp()),
            "exp": int((now + self.expires_in).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: str) -> CallerIdentity:
        """
        Check signature and expiry, then return the claims verbatim.
        Raises: InvalidTokenException on any failure
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[JWT_ALGORITHM], options={"require_exp": True})
        except ExpiredSignatureError:
            raise InvalidTokenException("Token expired")
        except JWTError as e:
            raise InvalidTokenException(f"Token rejected: {e}")

        if "id" not in payload or "role" not in payload:
            raise InvalidTokenException("Token is missing identity claims")

        return CallerIdentity(id=payload["id"], role=payload["role"])
