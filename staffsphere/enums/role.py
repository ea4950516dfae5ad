from enum import Enum
from typing import Optional


class Role(str, Enum):
    HR = "HR"
    EMPLOYEE = "EMPLOYEE"
    ADMIN = "ADMIN"

    @classmethod
    def coerce(cls, value: Optional[str]) -> "Role":
        """Upper-case the given role and fall back to EMPLOYEE when it is not recognised."""
        if not isinstance(value, str) or not value.strip():
            return cls.EMPLOYEE
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.EMPLOYEE
