from enum import Enum


class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    ON_LEAVE = "ON_LEAVE"

    @classmethod
    def coerce(cls, value) -> "AttendanceStatus":
        # Unknown values are recorded as PRESENT instead of being rejected
        try:
            return cls(value)
        except (TypeError, ValueError):
            return cls.PRESENT
