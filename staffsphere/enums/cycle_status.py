from enum import Enum


class CycleStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
