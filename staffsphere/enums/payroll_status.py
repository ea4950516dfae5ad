from enum import Enum


class PayrollStatus(str, Enum):
    PENDING = "Pending"
    PROCESSED = "Processed"
