from enum import Enum


class ProjectStatus(str, Enum):
    COMPLETED = "Completed"
    ONGOING = "Ongoing"
    PENDING = "Pending"
