from .attendance import Attendance
from .department import Department
from .employee import Employee
from .leave import Leave
from .notification import Notification
from .payroll import Payroll
from .performance import PerformanceCycle, PerformanceGoal, PerformanceReview
from .project import Project, project_members
from .task import Task
from .user import User

__all__ = [
    "User",
    "Employee",
    "Department",
    "Attendance",
    "Leave",
    "Payroll",
    "Project",
    "project_members",
    "Task",
    "PerformanceCycle",
    "PerformanceGoal",
    "PerformanceReview",
    "Notification",
]
