"""
Attendance marking. Both attendance write routes go through ``mark_attendance``
so the one-record-per-employee-per-day rule lives in a single place.
"""

from datetime import datetime
from typing import Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from ..enums.attendance_status import AttendanceStatus
from ..exceptions import (
    DuplicateAttendanceException,
    NotFoundException,
    ValidationException,
)
from ..extensions import db
from ..models.attendance import Attendance
from ..models.employee import Employee
from ..utils.date_utils import get_day_bounds


def mark_attendance(employee_id, status=None, now: Optional[datetime] = None) -> Attendance:
    """
    Record attendance for an employee for the day containing ``now``.

    Args:
        employee_id: Employee to mark
        status: PRESENT, ABSENT or ON_LEAVE. Anything else is recorded as PRESENT
        now: Timestamp of the mark, server-local (defaults to the current time)

    Returns:
        The persisted Attendance record

    Raises:
        ValidationException: employee_id missing
        NotFoundException: no such employee
        DuplicateAttendanceException: the employee already has a record for that day
    """
    if employee_id is None or employee_id == "":
        raise ValidationException("Employee ID is required.")

    employee = db.session.get(Employee, employee_id)
    if employee is None:
        raise NotFoundException("Employee not found.")

    if now is None:
        now = datetime.now()

    status = AttendanceStatus.coerce(status)
    start, end = get_day_bounds(now)

    existing = Attendance.filter_by_employee_between(employee.id, start, end).first()
    if existing is not None:
        current_app.logger.warning(f"Attendance for employee {employee.id} already marked on {start.date()}")
        raise DuplicateAttendanceException()

    record = Attendance.new(employee.id, status, now)
    db.session.add(record)
    try:
        db.session.commit()
    except IntegrityError:
        # A concurrent request marked the same day between the check and the insert
        db.session.rollback()
        current_app.logger.warning(f"Concurrent attendance mark for employee {employee.id} on {start.date()}")
        raise DuplicateAttendanceException()

    current_app.logger.info(f"Marked employee {employee.id} {status.value} on {start.date()}")
    return record


def attendance_percentage(employee_id: int) -> dict:
    """Share of an employee's records that are PRESENT, formatted with two decimals."""
    total_days = Attendance.query.filter(Attendance.employee_id == employee_id).count()
    present_days = Attendance.query.filter(
        Attendance.employee_id == employee_id, Attendance.status == AttendanceStatus.PRESENT
    ).count()

    percentage = (present_days / total_days * 100) if total_days else 0
    return {
        "employeeId": employee_id,
        "totalDays": total_days,
        "presentDays": present_days,
        "percentage": f"{percentage:.2f}",
    }


def monthly_overview() -> list[dict]:
    """PRESENT and total marks grouped by calendar month, oldest month first."""
    buckets: dict[tuple[int, int], dict] = {}
    for day, status in db.session.query(Attendance.day, Attendance.status).all():
        bucket = buckets.setdefault((day.year, day.month), {"presentCount": 0, "totalMarked": 0})
        bucket["totalMarked"] += 1
        if status == AttendanceStatus.PRESENT:
            bucket["presentCount"] += 1

    return [{"year": year, "month": month, **counts} for (year, month), counts in sorted(buckets.items())]


def present_today_count(now: Optional[datetime] = None) -> int:
    start, end = get_day_bounds(now)
    return Attendance.query.filter(
        Attendance.status == AttendanceStatus.PRESENT,
        Attendance.date >= start,
        Attendance.date <= end,
    ).count()
