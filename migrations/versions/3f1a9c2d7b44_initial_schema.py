"""Initial schema

Revision ID: 3f1a9c2d7b44
Revises:
Create Date: 2026-10-19 09:12:31.204118

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1a9c2d7b44"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _audit():
    return [
        sa.Column("created_by", sa.Integer(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
        sa.Column("updated_by", sa.Integer(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    ]


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.Enum("HR", "EMPLOYEE", "ADMIN", name="role"), nullable=False),
        sa.Column("department", sa.String(length=120), nullable=True),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("profile_image", sa.String(length=512), nullable=True),
        sa.Column("language", sa.String(length=32), nullable=True),
        sa.Column("theme", sa.String(length=32), nullable=False),
        sa.Column("dob", sa.Date(), nullable=True),
        sa.Column("gender", sa.String(length=16), nullable=True),
        *_timestamps(),
    )
    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_users_email"), ["email"], unique=True)

    op.create_table(
        "department",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False, unique=True),
        sa.Column("manager", sa.String(length=120), nullable=False),
        sa.Column("employees_count", sa.Integer(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "employee",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("department", sa.String(length=120), nullable=False),
        sa.Column("job_title", sa.String(length=120), nullable=False),
        sa.Column("date_of_joining", sa.DateTime(), nullable=False),
        sa.Column(
            "status", sa.Enum("ACTIVE", "INACTIVE", "ON_LEAVE", "TERMINATED", name="employeestatus"), nullable=False
        ),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("salary", sa.Float(), nullable=False),
        sa.Column("avatar_url", sa.String(length=512), nullable=True),
        sa.Column("dob", sa.Date(), nullable=True),
        sa.Column("gender", sa.Enum("MALE", "FEMALE", "OTHER", name="gender"), nullable=True),
        sa.Column("emergency_contact_name", sa.String(length=120), nullable=True),
        sa.Column("emergency_contact_relation", sa.String(length=64), nullable=True),
        sa.Column("emergency_contact_phone", sa.String(length=40), nullable=True),
        sa.Column("profile_summary", sa.Text(), nullable=True),
        sa.Column("user_ref", sa.Integer(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
        *_timestamps(),
        *_audit(),
    )
    with op.batch_alter_table("employee", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_employee_email"), ["email"], unique=True)
        batch_op.create_index(batch_op.f("ix_employee_department"), ["department"], unique=False)
        batch_op.create_index(batch_op.f("ix_employee_user_ref"), ["user_ref"], unique=False)

    op.create_table(
        "attendance",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "employee_id", sa.Integer(), sa.ForeignKey("employee.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("day", sa.Date(), nullable=False),
        sa.Column("status", sa.Enum("PRESENT", "ABSENT", "ON_LEAVE", name="attendancestatus"), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("employee_id", "day", name="uq_attendance_employee_day"),
    )
    with op.batch_alter_table("attendance", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_attendance_employee_id"), ["employee_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_attendance_date"), ["date"], unique=False)

    op.create_table(
        "leave",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "employee_id", sa.Integer(), sa.ForeignKey("employee.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("type", sa.Enum("CASUAL", "SICK", "EARNED", "UNPAID", "OTHER", name="leavetype"), nullable=False),
        sa.Column("from_date", sa.DateTime(), nullable=False),
        sa.Column("to_date", sa.DateTime(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("status", sa.Enum("PENDING", "APPROVED", "REJECTED", name="leavestatus"), nullable=False),
        *_timestamps(),
        *_audit(),
    )
    with op.batch_alter_table("leave", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_leave_employee_id"), ["employee_id"], unique=False)

    op.create_table(
        "payroll",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "employee_id", sa.Integer(), sa.ForeignKey("employee.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("employee_name", sa.String(length=120), nullable=False),
        sa.Column("month", sa.String(length=7), nullable=False),
        sa.Column("basic_pay", sa.Float(), nullable=False),
        sa.Column("deductions", sa.Float(), nullable=False),
        sa.Column("net_pay", sa.Float(), nullable=False),
        sa.Column("status", sa.Enum("PENDING", "PROCESSED", name="payrollstatus"), nullable=False),
        *_timestamps(),
        *_audit(),
    )
    with op.batch_alter_table("payroll", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_payroll_employee_id"), ["employee_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_payroll_month"), ["month"], unique=False)

    op.create_table(
        "project",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.Enum("COMPLETED", "ONGOING", "PENDING", name="projectstatus"), nullable=False),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=True),
        *_timestamps(),
        *_audit(),
    )
    with op.batch_alter_table("project", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_project_status"), ["status"], unique=False)

    op.create_table(
        "project_members",
        sa.Column(
            "project_id", sa.Integer(), sa.ForeignKey("project.id", ondelete="CASCADE"), primary_key=True
        ),
        sa.Column(
            "employee_id", sa.Integer(), sa.ForeignKey("employee.id", ondelete="CASCADE"), primary_key=True
        ),
    )

    op.create_table(
        "task",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("status", sa.Enum("TO_DO", "IN_PROGRESS", "DONE", name="taskstatus"), nullable=False),
        sa.Column("priority", sa.Enum("LOW", "MEDIUM", "HIGH", name="taskpriority"), nullable=False),
        sa.Column("due_date", sa.DateTime(), nullable=True),
        sa.Column(
            "assigned_to", sa.Integer(), sa.ForeignKey("employee.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("project_id", sa.Integer(), sa.ForeignKey("project.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_by", sa.Integer(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
        *_timestamps(),
    )
    with op.batch_alter_table("task", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_task_status"), ["status"], unique=False)
        batch_op.create_index(batch_op.f("ix_task_priority"), ["priority"], unique=False)
        batch_op.create_index(batch_op.f("ix_task_assigned_to"), ["assigned_to"], unique=False)
        batch_op.create_index(batch_op.f("ix_task_project_id"), ["project_id"], unique=False)

    op.create_table(
        "performance_cycle",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=False),
        sa.Column("status", sa.Enum("ACTIVE", "COMPLETED", name="cyclestatus"), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "performance_goal",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "employee_id", sa.Integer(), sa.ForeignKey("employee.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("target_date", sa.DateTime(), nullable=False),
        sa.Column("status", sa.Enum("PENDING", "IN_PROGRESS", "COMPLETED", name="goalstatus"), nullable=False),
        *_timestamps(),
    )
    with op.batch_alter_table("performance_goal", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_performance_goal_employee_id"), ["employee_id"], unique=False)

    op.create_table(
        "performance_review",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "employee_id", sa.Integer(), sa.ForeignKey("employee.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("reviewer", sa.String(length=120), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comments", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("acknowledged", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    with op.batch_alter_table("performance_review", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_performance_review_employee_id"), ["employee_id"], unique=False)

    op.create_table(
        "notification",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("message", sa.String(length=500), nullable=False),
        sa.Column("level", sa.Enum("INFO", "WARNING", "ALERT", name="notificationlevel"), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=True),
        *_timestamps(),
    )
    with op.batch_alter_table("notification", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_notification_user_id"), ["user_id"], unique=False)


def downgrade():
    op.drop_table("notification")
    op.drop_table("performance_review")
    op.drop_table("performance_goal")
    op.drop_table("performance_cycle")
    op.drop_table("task")
    op.drop_table("project_members")
    op.drop_table("project")
    op.drop_table("payroll")
    op.drop_table("leave")
    op.drop_table("attendance")
    op.drop_table("employee")
    op.drop_table("department")
    op.drop_table("users")

    bind = op.get_bind()
    for enum_name in (
        "notificationlevel",
        "goalstatus",
        "cyclestatus",
        "taskpriority",
        "taskstatus",
        "projectstatus",
        "payrollstatus",
        "leavestatus",
        "leavetype",
        "attendancestatus",
        "gender",
        "employeestatus",
        "role",
    ):
        sa.Enum(name=enum_name).drop(bind, checkfirst=True)
