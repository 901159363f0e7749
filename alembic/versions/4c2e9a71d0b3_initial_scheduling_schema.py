"""Initial scheduling schema

Revision ID: 4c2e9a71d0b3
Revises:
Create Date: 2026-10-16 09:12:44.201537
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "4c2e9a71d0b3"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TIME_OFF_ENUM = "time_off_status"
RUN_STATUS_ENUM = "generation_run_status"


def upgrade() -> None:
    # --- restaurants / employees ---
    op.create_table(
        "restaurants",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("owner_email", sa.String(length=255), nullable=True),
        sa.Column("timezone", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("restaurant_id", sa.Integer(), nullable=False),
        sa.Column("first_name", sa.String(length=128), nullable=False),
        sa.Column("last_name", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.Column("position", sa.String(length=64), nullable=True),
        sa.Column("hourly_rate", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.CheckConstraint(
            "role IN ('manager', 'server', 'cook', 'bartender', 'host', 'employee')",
            name="ck_employee_role",
        ),
        sa.ForeignKeyConstraint(["restaurant_id"], ["restaurants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_employees_restaurant_id"), "employees", ["restaurant_id"], unique=False)

    # --- scheduling inputs ---
    op.create_table(
        "employee_preferences",
        sa.Column("employee_id", sa.Integer(), nullable=False),
        sa.Column("target_monthly_hours", sa.Integer(), nullable=False, server_default=sa.text("160")),
        sa.Column("preferred_shift_start_time", sa.Time(), nullable=True),
        sa.Column("preferred_shift_length_hours", sa.Numeric(precision=3, scale=1), nullable=True),
        sa.Column("max_days_per_week", sa.Integer(), nullable=False, server_default=sa.text("6")),
        sa.Column("prefers_weekends", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.CheckConstraint("target_monthly_hours >= 40 AND target_monthly_hours <= 200", name="ck_pref_target_hours"),
        sa.CheckConstraint("max_days_per_week >= 1 AND max_days_per_week <= 7", name="ck_pref_max_days"),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("employee_id"),
    )

    op.create_table(
        "employee_availability",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("employee_id", sa.Integer(), nullable=False),
        sa.Column("restaurant_id", sa.Integer(), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=True),
        sa.Column("specific_date", sa.Date(), nullable=True),
        sa.Column("unavailable_start_time", sa.Time(), nullable=True),
        sa.Column("unavailable_end_time", sa.Time(), nullable=True),
        sa.Column("is_all_day", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_recurring", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.CheckConstraint("day_of_week IS NULL OR (day_of_week >= 0 AND day_of_week <= 6)", name="ck_availability_day"),
        sa.CheckConstraint(
            "(day_of_week IS NOT NULL AND specific_date IS NULL AND is_recurring) OR "
            "(day_of_week IS NULL AND specific_date IS NOT NULL)",
            name="ck_availability_date_or_day",
        ),
        sa.CheckConstraint(
            "is_all_day OR (unavailable_start_time IS NOT NULL AND unavailable_end_time IS NOT NULL)",
            name="ck_availability_time_required",
        ),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["restaurant_id"], ["restaurants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_employee_availability_employee_id"), "employee_availability", ["employee_id"], unique=False)
    op.create_index(op.f("ix_employee_availability_restaurant_id"), "employee_availability", ["restaurant_id"], unique=False)
    op.create_index("ix_availability_employee_day", "employee_availability", ["employee_id", "day_of_week"], unique=False)

    op.create_table(
        "business_hours",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("restaurant_id", sa.Integer(), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("open_time", sa.Time(), nullable=False),
        sa.Column("close_time", sa.Time(), nullable=False),
        sa.Column("is_closed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="ck_business_hours_day"),
        sa.ForeignKeyConstraint(["restaurant_id"], ["restaurants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("restaurant_id", "day_of_week", name="uq_business_hours_day"),
    )
    op.create_index(op.f("ix_business_hours_restaurant_id"), "business_hours", ["restaurant_id"], unique=False)

    op.create_table(
        "staffing_requirements",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("restaurant_id", sa.Integer(), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("time_slot_start", sa.Time(), nullable=False),
        sa.Column("time_slot_end", sa.Time(), nullable=False),
        sa.Column("min_staff_required", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("optimal_staff", sa.Integer(), nullable=False, server_default=sa.text("2")),
        sa.CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="ck_staffing_day"),
        sa.CheckConstraint("min_staff_required >= 0", name="ck_staffing_min"),
        sa.CheckConstraint("optimal_staff >= min_staff_required", name="ck_staffing_optimal"),
        sa.ForeignKeyConstraint(["restaurant_id"], ["restaurants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_staffing_requirements_restaurant_id"), "staffing_requirements", ["restaurant_id"], unique=False)
    op.create_index("ix_staffing_day_time", "staffing_requirements", ["day_of_week", "time_slot_start"], unique=False)

    op.create_table(
        "time_off_requests",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("restaurant_id", sa.Integer(), nullable=False),
        sa.Column("employee_id", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column(
            "status",
            sa.Enum("pending", "approved", "denied", name=TIME_OFF_ENUM),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("end_date >= start_date", name="ck_time_off_range"),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["restaurant_id"], ["restaurants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_time_off_requests_employee_id"), "time_off_requests", ["employee_id"], unique=False)
    op.create_index(op.f("ix_time_off_requests_restaurant_id"), "time_off_requests", ["restaurant_id"], unique=False)

    # --- generation runs and shifts ---
    op.create_table(
        "schedule_generation_runs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("restaurant_id", sa.Integer(), nullable=False),
        sa.Column("week_start_date", sa.Date(), nullable=False),
        sa.Column("generation_params", sa.JSON(), nullable=False),
        sa.Column("total_shifts", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("total_hours", sa.Numeric(precision=8, scale=2), nullable=True),
        sa.Column("estimated_labor_cost", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("warnings", sa.JSON(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("draft", "published", "archived", name=RUN_STATUS_ENUM),
            nullable=False,
            server_default="draft",
        ),
        sa.Column("generated_by", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("(CURRENT_TIMESTAMP)"), nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["restaurant_id"], ["restaurants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_schedule_generation_runs_restaurant_id"), "schedule_generation_runs", ["restaurant_id"], unique=False)
    op.create_index(
        "ix_generation_runs_restaurant_week", "schedule_generation_runs", ["restaurant_id", "week_start_date"], unique=False
    )

    op.create_table(
        "shifts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("restaurant_id", sa.Integer(), nullable=False),
        sa.Column("employee_id", sa.Integer(), nullable=False),
        sa.Column("generation_run_id", sa.Integer(), nullable=True),
        sa.Column("shift_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("position", sa.String(length=64), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("(CURRENT_TIMESTAMP)"), nullable=False),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["generation_run_id"], ["schedule_generation_runs.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["restaurant_id"], ["restaurants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_shifts_restaurant_id"), "shifts", ["restaurant_id"], unique=False)
    op.create_index(op.f("ix_shifts_employee_id"), "shifts", ["employee_id"], unique=False)
    op.create_index(op.f("ix_shifts_generation_run_id"), "shifts", ["generation_run_id"], unique=False)
    op.create_index("ix_shifts_restaurant_date", "shifts", ["restaurant_id", "shift_date"], unique=False)
    op.create_index("ix_shifts_employee_date", "shifts", ["employee_id", "shift_date"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_shifts_employee_date", table_name="shifts")
    op.drop_index("ix_shifts_restaurant_date", table_name="shifts")
    op.drop_index(op.f("ix_shifts_generation_run_id"), table_name="shifts")
    op.drop_index(op.f("ix_shifts_employee_id"), table_name="shifts")
    op.drop_index(op.f("ix_shifts_restaurant_id"), table_name="shifts")
    op.drop_table("shifts")

    op.drop_index("ix_generation_runs_restaurant_week", table_name="schedule_generation_runs")
    op.drop_index(op.f("ix_schedule_generation_runs_restaurant_id"), table_name="schedule_generation_runs")
    op.drop_table("schedule_generation_runs")

    op.drop_index(op.f("ix_time_off_requests_restaurant_id"), table_name="time_off_requests")
    op.drop_index(op.f("ix_time_off_requests_employee_id"), table_name="time_off_requests")
    op.drop_table("time_off_requests")

    op.drop_index("ix_staffing_day_time", table_name="staffing_requirements")
    op.drop_index(op.f("ix_staffing_requirements_restaurant_id"), table_name="staffing_requirements")
    op.drop_table("staffing_requirements")

    op.drop_index(op.f("ix_business_hours_restaurant_id"), table_name="business_hours")
    op.drop_table("business_hours")

    op.drop_index("ix_availability_employee_day", table_name="employee_availability")
    op.drop_index(op.f("ix_employee_availability_restaurant_id"), table_name="employee_availability")
    op.drop_index(op.f("ix_employee_availability_employee_id"), table_name="employee_availability")
    op.drop_table("employee_availability")

    op.drop_table("employee_preferences")

    op.drop_index(op.f("ix_employees_restaurant_id"), table_name="employees")
    op.drop_table("employees")
    op.drop_table("restaurants")

    # postgres keeps enum types around after the tables go
    sa.Enum(name=RUN_STATUS_ENUM).drop(op.get_bind(), checkfirst=True)
    sa.Enum(name=TIME_OFF_ENUM).drop(op.get_bind(), checkfirst=True)
