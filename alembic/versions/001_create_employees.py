"""Create employees table.

Revision ID: 001
Revises:
Create Date: 2026-10-19

Adds:
- employees table with a unique employee_number
- Index on name for directory search
"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the employees table."""
    op.create_table(
        "employees",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("employee_number", sa.String(32), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("employee_number", name="uq_employees_employee_number"),
    )
    op.create_index("ix_employees_name", "employees", ["name"], mysql_length=100)


def downgrade() -> None:
    """Drop the employees table."""
    op.drop_index("ix_employees_name", table_name="employees")
    op.drop_table("employees")
