"""add fingerprint hash to submissions

Revision ID: 7c8d9e0f1a2b
Revises: 1a2b3c4d5e6f
Create Date: 2026-02-13 21:37:52.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "7c8d9e0f1a2b"
down_revision = "1a2b3c4d5e6f"
branch_labels = None
depends_on = None


def upgrade():
    with op.batch_alter_table("submissions") as batch_op:
        batch_op.add_column(sa.Column("fingerprint_hash", sa.String(length=32), nullable=True))
        batch_op.create_unique_constraint(
            "uq_submissions_fingerprint_name", ["fingerprint_hash", "name_id"]
        )


def downgrade():
    with op.batch_alter_table("submissions") as batch_op:
        batch_op.drop_constraint("uq_submissions_fingerprint_name", type_="unique")
        batch_op.drop_column("fingerprint_hash")
