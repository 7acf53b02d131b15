"""Add moderation columns to gps_points

Revision ID: 002_add_moderation
Revises: 001_initial
Create Date: 2026-09-21

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '002_add_moderation'
down_revision: Union[str, None] = '001_initial'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column('gps_points', sa.Column('hidden_at', sa.DateTime(timezone=True), nullable=True))
    op.add_column('gps_points', sa.Column('hidden_reason', sa.Text(), nullable=True))


def downgrade() -> None:
    # batch mode so SQLite can drop columns
    with op.batch_alter_table('gps_points') as batch_op:
        batch_op.drop_column('hidden_reason')
        batch_op.drop_column('hidden_at')
