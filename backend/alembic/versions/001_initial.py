"""Initial migration - create gps_points table

Revision ID: 001_initial
Revises:
Create Date: 2026-09-14

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'gps_points',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('received_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('sent_at', sa.Text(), nullable=True),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('category', sa.Text(), nullable=False),
        sa.Column('user', sa.Text(), nullable=True),
        sa.Column('captured_at', sa.Text(), nullable=False),
        sa.Column('p1_lat', sa.Float(), nullable=False),
        sa.Column('p1_lon', sa.Float(), nullable=False),
        sa.Column('p1_accuracy_m', sa.Float(), nullable=True),
        sa.Column('p1_timestamp_ms', sa.BigInteger(), nullable=True),
        sa.Column('p2_lat', sa.Float(), nullable=False),
        sa.Column('p2_lon', sa.Float(), nullable=False),
        sa.Column('p2_accuracy_m', sa.Float(), nullable=True),
        sa.Column('p2_timestamp_ms', sa.BigInteger(), nullable=True),
        sa.Column('dt_sec', sa.Float(), nullable=True),
        sa.Column('distance_m', sa.Float(), nullable=True),
        sa.Column('speed_kmh', sa.Float(), nullable=True),
        sa.Column('direction_deg', sa.Float(), nullable=True),
        sa.Column('raw_json', sa.Text(), nullable=True),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table('gps_points')
