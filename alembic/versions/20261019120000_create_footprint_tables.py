"""create users, daily_logs and leaderboard_entries tables

Revision ID: 20261019120000
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019120000'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the profile, daily log and leaderboard tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('department', sa.String(), nullable=False),
        sa.Column('campus', sa.String(), nullable=False),
        sa.Column('total_points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_emissions', sa.Float(), nullable=False, server_default='0'),
        sa.Column('daily_points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('daily_emissions', sa.Float(), nullable=False, server_default='0'),
        sa.Column('today_transport_mode', sa.String(), nullable=True),
        sa.Column('last_log_date', sa.Date(), nullable=True),
        sa.Column('streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('walked_km', sa.Float(), nullable=False, server_default='0'),
        sa.Column('cycled_km', sa.Float(), nullable=False, server_default='0'),
        sa.Column('commute_mode', sa.String(), nullable=True),
        sa.Column('commute_distance_km', sa.Float(), nullable=True),
        sa.Column('commute_round_trips', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('last_active', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_department'), 'users', ['department'], unique=False)

    op.create_table(
        'daily_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('log_date', sa.Date(), nullable=False),
        sa.Column('transport_mode', sa.String(length=16), nullable=False),
        sa.Column('distance_km', sa.Float(), nullable=False),
        sa.Column('trips', sa.Integer(), nullable=False),
        sa.Column('emissions', sa.Float(), nullable=False),
        sa.Column('points', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'log_date', name='uq_daily_log_user_date'),
    )
    op.create_index(op.f('ix_daily_logs_id'), 'daily_logs', ['id'], unique=False)
    op.create_index(op.f('ix_daily_logs_user_id'), 'daily_logs', ['user_id'], unique=False)

    op.create_table(
        'leaderboard_entries',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('department', sa.String(), nullable=False),
        sa.Column('campus', sa.String(), nullable=False),
        sa.Column('total_points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('daily_points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('user_id'),
    )
    op.create_index(op.f('ix_leaderboard_entries_department'), 'leaderboard_entries', ['department'], unique=False)


def downgrade() -> None:
    """Drop the footprint tables."""
    op.drop_index(op.f('ix_leaderboard_entries_department'), table_name='leaderboard_entries')
    op.drop_table('leaderboard_entries')
    op.drop_index(op.f('ix_daily_logs_user_id'), table_name='daily_logs')
    op.drop_index(op.f('ix_daily_logs_id'), table_name='daily_logs')
    op.drop_table('daily_logs')
    op.drop_index(op.f('ix_users_department'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
