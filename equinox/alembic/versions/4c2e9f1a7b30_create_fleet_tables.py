"""create_fleet_tables

Revision ID: 4c2e9f1a7b30
Revises:
Create Date: 2026-10-19 06:12:41.508312

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c2e9f1a7b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

USER_ROLES = ('Admin', 'Supervisor', 'Driller', 'Viewer', 'User')
STAGING_STATUSES = ('Pending', 'Imported', 'Error')


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('role', sa.Enum(*USER_ROLES, name='userrole'), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('must_change_password', sa.Boolean(), nullable=False),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_created_at', 'users', ['created_at'])

    op.create_table(
        'import_staging',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('batch_id', sa.String(length=64), nullable=False),
        sa.Column('row_number', sa.Integer(), nullable=False),
        sa.Column('raw_data', sa.JSON(), nullable=False),
        sa.Column('status', sa.Enum(*STAGING_STATUSES, name='stagingstatus'), nullable=False),
        sa.Column('uploaded_by_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['uploaded_by_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_import_staging_batch_id', 'import_staging', ['batch_id'])
    op.create_index('ix_import_staging_created_at', 'import_staging', ['created_at'])

    op.create_table(
        'drilling_entries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('shift', sa.String(length=10), nullable=False),
        sa.Column('rig_id', sa.Integer(), nullable=True),
        sa.Column('project_id', sa.Integer(), nullable=True),
        sa.Column('meters_drilled', sa.Float(), nullable=False),
        sa.Column('total_shift_hours', sa.Float(), nullable=False),
        sa.Column('drilling_hours', sa.Float(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('created_by_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['created_by_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_drilling_entries_rig_id', 'drilling_entries', ['rig_id'])
    op.create_index('ix_drilling_entries_created_at', 'drilling_entries', ['created_at'])

    op.create_table(
        'financial_params',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('rig_id', sa.Integer(), nullable=True),
        sa.Column('project_id', sa.Integer(), nullable=True),
        sa.Column('cost_per_meter', sa.Float(), nullable=False),
        sa.Column('fuel_cost_factor', sa.Float(), nullable=False),
        sa.Column('consumables_factor', sa.Float(), nullable=False),
        sa.Column('labor_cost_factor', sa.Float(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_financial_params_created_at', 'financial_params', ['created_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_financial_params_created_at', table_name='financial_params')
    op.drop_table('financial_params')

    op.drop_index('ix_drilling_entries_created_at', table_name='drilling_entries')
    op.drop_index('ix_drilling_entries_rig_id', table_name='drilling_entries')
    op.drop_table('drilling_entries')

    op.drop_index('ix_import_staging_created_at', table_name='import_staging')
    op.drop_index('ix_import_staging_batch_id', table_name='import_staging')
    op.drop_table('import_staging')

    op.drop_index('ix_users_created_at', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

    # Drop the enum types (PostgreSQL)
    sa.Enum(*STAGING_STATUSES, name='stagingstatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(*USER_ROLES, name='userrole').drop(op.get_bind(), checkfirst=True)
