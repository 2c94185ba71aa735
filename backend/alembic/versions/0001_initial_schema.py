"""initial agent, preference, coverage and email job tables

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'agents',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column('company', sa.String(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('onboarding_step', sa.String(length=20), nullable=False, server_default='welcome'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_agents_email', 'agents', ['email'], unique=True)

    op.create_table(
        'notification_preferences',
        sa.Column('agent_id', sa.Uuid(), nullable=False),
        sa.Column('buyer_need', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('sales_intel', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('renter_need', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('general_discussion', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('min_price', sa.Float(), nullable=True),
        sa.Column('max_price', sa.Float(), nullable=True),
        sa.Column('has_no_min', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('has_no_max', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('property_types', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['agent_id'], ['agents.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('agent_id'),
    )

    op.create_table(
        'agent_coverage_areas',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('agent_id', sa.Uuid(), nullable=False),
        sa.Column('state', sa.String(length=2), nullable=False),
        sa.Column('county', sa.String(length=100), nullable=True),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('neighborhood', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['agent_id'], ['agents.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_agent_coverage_areas_agent_id', 'agent_coverage_areas', ['agent_id'])
    op.create_index('ix_agent_coverage_areas_state', 'agent_coverage_areas', ['state'])

    op.create_table(
        'email_jobs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('batch_id', sa.Uuid(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='queued'),
        sa.Column('attempts', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('max_attempts', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('run_after', sa.DateTime(), nullable=False),
        sa.Column('last_error', sa.Text(), nullable=True),
        sa.Column('payload', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_email_jobs_batch_id', 'email_jobs', ['batch_id'])
    op.create_index('ix_email_jobs_status', 'email_jobs', ['status'])


def downgrade() -> None:
    op.drop_index('ix_email_jobs_status', table_name='email_jobs')
    op.drop_index('ix_email_jobs_batch_id', table_name='email_jobs')
    op.drop_table('email_jobs')
    op.drop_index('ix_agent_coverage_areas_state', table_name='agent_coverage_areas')
    op.drop_index('ix_agent_coverage_areas_agent_id', table_name='agent_coverage_areas')
    op.drop_table('agent_coverage_areas')
    op.drop_table('notification_preferences')
    op.drop_index('ix_agents_email', table_name='agents')
    op.drop_table('agents')
