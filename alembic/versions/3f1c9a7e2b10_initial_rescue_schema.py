"""Initial rescue schema: users, foster profiles, animals, applications, adoption history

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2026-10-17 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7e2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ANIMAL_STATUSES = (
    'Not Yet Available',
    'Available',
    'Available - In Foster',
    'Adoption Pending',
    'Adopted',
    'Behavioral Hold',
    'Behavioral Hold - With Trainer',
    'Medical Hold',
    'Medical Hold - In Foster',
    'Stray Hold',
    'Returned to Owner',
    'Transferred',
    'Lost in Care',
    'Died in Care',
    'Euthanized',
)
APPLICATION_STATUSES = (
    'Pending Review',
    'Approved',
    'Rejected',
    'On Hold',
    'Withdrawn',
    'Contacted',
    'Archived',
)
APPLICATION_KINDS = ('adoption', 'foster', 'volunteer', 'partnership_sponsorship')
ROLES = ('Admin', 'Staff', 'Volunteer', 'Guest')


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('role', sa.Enum(*ROLES, name='user_role', native_enum=False, length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('primary_phone', sa.String(20), nullable=True),
        sa.Column('external_provider_id', sa.String(255), nullable=True, unique=True),
        *_timestamps(),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index('ix_users_email', 'users', ['email'])

    op.create_table(
        'foster_profiles',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False, unique=True),
        sa.Column('foster_application_id', sa.Uuid(), nullable=True),
        sa.Column('approval_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('is_active_foster', sa.Boolean(), nullable=False),
        sa.Column('availability_notes', sa.Text(), nullable=True),
        sa.Column('capacity_details', sa.Text(), nullable=True),
        sa.Column('home_visit_date', sa.Date(), nullable=True),
        sa.Column('home_visit_notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False),
    )

    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('species', sa.String(50), nullable=True),
        sa.Column('breed', sa.String(100), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('gender', sa.String(20), nullable=True),
        sa.Column('weight', sa.Numeric(6, 2), nullable=True),
        sa.Column('story', sa.Text(), nullable=True),
        sa.Column(
            'adoption_status',
            sa.Enum(*ANIMAL_STATUSES, name='animal_adoption_status', native_enum=False, length=50),
            nullable=False,
        ),
        sa.Column('current_foster_id', sa.Uuid(), sa.ForeignKey('foster_profiles.id'), nullable=True),
        sa.Column('created_by', sa.Uuid(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('updated_by', sa.Uuid(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False),
    )
    op.create_index('ix_animals_adoption_status', 'animals', ['adoption_status'])
    op.create_index('ix_animals_current_foster_id', 'animals', ['current_foster_id'])

    op.create_table(
        'applications',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column(
            'kind',
            sa.Enum(*APPLICATION_KINDS, name='application_kind', native_enum=False, length=30),
            nullable=False,
        ),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('primary_email', sa.String(255), nullable=True),
        sa.Column('primary_phone', sa.String(20), nullable=True),
        sa.Column(
            'status',
            sa.Enum(*APPLICATION_STATUSES, name='application_status', native_enum=False, length=30),
            nullable=False,
        ),
        sa.Column('submission_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('applicant_user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('animal_id', sa.Uuid(), sa.ForeignKey('animals.id'), nullable=True),
        sa.Column('answers', sa.JSON(), nullable=False),
        sa.Column('reviewed_by', sa.Uuid(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('review_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('internal_notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False),
    )
    op.create_index('ix_applications_kind', 'applications', ['kind'])
    op.create_index('ix_applications_status', 'applications', ['status'])
    op.create_index('ix_applications_primary_email', 'applications', ['primary_email'])

    op.create_table(
        'adoption_history',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('animal_id', sa.Uuid(), sa.ForeignKey('animals.id'), nullable=False),
        sa.Column('adopter', sa.JSON(), nullable=False),
        sa.Column('adoption_date', sa.Date(), nullable=False),
        sa.Column('return_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Uuid(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_adoption_history_animal_id', 'adoption_history', ['animal_id'])
    op.create_index(
        'ux_adoption_history_open_animal',
        'adoption_history',
        ['animal_id'],
        unique=True,
        postgresql_where=sa.text('return_date IS NULL'),
        sqlite_where=sa.text('return_date IS NULL'),
    )


def downgrade() -> None:
    op.drop_index('ux_adoption_history_open_animal', table_name='adoption_history')
    op.drop_index('ix_adoption_history_animal_id', table_name='adoption_history')
    op.drop_table('adoption_history')
    op.drop_index('ix_applications_primary_email', table_name='applications')
    op.drop_index('ix_applications_status', table_name='applications')
    op.drop_index('ix_applications_kind', table_name='applications')
    op.drop_table('applications')
    op.drop_index('ix_animals_current_foster_id', table_name='animals')
    op.drop_index('ix_animals_adoption_status', table_name='animals')
    op.drop_table('animals')
    op.drop_table('foster_profiles')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
