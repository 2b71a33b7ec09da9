"""Add version to users for profile edits

Revision ID: 5b8e2d4c7a91
Revises: 3f1c9a7e2b10
Create Date: 2026-10-17 12:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b8e2d4c7a91'
down_revision: Union[str, Sequence[str], None] = '3f1c9a7e2b10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column('users', sa.Column('version', sa.Integer(), nullable=False, server_default='1'))


def downgrade() -> None:
    op.drop_column('users', 'version')
