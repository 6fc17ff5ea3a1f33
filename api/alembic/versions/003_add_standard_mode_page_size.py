"""Add standard_mode_page_size to user_settings

Revision ID: 003_add_standard_mode_page_size
Revises: 002_add_hsk_level_and_variants
Create Date: 2025-02-03 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '003_add_standard_mode_page_size'
down_revision = '002_add_hsk_level_and_variants'
branch_labels = None
depends_on = None


def upgrade() -> None:
    """
    Add the browse view page size (default 20) to user settings.
    """
    op.add_column(
        'user_settings',
        sa.Column('standard_mode_page_size', sa.Integer(), nullable=False, server_default='20')
    )


def downgrade() -> None:
    """
    Drop standard_mode_page_size.
    """
    op.drop_column('user_settings', 'standard_mode_page_size')
