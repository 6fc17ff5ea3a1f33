"""Initial schema: user, chinese_character, user_settings, character_progress

Revision ID: 001_initial_schema
Revises:
Create Date: 2025-01-06 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """
    Create the catalog, user, settings and progress tables.
    """
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('profile_image_url', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='user_pkey'),
    )
    op.create_index(op.f('ix_user_username'), 'user', ['username'], unique=True)
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    op.create_table(
        'chinese_character',
        sa.Column('index', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('simplified', sa.String(), nullable=False),
        sa.Column('traditional', sa.String(), nullable=False),
        sa.Column('pinyin', sa.String(), nullable=False),
        sa.Column('radical', sa.String(), nullable=False),
        sa.Column('radical_pinyin', sa.String(), nullable=True),
        sa.Column('definition', sa.JSON(), nullable=False),
        sa.Column('examples', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('index', name='chinese_character_pkey'),
    )

    op.create_table(
        'user_settings',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('current_level', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('daily_char_count', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('prefer_traditional', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], name='user_settings_user_id_fkey', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('user_id', name='user_settings_pkey'),
    )

    op.create_table(
        'character_progress',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('character_index', sa.Integer(), nullable=False),
        sa.Column('reading', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('writing', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('radical', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], name='character_progress_user_id_fkey', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='character_progress_pkey'),
        sa.UniqueConstraint('user_id', 'character_index', name='uq_character_progress_user_char'),
    )
    # Create index on user_id for query performance
    op.create_index(op.f('ix_character_progress_user_id'), 'character_progress', ['user_id'], unique=False)


def downgrade() -> None:
    """
    Drop all tables.
    """
    op.drop_index(op.f('ix_character_progress_user_id'), table_name='character_progress')
    op.drop_table('character_progress')
    op.drop_table('user_settings')
    op.drop_table('chinese_character')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_index(op.f('ix_user_username'), table_name='user')
    op.drop_table('user')
