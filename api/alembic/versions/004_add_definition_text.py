"""Add searchable definition_text to chinese_character

Revision ID: 004_add_definition_text
Revises: 003_add_standard_mode_page_size
Create Date: 2025-02-17 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '004_add_definition_text'
down_revision = '003_add_standard_mode_page_size'
branch_labels = None
depends_on = None


def definition_text(definition) -> str:
    """Lowercased glosses, one per line."""
    return '\n'.join(gloss.replace('\n', ' ').lower() for gloss in definition or [])


def upgrade() -> None:
    """
    Add definition_text and backfill it from the stored definition lists.
    """
    op.add_column('chinese_character', sa.Column('definition_text', sa.String(), nullable=False, server_default=''))

    connection = op.get_bind()
    character_table = sa.table(
        'chinese_character',
        sa.column('index', sa.Integer),
        sa.column('definition', sa.JSON),
        sa.column('definition_text', sa.String),
    )
    rows = connection.execute(sa.select(character_table.c.index, character_table.c.definition)).fetchall()
    for index, definition in rows:
        connection.execute(
            character_table.update()
            .where(character_table.c.index == index)
            .values(definition_text=definition_text(definition))
        )


def downgrade() -> None:
    """
    Drop definition_text.
    """
    op.drop_column('chinese_character', 'definition_text')
