"""Add HSK level, traditional variants and plain pinyin to chinese_character

Revision ID: 002_add_hsk_level_and_variants
Revises: 001_initial_schema
Create Date: 2025-01-20 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '002_add_hsk_level_and_variants'
down_revision = '001_initial_schema'
branch_labels = None
depends_on = None

# Tone mark -> base vowel
TONE_MARKS = {
    'ā': 'a', 'á': 'a', 'ǎ': 'a', 'à': 'a',
    'ē': 'e', 'é': 'e', 'ě': 'e', 'è': 'e',
    'ī': 'i', 'í': 'i', 'ǐ': 'i', 'ì': 'i',
    'ō': 'o', 'ó': 'o', 'ǒ': 'o', 'ò': 'o',
    'ū': 'u', 'ú': 'u', 'ǔ': 'u', 'ù': 'u',
    'ǖ': 'ü', 'ǘ': 'ü', 'ǚ': 'ü', 'ǜ': 'ü',
}


def plain_pinyin(pinyin: str) -> str:
    """Lowercase, tone-stripped, space-free pinyin."""
    return ''.join(
        TONE_MARKS.get(ch, ch)
        for ch in pinyin.lower()
        if ch not in '12345' and not ch.isspace()
    )


def upgrade() -> None:
    """
    Add hsk_level (1-6), traditional_variants and pinyin_plain, and backfill
    the new columns for rows seeded before this revision.
    """
    op.add_column('chinese_character', sa.Column('hsk_level', sa.Integer(), nullable=False, server_default='1'))
    op.add_column('chinese_character', sa.Column('traditional_variants', sa.JSON(), nullable=True))
    op.add_column('chinese_character', sa.Column('pinyin_plain', sa.String(), nullable=False, server_default=''))
    op.create_index(op.f('ix_chinese_character_hsk_level'), 'chinese_character', ['hsk_level'], unique=False)
    op.create_index(op.f('ix_chinese_character_pinyin_plain'), 'chinese_character', ['pinyin_plain'], unique=False)

    connection = op.get_bind()
    character_table = sa.table(
        'chinese_character',
        sa.column('index', sa.Integer),
        sa.column('pinyin', sa.String),
        sa.column('pinyin_plain', sa.String),
        sa.column('traditional_variants', sa.JSON),
    )
    rows = connection.execute(sa.select(character_table.c.index, character_table.c.pinyin)).fetchall()
    for index, pinyin in rows:
        connection.execute(
            character_table.update()
            .where(character_table.c.index == index)
            .values(pinyin_plain=plain_pinyin(pinyin), traditional_variants=[])
        )

    op.alter_column('chinese_character', 'traditional_variants', nullable=False)


def downgrade() -> None:
    """
    Drop the added columns.
    """
    op.drop_index(op.f('ix_chinese_character_pinyin_plain'), table_name='chinese_character')
    op.drop_index(op.f('ix_chinese_character_hsk_level'), table_name='chinese_character')
    op.drop_column('chinese_character', 'pinyin_plain')
    op.drop_column('chinese_character', 'traditional_variants')
    op.drop_column('chinese_character', 'hsk_level')
