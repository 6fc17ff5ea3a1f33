"""
Text utility functions.
"""
import re

# Toned vowel -> base vowel. ü keeps its umlaut; it is a distinct letter from u.
TONE_MARK_MAP = {
    'ā': 'a', 'á': 'a', 'ǎ': 'a', 'à': 'a',
    'ē': 'e', 'é': 'e', 'ě': 'e', 'è': 'e',
    'ī': 'i', 'í': 'i', 'ǐ': 'i', 'ì': 'i',
    'ō': 'o', 'ó': 'o', 'ǒ': 'o', 'ò': 'o',
    'ū': 'u', 'ú': 'u', 'ǔ': 'u', 'ù': 'u',
    'ǖ': 'ü', 'ǘ': 'ü', 'ǚ': 'ü', 'ǜ': 'ü',
}

_TONE_MARK_TABLE = str.maketrans(TONE_MARK_MAP)
_TONE_NUMBER_RE = re.compile(r"[1-5]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_pinyin(text: str) -> str:
    """
    Normalize pinyin so that equivalent spellings compare equal.

    Accepts both tone marks (xué) and numbered tones (xue2):
    1. Lowercase and trim
    2. Remove tone numbers 1-5
    3. Replace toned vowels with their base vowel
    4. Remove all remaining whitespace

    Args:
        text: Pinyin as typed or as stored

    Returns:
        Canonical form used for comparison
    """
    if not text:
        return ""

    normalized = text.lower().strip()
    normalized = _TONE_NUMBER_RE.sub("", normalized)
    normalized = normalized.translate(_TONE_MARK_TABLE)
    normalized = _WHITESPACE_RE.sub("", normalized)
    return normalized


def parse_int_list(raw: str) -> list[int]:
    """
    Parse a comma-separated list of integers, skipping empty entries.

    Raises:
        ValueError: If an entry is not an integer
    """
    return [int(part.strip()) for part in raw.split(',') if part.strip()]


# Joins glosses in the searchable definition text; search terms never contain it
DEFINITION_SEPARATOR = "\n"


def definition_search_text(definition: list[str]) -> str:
    """
    Flatten a definition list into lowercased text for substring search.

    Glosses are joined with DEFINITION_SEPARATOR, so a match can never span
    two glosses.
    """
    return DEFINITION_SEPARATOR.join(
        gloss.replace(DEFINITION_SEPARATOR, " ").lower() for gloss in definition or []
    )
