"""
OCR character confusion handling.

Resolves characters that OCR engines commonly misread (letters that look
like digits and vice versa) into the character the caller expects.
"""

from typing import Dict

DIGITS = "0123456789"

# Directional substitutions between visually similar characters.  Some
# entries are true pairs (B <-> 8), others form chains (l -> I -> 1,
# s -> S -> 5).  Each lookup follows a single entry.
CONFUSION_TABLE: Dict[str, str] = {
    's': 'S',
    'S': '5',
    '5': 'S',
    'o': 'O',
    'Q': 'O',
    'O': '0',
    '0': 'O',
    'l': 'I',
    'I': '1',
    '1': 'I',
    'B': '8',
    '8': 'B',
}

# Longest chain in CONFUSION_TABLE is two hops ('s' -> 'S' -> '5').  No
# character is ever substituted more than this many times.
MAX_SUBSTITUTIONS = 2


def get_similar_character(char: str, allowed_chars: str) -> str:
    """
    Map an OCR character onto ``allowed_chars`` using the confusion table.

    Characters already in ``allowed_chars`` are returned unchanged.
    Otherwise CONFUSION_TABLE is followed one entry at a time until the
    result is allowed, no entry exists for the current character, or
    MAX_SUBSTITUTIONS hops have been taken.

    The returned character may still be outside ``allowed_chars``; callers
    must re-check membership.

    Args:
        char: Single recognized character
        allowed_chars: Characters acceptable at this position

    Returns:
        The last character reached

    Raises:
        ValueError: if ``char`` is not exactly one character
    """
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")

    current = char
    substitutions = 0
    while current not in allowed_chars and substitutions < MAX_SUBSTITUTIONS:
        similar = CONFUSION_TABLE.get(current)
        if similar is None:
            break
        current = similar
        substitutions += 1
    return current
