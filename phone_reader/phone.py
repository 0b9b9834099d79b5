"""
US phone number extraction from recognized text lines.

Matching happens in two passes: a loose structural match that accepts any
word characters in digit positions, then per-character reconciliation
through the OCR confusion table.  Letters are accepted provisionally
because OCR often emits 'O' for '0', 'l' for '1' and so on.
"""

import re
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .characters import DIGITS, get_similar_character

logger = logging.getLogger(__name__)

# Matches the following common patterns and more:
#   xxx-xxx-xxxx    xxx xxx xxxx    (xxx) xxx-xxxx    (xxx)xxx-xxxx
#   xxx.xxx.xxxx    xxx xxx-xxxx    xxx/xxx.xxxx      +1-xxx-xxx-xxxx
PHONE_PATTERN = re.compile(r"""
    (?:\+1-?)?          # Potential international prefix, may have -
    [(]?                # Potential opening (
    \b(\w{3})           # Capture xxx
    [)]?                # Potential closing )
    [ \-./]?            # Potential separator
    (\w{3})             # Capture xxx
    [ \-./]?            # Potential separator
    (\w{4})\b           # Capture xxxx
""", re.VERBOSE)

PHONE_NUMBER_LENGTH = 10


@dataclass(frozen=True)
class PhoneMatch:
    """Phone number located in a text line."""

    start: int
    end: int
    digits: str

    @property
    def span(self) -> Tuple[int, int]:
        return self.start, self.end

    def covers(self, line: str) -> bool:
        """Return True if the match spans the whole of ``line``."""
        return self.start == 0 and self.end == len(line)


def extract_phone_number(line: str) -> Optional[PhoneMatch]:
    """
    Extract the first US-style phone number found in a text line.

    Only the first structural match is considered.  If any of its ten
    characters cannot be resolved to a digit the line yields nothing;
    partial numbers are never returned.

    Args:
        line: One line of recognized text

    Returns:
        PhoneMatch with the span of the matched substring and the
        normalized 10-digit string, or None
    """
    if not line:
        return None

    match = PHONE_PATTERN.search(line)
    if match is None:
        return None

    # Strip punctuation, whitespace and country prefix.
    raw_digits = "".join(match.groups())
    if len(raw_digits) != PHONE_NUMBER_LENGTH:
        return None

    # Substitute commonly misrecognized characters, e.g. 'S' -> '5', 'l' -> '1'.
    result = []
    for char in raw_digits:
        char = get_similar_character(char, DIGITS)
        if char not in DIGITS:
            logger.debug("Rejected %r: unresolvable character %r", match.group(0), char)
            return None
        result.append(char)

    return PhoneMatch(start=match.start(), end=match.end(), digits="".join(result))


def format_phone_number(digits: str) -> str:
    """Format a 10-digit number as ``(XXX) XXX-XXXX``; other input is returned as-is."""
    if len(digits) != PHONE_NUMBER_LENGTH or any(c not in DIGITS for c in digits):
        return digits
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
