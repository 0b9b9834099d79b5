"""
Real-time phone number reading from frame-by-frame OCR output.

Re-exports the public API.
"""

from .config import CONFIG, ReaderConfig
from .characters import (
    CONFUSION_TABLE,
    DIGITS,
    MAX_SUBSTITUTIONS,
    get_similar_character,
)
from .phone import (
    PHONE_PATTERN,
    PhoneMatch,
    extract_phone_number,
    format_phone_number,
)
from .tracker import Observation, StringTracker
from .pipeline import (
    FrameResult,
    LineResult,
    NumberReader,
    read_transcript,
    sanitize_frame,
)

__all__ = [
    # Config
    'CONFIG',
    'ReaderConfig',
    # Characters
    'CONFUSION_TABLE',
    'DIGITS',
    'MAX_SUBSTITUTIONS',
    'get_similar_character',
    # Phone numbers
    'PHONE_PATTERN',
    'PhoneMatch',
    'extract_phone_number',
    'format_phone_number',
    # Tracking
    'Observation',
    'StringTracker',
    # Pipeline
    'FrameResult',
    'LineResult',
    'NumberReader',
    'read_transcript',
    'sanitize_frame',
]
