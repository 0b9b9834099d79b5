"""
Per-frame reading loop.

Feeds the recognized text lines of each frame through phone number
extraction and the string tracker, and reports a number once it is stable.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple, Union

from .config import CONFIG, ReaderConfig
from .phone import PhoneMatch, extract_phone_number
from .tracker import StringTracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineResult:
    """Extraction result for one recognized text line."""

    line_index: int
    text: str
    match: PhoneMatch

    @property
    def number(self) -> str:
        return self.match.digits

    @property
    def is_substring(self) -> bool:
        """True if the number is only part of the recognized line."""
        return not self.match.covers(self.text)


@dataclass(frozen=True)
class FrameResult:
    """Outcome of processing one frame."""

    frame_index: int
    lines: List[LineResult] = field(default_factory=list)
    stable_number: Optional[str] = None

    @property
    def numbers(self) -> List[str]:
        return [line.number for line in self.lines]


def _top_candidate(line: Any, max_candidates: int) -> Optional[str]:
    """Reduce a line (plain text or a list of OCR candidates) to its top candidate."""
    if line is None:
        return None
    if isinstance(line, (list, tuple)):
        for candidate in line[:max_candidates]:
            if candidate is not None:
                return _as_text(candidate)
        return None
    return _as_text(line)


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def sanitize_frame(frame: Any, config: ReaderConfig = CONFIG) -> List[str]:
    """Validate and coerce one frame of OCR output at the pipeline boundary.

    Ensures downstream extraction only ever sees a list of strings:
    - ``None`` frames become empty frames
    - a frame that is not a list or tuple is treated as a single line
    - ``None`` lines are dropped
    - bytes are decoded as UTF-8, other non-string lines coerced with ``str()``
    - a list of candidates is reduced to its top candidate
    """
    if frame is None:
        return []
    if not isinstance(frame, (list, tuple)):
        frame = [frame]

    lines = []
    for line in frame:
        text = _top_candidate(line, config.max_candidates)
        if text is not None:
            lines.append(text)
    return lines


class NumberReader:
    """Drive extraction and stability tracking one frame at a time."""

    def __init__(self, config: ReaderConfig = CONFIG):
        self.config = config
        self.tracker = StringTracker(config)

    @property
    def frame_index(self) -> int:
        return self.tracker.frame_index

    def process_frame(self, lines: Iterable[Any]) -> FrameResult:
        """
        Process the recognized text lines of one frame.

        Every line is scanned for a phone number, all numbers found are
        logged with the tracker, and the tracker is queried for a stable
        number.  With ``config.auto_reset`` a stable number is reset right
        away so it is reported only once.

        Args:
            lines: Recognized text lines (strings or candidate lists)

        Returns:
            FrameResult with per-line matches and the stable number, if any
        """
        frame_index = self.tracker.frame_index
        line_results = []
        for i, text in enumerate(sanitize_frame(lines, self.config)):
            match = extract_phone_number(text)
            if match is not None:
                line_results.append(LineResult(line_index=i, text=text, match=match))

        self.tracker.record_frame([result.number for result in line_results])
        logger.debug("Frame %d: %d number(s) found", frame_index, len(line_results))

        stable_number = self.tracker.get_stable_string()
        if stable_number is not None:
            logger.info("Stable number at frame %d: %s", frame_index, stable_number)
            if self.config.auto_reset:
                self.tracker.reset(stable_number)

        return FrameResult(frame_index=frame_index, lines=line_results,
                           stable_number=stable_number)

    def reset(self, number: str) -> None:
        """Stop reporting ``number``; for use when ``auto_reset`` is off."""
        self.tracker.reset(number)

    def read_frames(self, frames: Iterable[Any]) -> List[Tuple[int, str]]:
        """Process a sequence of frames and return ``(frame_index, number)`` readings."""
        readings = []
        for frame in frames:
            result = self.process_frame(frame)
            if result.stable_number is not None:
                readings.append((result.frame_index, result.stable_number))
        return readings


def read_transcript(path: Union[str, Path]) -> List[Any]:
    """
    Load a recorded OCR transcript.

    A transcript is a JSON list of frames, or an object with a ``frames``
    list.  Each frame is a list of lines; each line is a string or a list
    of candidate strings.

    Raises:
        ValueError: if the file does not contain a list of frames
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("frames")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of frames")
    return data
