"""
Temporal stabilization of recognized strings.

Counts how often each string is seen across frames, forgets strings that
have not been seen for a while, and reports a string once it has been seen
consistently enough to trust.  Not thread-safe: a single caller must own
the tracker and drive it one frame at a time.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from .config import CONFIG, ReaderConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observation:
    """Sighting history of one tracked string."""

    last_seen: int
    count: int


# Initial record for a new string.  The increment applied on the same
# sighting brings it to count 0, so counts are "sightings after the first".
_UNSEEN = Observation(last_seen=0, count=-1)


class StringTracker:
    """Track strings across frames until one of them is stable.

    The best count carries over between frames and is only replaced by a
    strictly greater count.  When entries tie, the one that reached the
    count first keeps it; within one frame, the earlier-inserted entry
    wins.
    """

    def __init__(self, config: ReaderConfig = CONFIG):
        self.config = config
        self.frame_index = 0
        self.seen_strings: Dict[str, Observation] = {}
        self.best_count = 0
        self.best_string = ""

    def record_frame(self, strings: Iterable[str]) -> None:
        """
        Log the strings recognized in one frame and advance the frame index.

        Duplicates within a frame each count as a separate sighting.  Entries
        not seen within ``config.expiry_frames`` frames are pruned in the
        same call.
        """
        threshold = self.config.stable_count_threshold
        for string in strings:
            obs = self.seen_strings.get(string, _UNSEEN)
            obs = Observation(last_seen=self.frame_index, count=obs.count + 1)
            self.seen_strings[string] = obs
            logger.debug("Seen %s %d times", string, obs.count)
            if obs.count == threshold:
                logger.info("%s is stable at frame %d", string, self.frame_index)

        # Prune strings that have not been seen in a while.
        oldest_allowed = self.frame_index - self.config.expiry_frames
        obsolete = [string for string, obs in self.seen_strings.items()
                    if obs.last_seen < oldest_allowed]
        for string in obsolete:
            del self.seen_strings[string]
            logger.debug("Pruned %s (not seen for %d frames)",
                         string, self.config.expiry_frames)
            if string == self.best_string:
                self.best_count = 0
                self.best_string = ""

        # Find the remaining string with the greatest count.
        for string, obs in self.seen_strings.items():
            if obs.count > self.best_count:
                self.best_count = obs.count
                self.best_string = string

        self.frame_index += 1

    def get_stable_string(self) -> Optional[str]:
        """Return the best string if it has been seen often enough, else None."""
        if self.best_count >= self.config.stable_count_threshold:
            return self.best_string
        return None

    def reset(self, string: str) -> None:
        """
        Forget ``string`` and clear the best string.

        The best pair is cleared even when other entries still qualify; they
        are reconsidered on the next ``record_frame``.  Safe to call for a
        string that is not tracked.
        """
        self.seen_strings.pop(string, None)
        self.best_count = 0
        self.best_string = ""
