"""
Centralized configuration for the frame-by-frame number reader.

Thresholds that control when a recognized number is reported are collected
here.  Character-level recognition constants (confusion table, substitution
cap) stay in ``characters.py`` since changing them changes what counts as a
phone number at all.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReaderConfig:
    """Key thresholds controlling stable number reporting.

    Frozen dataclass — treat as read-only at runtime.  To experiment with
    different values, create a new instance and pass it through.
    """

    # ------------------------------------------------------------------
    # Stability tracking
    # ------------------------------------------------------------------
    # A number is stable once its count reaches this value.  The first
    # sighting reads as count 0, so 10 here means 11 sightings in total.
    stable_count_threshold: int = 10

    # Entries not seen for more than this many frames are pruned.  At the
    # nominal ~30 frames per second this is roughly one second.
    expiry_frames: int = 30

    # ------------------------------------------------------------------
    # Frame consumption
    # ------------------------------------------------------------------
    # Number of OCR candidates considered per text region.  Only the top
    # candidate is used for extraction.
    max_candidates: int = 1

    # Reset a stable number immediately after reporting it so it is not
    # reported again on every following frame.
    auto_reset: bool = True


# Singleton used by all modules.  Import this, not ReaderConfig.
CONFIG = ReaderConfig()
