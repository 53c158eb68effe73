"""Infer tempo and key from audio file names."""

from __future__ import annotations

import re
from dataclasses import dataclass

UNKNOWN_KEY = "Unknown"

BPM_PATTERN = re.compile(r"(\d{2,3})\s*BPM", re.IGNORECASE)

# Underscores, dashes, spaces and dots all separate a key token from its
# neighbours; only letters and digits glue it to them.
KEY_PATTERN = re.compile(
    r"(?<![A-Za-z0-9])([A-G][#b]?(?:m|min|maj|minor|major)?)(?![A-Za-z0-9])"
)


@dataclass(frozen=True)
class TrackMetadata:
    bpm: int = 0
    key: str = UNKNOWN_KEY


def parse_bpm(filename: str) -> int:
    """Return the first ``<2-3 digits> BPM`` value in *filename*, else 0."""
    match = BPM_PATTERN.search(filename)
    if match is None:
        return 0
    return int(match.group(1))


def normalize_key(token: str) -> str:
    """Shorten a matched key token, e.g. ``Cminor`` -> ``Cm``, ``Dmajor`` -> ``D``."""
    return token.replace("minor", "m").replace("major", "").strip()


def parse_key(filename: str) -> str:
    """Return the first key token in *filename*, normalized, else ``Unknown``.

    This is a loose pattern match, not music theory: any stray capital A-G
    standing on its own counts as a key.
    """
    match = KEY_PATTERN.search(filename)
    if match is None:
        return UNKNOWN_KEY
    return normalize_key(match.group(1))


def get_metadata(filename: str) -> TrackMetadata:
    return TrackMetadata(bpm=parse_bpm(filename), key=parse_key(filename))
