"""Turn scanned audio files into library track records."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Any

from acapella_index.core.metadata import get_metadata
from acapella_index.core.scanner import AudioFile, FileScanner

if TYPE_CHECKING:
    from acapella_index.config.settings import IndexSettings

logger = logging.getLogger(__name__)

UNKNOWN_ARTIST = "Unknown"
BYTES_PER_MB = 1024 * 1024


@dataclass
class Track:
    """One entry of the library manifest."""
    artist: str
    title: str
    bpm: int
    key: str
    format: str
    size: str
    path: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "artist": self.artist,
            "title": self.title,
            "bpm": self.bpm,
            "key": self.key,
            "format": self.format,
            "size": self.size,
            "path": self.path,
        }


@dataclass
class LibraryDocument:
    """The full manifest: generation time plus tracks in traversal order."""
    generated: str = ""
    tracks: list[Track] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.generated:
            self.generated = utc_timestamp()

    def to_dict(self) -> dict[str, Any]:
        return {
            "generated": self.generated,
            "tracks": [t.as_dict() for t in self.tracks],
        }


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def format_size(num_bytes: int) -> str:
    """Megabytes to one decimal place, halves rounded up (``262144`` -> ``0.3MB``)."""
    mb = (Decimal(num_bytes) / BYTES_PER_MB).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{mb}MB"


def clean_name(name: str) -> str:
    """Replace undecodable file name bytes with U+FFFD."""
    return os.fsencode(name).decode("utf-8", errors="replace")


def derive_location(file_path: str | Path, root: str | Path, web_prefix: str) -> tuple[str, str]:
    """Return ``(artist, web_path)`` for a file below *root*.

    The artist is the first folder under the root. The web path always uses
    forward slashes, whatever the host separator.
    """
    if not isinstance(file_path, PurePath):
        file_path = PurePath(file_path)
    rel = file_path.relative_to(root)
    rel_dir_parts = [clean_name(part) for part in rel.parent.parts]
    artist = rel_dir_parts[0] if rel_dir_parts else UNKNOWN_ARTIST
    web_path = "/".join([web_prefix, *rel_dir_parts, clean_name(rel.name)])
    return artist, web_path


def track_from_audio_file(audio_file: AudioFile, root: str | Path, web_prefix: str) -> Track:
    artist, web_path = derive_location(audio_file.path, root, web_prefix)
    title = clean_name(audio_file.path.name)
    meta = get_metadata(title)
    return Track(
        artist=artist,
        title=title,
        bpm=meta.bpm,
        key=meta.key,
        format=audio_file.format,
        size=format_size(audio_file.size),
        path=web_path,
    )


def build_library(settings: IndexSettings) -> LibraryDocument:
    """Scan the library folder and collect every track.

    Raises AcapellaIndexError before traversal if the root is missing.
    """
    scanner = FileScanner(
        settings.root_dir,
        extensions=settings.extensions,
        reserved_names=settings.reserved_names,
    )
    logger.info("Scanning directory: %s", settings.root_dir)
    scanner.ensure_root()

    document = LibraryDocument()
    for audio_file in scanner.scan_iter():
        track = track_from_audio_file(audio_file, settings.root_dir, settings.web_prefix)
        document.tracks.append(track)
        logger.info("Index: %s -> %s", track.artist, track.title)
    return document
