"""Walk directories and find audio files."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from acapella_index.errors import AcapellaIndexError, ErrorCode

AUDIO_EXTENSIONS = {".wav", ".mp3", ".aif", ".flac", ".ogg", ".m4a"}


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def _dir_key(path: str | Path) -> tuple[int, int]:
    st = os.stat(path)
    return st.st_dev, st.st_ino


def _reraise(exc: OSError) -> None:
    raise exc


@dataclass
class AudioFile:
    """Lightweight descriptor for a discovered audio file."""
    path: Path
    extension: str = field(init=False)
    size: int = field(init=False)

    def __post_init__(self) -> None:
        self.extension = self.path.suffix.lower()
        self.size = self.path.stat().st_size

    @property
    def format(self) -> str:
        return self.extension.lstrip(".")


class FileScanner:
    """Scans a directory tree for audio files.

    Hidden entries (names starting with ``.``) are skipped at every level and
    hidden directories are not descended into. Entries are visited in sorted
    order, files of a directory before its subdirectories.
    """

    def __init__(
        self,
        root: str | Path,
        extensions: Iterable[str] = AUDIO_EXTENSIONS,
        reserved_names: Iterable[str] = (),
    ) -> None:
        self._root = Path(root)
        self._extensions = {e.lower() for e in extensions}
        self._reserved = set(reserved_names)

    @property
    def root(self) -> Path:
        return self._root

    def ensure_root(self) -> None:
        """Raise if the root directory is missing or not a directory."""
        if not self._root.exists():
            raise AcapellaIndexError(ErrorCode.ROOT_NOT_FOUND, path=self._root)
        if not self._root.is_dir():
            raise AcapellaIndexError(ErrorCode.ROOT_NOT_A_DIRECTORY, path=self._root)

    def accepts(self, name: str) -> bool:
        """Return True if a file name passes the hidden/reserved/extension filters."""
        if is_hidden(name) or name in self._reserved:
            return False
        return Path(name).suffix.lower() in self._extensions

    def scan(self) -> list[AudioFile]:
        """Return all audio files under the root directory."""
        return list(self.scan_iter())

    def scan_iter(self) -> Iterator[AudioFile]:
        """Yield audio files one at a time (for progress reporting).

        Symlinked folders are followed. A link back to one of its own
        ancestors is not descended into again. Unreadable folders raise.
        """
        self.ensure_root()
        ancestors = {str(self._root): frozenset({_dir_key(self._root)})}
        for dirpath, dirnames, filenames in os.walk(
            self._root, onerror=_reraise, followlinks=True
        ):
            chain = ancestors.pop(dirpath)
            kept = []
            for d in sorted(dirnames):
                if is_hidden(d):
                    continue
                child = os.path.join(dirpath, d)
                key = _dir_key(child)
                if key in chain:
                    continue
                ancestors[child] = chain | {key}
                kept.append(d)
            # Pruned in place so os.walk only descends into kept folders.
            dirnames[:] = kept
            for fname in sorted(filenames):
                if self.accepts(fname):
                    yield AudioFile(path=Path(dirpath) / fname)
