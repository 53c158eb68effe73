"""Application settings loaded from the bundled defaults.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from acapella_index.core.scanner import AUDIO_EXTENSIONS
from acapella_index.errors import AcapellaIndexError, ErrorCode
from acapella_index.runtime_paths import config_path, program_root

DEFAULTS_FILE = "defaults.yaml"


@dataclass
class IndexSettings:
    """Resolved locations and filters for one generator run."""

    root_dir: Path
    output_path: Path
    web_prefix: str = ""
    extensions: frozenset[str] = field(default_factory=frozenset)
    reserved_names: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        self.root_dir = Path(self.root_dir)
        self.output_path = Path(self.output_path)
        if not self.web_prefix:
            self.web_prefix = self.root_dir.name
        if not self.extensions:
            self.extensions = frozenset(AUDIO_EXTENSIONS)
        self.extensions = frozenset(_normalize_extension(e) for e in self.extensions)
        self.reserved_names = frozenset(self.reserved_names) | {self.output_path.name}


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


def _read_defaults(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise AcapellaIndexError(ErrorCode.CONFIG_MISSING, path=path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise AcapellaIndexError(
            ErrorCode.CONFIG_INVALID, path=path, details={"original": str(exc)}
        ) from exc
    if not isinstance(data, dict):
        raise AcapellaIndexError(
            ErrorCode.CONFIG_INVALID, path=path, details={"reason": "not a mapping"}
        )
    return data


def _require_str(data: dict[str, Any], key: str, path: Path) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise AcapellaIndexError(
            ErrorCode.CONFIG_INVALID, path=path, details={"key": key}
        )
    return value.strip()


def _require_str_list(data: dict[str, Any], key: str, path: Path) -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise AcapellaIndexError(
            ErrorCode.CONFIG_INVALID, path=path, details={"key": key}
        )
    return value


def load_settings(
    base_dir: str | Path | None = None,
    defaults_path: str | Path | None = None,
) -> IndexSettings:
    """Build settings from defaults.yaml, resolving paths against *base_dir*."""
    base = Path(base_dir) if base_dir is not None else program_root()
    source = Path(defaults_path) if defaults_path is not None else config_path(DEFAULTS_FILE)
    data = _read_defaults(source)

    library_dir = _require_str(data, "library_dir", source)
    output_file = _require_str(data, "output_file", source)
    extensions = _require_str_list(data, "extensions", source)
    if not extensions:
        raise AcapellaIndexError(
            ErrorCode.CONFIG_INVALID, path=source, details={"key": "extensions"}
        )

    return IndexSettings(
        root_dir=base / library_dir,
        output_path=base / output_file,
        web_prefix=Path(library_dir).name,
        extensions=frozenset(extensions),
        reserved_names=frozenset(_require_str_list(data, "reserved_names", source)),
    )
