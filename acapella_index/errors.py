"""Error codes and error handling utilities for Acapella Index."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for library generation."""

    # Scan root errors
    ROOT_NOT_FOUND = auto()
    ROOT_NOT_A_DIRECTORY = auto()

    # Output errors
    OUTPUT_WRITE_FAILED = auto()

    # Configuration errors
    CONFIG_MISSING = auto()
    CONFIG_INVALID = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.ROOT_NOT_FOUND: "Directory not found.",
    ErrorCode.ROOT_NOT_A_DIRECTORY: "The library path exists but is not a directory.",
    ErrorCode.OUTPUT_WRITE_FAILED: "Failed to write the library file.",
    ErrorCode.CONFIG_MISSING: "Bundled configuration file not found.",
    ErrorCode.CONFIG_INVALID: "Bundled configuration is invalid.",
}

ERROR_SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.ROOT_NOT_FOUND: "Create the acapella folder next to the program and add audio files.",
    ErrorCode.ROOT_NOT_A_DIRECTORY: "Replace the file with a folder of audio files.",
    ErrorCode.OUTPUT_WRITE_FAILED: "Check folder permissions and free disk space.",
    ErrorCode.CONFIG_MISSING: "Reinstall the package to restore defaults.yaml.",
    ErrorCode.CONFIG_INVALID: "Reinstall the package to restore defaults.yaml.",
}


@dataclass
class AcapellaIndexError(Exception):
    """Base exception with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion:
            self.suggestion = ERROR_SUGGESTIONS.get(self.code, "")

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f" {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def format_error_for_user(error: AcapellaIndexError | Exception) -> str:
    """Format an error for the console with an actionable suggestion."""
    if isinstance(error, AcapellaIndexError):
        parts = [f"Error: {error.message}"]
        if error.path:
            parts.append(f" - {error.path}")
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n{error.suggestion}")
        return "".join(parts)
    return f"Error: {type(error).__name__}: {error}"
