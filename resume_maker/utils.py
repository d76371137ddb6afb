"""
Utility functions for resume-maker: file reading and writing with the
offending path in the error message.
"""

from pathlib import Path


class ResumeFileError(OSError):
    """An input could not be read or the output could not be written."""


def read_text(path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResumeFileError(f"Error reading file {path}: {e}") from e


def write_text(path, text: str) -> Path:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ResumeFileError(f"Error writing file {path}: {e}") from e
    return path
