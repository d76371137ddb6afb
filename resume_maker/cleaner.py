"""
Shared text clean-ups and the tokenizer used by the profile parser and the
section formatters.

Assumptions about profile text:
  • an entry (one job, project, degree) starts after a blank line, on a line
    that begins with an ASCII letter; a blank line followed by anything else
    (a bullet, a digit) stays inside the current entry
  • list-like sections (skills, achievements, certifications) separate their
    items with "-", so a hyphen inside an item also splits it
  • header lines hold nothing but the header word
"""
from __future__ import annotations
import re
from typing import Iterable, List

_NEWLINES = re.compile(r"\r\n?")
_ENTRY_BREAK = re.compile(r"\n[ \t]*\n(?=[A-Za-z])")
_BULLET = re.compile(r"^-\s*")
DASHES = ("-", "–", "—")


# ───────────────────────────────────────── helpers ──
def normalise_newlines(text: str) -> str:
    return _NEWLINES.sub("\n", text or "")


def is_blank(text: str | None) -> bool:
    return not (text or "").strip()


def is_header_line(line: str, headers: Iterable[str]) -> bool:
    return line.strip().upper() in {h.upper() for h in headers}


def starts_with_header(line: str, headers: Iterable[str]) -> bool:
    """True if the line opens with one of the header words, e.g. "Projects & more"."""
    upper = line.strip().upper()
    return any(upper.startswith(h.upper()) for h in headers)


def split_entries(text: str) -> List[str]:
    """Split a section body into entries on blank-line-before-letter boundaries."""
    if is_blank(text):
        return []
    parts = _ENTRY_BREAK.split(normalise_newlines(text).strip())
    return [p.strip() for p in parts if p.strip()]


def split_items(text: str) -> List[str]:
    """Split a "-" delimited list, trimming tokens and dropping empty ones."""
    return [t.strip() for t in (text or "").split("-") if t.strip()]


def strip_bullet(line: str) -> str:
    return _BULLET.sub("", line.strip())


def non_blank_lines(text: str) -> List[str]:
    return [ln.strip() for ln in normalise_newlines(text).split("\n") if ln.strip()]


def looks_like_date_range(line: str) -> bool:
    """A date line holds a dash but is not itself a "-" bullet."""
    stripped = line.strip()
    # a leading "-" marks a bullet, even when the bullet text holds a dash
    if not stripped or stripped.startswith("-"):
        return False
    return any(d in stripped for d in DASHES)
