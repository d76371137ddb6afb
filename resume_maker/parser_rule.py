"""
Rule-based profile parser.
Reads the plain-text user profile: labelled contact lines ("Email: ...")
plus sections introduced by header lines (SUMMARY, SKILLS, EXPERIENCE, ...).
"""

from __future__ import annotations
import re
from typing import Dict, List

from resume_maker.cleaner import is_header_line, normalise_newlines
from resume_maker.schema_resume import Profile, SECTION_HEADERS

LABELS = {
    "name": "Name",
    "email": "Email",
    "phone": "Phone",
    "linkedin": "LinkedIn",
    "github": "GitHub",
    "website": "Website",
}
_LABEL_RE = {
    key: re.compile(rf"^[ \t]*{label}:[ \t]*(.*)$", re.I | re.M)
    for key, label in LABELS.items()
}


def parse_profile(text: str) -> Profile:
    text = normalise_newlines(text)
    out: Dict[str, str] = {}

    # contact lines
    for key, pat in _LABEL_RE.items():
        m = pat.search(text)
        out[key] = m.group(1).strip() if m else ""

    # sections
    out.update(_sections(text.split("\n")))

    # tagline comes from the summary parsed above
    out["tagline"] = out["summary"].split("\n", 1)[0].strip() if out["summary"] else ""
    return Profile(**out)


# ───────────────────────────────────────── helpers ──
def _sections(lines: List[str]) -> Dict[str, str]:
    found: Dict[str, List[str]] = {}
    sec, buf = None, []
    for ln in lines:
        if is_header_line(ln, SECTION_HEADERS):
            _flush(sec, buf, found)
            sec, buf = ln.strip().lower(), []
        elif sec:
            buf.append(ln)
    _flush(sec, buf, found)
    return {h.lower(): "\n".join(found.get(h.lower(), [])).strip() for h in SECTION_HEADERS}


def _flush(sec: str | None, buf: List[str], found: Dict[str, List[str]]):
    # first occurrence of a header wins
    if sec and sec not in found:
        found[sec] = buf
