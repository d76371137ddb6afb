from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from typing import Dict

# canonical field lists (everything is a string, absence is "")
SCALAR_FIELDS = ("name", "email", "phone", "linkedin", "github", "website", "tagline")

# header order in the profile text
SECTION_HEADERS = (
    "SUMMARY",
    "SKILLS",
    "EXPERIENCE",
    "EDUCATION",
    "PROJECTS",
    "CERTIFICATIONS",
    "ACHIEVEMENTS",
)

# sections that get an HTML fragment
FORMATTED_SECTIONS = ("skills", "experience", "achievements", "projects", "certifications", "education")

# keys of the generated content, i.e. the placeholders a template may use
CONTENT_KEYS = (
    "name",
    "email",
    "phone",
    "linkedin",
    "github",
    "website",
    "tagline",
    "summary",
) + FORMATTED_SECTIONS


@dataclass(frozen=True)
class Profile:
    name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""
    tagline: str = ""
    summary: str = ""
    skills: str = ""
    experience: str = ""
    education: str = ""
    projects: str = ""
    certifications: str = ""
    achievements: str = ""

    def get(self, key: str, default: str = "") -> str:
        return getattr(self, key, default)

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


PROFILE_FIELDS = tuple(f.name for f in fields(Profile))


def empty_content() -> Dict[str, str]:
    """Generated content with every key present and blank."""
    return {key: "" for key in CONTENT_KEYS}
