"""
Deterministic section formatters: profile section text ➜ HTML fragment.

Every formatter is total. Empty input (or input that yields no items)
gives the section's fixed default fragment, so a resume can always be
rendered without the LLM.
"""
from __future__ import annotations
from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from resume_maker.cleaner import (
    is_blank,
    looks_like_date_range,
    non_blank_lines,
    split_entries,
    split_items,
    starts_with_header,
    strip_bullet,
)
from resume_maker.schema_resume import Profile, SCALAR_FIELDS, empty_content

env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates" / "sections"),
                  autoescape=True, trim_blocks=True, lstrip_blocks=True)

DEFAULT_SKILLS = '<span class="skill">No skills provided</span>'
DEFAULT_EXPERIENCE = "<p>Experience details not available</p>"
DEFAULT_ACHIEVEMENTS = (
    '<ul class="achievements-bullets">'
    "<li>Successfully delivered key projects ahead of schedule</li>"
    "<li>Recognized for excellence in technical leadership</li>"
    "<li>Improved system performance by 40% through optimization</li>"
    "</ul>"
)
DEFAULT_PROJECTS = "<p>Project details not available</p>"
DEFAULT_CERTIFICATIONS = '<ul class="compact-list"><li>No certifications provided</li></ul>'
DEFAULT_EDUCATION = "<p>Education details not available</p>"
DEFAULT_BULLET = "Responsible for key initiatives and projects with measurable outcomes"

# entries starting with one of these are a neighbouring section, not a job
_NOT_A_JOB = ("ACHIEVEMENTS", "EDUCATION", "PROJECTS", "CERTIFICATIONS", "SKILLS")


def _render(name: str, **ctx) -> str:
    return env.get_template(name).render(**ctx).strip()


# ───────────────────────────────────────── entries ──
def parse_experience(text: str) -> List[Dict]:
    """Experience text ➜ list of job dicts (title, company, location, dates, bullets)."""
    jobs = []
    for entry in split_entries(text):
        lines = non_blank_lines(entry)
        if starts_with_header(lines[0], _NOT_A_JOB):
            continue

        title, company, location = lines[0], "", ""
        if "|" in lines[0]:
            parts = [p.strip() for p in lines[0].split("|")] + ["", ""]
            title, company, location = parts[:3]

        dates = ""
        rest = lines[1:]
        if rest and looks_like_date_range(rest[0]):
            dates, rest = rest[0], rest[1:]

        jobs.append(
            {
                "title": title or "Position",
                "company": company,
                "location": location,
                "dates": dates,
                "bullets": [b for b in (strip_bullet(ln) for ln in rest) if b] or [DEFAULT_BULLET],
            }
        )
    return jobs


def _name_and_details(text: str) -> List[Dict]:
    """Projects / education: first line is the name, the rest one description line."""
    items = []
    for entry in split_entries(text):
        lines = non_blank_lines(entry)
        items.append({"name": lines[0], "details": " ".join(lines[1:])})
    return items


# ───────────────────────────────────────── formatters ──
def format_skills(skills: str) -> str:
    items = split_items(skills)
    if not items:
        return DEFAULT_SKILLS
    return _render("skills.html", skills=items)


def format_experience(experience: str) -> str:
    jobs = parse_experience(experience)
    if not jobs:
        return DEFAULT_EXPERIENCE
    return _render("experience.html", jobs=jobs)


def format_achievements(achievements: str) -> str:
    items = split_items(achievements)
    if not items:
        return DEFAULT_ACHIEVEMENTS
    return _render("list.html", css_class="achievements-bullets", items=items)


def format_projects(projects: str) -> str:
    if is_blank(projects):
        return DEFAULT_PROJECTS
    return _render("projects.html", projects=_name_and_details(projects))


def format_certifications(certifications: str) -> str:
    items = split_items(certifications)
    if not items:
        return DEFAULT_CERTIFICATIONS
    return _render("list.html", css_class="compact-list", items=items)


def format_education(education: str) -> str:
    if is_blank(education):
        return DEFAULT_EDUCATION
    return _render("education.html", degrees=_name_and_details(education))


FORMATTERS = {
    "skills": format_skills,
    "experience": format_experience,
    "achievements": format_achievements,
    "projects": format_projects,
    "certifications": format_certifications,
    "education": format_education,
}


def format_sections(profile: Profile) -> Dict[str, str]:
    return {key: fmt(profile.get(key)) for key, fmt in FORMATTERS.items()}


def fallback_content(profile: Profile) -> Dict[str, str]:
    """The whole resume rendered from the profile alone."""
    content = empty_content()
    for key in SCALAR_FIELDS:
        content[key] = profile.get(key)
    content["summary"] = profile.summary
    content.update(format_sections(profile))
    return content
