"""
LLM-based resume content generator.

• One chat call per run through an injected ``LLMClient`` (no retries, no cache).
• The model answers in labelled plain-text sections whose bodies are HTML
  fragments; each section is validated and replaced by the deterministic
  formatter output from ``generator_rule`` when it is missing or unusable.
• Contact details always come from the parsed profile, never from the model.
• Any failure of the call itself degrades to a fully deterministic resume.
"""

from __future__ import annotations
import json
import logging
import re
import textwrap
from typing import Callable, Dict, List

from bs4 import BeautifulSoup

from resume_maker.config import get_model_for_provider
from resume_maker.generator_rule import (
    FORMATTERS,
    fallback_content,
    format_experience,
    parse_experience,
)
from resume_maker.llm_client import LLMClient
from resume_maker.schema_resume import Profile, empty_content

logger = logging.getLogger(__name__)

# contact fields the model is never allowed to change
IDENTITY_FIELDS = ("name", "email", "phone", "linkedin", "github")

# block sections in the order the model is asked to return them
RESPONSE_SECTIONS = ("SKILLS", "EXPERIENCE", "ACHIEVEMENTS", "PROJECTS", "CERTIFICATIONS", "EDUCATION")

# every label line the model is asked to write
RESPONSE_LABELS = ("NAME", "EMAIL", "PHONE", "LINKEDIN", "GITHUB", "WEBSITE", "TAGLINE") + RESPONSE_SECTIONS

_FENCE = re.compile(r"^[ \t]*```[\w-]*[ \t]*$", re.M)

_SYSTEM_PROMPT = "You are a professional resume writer who tailors resumes to specific job descriptions."

_USER_PROMPT = textwrap.dedent(
    """\
USER PROFILE:
{profile_json}

JOB DESCRIPTION:
{job_description}

Please optimize the resume content to match this job description in FAANG-style resume standards. Highlight relevant skills and experiences. The resume should be concise and fit on a single page. IMPORTANT: Include ALL experience entries from the user profile - do not omit any job positions.

Return the following sections in plain text format (not JSON):

NAME: {name}
EMAIL: {email}
PHONE: {phone}
LINKEDIN: {linkedin}
GITHUB: {github}
WEBSITE: {website}
TAGLINE: {tagline}

SKILLS:
[Format skills as HTML spans with class="skill"]
<span class="skill">Skill 1</span>
<span class="skill">Skill 2</span>

EXPERIENCE:
[Format experience as HTML with proper structure, one experience-item per position]
<div class="experience-item">
  <div class="experience-header">
    <div class="job-title-company">Job Title, Company</div>
    <div class="date">Date Range</div>
  </div>
  <ul class="experience-bullets">
    <li>Achievement-oriented bullet point with metrics</li>
  </ul>
</div>

ACHIEVEMENTS:
[Format achievements as HTML bullet points]
<ul class="achievements-bullets">
  <li>Specific achievement with metrics</li>
  <li>Another achievement with quantifiable results</li>
</ul>

PROJECTS:
[Format projects as HTML with proper structure]
<div class="project-item">
  <strong>Project Name</strong>
  <div>Project description and technologies used</div>
</div>

CERTIFICATIONS:
[Format certifications as HTML list]
<ul class="compact-list">
  <li>Certification 1</li>
  <li>Certification 2</li>
</ul>

EDUCATION:
[Format education as HTML with proper structure]
<div class="education-item">
  <strong>Degree, Institution</strong>
  <div>Year</div>
</div>
"""
)


def build_messages(profile: Profile, job_description: str) -> List[Dict[str, str]]:
    prompt = _USER_PROMPT.format(
        profile_json=json.dumps(profile.as_dict(), indent=2, ensure_ascii=False),
        job_description=job_description.strip(),
        **{k: profile.get(k) for k in ("name", "email", "phone", "linkedin", "github", "website", "tagline")},
    )
    return [
        {"role": "system", "content": _SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]


# ───────────────────────────────────────── response parsing ──
def _strip_fences(raw: str) -> str:
    """Drop markdown code fence lines (```html, ```) the model may add."""
    return _FENCE.sub("", raw).strip()


def extract_line(content: str, label: str) -> str:
    """Value written on the same line as ``LABEL:``."""
    if m := re.search(rf"^[ \t]*{label}:[ \t]*(.*)$", content, re.I | re.M):
        return m.group(1).strip()
    return ""


def extract_section(content: str, label: str) -> str:
    """Text after ``LABEL:`` up to the next line holding any other expected label, or end of text."""
    others = [l for l in RESPONSE_LABELS if l != label]
    stop = rf"(?=^[ \t]*(?:{'|'.join(others)}):)|\Z"
    if m := re.search(rf"^[ \t]*{label}:(.*?)(?:{stop})", content, re.I | re.M | re.S):
        return m.group(1).strip()
    return ""


def parse_response(content: str) -> Dict[str, str]:
    """Model response ➜ raw (unvalidated) section texts keyed like the content."""
    content = _strip_fences(content)
    parsed = {
        "website": extract_line(content, "WEBSITE"),
        "tagline": extract_line(content, "TAGLINE"),
    }
    for label in RESPONSE_SECTIONS:
        parsed[label.lower()] = extract_section(content, label)
    return parsed


def count_experience_items(fragment: str) -> int:
    return len(BeautifulSoup(fragment, "html.parser").select(".experience-item"))


# ───────────────────────────────────────── validation ──
def _has_text(value: str) -> bool:
    return bool(value and value.strip())


def prefer(generated: str, fallback: Callable[[], str], valid: Callable[[str], bool] = _has_text) -> str:
    """Keep the generated value if it passes ``valid``, otherwise build the fallback."""
    return generated if valid(generated) else fallback()


def reconcile(profile: Profile, parsed: Dict[str, str]) -> Dict[str, str]:
    """Merge a parsed model response with the profile, section by section."""
    content = empty_content()
    for key in IDENTITY_FIELDS:
        content[key] = profile.get(key)
    content["summary"] = profile.summary
    content["website"] = prefer(parsed.get("website", ""), lambda: profile.website)
    content["tagline"] = prefer(parsed.get("tagline", ""), lambda: profile.tagline)

    # counted as rendered: entries that open with a section header are not positions
    expected_jobs = len(parse_experience(profile.experience))

    def all_jobs_present(fragment: str) -> bool:
        return _has_text(fragment) and count_experience_items(fragment) >= expected_jobs

    generated = parsed.get("experience", "")
    if _has_text(generated) and not all_jobs_present(generated):
        logger.info("Generated experience has %d of %d positions, using the profile's entries",
                    count_experience_items(generated), expected_jobs)
    content["experience"] = prefer(generated, lambda: format_experience(profile.experience), all_jobs_present)

    for key, fmt in FORMATTERS.items():
        if key == "experience":
            continue
        content[key] = prefer(parsed.get(key, ""), lambda fmt=fmt, key=key: fmt(profile.get(key)))
    return content


# ───────────────────────────────────────── entry point ──
def generate_resume_content(
    profile: Profile,
    job_description: str,
    client: LLMClient,
    model: str | None = None,
    status_callback: Callable[[str], None] | None = None,
) -> Dict[str, str]:
    """
    Generates job-tailored resume content for the template placeholders.

    Args:
        profile: The parsed user profile.
        job_description: The job description, passed to the model verbatim.
        client: The LLM client used for the single chat call.
        model: Model name; defaults to the configured one for the provider.
        status_callback: An optional function to call with status updates.
    """
    if status_callback:
        status_callback("Generating optimized resume content with the LLM...")

    try:
        rsp = client.chat(model=model or get_model_for_provider(), messages=build_messages(profile, job_description))
        raw = (rsp.message.content or "").strip()
        if not raw:
            raise ValueError("the model returned an empty response")
        parsed = parse_response(raw)
    except Exception as e:
        logger.warning("Error generating optimized resume, falling back to the profile: %s", e)
        return fallback_content(profile)

    if status_callback:
        status_callback("LLM response received.")
    return reconcile(profile, parsed)
