import pytest

from resume_maker.llm_client import LLMClient, LLMResponse
from resume_maker.parser_rule import parse_profile

PROFILE_TEXT = """\
Name: Jane Doe
Email: jane@example.com
Phone: +1 555 0100
LinkedIn: linkedin.com/in/janedoe
GitHub: github.com/janedoe
Website: janedoe.dev

SUMMARY
Backend engineer focused on data platforms.
Eight years of Python and distributed systems.

SKILLS
- Python - Go - PostgreSQL - Kubernetes

EXPERIENCE
Senior Engineer | Acme Corp | Berlin
2021 – Present
- Led migration of billing to event sourcing
- Cut p99 latency by 40%

Software Engineer | Initech | Remote
2017 - 2021
- Built the ingestion pipeline

EDUCATION
BSc Computer Science
University of Somewhere, 2017

PROJECTS
ledgerkit
Small double-entry accounting library
written in Python.

CERTIFICATIONS
- AWS Solutions Architect - CKA

ACHIEVEMENTS
- Speaker at PyCon - Open source maintainer
"""


class FakeClient(LLMClient):
    """Returns a canned response (or raises) and records the calls."""

    def __init__(self, content="", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def chat(self, model, messages):
        self.calls.append({"model": model, "messages": messages})
        if self.error:
            raise self.error
        return LLMResponse(self.content)


@pytest.fixture
def profile_text():
    return PROFILE_TEXT


@pytest.fixture
def profile():
    return parse_profile(PROFILE_TEXT)
