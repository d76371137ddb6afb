"""
Template renderer: literal ``{{key}}`` substitution.

No expressions, filters or loops; each known key is replaced everywhere it
occurs and any other ``{{...}}`` token is left exactly as written. The
substitution is a single pass, so a value that itself contains ``{{key}}``
text is inserted as is.
"""
from __future__ import annotations
import re
from typing import List, Mapping, Optional

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def render_template(template: str, content: Mapping[str, Optional[str]]) -> str:
    if not content:
        return template
    tokens = {"{{" + key + "}}": value or "" for key, value in content.items()}
    pattern = re.compile("|".join(re.escape(t) for t in sorted(tokens, key=len, reverse=True)))
    return pattern.sub(lambda m: tokens[m.group(0)], template)


def find_placeholders(text: str) -> List[str]:
    """Placeholder names present in ``text``, in order of first appearance."""
    return list(dict.fromkeys(_PLACEHOLDER.findall(text)))
