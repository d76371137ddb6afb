"""Tailor a plain-text profile to a job description and render an HTML resume."""

__version__ = "0.1.0"
