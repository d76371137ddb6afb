"""
Configuration settings for resume-maker.

This file contains configuration for the LLM providers, models and the
default input/output locations. Values come from the environment (a local
.env file is loaded first), so switching provider or model needs no code
change.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os
from pathlib import Path

# LLM Provider Configuration
# Set to "ollama" or "openai"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").lower()

# Model Configuration
# For OpenAI: use models like "gpt-4o", "gpt-4o-mini", etc.
# For Ollama: any locally pulled model, e.g. "llama3.1"
DEFAULT_MODEL = {
    "openai": "gpt-4o",
    "ollama": "llama3.1",
}
RESUME_MODEL = os.getenv("RESUME_MODEL")

# OpenAI Configuration
# The key and the numeric params are checked when the client is created, not here.
OPENAI_MODEL_PARAMS = {
    "temperature": 0.7,
    "max_tokens": 2000,
}

# Ollama Configuration
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

# Default locations, relative to the working directory
PROFILE_PATH = Path("input") / "user-profile.txt"
JOB_DESCRIPTION_PATH = Path("input") / "job-description.txt"
OUTPUT_PATH = Path("output") / "generated-resume.html"
TEMPLATE_PATH = Path(__file__).parent / "templates" / "resume.html"


def get_model_for_provider(provider: str = None) -> str:
    """Get the model to use for the specified provider."""
    if RESUME_MODEL:
        return RESUME_MODEL
    provider = provider or LLM_PROVIDER
    return DEFAULT_MODEL.get(provider, "gpt-4o")


def get_openai_params() -> dict:
    """OPENAI_MODEL_PARAMS with OPENAI_TEMPERATURE / OPENAI_MAX_TOKENS overrides applied."""
    params = dict(OPENAI_MODEL_PARAMS)
    for key, env, cast in (("temperature", "OPENAI_TEMPERATURE", float), ("max_tokens", "OPENAI_MAX_TOKENS", int)):
        raw = os.getenv(env)
        if raw is None or not raw.strip():
            continue
        try:
            params[key] = cast(raw)
        except ValueError:
            raise ValueError(f"{env} must be a {cast.__name__}, got {raw!r}") from None
    return params
