"""
Command line entry point: profile + job description ➜ tailored HTML resume.
"""
from __future__ import annotations
import argparse
import logging
import sys

from resume_maker import config
from resume_maker.generator_llm import generate_resume_content
from resume_maker.generator_rule import fallback_content
from resume_maker.llm_client import get_llm_client
from resume_maker.parser_rule import parse_profile
from resume_maker.renderer import find_placeholders, render_template
from resume_maker.utils import ResumeFileError, read_text, write_text

logger = logging.getLogger("resume_maker")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-maker",
        description="Tailor a plain-text profile to a job description and render it into an HTML resume.",
    )
    parser.add_argument("--profile", default=str(config.PROFILE_PATH), help="Path to the user profile text file")
    parser.add_argument("--job", default=str(config.JOB_DESCRIPTION_PATH), help="Path to the job description text file")
    parser.add_argument("--template", default=str(config.TEMPLATE_PATH),
                        help="HTML template with {{placeholders}} (default: bundled template)")
    parser.add_argument("--output", default=str(config.OUTPUT_PATH), help="Where to write the generated resume")
    parser.add_argument("--provider", choices=("openai", "ollama"), help="LLM provider (default: $LLM_PROVIDER)")
    parser.add_argument("--model", help="Model name (default: $RESUME_MODEL or the provider default)")
    parser.add_argument("--offline", action="store_true",
                        help="Skip the LLM and render the profile with the built-in formatters")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )
    # silence noisy HTTP client logging
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    client = None
    if not args.offline:
        try:
            client = get_llm_client(args.provider)
        except (ValueError, ImportError) as e:
            logger.error("Error initializing LLM client: %s", e)
            return 1

    try:
        logger.info("Reading input files...")
        profile_text = read_text(args.profile)
        job_text = "" if args.offline else read_text(args.job)
        template = read_text(args.template)

        logger.info("Parsing user profile...")
        profile = parse_profile(profile_text)

        if client is None:
            logger.info("Offline mode, formatting the profile as written...")
            content = fallback_content(profile)
        else:
            content = generate_resume_content(
                profile,
                job_text,
                client,
                model=args.model or config.get_model_for_provider(args.provider),
                status_callback=logger.info,
            )

        logger.info("Generating HTML resume...")
        html = render_template(template, content)
        if leftover := find_placeholders(html):
            logger.warning("Template placeholders left unreplaced: %s", ", ".join(leftover))

        logger.info("Writing generated resume to file...")
        out = write_text(args.output, html)
    except ResumeFileError as e:
        logger.error("Error generating resume: %s", e)
        return 1

    logger.info("Resume successfully generated at: %s", out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
