"""CLI entry point: analyze resumes and rank candidates per role."""

import argparse
import json
import logging
import sys

from resume_screener.analysis import analyze_files
from resume_screener.config import AppConfig, default_config, load_config, validate_config
from resume_screener.errors import ProfileConfigError
from resume_screener.matching.ranking import comparative_summary
from resume_screener.reports.templates import render_batch_report, render_registry, render_role_ranking
from resume_screener.roles.registry import RoleCategory, load_registry
from resume_screener.utils.logging_config import setup_logging

logger = logging.getLogger("resume_screener")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resume Screener - score resumes against healthcare and front-office roles",
    )
    parser.add_argument(
        "files", nargs="*",
        help="Resume files to analyze (.pdf, .docx, .txt, .md)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to config file (default: built-in settings)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--role", default=None,
        help="Show the full ranking for one role (e.g. 'RNs')",
    )
    parser.add_argument(
        "--list-roles", action="store_true",
        help="Print role profiles and exit",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log debug output to the console",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace, config: AppConfig) -> int:
    """Analyze the given files and print the report. Returns the exit code."""
    try:
        registry = load_registry(config.analysis.roles_file)
    except ProfileConfigError as e:
        logger.error("Invalid role profiles: %s", e)
        return 1

    if args.list_roles:
        print(render_registry(registry))
        return 0

    role = None
    if args.role:
        try:
            role = RoleCategory.from_name(args.role)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if not args.files:
        print("Error: no files given", file=sys.stderr)
        return 1

    workers = config.analysis.workers if isinstance(config.analysis.workers, int) and config.analysis.workers > 0 else 1
    result = analyze_files(
        args.files,
        registry=registry,
        workers=workers,
        name_from_filename=config.analysis.name_from_filename,
    )

    if args.json or config.output.format == "json":
        payload = result.to_dict(registry)
        if role is not None:
            payload["best_per_role"] = [s for s in payload["best_per_role"] if s["role"] == role.value]
        print(json.dumps(payload, indent=2))
    elif role is not None:
        summary = comparative_summary(role, result.analyses)
        if summary is not None:
            print(render_role_ranking(summary))
    else:
        top_skills = config.output.top_skills if isinstance(config.output.top_skills, int) else 5
        print(render_batch_report(result, result.summaries(registry), top_skills=max(top_skills, 0)))

    if result.failures:
        logger.warning(result.failure_message())
    # Nothing usable came out of the batch
    if result.succeeded == 0:
        return 1
    return 0


def main(argv=None):
    args = parse_args(argv)

    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        config = default_config()

    level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(config.log_dir, level=level, console_level=level if args.verbose else logging.WARNING)

    for w in validate_config(config):
        logger.warning("Config: %s", w)

    sys.exit(run(args, config))


if __name__ == "__main__":
    main()
