"""YAML config loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

OUTPUT_FORMATS = ("text", "json")


@dataclass
class AnalysisConfig:
    roles_file: str = ""  # empty = built-in role profiles
    workers: int = 1
    name_from_filename: bool = True


@dataclass
class OutputConfig:
    format: str = "text"
    top_skills: int = 5


@dataclass
class AppConfig:
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_dir: str = "logs"


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load configuration from a YAML file, falling back to defaults for missing keys."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml or run without --config to use defaults."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    # Analysis (env var takes precedence for the roles file)
    analysis_raw = raw.get("analysis", {})
    config.analysis = AnalysisConfig(
        roles_file=os.environ.get("RESUME_SCREENER_ROLES_FILE", analysis_raw.get("roles_file", "")),
        workers=analysis_raw.get("workers", 1),
        name_from_filename=analysis_raw.get("name_from_filename", True),
    )

    # Output
    output_raw = raw.get("output", {})
    config.output = OutputConfig(
        format=output_raw.get("format", "text"),
        top_skills=output_raw.get("top_skills", 5),
    )

    config.log_dir = os.environ.get("RESUME_SCREENER_LOG_DIR", raw.get("log_dir", "logs"))

    return config


def default_config() -> AppConfig:
    """Defaults, with the same environment overrides load_config applies."""
    config = AppConfig()
    config.analysis.roles_file = os.environ.get("RESUME_SCREENER_ROLES_FILE", "")
    config.log_dir = os.environ.get("RESUME_SCREENER_LOG_DIR", "logs")
    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if not isinstance(config.analysis.workers, int) or config.analysis.workers < 1:
        warnings.append(f"analysis.workers must be a positive integer (got {config.analysis.workers!r}) - using 1")

    if config.analysis.roles_file and not Path(config.analysis.roles_file).exists():
        warnings.append(f"Roles file not found: {config.analysis.roles_file}")

    if config.output.format not in OUTPUT_FORMATS:
        warnings.append(
            f"Unknown output format '{config.output.format}' (expected one of: {', '.join(OUTPUT_FORMATS)}) - using text"
        )

    if not isinstance(config.output.top_skills, int) or config.output.top_skills < 0:
        warnings.append(f"output.top_skills must be a non-negative integer (got {config.output.top_skills!r})")

    return warnings
