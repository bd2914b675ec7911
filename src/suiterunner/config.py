"""Configuration management for suiterunner."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ProjectConfig(BaseModel):
    """Project identification and metadata."""

    name: str = Field(default="my-project", description="Project name shown in reports")
    description: str = Field(default="", description="Brief description shown in reports")


class SuitesConfig(BaseModel):
    """Where to find suites."""

    targets: list[str] = Field(
        default_factory=list,
        description="Suite targets, 'package.module' or 'package.module:Suite'",
    )
    search_path: list[str] = Field(
        default_factory=lambda: ["."],
        description="Directories prepended to sys.path before importing targets",
    )

    @field_validator("targets")
    @classmethod
    def validate_targets(cls, v: list[str]) -> list[str]:
        for target in v:
            module_name, _, attr = target.partition(":")
            if not module_name.strip() or (":" in target and not attr.strip()):
                raise ValueError(f"Invalid suite target: {target!r}")
        return v


class OutputConfig(BaseModel):
    """Console output configuration."""

    color: bool = Field(default=True, description="Colorize console output")
    show_descriptions: bool = Field(default=True, description="Print test descriptions before tests")
    log_level: str = Field(default="WARNING", description="Logging level for suiterunner loggers")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


class ReportConfig(BaseModel):
    """Report generation configuration."""

    enabled: bool = Field(default=False, description="Write an HTML report after each run")
    output_dir: str = Field(default="./reports", description="Directory for report output")
    filename: str = Field(default="suite_report.html", description="Report filename")
    title: str = Field(default="Suite Results", description="Report title")


class RunnerConfig(BaseModel):
    """Main configuration for suiterunner."""

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    suites: SuitesConfig = Field(default_factory=SuitesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def from_file(cls, path: Path | str) -> "RunnerConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r") as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def find_and_load(cls, start_dir: Path | str | None = None) -> "RunnerConfig":
        """Find and load configuration file, searching up the directory tree."""
        path = find_config_file(start_dir)
        if path is None:
            raise FileNotFoundError(
                "No configuration file found. Create suiterunner.json or run 'suiterunner init'"
            )
        return cls.from_file(path)

    def to_file(self, path: Path | str) -> None:
        """Save configuration to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)

    def get_report_path(self, base_dir: Path | str | None = None) -> Path:
        """Absolute path of the HTML report."""
        base_dir = Path.cwd() if base_dir is None else Path(base_dir)
        return (base_dir / self.report.output_dir / self.report.filename).resolve()


CONFIG_NAMES = ["suiterunner.json", ".suiterunner.json"]


def find_config_file(start_dir: Path | str | None = None) -> Optional[Path]:
    """Search up the directory tree for a configuration file."""
    current = (Path.cwd() if start_dir is None else Path(start_dir)).resolve()

    for directory in [current, *current.parents]:
        for name in CONFIG_NAMES:
            config_path = directory / name
            if config_path.exists():
                return config_path
    return None


def get_default_config() -> RunnerConfig:
    """Return a default configuration."""
    return RunnerConfig(
        project=ProjectConfig(name="my-project"),
        suites=SuitesConfig(targets=[], search_path=["."]),
    )


def create_example_config(output_path: Path | str) -> Path:
    """Create an example configuration file."""
    output_path = Path(output_path)
    config = get_default_config()
    config.project.description = "Brief description of your project"
    config.suites.targets = ["tests.suites"]
    config.to_file(output_path)
    return output_path
