"""Tests for the configuration module."""

import json
import logging
from pathlib import Path

import pytest

from suiterunner.config import (
    OutputConfig,
    ProjectConfig,
    ReportConfig,
    RunnerConfig,
    SuitesConfig,
    create_example_config,
    find_config_file,
    get_default_config,
)


class TestProjectConfig:
    """Tests for ProjectConfig."""

    def test_default_values(self):
        """Test default values are set correctly."""
        config = ProjectConfig(name="test")
        assert config.name == "test"
        assert config.description == ""


class TestSuitesConfig:
    """Tests for SuitesConfig."""

    def test_default_values(self):
        config = SuitesConfig()
        assert config.targets == []
        assert config.search_path == ["."]

    def test_valid_targets(self):
        config = SuitesConfig(targets=["pkg.suites", "pkg.suites:CartSuite"])
        assert len(config.targets) == 2

    @pytest.mark.parametrize("target", ["", ":Suite", "pkg.mod:"])
    def test_invalid_targets(self, target):
        """Test that malformed targets are rejected."""
        with pytest.raises(ValueError):
            SuitesConfig(targets=[target])


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_values(self):
        config = OutputConfig()
        assert config.color is True
        assert config.show_descriptions is True
        assert config.level == logging.WARNING

    def test_log_level_normalized(self):
        assert OutputConfig(log_level="debug").log_level == "DEBUG"

    def test_log_level_validation(self):
        with pytest.raises(ValueError):
            OutputConfig(log_level="chatty")


class TestRunnerConfig:
    """Tests for RunnerConfig."""

    def test_defaults(self):
        config = RunnerConfig()
        assert config.report.enabled is False
        assert config.report.filename == "suite_report.html"

    def test_round_trip_file(self, tmp_path):
        """Test saving and loading configuration."""
        config = RunnerConfig(
            project=ProjectConfig(name="shop"),
            suites=SuitesConfig(targets=["shop.suites"]),
            report=ReportConfig(enabled=True, title="Nightly"),
        )
        path = tmp_path / "nested" / "suiterunner.json"
        config.to_file(path)

        loaded = RunnerConfig.from_file(path)
        assert loaded == config

    def test_from_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RunnerConfig.from_file(tmp_path / "absent.json")

    def test_from_file_invalid(self, tmp_path):
        """Test that validation errors surface as ValueError."""
        path = tmp_path / "suiterunner.json"
        path.write_text(json.dumps({"output": {"log_level": "loud"}}))

        with pytest.raises(ValueError):
            RunnerConfig.from_file(path)

    def test_find_and_load_searches_parents(self, tmp_path):
        """Test that the config file is found in a parent directory."""
        RunnerConfig(project=ProjectConfig(name="parent")).to_file(tmp_path / ".suiterunner.json")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)

        config = RunnerConfig.find_and_load(child)

        assert config.project.name == "parent"
        assert find_config_file(child) == (tmp_path / ".suiterunner.json").resolve()

    def test_find_and_load_missing(self, tmp_path, monkeypatch):
        monkeypatch.setattr("suiterunner.config.find_config_file", lambda start_dir=None: None)
        with pytest.raises(FileNotFoundError):
            RunnerConfig.find_and_load(tmp_path)

    def test_report_path(self, tmp_path):
        config = RunnerConfig(report=ReportConfig(output_dir="out", filename="r.html"))
        assert config.get_report_path(tmp_path) == (tmp_path / "out" / "r.html").resolve()


class TestConfigHelpers:
    """Tests for config helper functions."""

    def test_get_default_config(self):
        config = get_default_config()
        assert config.project.name == "my-project"
        assert config.suites.targets == []

    def test_create_example_config(self, tmp_path):
        output = create_example_config(tmp_path / "suiterunner.json")

        assert output.exists()
        data = json.loads(Path(output).read_text())
        assert data["suites"]["targets"] == ["tests.suites"]
        assert data["project"]["description"]
