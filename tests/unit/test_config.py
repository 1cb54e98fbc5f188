"""Tests for reporter configuration."""

from functools import cmp_to_key
from pathlib import Path

import pytest

from screenshot_reporter.config import (
    ConfigurationError,
    ReporterConfig,
    load_config_file,
)
from screenshot_reporter.models.metadata import Metadata
from screenshot_reporter.naming.builders import (
    descriptive_path_builder,
    guid_path_builder,
)
from screenshot_reporter.storage.base import default_sort_key
from screenshot_reporter.testing.factories import MetadataFactory


class TestFromOptions:
    """Tests for ReporterConfig.from_options."""

    def test_applies_defaults(self, tmp_path: Path) -> None:
        """Fills every optional setting with its default."""
        config = ReporterConfig.from_options(base_directory=tmp_path)

        assert config.base_directory == tmp_path
        assert config.screenshots_subfolder == ""
        assert config.jsons_subfolder == ""
        assert config.path_builder is guid_path_builder
        assert config.sort_key is default_sort_key
        assert config.metadata_builders == {}
        assert config.preserve_directory is True
        assert config.exclude_skipped_specs is False
        assert config.take_screenshots_for_skipped_specs is False
        assert config.take_screenshots_only_for_failed_specs is False
        assert config.gather_browser_logs is True
        assert config.screenshot_on_failure is False
        assert config.doc_title == "Test Results"
        assert config.doc_name == "report.html"
        assert config.client_defaults == {}

    @pytest.mark.parametrize("base_directory", [None, "", "   "])
    def test_rejects_missing_base_directory(self, base_directory: str | None) -> None:
        """Raises ConfigurationError for an empty base directory."""
        with pytest.raises(ConfigurationError, match="valid base directory"):
            ReporterConfig.from_options(base_directory=base_directory)

    def test_accepts_camel_case_options(self, tmp_path: Path) -> None:
        """Accepts the option names used in configuration files."""
        config = ReporterConfig.from_options(
            baseDirectory=str(tmp_path),
            screenshotsSubfolder="images",
            excludeSkippedSpecs=True,
        )

        assert config.base_directory == tmp_path
        assert config.screenshots_subfolder == "images"
        assert config.exclude_skipped_specs is True

    def test_folds_legacy_client_settings(self, tmp_path: Path) -> None:
        """Moves searchSettings and columnSettings into client defaults."""
        config = ReporterConfig.from_options(
            base_directory=tmp_path,
            client_defaults={"showTotalDurationIn": "header"},
            search_settings={"allselected": False},
            columnSettings={"displayTime": True},
        )

        assert config.client_defaults == {
            "showTotalDurationIn": "header",
            "searchSettings": {"allselected": False},
            "columnSettings": {"displayTime": True},
        }

    def test_resolves_path_builder_key(self, tmp_path: Path) -> None:
        """Loads a registered naming strategy from its key."""
        config = ReporterConfig.from_options(
            base_directory=tmp_path, path_builder="descriptive"
        )

        assert config.path_builder is descriptive_path_builder

    def test_rejects_unknown_path_builder_key(self, tmp_path: Path) -> None:
        """Raises ConfigurationError for an unregistered strategy."""
        with pytest.raises(ConfigurationError, match="nonexistent"):
            ReporterConfig.from_options(
                base_directory=tmp_path, path_builder="nonexistent"
            )

    def test_rejects_unknown_result_kind(self, tmp_path: Path) -> None:
        """Raises ConfigurationError for builders of unknown result kinds."""
        with pytest.raises(ConfigurationError, match="Unknown result kinds"):
            ReporterConfig.from_options(
                base_directory=tmp_path,
                metadata_builders={"jasmine3": lambda *args: None},
            )

    def test_report_options_carry_display_settings(self, tmp_path: Path) -> None:
        """Passes display settings through to the report options."""
        config = ReporterConfig.from_options(
            base_directory=tmp_path,
            doc_title="Nightly",
            css_override_file="theme.css",
            screenshots_subfolder="images",
        )

        options = config.report_options()

        assert options.base_directory == tmp_path
        assert options.doc_title == "Nightly"
        assert options.css_override_file == "theme.css"
        assert options.screenshots_subfolder == "images"
        assert options.prepare_assets is True

    def test_accepts_comparator_wrapped_as_sort_key(self, tmp_path: Path) -> None:
        """A comparator passed through cmp_to_key orders report entries."""

        def newest_first(a: Metadata, b: Metadata) -> int:
            return (b.timestamp or 0) - (a.timestamp or 0)

        config = ReporterConfig.from_options(
            base_directory=tmp_path, sort_key=cmp_to_key(newest_first)
        )
        entries = [MetadataFactory.build(timestamp=ts) for ts in (1, 3, 2)]

        ordered = sorted(entries, key=config.report_options().sort_key)

        assert [entry.timestamp for entry in ordered] == [3, 2, 1]


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads and validates options from YAML."""
        config_file = tmp_path / "reporter.yaml"
        config_file.write_text(
            """
baseDirectory: reports/e2e
screenshotsSubfolder: images
jsonsSubfolder: jsons
takeScreenshotsOnlyForFailedSpecs: true
docTitle: "E2E results"
"""
        )

        config = load_config_file(config_file)

        assert config.base_directory == Path("reports/e2e")
        assert config.screenshots_subfolder == "images"
        assert config.jsons_subfolder == "jsons"
        assert config.take_screenshots_only_for_failed_specs is True
        assert config.doc_title == "E2E results"

    def test_overrides_take_precedence(self, tmp_path: Path) -> None:
        """Applies keyword overrides on top of the file."""
        config_file = tmp_path / "reporter.yaml"
        config_file.write_text("base_directory: reports\ndoc_title: From file\n")

        config = load_config_file(config_file, doc_title="Override")

        assert config.doc_title == "Override"

    def test_raises_for_missing_file(self, tmp_path: Path) -> None:
        """Raises FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config_file(tmp_path / "missing.yaml")

    def test_raises_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ConfigurationError for malformed YAML."""
        config_file = tmp_path / "reporter.yaml"
        config_file.write_text("invalid: yaml: content: [")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config_file(config_file)

    def test_raises_for_non_mapping(self, tmp_path: Path) -> None:
        """Raises ConfigurationError when the file is not a mapping."""
        config_file = tmp_path / "reporter.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError, match="Expected a mapping"):
            load_config_file(config_file)

    def test_raises_for_empty_file(self, tmp_path: Path) -> None:
        """Requires the base directory even for an empty file."""
        config_file = tmp_path / "reporter.yaml"
        config_file.write_text("")

        with pytest.raises(ConfigurationError):
            load_config_file(config_file)
