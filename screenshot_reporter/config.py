"""Configuration for the screenshot reporter."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator, model_validator

from screenshot_reporter.models.base import Model
from screenshot_reporter.models.metadata import Metadata
from screenshot_reporter.naming.builders import guid_path_builder
from screenshot_reporter.naming.loading import (
    PathBuilderNotFoundError,
    load_path_builder,
)
from screenshot_reporter.storage.base import ReportOptions, default_sort_key


class ConfigurationError(Exception):
    """Raised when reporter options are missing or invalid."""


class ReporterConfig(Model):
    """Options accepted when constructing a reporter.

    Options may be given in snake_case or in the camelCase used by report
    configuration files.
    """

    base_directory: Path = Field(
        ..., description="Directory receiving captures and the report"
    )
    screenshots_subfolder: str = ""
    jsons_subfolder: str = ""
    path_builder: Callable[..., str] = guid_path_builder
    metadata_builders: dict[str, Callable[..., Metadata]] = Field(
        default_factory=dict,
        description="Metadata builder overrides keyed by result kind",
    )
    sort_key: Callable[[Metadata], Any] = Field(
        default=default_sort_key,
        description=(
            "Key function ordering the combined report; wrap a two-argument "
            "comparator with functools.cmp_to_key"
        ),
    )

    preserve_directory: bool = True
    exclude_skipped_specs: bool = False
    take_screenshots_for_skipped_specs: bool = False
    take_screenshots_only_for_failed_specs: bool = False
    gather_browser_logs: bool = True
    screenshot_on_failure: bool = False

    doc_title: str = "Test Results"
    doc_name: str = "report.html"
    css_override_file: str | None = None
    custom_css_inline: str | None = None
    client_defaults: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _fold_legacy_client_settings(cls, data: Any) -> Any:
        # searchSettings/columnSettings used to be top-level options
        if not isinstance(data, dict):
            return data
        data = dict(data)
        defaults = dict(data.pop("client_defaults", data.pop("clientDefaults", {})))
        for key, target in (
            ("search_settings", "searchSettings"),
            ("searchSettings", "searchSettings"),
            ("column_settings", "columnSettings"),
            ("columnSettings", "columnSettings"),
        ):
            if (value := data.pop(key, None)) is not None:
                defaults[target] = value
        data["client_defaults"] = defaults
        return data

    @field_validator("base_directory", mode="before")
    @classmethod
    def _require_base_directory(cls, value: Any) -> Any:
        if value is None or not str(value).strip():
            raise ValueError(
                "Please pass a valid base directory to store the screenshots into"
            )
        return value

    @field_validator("path_builder", mode="before")
    @classmethod
    def _resolve_path_builder(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return load_path_builder(value)
            except PathBuilderNotFoundError as exc:
                raise ValueError(str(exc)) from exc
        return value

    @field_validator("metadata_builders")
    @classmethod
    def _check_result_kinds(
        cls, value: dict[str, Callable[..., Metadata]]
    ) -> dict[str, Callable[..., Metadata]]:
        unknown = set(value) - {"status", "items", "item"}
        if unknown:
            raise ValueError(f"Unknown result kinds: {sorted(unknown)}")
        return value

    @classmethod
    def from_options(cls, **options: Any) -> "ReporterConfig":
        """Validate options, raising ConfigurationError when they are invalid."""
        try:
            return cls(**options)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid reporter options: {exc}") from exc

    def report_options(self) -> ReportOptions:
        """Options passed to the storage collaborator on merge."""
        return ReportOptions(
            base_directory=self.base_directory,
            path_builder=self.path_builder,
            sort_key=self.sort_key,
            screenshots_subfolder=self.screenshots_subfolder,
            exclude_skipped_specs=self.exclude_skipped_specs,
            take_screenshots_only_for_failed_specs=(
                self.take_screenshots_only_for_failed_specs
            ),
            take_screenshots_for_skipped_specs=self.take_screenshots_for_skipped_specs,
            doc_title=self.doc_title,
            doc_name=self.doc_name,
            css_override_file=self.css_override_file,
            custom_css_inline=self.custom_css_inline,
            client_defaults=self.client_defaults,
        )


def load_config_file(path: Path, **overrides: Any) -> ReporterConfig:
    """Load reporter options from a YAML file.

    Args:
        path: Path to the YAML file
        **overrides: Options taking precedence over the file, such as
            callables that cannot be expressed in YAML

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file is malformed or the options invalid

    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping of options in {path}")

    return ReporterConfig.from_options(**{**data, **overrides})
