"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .domain.exceptions import ConfigurationError
from .domain.models import DEFAULT_INTERVIEW_MINUTES, OfficeHoursPolicy


class OfficeHoursConfig(BaseModel):
    """Weekly office hours in which interviews may be scheduled."""
    start_hour: int = 9
    end_hour: int = 18
    allowed_weekdays: List[int] = Field(default_factory=lambda: [1, 2, 3, 4, 5])  # Monday-Friday

    @field_validator("start_hour")
    @classmethod
    def validate_start_hour(cls, v: int) -> int:
        """Validate hour is between 0 and 23."""
        if not 0 <= v <= 23:
            raise ValueError(f"start_hour must be between 0 and 23, got {v}")
        return v

    @field_validator("end_hour")
    @classmethod
    def validate_end_hour(cls, v: int) -> int:
        """Validate hour is between 1 and 24 (24 closes at midnight)."""
        if not 1 <= v <= 24:
            raise ValueError(f"end_hour must be between 1 and 24, got {v}")
        return v

    @field_validator("allowed_weekdays")
    @classmethod
    def validate_allowed_weekdays(cls, value: List[int]) -> List[int]:
        """Ensure weekdays are ISO numbers (1=Monday, 7=Sunday), deduplicated."""
        if not value:
            raise ValueError("allowed_weekdays must contain at least one day")
        invalid_days = [day for day in value if day not in range(1, 8)]
        if invalid_days:
            raise ValueError(f"allowed_weekdays must be between 1 and 7, got {invalid_days}")
        return sorted(set(value))

    @model_validator(mode="after")
    def validate_hours_order(self) -> "OfficeHoursConfig":
        """Ensure the configured window opens before it closes."""
        if self.end_hour <= self.start_hour:
            raise ValueError("end_hour must be later than start_hour")
        return self

    def to_policy(self) -> OfficeHoursPolicy:
        """Build the immutable domain policy."""
        return OfficeHoursPolicy(
            start_hour=self.start_hour,
            end_hour=self.end_hour,
            allowed_weekdays=frozenset(self.allowed_weekdays),
        )


class DefaultsConfig(BaseModel):
    """Default settings for checks and slot listings."""
    duration_minutes: int = DEFAULT_INTERVIEW_MINUTES
    slot_step_minutes: int = 30

    @field_validator("duration_minutes", "slot_step_minutes")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        """Ensure minute values are positive."""
        if value <= 0:
            raise ValueError("minute values must be greater than zero")
        return value


class AppConfig(BaseModel):
    """Application configuration."""
    office_hours: OfficeHoursConfig = Field(default_factory=OfficeHoursConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)

    def get_policy(self) -> OfficeHoursPolicy:
        return self.office_hours.to_policy()

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML or
                holds invalid settings
        """
        if not config_path.exists():
            raise ConfigurationError(
                f"Config file not found: {config_path}\n"
                f"See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a mapping at the root level.")

        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration in {config_path}:\n{exc}") from exc


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    config_path = Path.cwd() / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Load the configuration, falling back to built-in defaults.

    An explicitly given path must exist; when no path is given and no
    config.yaml is found, the defaults (09:00-18:00, Monday-Friday) apply.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)
    return AppConfig()
