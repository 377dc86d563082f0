"""Configuration management using Pydantic for validation."""

from pathlib import Path
from typing import Any, Dict, List, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EdgeView = Literal["all", "system", "internal"]


class ExtractionOptions(BaseModel):
    """Per-request extraction options.

    Built strictly so that a malformed flag (e.g. the string "true") fails
    before any document is scanned.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    strict_ethernet: StrictBool = Field(default=False, alias="strictEthernet")


class ExtractionConfig(BaseSettings):
    """Cable extraction configuration."""

    strict_ethernet: bool = False
    supported_suffixes: List[str] = [".pdf", ".txt", ".text"]

    @field_validator("supported_suffixes")
    @classmethod
    def normalize_suffixes(cls, v: List[str]) -> List[str]:
        """Lower-case suffixes and make sure each starts with a dot."""
        return [s.lower() if s.startswith(".") else f".{s.lower()}" for s in v]

    def options(self) -> ExtractionOptions:
        return ExtractionOptions(strict_ethernet=self.strict_ethernet)


class ReportingConfig(BaseSettings):
    """Export configuration."""

    default_view: EdgeView = "all"
    csv_filename: str = "connections.csv"
    review_filename: str = "review.md"
    json_filename: str = "connections.json"


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    level: str = "INFO"
    file: str = "logs/cablegraph.log"
    rotation: str = "10 MB"
    retention: str = "1 week"


class Config(BaseSettings):
    """Main configuration class."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        env_nested_delimiter="__",
    )

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    reporting: ReportingConfig = Field(default_factory=ReportingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    vessel_id: str = "default"

    @staticmethod
    def _deep_merge_dict(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Deep-merge two dicts (overrides win).

        This is used to apply environment-derived overrides on top of YAML defaults.
        """
        merged: Dict[str, Any] = dict(base)
        for key, value in overrides.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge_dict(merged[key], value)
            else:
                merged[key] = value
        return merged

    @classmethod
    def from_yaml(cls, yaml_path: str | Path = "config/config.yaml") -> "Config":
        """Load configuration from YAML file and environment variables.

        Precedence (highest to lowest):
        1) Environment variables / .env
        2) YAML file
        3) Model defaults

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance with loaded settings

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML file is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        with open(yaml_path) as f:
            yaml_config = yaml.safe_load(f) or {}

        if not isinstance(yaml_config, dict):
            raise ValueError(f"YAML config root must be a mapping/dict: {yaml_path}")

        # Only values actually supplied by env/.env are layered on top of the YAML file.
        env_overrides = cls().model_dump(exclude_unset=True)
        merged = cls._deep_merge_dict(yaml_config, env_overrides)

        return cls(**merged)


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Raises:
        RuntimeError: If configuration hasn't been initialized
    """
    global _config
    if _config is None:
        raise RuntimeError("Configuration not initialized. Call load_config() first.")
    return _config


def load_config(yaml_path: str | Path = "config/config.yaml") -> Config:
    """Load configuration and install it as the global instance."""
    global _config
    _config = Config.from_yaml(yaml_path)
    return _config


def reset_config() -> None:
    """Reset global configuration (mainly for testing)."""
    global _config
    _config = None
