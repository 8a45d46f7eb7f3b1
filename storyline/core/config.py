"""Configuration management for the Storyline timeline engine."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml

from storyline.core.exceptions import ConfigurationError

MAX_UID = 2**63 - 1


class FloatConfig(BaseSettings):
    """
    Float Controller Configuration.

    Controls the execution marker system used to trace engine operations.
    """

    enabled: bool = Field(
        default=False, description="Enable float collection (True=tests/debug, False=production)"
    )
    max_events: int = Field(default=10000, ge=0, description="Max floats to keep (0=unlimited)")

    model_config = SettingsConfigDict(
        env_prefix="STORYLINE_FLOAT_",
        extra="ignore",
    )


class StorylineConfig(BaseSettings):
    """
    Configuration for the event engine.

    Can be loaded from:
    - Environment variables (prefix: STORYLINE_)
    - YAML file
    - Direct initialization

    Example:
        >>> config = StorylineConfig(default_order_lists=2)
        >>> config = StorylineConfig.from_yaml("storyline.yaml")
        >>> config = StorylineConfig()
    """

    model_config = SettingsConfigDict(
        env_prefix="STORYLINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )

    default_order_lists: int = Field(
        default=1,
        ge=1,
        description="Number of event order lists created with a fresh engine",
    )
    uid_start: int = Field(
        default=1,
        ge=0,
        le=MAX_UID,
        description="First UID handed out by the allocator",
    )
    reuse_uids: bool = Field(
        default=False,
        description="Reissue released UIDs (smallest first) instead of retiring them",
    )
    floats_enabled: bool = Field(
        default=False,
        description="Enable execution markers for engine operations",
    )

    @classmethod
    def find_config_yaml(cls) -> Path | None:
        """
        Search for a YAML config in standard locations.

        Search order:
        1. ./storyline.yaml
        2. Project root (parent of the storyline package)
        3. ~/.storyline/config.yaml

        Returns:
            Path to the config file if found, None otherwise
        """
        search_paths = [
            Path.cwd() / "storyline.yaml",
            Path(__file__).parent.parent.parent / "storyline.yaml",
            Path.home() / ".storyline" / "config.yaml",
        ]

        for path in search_paths:
            if path.exists():
                return path

        return None

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> StorylineConfig:
        """
        Load configuration from YAML file.

        Environment variables take precedence over keys in the file.

        Args:
            path: Path to YAML configuration file. If None, searches standard locations.

        Returns:
            StorylineConfig instance

        Raises:
            FileNotFoundError: If no configuration file can be found
            ConfigurationError: If the file does not hold a mapping
        """
        if path is None:
            path = cls.find_config_yaml()
            if path is None:
                raise FileNotFoundError(
                    "Config file not found. Searched:\n"
                    "  1. ./storyline.yaml\n"
                    "  2. <project_root>/storyline.yaml\n"
                    "  3. ~/.storyline/config.yaml"
                )
        else:
            path = Path(path)
            if not path.exists():
                raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        if not isinstance(yaml_data, dict):
            msg = f"Config file must contain a mapping: {path}"
            raise ConfigurationError(msg)

        result_data = {}

        for key, value in yaml_data.items():
            env_key = f"STORYLINE_{key.upper()}"
            if env_key in os.environ:
                continue
            result_data[key] = value

        return cls(**result_data)

    def to_yaml(self, path: Path | str) -> None:
        """
        Save configuration to YAML file.

        Args:
            path: Path to save YAML configuration
        """
        path = Path(path)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(mode="json"),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"StorylineConfig(default_order_lists={self.default_order_lists}, "
            f"uid_start={self.uid_start}, reuse_uids={self.reuse_uids})"
        )
