"""
Configuration for the in-memory git client.

Settings can be built directly, from a dictionary, or from a YAML file
such as:

    pull_request_link_template: "https://git.example.com/pulls/{number}"
    log_level: DEBUG
    log_file: logs/scm_client.log
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LINK_TEMPLATE = "https://example.com/pull-request/{number}"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MockClientConfig:
    """Settings for MockGitClient."""

    pull_request_link_template: str = DEFAULT_LINK_TEMPLATE
    log_level: Optional[str] = None
    log_file: Optional[str] = None

    def validate(self) -> None:
        """Raise ConfigurationError if any setting is unusable."""
        if "{number}" not in self.pull_request_link_template:
            raise ConfigurationError(
                "pull_request_link_template must contain a {number} placeholder",
                {"pull_request_link_template": self.pull_request_link_template},
            )
        if self.log_level is not None and self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level}",
                {"log_level": self.log_level},
            )

    def link_for(self, number: int) -> str:
        """Format the pull request link for a pull request number."""
        return self.pull_request_link_template.format(number=number)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "pull_request_link_template": self.pull_request_link_template,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MockClientConfig":
        """Create from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        config = cls(**{k: v for k, v in data.items() if k in known})
        config.validate()
        return config

    @classmethod
    def from_yaml(cls, path: Path) -> "MockClientConfig":
        """Load configuration from a YAML file.

        A missing file yields the defaults. A relative log_file is resolved
        against the directory holding the YAML file.
        """
        path = Path(path)
        if not path.exists():
            logger.debug(f"Config file not found, using defaults: {path}")
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {path}: {e}", {"path": str(path)}
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config root must be a mapping: {path}", {"path": str(path)}
            )

        logger.debug(f"Loaded mock client config from {path}")
        config = cls.from_dict(data)
        if config.log_file and not Path(config.log_file).is_absolute():
            config.log_file = str(path.parent / config.log_file)
        return config
