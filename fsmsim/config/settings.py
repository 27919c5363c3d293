"""Configuration for the fsmsim command line.

Defaults live here; a YAML file can override any of them and command-line
options override the file.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from fsmsim.utils.logging import LEVELS
from fsmsim.utils.result import ConfigError, Err, Ok, Result

ENV_CONFIG_PATH = "FSMSIM_CONFIG"

OUTPUT_FORMATS = ("text", "json")
LOG_FORMATS = ("json", "text")


def _read_yaml(path: Path) -> Result[Any, ConfigError]:
    """Load a YAML document; an empty file yields an empty mapping."""
    if not path.exists():
        return Err(ConfigError(
            field="path",
            message=f"Configuration file not found: {path}",
        ))

    try:
        with open(path) as f:
            return Ok(yaml.safe_load(f) or {})
    except yaml.YAMLError as e:
        return Err(ConfigError(
            field="yaml",
            message=f"Failed to parse YAML: {e}",
        ))
    except OSError as e:
        return Err(ConfigError(
            field="file",
            message=f"Failed to read config file: {e}",
        ))


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "warn"
    format: str = "json"


@dataclass
class OutputConfig:
    """How verdicts are printed."""

    format: str = "text"
    trace: bool = False
    # Drop trailing whitespace (e.g. a newline from a shell heredoc) from the input
    strip_input: bool = True


@dataclass
class SimulatorConfig:
    """Complete CLI configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    source: Optional[Path] = None

    @classmethod
    def from_yaml(cls, path: Path) -> Result["SimulatorConfig", ConfigError]:
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Result with loaded config or error
        """
        path = Path(path)
        return (
            _read_yaml(path)
            .and_then(cls.from_dict)
            .map(lambda config: replace(config, source=path))
        )

    @classmethod
    def from_dict(cls, data: Any) -> Result["SimulatorConfig", ConfigError]:
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Result with loaded config or error
        """
        if not isinstance(data, dict):
            return Err(ConfigError(
                field="root",
                message=f"Expected a mapping, got {type(data).__name__}",
            ))

        for key in ("logging", "output"):
            if not isinstance(data.get(key) or {}, dict):
                return Err(ConfigError(
                    field=key,
                    message="Expected a mapping",
                ))

        logging_data = data.get("logging") or {}
        logging_config = LoggingConfig(
            level=str(logging_data.get("level", "warn")),
            format=str(logging_data.get("format", "json")),
        )

        output_data = data.get("output") or {}
        output = OutputConfig(
            format=str(output_data.get("format", "text")),
            trace=output_data.get("trace", False),
            strip_input=output_data.get("strip_input", True),
        )

        config = cls(logging=logging_config, output=output)
        return config.validate().map(lambda _: config)

    def validate(self) -> Result[None, ConfigError]:
        """
        Validate configuration values.

        Returns:
            Result indicating success or validation error
        """
        if self.logging.level.lower() not in LEVELS:
            return Err(ConfigError(
                field="logging.level",
                message=f"Must be one of {', '.join(LEVELS)}, got {self.logging.level!r}",
            ))
        if self.logging.format not in LOG_FORMATS:
            return Err(ConfigError(
                field="logging.format",
                message=f"Must be one of {', '.join(LOG_FORMATS)}, got {self.logging.format!r}",
            ))
        if self.output.format not in OUTPUT_FORMATS:
            return Err(ConfigError(
                field="output.format",
                message=f"Must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output.format!r}",
            ))
        for name, value in [
            ("trace", self.output.trace),
            ("strip_input", self.output.strip_input),
        ]:
            if not isinstance(value, bool):
                return Err(ConfigError(
                    field=f"output.{name}",
                    message=f"Must be true or false, got {value!r}",
                ))

        return Ok(None)

    def with_overrides(
        self,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        output_format: Optional[str] = None,
        trace: Optional[bool] = None,
    ) -> "SimulatorConfig":
        """
        Return a new config with command-line values applied.

        Arguments left as None keep the configured value.
        """
        return SimulatorConfig(
            logging=LoggingConfig(
                level=log_level or self.logging.level,
                format=log_format or self.logging.format,
            ),
            output=OutputConfig(
                format=output_format or self.output.format,
                trace=self.output.trace if trace is None else trace,
                strip_input=self.output.strip_input,
            ),
            source=self.source,
        )


def load_config(path: Optional[Path] = None) -> Result[SimulatorConfig, ConfigError]:
    """
    Load configuration from ``path``, or return defaults when no path is given.

    Args:
        path: Optional YAML configuration file

    Returns:
        Result with loaded config or error
    """
    if path is None:
        return Ok(SimulatorConfig())
    return SimulatorConfig.from_yaml(path)
