"""
tree_parser.toml configuration loading.

Example tree_parser.toml:

    [parser]
    strict = true

    [logging]
    level = "INFO"
    file = ".tree_parser/logs/tree_parser.log"

Every key is optional. Environment overrides from
:mod:`tree_parser.core.environment` are applied on top.
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .environment import LOG_LEVELS, get_log_level_override, get_strict_override
from .errors import ConfigError

CONFIG_FILENAME = "tree_parser.toml"


@dataclass
class ParserConfig:
    """Parser behaviour."""

    strict: bool = False  # reject tokens left after a complete expression


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    file: Path | None = None  # optional JSONL log file


@dataclass
class TreeParserConfig:
    """Top-level configuration."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source: Path | None = None  # file the configuration was read from


def _section(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [{name}] must be a table")
    return section


def _parse_config(data: dict[str, Any], path: Path) -> TreeParserConfig:
    parser_data = _section(data, "parser", path)
    logging_data = _section(data, "logging", path)

    strict = parser_data.get("strict", False)
    if not isinstance(strict, bool):
        raise ConfigError(f"{path}: parser.strict must be a boolean")

    level = logging_data.get("level", "WARNING")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigError(f"{path}: logging.level must be one of {', '.join(LOG_LEVELS)}")

    log_file = logging_data.get("file")
    if log_file is not None and not isinstance(log_file, str):
        raise ConfigError(f"{path}: logging.file must be a string")

    return TreeParserConfig(
        parser=ParserConfig(strict=strict),
        logging=LoggingConfig(
            level=level.upper(),
            file=Path(log_file) if log_file else None,
        ),
        source=path,
    )


def load_config(path: Path | None = None) -> TreeParserConfig:
    """
    Load configuration from a TOML file and the environment.

    Args:
        path: Explicit config file. When omitted, ``tree_parser.toml`` in the
            current directory is used if it exists.

    Returns:
        Parsed configuration with environment overrides applied.

    Raises:
        ConfigError: If the file is missing (explicit path only), cannot be
            read, is not valid TOML, or holds a value of the wrong type.
    """
    if path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        config = _read_config(candidate) if candidate.exists() else TreeParserConfig()
    else:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        config = _read_config(path)

    strict = get_strict_override()
    if strict is not None:
        config.parser.strict = strict

    level = get_log_level_override()
    if level is not None:
        config.logging.level = level

    return config


def _read_config(path: Path) -> TreeParserConfig:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: invalid TOML: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file '{path}': {e}") from e
    return _parse_config(data, path)


_config: TreeParserConfig | None = None


def get_config() -> TreeParserConfig:
    """Return the process configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_parser_config() -> ParserConfig:
    """Parser settings from a config installed with set_config(), else defaults.

    Never reads from disk; loading a file is the caller's job.
    """
    if _config is None:
        return ParserConfig()
    return _config.parser


def set_config(config: TreeParserConfig) -> None:
    """Replace the process configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Forget the cached configuration; the next get_config() reloads it."""
    global _config
    _config = None
