"""
Environment overrides for tree-parser configuration.

Environment variables take precedence over ``tree_parser.toml``:

    TREE_PARSER_STRICT     1/true/yes/on or 0/false/no/off
    TREE_PARSER_LOG_LEVEL  DEBUG, INFO, WARNING, ERROR or CRITICAL

Unknown values are logged as a warning and ignored.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

STRICT_ENV_VAR = "TREE_PARSER_STRICT"
LOG_LEVEL_ENV_VAR = "TREE_PARSER_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_strict_override() -> bool | None:
    """Read TREE_PARSER_STRICT; None when unset or unrecognised."""
    env_value = os.environ.get(STRICT_ENV_VAR, "").lower().strip()

    if env_value in _TRUE_VALUES:
        return True
    elif env_value in _FALSE_VALUES:
        return False
    elif env_value == "":
        return None
    else:
        logger.warning(
            "Unknown %s value '%s'. Valid values: true, false. Ignoring.",
            STRICT_ENV_VAR,
            env_value,
        )
        return None


def get_log_level_override() -> str | None:
    """Read TREE_PARSER_LOG_LEVEL; None when unset or unrecognised."""
    env_value = os.environ.get(LOG_LEVEL_ENV_VAR, "").upper().strip()

    if env_value == "":
        return None
    if env_value in LOG_LEVELS:
        return env_value

    logger.warning(
        "Unknown %s value '%s'. Valid values: %s. Ignoring.",
        LOG_LEVEL_ENV_VAR,
        env_value,
        ", ".join(LOG_LEVELS),
    )
    return None
