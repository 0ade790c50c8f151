"""
Default configuration values for selector-builder.
"""

from typing import Any

from ..parts import Combinator

# Combinator defaults
DEFAULT_STRICT_COMBINATORS = False
DEFAULT_ALLOWED_COMBINATORS: list[str] = [token.value for token in Combinator]

# Logging defaults
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")

# File config defaults
DEFAULT_CONFIG_FILENAME = "selector-builder.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/selector-builder",
]

# Environment variable prefix
ENV_PREFIX = "SELECTOR_BUILDER_"


def get_default_options() -> dict[str, Any]:
    """Get default builder options as a dictionary."""
    return {
        "strict_combinators": DEFAULT_STRICT_COMBINATORS,
        "allowed_combinators": list(DEFAULT_ALLOWED_COMBINATORS),
        "log_level": DEFAULT_LOG_LEVEL,
    }
