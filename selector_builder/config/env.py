"""
Environment variable support for selector-builder configuration.

This module loads option values from ``SELECTOR_BUILDER_*`` environment
variables with type conversion.
"""

import os
from typing import Any, Optional, TypeVar, Union

from .defaults import ENV_PREFIX

T = TypeVar("T")


def get_env_key(key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a configuration key to environment variable name.

    Args:
        key: Configuration key (e.g., "strict_combinators")
        prefix: Environment variable prefix

    Returns:
        Environment variable name (e.g., "SELECTOR_BUILDER_STRICT_COMBINATORS")
    """
    return f"{prefix}{key.upper().replace('.', '_').replace('-', '_')}"


def parse_bool(value: str) -> bool:
    """Parse string to boolean."""
    return value.strip().lower() in ("true", "1", "yes", "on", "enabled")


def parse_list(value: str) -> list[str]:
    """Parse a comma-separated string to a list.

    Whitespace-only items are kept verbatim so that the descendant
    combinator ``" "`` survives.
    """
    if not value:
        return []
    return [item if item.strip() == "" else item.strip() for item in value.split(",")]


def parse_value(value: str, target_type: type) -> Any:
    """Parse string value to target type.

    Args:
        value: String value
        target_type: One of bool, list or str

    Returns:
        Parsed value
    """
    if target_type is bool:
        return parse_bool(value)
    if target_type is list:
        return parse_list(value)
    return value


def get_env(
    key: str,
    default: Optional[T] = None,
    target_type: Optional[type] = None,
    prefix: str = ENV_PREFIX,
) -> Optional[Union[T, str]]:
    """Get configuration value from environment variable.

    Args:
        key: Configuration key
        default: Default value if not set
        target_type: Target type for parsing
        prefix: Environment variable prefix

    Returns:
        Parsed value or default
    """
    value = os.environ.get(get_env_key(key, prefix))

    if value is None:
        return default

    if target_type is not None:
        return parse_value(value, target_type)

    # Infer type from default
    if default is not None:
        return parse_value(value, type(default))

    return value


def get_env_bool(key: str, default: bool = False, prefix: str = ENV_PREFIX) -> bool:
    """Get boolean value from environment variable."""
    result = get_env(key, default, bool, prefix)
    return result if isinstance(result, bool) else default


def get_env_list(
    key: str,
    default: Optional[list[str]] = None,
    prefix: str = ENV_PREFIX,
) -> list[str]:
    """Get list value from environment variable."""
    value = os.environ.get(get_env_key(key, prefix))

    if value is None:
        return default if default is not None else []

    return parse_list(value)


# Option name -> (environment variable, type)
ENV_MAPPINGS = {
    "strict_combinators": (f"{ENV_PREFIX}STRICT_COMBINATORS", bool),
    "allowed_combinators": (f"{ENV_PREFIX}ALLOWED_COMBINATORS", list),
    "log_level": (f"{ENV_PREFIX}LOG_LEVEL", str),
}


def load_env_config() -> dict[str, Any]:
    """Load option values from the predefined environment variables.

    Returns:
        Dictionary holding only the options that are set in the environment
    """
    result: dict[str, Any] = {}

    for option, (env_var, target_type) in ENV_MAPPINGS.items():
        value = os.environ.get(env_var)
        if value is not None:
            result[option] = parse_value(value, target_type)

    return result
