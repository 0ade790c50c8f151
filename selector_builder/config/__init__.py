"""
Configuration module for selector-builder.

Options are pydantic models and can be loaded from a JSON or TOML file
and from environment variables.

Example usage:
    from selector_builder.config import BuilderOptions, load_config, set_options

    # Load from file with environment overrides
    options = load_config("selector-builder.config.toml")

    # Or create programmatically and make it the process default
    set_options(BuilderOptions(strict_combinators=True))

Environment variables:
    SELECTOR_BUILDER_STRICT_COMBINATORS=true
    SELECTOR_BUILDER_ALLOWED_COMBINATORS=>,+,~
    SELECTOR_BUILDER_LOG_LEVEL=DEBUG
"""

from .defaults import (
    DEFAULT_ALLOWED_COMBINATORS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_STRICT_COMBINATORS,
    ENV_PREFIX,
    get_default_options,
)
from .env import (
    ENV_MAPPINGS,
    get_env,
    get_env_bool,
    get_env_key,
    get_env_list,
    load_env_config,
)
from .loader import (
    ConfigurationError,
    configure_logging,
    find_config_file,
    get_combinator_options,
    get_options,
    load_config,
    load_file,
    merge_configs,
    set_options,
)
from .options import BuilderOptions

__all__ = [
    # Options
    "BuilderOptions",
    # Loader functions
    "ConfigurationError",
    "configure_logging",
    "find_config_file",
    "get_combinator_options",
    "get_options",
    "load_config",
    "load_file",
    "merge_configs",
    "set_options",
    # Environment functions
    "ENV_MAPPINGS",
    "ENV_PREFIX",
    "get_env",
    "get_env_bool",
    "get_env_key",
    "get_env_list",
    "load_env_config",
    # Default values
    "DEFAULT_ALLOWED_COMBINATORS",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_STRICT_COMBINATORS",
    "get_default_options",
]
