"""
Configuration loader for selector-builder.

Options are resolved from defaults, then a JSON or TOML file, then
``SELECTOR_BUILDER_*`` environment variables, then programmatic overrides.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from .defaults import (
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import BuilderOptions

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "selector_builder"


class ConfigurationError(Exception):
    """Configuration loading or parsing error."""

    pass


def _load_json(path: Path) -> dict[str, Any]:
    """Load configuration from JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e


def _load_toml(path: Path) -> dict[str, Any]:
    """Load configuration from TOML file."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Load configuration from file based on extension.

    A top-level ``selector_builder`` table, if present, is unwrapped so that
    options can live inside a larger shared file such as ``pyproject.toml``.

    Args:
        path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If file format is not supported or file not found
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".json":
        data = _load_json(path)
    elif suffix == ".toml":
        data = _load_toml(path)
    else:
        raise ConfigurationError(f"Unsupported configuration format: {suffix}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {path}")

    section = data.get("selector_builder")
    if isinstance(section, dict):
        return section
    return data


def find_config_file(
    filename: str = DEFAULT_CONFIG_FILENAME,
    search_paths: Optional[list[str]] = None,
    extensions: Optional[list[str]] = None,
) -> Optional[Path]:
    """Find configuration file in search paths.

    Args:
        filename: Base filename without extension
        search_paths: Directories to search
        extensions: File extensions to try

    Returns:
        Path to config file or None if not found
    """
    if search_paths is None:
        search_paths = DEFAULT_CONFIG_SEARCH_PATHS

    if extensions is None:
        extensions = DEFAULT_CONFIG_EXTENSIONS

    for search_path in search_paths:
        search_dir = Path(search_path).expanduser()

        for ext in extensions:
            config_path = search_dir / f"{filename}{ext}"
            if config_path.exists():
                return config_path

    return None


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Merge configuration dictionaries, later ones taking precedence."""
    result: dict[str, Any] = {}

    for config in configs:
        result.update(config)

    return result


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
    auto_find: bool = False,
) -> BuilderOptions:
    """Load builder options from all sources.

    Priority (highest to lowest):
    1. Programmatic overrides
    2. Environment variables
    3. Configuration file
    4. Default values

    Args:
        config_file: Path to configuration file
        overrides: Programmatic overrides
        load_env: Whether to load environment variables
        auto_find: Search the default locations when no file is given

    Returns:
        Validated options

    Raises:
        ConfigurationError: If a source cannot be read or values are invalid
    """
    configs: list[dict[str, Any]] = []

    path = Path(config_file) if config_file else None
    if path is None and auto_find:
        path = find_config_file()

    if path is not None:
        logger.debug(f"Loading configuration from {path}")
        configs.append(load_file(path))

    if load_env:
        configs.append(load_env_config())

    if overrides:
        configs.append(overrides)

    try:
        return BuilderOptions.from_dict(merge_configs(*configs))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


_options: Optional[BuilderOptions] = None


def get_options() -> BuilderOptions:
    """Get the process-wide options, loading them on first use."""
    global _options
    if _options is None:
        _options = load_config()
    return _options


COMBINATOR_FIELDS = ("strict_combinators", "allowed_combinators")


def get_combinator_options() -> BuilderOptions:
    """Get options for combinator validation.

    Returns the process-wide options when already set. Otherwise only the
    combinator fields are read from the environment, so an unrelated bad
    value such as ``SELECTOR_BUILDER_LOG_LEVEL=verbose`` is ignored.

    Raises:
        ConfigurationError: If the combinator fields themselves are invalid
    """
    if _options is not None:
        return _options

    env_config = load_env_config()
    data = {key: env_config[key] for key in COMBINATOR_FIELDS if key in env_config}

    try:
        return BuilderOptions.from_dict(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def set_options(options: Optional[BuilderOptions]) -> None:
    """Replace the process-wide options; None forces a reload on next use."""
    global _options
    _options = options


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Set the package log level and attach a stderr handler if none exists.

    Intended for applications; the library itself never calls it.

    Args:
        level: Log level; defaults to the configured ``log_level``

    Returns:
        The package logger
    """
    if level is None:
        level = get_options().log_level

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        package_logger.addHandler(handler)

    return package_logger
