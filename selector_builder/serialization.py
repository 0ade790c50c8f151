"""
JSON passthrough helpers.

``serialize`` turns plain values and pydantic models into compact JSON;
``deserialize`` rebuilds an instance of a given class from JSON text.
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar("T")


class SerializationError(ValueError):
    """JSON text could not be turned into the requested shape."""

    pass


def _default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize(value: Any) -> str:
    """Return the JSON representation of a value.

    Example:
        >>> serialize([1, 2, 3])
        '[1,2,3]'
    """
    if isinstance(value, BaseModel):
        return value.model_dump_json()
    return json.dumps(value, separators=(",", ":"), default=_default)


def deserialize(shape: type[T], text: str) -> T:
    """Build an instance of ``shape`` from JSON text.

    Pydantic models are validated. Any other class is instantiated without
    calling ``__init__`` and receives the decoded fields as attributes, so
    its methods and properties work on the result.

    Args:
        shape: Class of the object to build.
        text: JSON text.

    Returns:
        Instance of ``shape``.

    Raises:
        SerializationError: If the text is not valid JSON for the shape.
    """
    if isinstance(shape, type) and issubclass(shape, BaseModel):
        try:
            return shape.model_validate_json(text)
        except ValidationError as e:
            raise SerializationError(f"Invalid {shape.__name__} JSON: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e

    if isinstance(data, shape):
        return data

    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {shape.__name__}, got {type(data).__name__}"
        )

    try:
        obj = shape.__new__(shape)
        obj.__dict__.update(data)
    except (AttributeError, TypeError) as e:
        raise SerializationError(
            f"Cannot populate {shape.__name__} from JSON fields: {e}"
        ) from e
    return obj


__all__ = [
    "SerializationError",
    "deserialize",
    "serialize",
]
