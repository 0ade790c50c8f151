"""
Configuration options for selector-builder.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    DEFAULT_ALLOWED_COMBINATORS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_STRICT_COMBINATORS,
    LOG_LEVELS,
)
from .env import parse_list


class BuilderOptions(BaseModel):
    """Options controlling selector construction."""

    strict_combinators: bool = Field(
        DEFAULT_STRICT_COMBINATORS,
        description="Reject combinators outside allowed_combinators",
    )
    allowed_combinators: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_COMBINATORS),
        description="Combinator tokens accepted in strict mode",
    )
    log_level: str = Field(DEFAULT_LOG_LEVEL, description="Package log level")

    @field_validator("allowed_combinators", mode="before")
    @classmethod
    def parse_combinators(cls, v: Any) -> Any:
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return parse_list(v)
        return v

    @field_validator("allowed_combinators")
    @classmethod
    def check_combinators(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("allowed_combinators must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Expected one of: {', '.join(LOG_LEVELS)}"
            )
        return level

    def is_allowed(self, combinator: str) -> bool:
        """Check whether a combinator token passes validation."""
        if not self.strict_combinators:
            return True
        return combinator in self.allowed_combinators

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BuilderOptions":
        """Create options from dictionary."""
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        """Convert options to dictionary."""
        return self.model_dump()
