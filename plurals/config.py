"""
Settings for the plurals command line.

Values come from environment variables and are overridden by CLI flags:

    PLURALS_LANGUAGE     Language code or name (default: en)
    PLURALS_DICTIONARY   Path to a dictionary file
    PLURALS_VERBOSE      Enable debug logging (1/true/yes)
"""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from plurals.rules import resolve_language

ENV_LANGUAGE = "PLURALS_LANGUAGE"
ENV_DICTIONARY = "PLURALS_DICTIONARY"
ENV_VERBOSE = "PLURALS_VERBOSE"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Resolved command line settings."""

    model_config = {"frozen": True}

    language: str = Field(default="en", description="Registered language code")
    dictionary: Path | None = Field(
        default=None, description="Dictionary file; bundled words are used when unset"
    )
    verbose: bool = Field(default=False, description="Enable debug logging")

    @field_validator("language")
    @classmethod
    def check_language(cls, value: str) -> str:
        code = resolve_language(value)
        if code is None:
            raise ValueError(f"unsupported language: {value!r}")
        return code

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Environment mapping (defaults to os.environ)
            **overrides: Values taking priority over the environment;
                None values are ignored

        Raises:
            pydantic.ValidationError: If a value is invalid
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        language = env.get(ENV_LANGUAGE, "").strip()
        if language:
            values["language"] = language
        dictionary = env.get(ENV_DICTIONARY, "").strip()
        if dictionary:
            values["dictionary"] = dictionary
        if env.get(ENV_VERBOSE, "").strip().lower() in _TRUTHY:
            values["verbose"] = True

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
