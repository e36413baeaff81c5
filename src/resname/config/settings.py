"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RESNAME_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from resname.domain.names import MAX_NAME_LENGTH


class ResnameSettings(BaseSettings):
    """Settings for the resname CLI and services.

    Frozen after construction and stored on the Click context object.

    Attributes:
        max_length: Byte limit applied by the length check.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RESNAME_",
    }

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- Validation ---
    max_length: int = Field(default=MAX_NAME_LENGTH, ge=1)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only init kwargs and env vars; no dotenv or secret files."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> ResnameSettings:
        """Construct settings from a CLI invocation.

        Flags left at ``None`` (options the user did not pass) fall
        through to env vars and defaults.
        """
        overrides = {key: value for key, value in cli_flags.items() if value is not None}
        return cls(**overrides)
