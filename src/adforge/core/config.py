"""Configuration management for Adforge.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the ADFORGE_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (ADFORGE_* prefix)
2. .env file in the working directory
3. Default values defined in AdforgeConfig

The service credential is the one exception to the prefix rule: it is also
picked up from ``GOOGLE_API_KEY`` or ``GEMINI_API_KEY`` so an existing Gemini
setup works unchanged.

Example .env file:
    GOOGLE_API_KEY=...
    ADFORGE_MODEL_NAME=gemini-2.5-flash-image-preview
    ADFORGE_OUTPUTS_DIR=generated-images
    ADFORGE_SERVER_PORT=8765

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
It is the default used by the API layer; tests build their own instances.

Usage Example
-------------
    from adforge.core.config import config

    print(config.model_name)
    print(config.outputs_dir)

Directory Management
--------------------
``outputs_dir`` is *not* created when the configuration loads.  The artifact
store creates it on first save, so an idle server never touches the
filesystem.
"""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Anchor for relative output paths: the project checkout that contains src/.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[3]

DEFAULT_MODEL_NAME = "gemini-2.5-flash-image-preview"


class AdforgeConfig(BaseSettings):
    """Main configuration for Adforge.

    Values are loaded from environment variables with the ADFORGE_ prefix,
    with fallback to defaults defined here.

    Attributes
    ----------
    Service Settings:
        api_key : SecretStr | None
            Bearer credential for the generation service.  Never logged.
        model_name : str
            Generation model identifier.
        max_prompt_length : int | None
            Upper bound on compiled prompt length; None disables the check.

    Paths:
        outputs_dir : Path
            Directory to save generated images.  Relative values resolve
            against the project root, not the current working directory.

    Server Settings:
        server_host : str
            Bind address for the HTTP API.
        server_port : int
            Port for the HTTP API (1024-65535).
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root log level used by the CLI entry point.

    Examples
    --------
        >>> custom_config = AdforgeConfig(
        ...     api_key="test-key",
        ...     outputs_dir="/tmp/adforge-out",
        ... )
        >>> custom_config.outputs_dir
        PosixPath('/tmp/adforge-out')
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ADFORGE_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Service settings
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("ADFORGE_API_KEY", "GOOGLE_API_KEY", "GEMINI_API_KEY"),
        description="Credential for the generation service",
    )
    model_name: str = Field(
        default=DEFAULT_MODEL_NAME,
        description="Generation model identifier",
    )
    max_prompt_length: int | None = Field(
        default=None,
        ge=1,
        description="Reject compiled prompts longer than this (None = no limit)",
    )

    # Paths
    outputs_dir: Path = Field(
        default=PROJECT_ROOT / "generated-images",
        description="Directory to save generated images",
    )

    # Server settings
    server_host: str = Field(
        default="127.0.0.1",
        description="Server bind address",
    )
    server_port: int = Field(
        default=8765,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level for the CLI entry point",
    )

    @field_validator("outputs_dir")
    @classmethod
    def _anchor_outputs_dir(cls, value: Path) -> Path:
        """Resolve relative output directories against the project root."""
        value = value.expanduser()
        if not value.is_absolute():
            value = PROJECT_ROOT / value
        return value

    @property
    def has_api_key(self) -> bool:
        """Whether a non-empty credential is configured."""
        return self.api_key is not None and bool(self.api_key.get_secret_value())


# Global configuration instance
# Loads values from environment variables (ADFORGE_* prefix) and .env file.
config = AdforgeConfig()
