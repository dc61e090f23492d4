"""cdp-client configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import PydanticBaseSettingsSource
from pydantic_settings import SettingsConfigDict
from pydantic_settings import TomlConfigSettingsSource


def config_paths() -> list[Path]:
    """Get the TOML config files, lowest precedence first.

    Later files override earlier ones, so the project-local file wins
    over the user-level one.
    """
    return [
        Path.home() / ".config" / "cdp-client" / "config.toml",
        Path("cdp-client.toml"),
    ]


class ClientConfig(BaseSettings):
    """cdp-client configuration.

    Configuration is loaded from (in order of precedence):
    1. Environment variables (prefixed with CDP_CLIENT_)
    2. Config file (./cdp-client.toml, then ~/.config/cdp-client/config.toml)
    3. Default values

    Environment variable examples:
        CDP_CLIENT_LOG_LEVEL=DEBUG
        CDP_CLIENT_LOG_FORMAT="%(levelname)s %(message)s"
    """

    model_config = SettingsConfigDict(
        env_prefix="CDP_CLIENT_",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    log_format: str = Field(
        default="%(asctime)s %(name)s %(levelname)s: %(message)s",
        description="Format string for the cdp_client log handler.",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML config files."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=config_paths()),
        )


def load_config() -> ClientConfig:
    """Load client configuration."""
    return ClientConfig()


# Global config instance (lazily loaded)
_config: ClientConfig | None = None


def get_config() -> ClientConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
