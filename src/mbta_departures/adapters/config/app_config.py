"""12-factor configuration adapter using environment variables."""

import re
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

PAGE_SIZE_OPTIONS = (10, 20, 30, 40, 50)
ROUTE_TYPES = {
    0: "Light Rail",
    1: "Heavy Rail",
    2: "Commuter Rail",
    3: "Bus",
    4: "Ferry",
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="MBTA_",
        case_sensitive=False,
        extra="ignore",
    )

    # Transit API configuration
    api_base_url: str = Field(
        default="https://api-v3.mbta.com", description="Base URL of the MBTA v3 API"
    )
    api_key: str | None = Field(
        default=None, description="Optional MBTA API key, sent as the x-api-key header"
    )
    api_timeout: int = Field(default=10, description="Timeout for API requests in seconds")
    route_type: int = Field(
        default=2, description="Transit mode to display (route type, 2 is Commuter Rail)"
    )
    max_time: str = Field(
        default="24:00", description="Latest schedule time to fetch (HH:MM, service day)"
    )

    # Display configuration
    timezone: str = Field(
        default="America/New_York",
        description="Timezone for displaying schedule times (IANA timezone name)",
    )
    page_size: int = Field(default=10, description="Number of departures per table page")
    show_past_departures: bool = Field(
        default=False, description="Whether departures in the past are shown by default"
    )
    title: str = Field(
        default="MBTA Commuter Rail Departure Board",
        description="Title displayed above the board",
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Root log level")
    log_requests: bool = Field(default=False, description="Log every outgoing API request")

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended."""
        return v.rstrip("/")

    @field_validator("route_type")
    @classmethod
    def validate_route_type(cls, v: int) -> int:
        """Validate route type is a known transit mode."""
        if v not in ROUTE_TYPES:
            raise ValueError(f"route_type must be one of {sorted(ROUTE_TYPES)}")
        return v

    @field_validator("max_time")
    @classmethod
    def validate_max_time(cls, v: str) -> str:
        """Validate max time is HH:MM."""
        if not re.fullmatch(r"\d{1,2}:\d{2}", v):
            raise ValueError("max_time must be in HH:MM format")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name: {v}") from e
        return v

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """Validate page size is one of the offered options."""
        if v not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"page_size must be one of {PAGE_SIZE_OPTIONS}")
        return v

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        """Log levels are upper case."""
        return v.upper()

    @property
    def mode_name(self) -> str:
        """Human-readable name of the configured transit mode."""
        return ROUTE_TYPES[self.route_type]

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config from defaults and overrides without reading the environment."""
        return _InitOnlyAppConfig(**overrides)


class _InitOnlyAppConfig(AppConfig):
    """AppConfig whose only settings source is the constructor arguments."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)
