"""Configuration adapters."""

from mbta_departures.adapters.config.app_config import PAGE_SIZE_OPTIONS, ROUTE_TYPES, AppConfig

__all__ = ["PAGE_SIZE_OPTIONS", "ROUTE_TYPES", "AppConfig"]
