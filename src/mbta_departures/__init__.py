"""MBTA Commuter Rail departure board."""

__version__ = "0.1.0"
