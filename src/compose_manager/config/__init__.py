"""Configuration for Compose Manager."""

from .settings import ComposeSettings, get_settings

__all__ = [
    "ComposeSettings",
    "get_settings",
]
