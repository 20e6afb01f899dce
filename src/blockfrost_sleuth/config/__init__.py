"""Configuration management for blockfrost_sleuth package."""

from .settings import Settings, settings, APIs, APIUrls, RetrySettings, get_base_url

__all__ = [
    "Settings",
    "settings",
    "APIs",
    "APIUrls",
    "RetrySettings",
    "get_base_url",
]
