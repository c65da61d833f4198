"""Configuration package for the exchange rates service."""

from .settings import AppSettings, get_settings

__all__ = ["AppSettings", "get_settings"]
