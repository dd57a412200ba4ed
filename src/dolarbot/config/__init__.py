# src/dolarbot/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a local .env file.
"""

from dolarbot.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
