"""
Configuration module.

Handles environment variables, API keys, and application settings.
"""

from src.config.config import (
    APP_ENV,
    DEBUG,
    TAVILY_API_KEY,
    TAVILY_SEARCH_URL,
    SEARCH_MAX_RESULTS,
    RELATED_SUMMARY_CHARS,
    GEMINI_API_KEY,
    GEMINI_MODEL,
    MONGODB_URI,
    MONGODB_DB,
    MONGODB_COLLECTION,
    Settings,
    is_production,
    is_development,
    validate_config,
    print_config_summary,
)

__all__ = [
    "APP_ENV",
    "DEBUG",
    "TAVILY_API_KEY",
    "TAVILY_SEARCH_URL",
    "SEARCH_MAX_RESULTS",
    "RELATED_SUMMARY_CHARS",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "MONGODB_URI",
    "MONGODB_DB",
    "MONGODB_COLLECTION",
    "Settings",
    "is_production",
    "is_development",
    "validate_config",
    "print_config_summary",
]
