"""
Configuration Validation Module

Validates configuration values at startup to fail-fast
with clear error messages instead of silently logging nothing
or rendering copy in an unexpected language.
"""

import logging
import sys

from order_ui.utils.localizator import Localizator

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def validate_log_level(log_level: str | None) -> None:
    """
    Validate LOG_LEVEL.

    Args:
        log_level: The LOG_LEVEL value from config

    Raises:
        ConfigValidationError: If the level is not a standard logging level
    """
    if not log_level or str(log_level).strip().upper() not in VALID_LOG_LEVELS:
        raise ConfigValidationError(
            f"LOG_LEVEL '{log_level}' is invalid!\n"
            f"Valid values: {', '.join(VALID_LOG_LEVELS)}\n"
            "Add to .env: LOG_LEVEL=INFO"
        )


def validate_retention_days(retention_days) -> None:
    """
    Validate LOG_RETENTION_DAYS.

    Raises:
        ConfigValidationError: If retention is not a positive integer
    """
    if isinstance(retention_days, bool) or not isinstance(retention_days, int) or retention_days < 1:
        raise ConfigValidationError(
            f"LOG_RETENTION_DAYS must be a positive integer (currently: {retention_days})"
        )


def validate_copy_language(language: str | None) -> None:
    """
    Validate COPY_LANGUAGE against the languages with complete stage copy.

    Raises:
        ConfigValidationError: If no complete copy set exists for the language
    """
    supported = Localizator.supported_languages()
    normalized = str(language or "").strip().lower()
    if normalized not in supported:
        raise ConfigValidationError(
            f"COPY_LANGUAGE '{language}' has no stage copy!\n"
            f"Supported languages: {', '.join(sorted(supported))}\n"
            "Add to .env: COPY_LANGUAGE=en"
        )


def validate_startup_config(config_module) -> None:
    """
    Validate all configuration at startup.

    Args:
        config_module: The config module to validate

    Raises:
        ConfigValidationError: If any validation fails
    """
    validate_log_level(getattr(config_module, 'LOG_LEVEL', None))
    validate_retention_days(getattr(config_module, 'LOG_RETENTION_DAYS', None))
    validate_copy_language(getattr(config_module, 'COPY_LANGUAGE', None))
    logging.debug("Configuration validated")


def validate_or_exit(config_module) -> None:
    """
    Validate configuration and exit with error code 1 if validation fails.

    This is the main entry point for startup validation.

    Args:
        config_module: The config module to validate
    """
    try:
        validate_startup_config(config_module)
    except ConfigValidationError as e:
        print(f"\n ERROR: Configuration Validation Failed\n", file=sys.stderr)
        print(str(e), file=sys.stderr)
        print("\nStartup aborted. Please fix configuration and try again.\n", file=sys.stderr)
        sys.exit(1)
