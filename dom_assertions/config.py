"""
Configuration for DOM assertions.
Settings are read from the environment, after loading a `.env` file if present.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger("dom_assertions.config")

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")
TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    """Runtime settings"""
    log_level: str = "WARNING"
    fail_fast: bool = False
    report_path: Optional[str] = None
    headless: bool = True
    browser: str = "chromium"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Load settings from the environment.

    Args:
        dotenv_path: Optional path of the `.env` file; by default it is searched for
            from the current directory upwards. Existing variables are not overridden.

    Returns:
        Settings: The loaded settings

    Raises:
        ValueError: If a variable holds an invalid value
    """
    load_dotenv(dotenv_path)

    browser = os.getenv("DOM_ASSERTIONS_BROWSER", "chromium").strip().lower()
    if browser not in SUPPORTED_BROWSERS:
        raise ValueError(f"DOM_ASSERTIONS_BROWSER must be one of {', '.join(SUPPORTED_BROWSERS)}, got {browser!r}")

    log_level = os.getenv("DOM_ASSERTIONS_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"DOM_ASSERTIONS_LOG_LEVEL is not a logging level: {log_level!r}")

    settings = Settings(
        log_level=log_level,
        fail_fast=_env_flag("DOM_ASSERTIONS_FAIL_FAST", False),
        report_path=os.getenv("DOM_ASSERTIONS_REPORT_PATH") or None,
        headless=_env_flag("DOM_ASSERTIONS_HEADLESS", True),
        browser=browser,
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the package logger."""
    logging.getLogger("dom_assertions").setLevel(settings.log_level)
