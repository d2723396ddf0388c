"""Utility functions for configuration, logging, and common operations."""

import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# Leading numeric literal, optionally followed by arbitrary text ("12.5 $/yr")
_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity))")


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load the main configuration file.

    Args:
        config_path: Optional path to config file. If not provided,
                     uses default config/config.yaml

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If the config file does not exist
    """
    if config_path is None:
        config_path = get_project_root() / "config" / "config.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def setup_logging(
    level: str = "INFO",
    log_format: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """Set up logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Optional custom log format
        log_file: Optional log file path

    Returns:
        Configured logger
    """
    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=[]
    )

    logger = logging.getLogger("hvac_savings")
    logger.setLevel(getattr(logging, level.upper()))

    # Repeated calls (dashboard reruns) must not stack handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console_handler)

    # File handler (optional)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(file_handler)

    return logger


def parse_number(value: Any) -> float:
    """Coerce loosely typed numeric input to a float.

    Strings are read like a form field: the leading numeric literal is
    used and any trailing text is ignored. Anything that does not start
    with a number, as well as None, NaN and -0, becomes 0. "Infinity" is
    accepted as a leading literal.

    Examples:
        >>> parse_number("1000")
        1000.0
        >>> parse_number("12.5 per year")
        12.5
        >>> parse_number("n/a")
        0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMBER_PREFIX.match(str(value))
        if not match:
            return 0.0
        number = float(match.group(1))

    if math.isnan(number):
        return 0.0
    # Normalize -0.0
    return number or 0.0


def format_currency(amount: float, symbol: str = "$", decimals: int = 0) -> str:
    """Format a number as currency.

    Args:
        amount: Amount to format
        symbol: Currency symbol placed before the digits
        decimals: Number of decimal places (halves round away from zero)

    Returns:
        Formatted currency string, e.g. "$1,234" or "-$56"
    """
    if not math.isfinite(amount):
        return f"{symbol}{amount}"

    quantum = Decimal(1).scaleb(-decimals)
    value = Decimal(str(amount)).quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{decimals}f}"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a percentage value.

    Args:
        value: Value to format (already scaled to 0-100)
        decimals: Number of decimal places

    Returns:
        Formatted percentage string
    """
    return f"{value:.{decimals}f}%"
