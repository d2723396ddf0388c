"""Utility functions."""

from .helpers import format_currency, load_config, parse_number, setup_logging

__all__ = ["format_currency", "load_config", "parse_number", "setup_logging"]
