"""
Shared utilities module.

This module contains the configuration, logging and argument validation
helpers used by the Result implementation.
"""

from fluent_result.shared.config import ResultSettings, get_settings
from fluent_result.shared.logging import configure_logging, get_logger

__all__ = ["ResultSettings", "get_settings", "configure_logging", "get_logger"]
