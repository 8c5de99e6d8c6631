"""Logging setup."""

from jokebox.log_config.logger import get_logger, setup_logging

__all__ = ["setup_logging", "get_logger"]
