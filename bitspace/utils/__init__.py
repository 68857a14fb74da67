"""Shared utilities."""

from .logging_setup import configure_logging, setup_logging, log_operation

__all__ = ["configure_logging", "setup_logging", "log_operation"]
