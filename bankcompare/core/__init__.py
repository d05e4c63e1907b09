"""
Core utilities and configuration for BankCompare.

This package provides core functionality including logging configuration,
settings, and the database layer.
"""

from bankcompare.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
