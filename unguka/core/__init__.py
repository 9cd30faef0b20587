"""
Core utilities and configuration for Unguka.

This package provides core functionality including logging configuration,
database setup, domain errors and other shared utilities.
"""

from unguka.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
