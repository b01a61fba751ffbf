"""
Logging configuration and utilities for the odometer counter.
"""
from .config import configure_logging, get_counter_logger, get_logger

__all__ = ["configure_logging", "get_counter_logger", "get_logger"]
