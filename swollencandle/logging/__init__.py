"""
Logging configuration and utilities for swollencandle.
"""
from .config import configure_logging, get_logger, get_persistence_logger

__all__ = ["configure_logging", "get_logger", "get_persistence_logger"]
