"""Utility modules for tinylex.

Provides:
- logger: get_logger for logging
"""

from tinylex.utils.logger import get_logger

__all__ = ["get_logger"]
