"""Utility modules for xmlscan.

Provides:
- logger: get_logger for logging
"""

from xmlscan.utils.logger import get_logger

__all__ = ["get_logger"]
