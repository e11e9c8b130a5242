"""
Logging setup for the runtime and its CLI.
"""

from .setup import configure_logging

__all__ = ["configure_logging"]
