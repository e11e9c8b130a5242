"""
实用工具
"""

from . import utility

__all__ = ["utility"]
