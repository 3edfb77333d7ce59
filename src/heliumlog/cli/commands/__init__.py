"""
CLI commands module for heliumlog
"""

from . import template

__all__ = ["template"]
