"""
Easel CLI - Interactive session over a shape catalog.

This package provides the menu-driven command loop: it reads typed input,
calls into the catalog and factory, and renders results as text lines.

Usage:
    easel
    easel --config config/session.yaml --log-level INFO
"""

from .reader import InputError, TokenReader
from .menu import InvalidChoiceError, Menu
from .session import CatalogSession

__all__ = [
    "InputError",
    "TokenReader",
    "InvalidChoiceError",
    "Menu",
    "CatalogSession",
]

__version__ = "1.0.0"
