"""
Controller package exports.

Provides a stable import surface for the command line entry point and tests.
"""

from .transliteration_controller import TransliterationController  # noqa: F401

__all__ = [
    "TransliterationController",
]
