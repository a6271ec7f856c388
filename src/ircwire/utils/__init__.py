"""Utility functions for ircwire.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import available_bytes, encoded_length, fits

__all__ = [
    "encoded_length",
    "available_bytes",
    "fits",
]
