"""Pydantic message modeling for ircwire.

This module provides the immutable Message model and its derived accessors.
"""

from __future__ import annotations

from .message import Message, source_nick

__all__ = [
    "Message",
    "source_nick",
]
