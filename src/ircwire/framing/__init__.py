"""Line framing utilities for ircwire.

This module provides line ending normalization and receive buffer splitting.
"""

from __future__ import annotations

from .lines import fix_line_ending, split_lines

__all__ = [
    "fix_line_ending",
    "split_lines",
]
