"""Protocol line codec for ircwire.

This module provides decoding of raw protocol lines into Message values and
encoding of Message values back into lines, under a fixed line limit.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode, needs_trailing
from .result import DecodeResult, EncodeResult, Status

__all__ = [
    "encode",
    "decode",
    "needs_trailing",
    "DecodeResult",
    "EncodeResult",
    "Status",
]
