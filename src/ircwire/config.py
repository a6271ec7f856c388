"""Codec configuration.

This module provides the frozen configuration dataclass shared by the decoder,
encoder and sizing helpers. The defaults are the protocol values from
ircwire.constants; override them only when talking to a peer that is known to
use a different line limit.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass

from .constants import DEFAULT_ENCODING, DEFAULT_ERRORS, MAX_LINE_LENGTH, MAX_PARAMS


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for encoding and decoding protocol lines.

    Attributes:
        max_line_length: Maximum line length in bytes, CRLF included (default 512).
            Some networks raise this, for example to 1024 or more bytes, but
            512 is what RFC 1459/2812 specify.

        max_params: Maximum number of parameters per message (default 15).

        encoding: Text encoding used between str fields and wire bytes
            (default "utf-8").

        errors: Codec error handler (default "surrogateescape"). With
            surrogateescape, bytes that are not valid in the encoding decode
            to lone surrogates and encode back to the same bytes, so a
            decode/encode round trip never alters the wire form.

    Examples:
        ```python
        from ircwire import CodecConfig, decode

        config = CodecConfig(max_line_length=1024)
        result = decode(line, config=config)
        ```
    """

    max_line_length: int = MAX_LINE_LENGTH
    max_params: int = MAX_PARAMS
    encoding: str = DEFAULT_ENCODING
    errors: str = DEFAULT_ERRORS

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        # Room for at least one command byte and CRLF.
        if self.max_line_length < 3:
            raise ValueError(f"max_line_length must be >= 3, got {self.max_line_length}")

        if self.max_params < 0:
            raise ValueError(f"max_params must be >= 0, got {self.max_params}")

        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e

        try:
            codecs.lookup_error(self.errors)
        except LookupError as e:
            raise ValueError(f"Unknown error handler: {self.errors}") from e

    def to_bytes(self, text: str) -> bytes:
        """Convert text to wire bytes."""
        return text.encode(self.encoding, self.errors)

    def to_text(self, data: bytes) -> str:
        """Convert wire bytes to text."""
        return data.decode(self.encoding, self.errors)


DEFAULT_CONFIG = CodecConfig()
