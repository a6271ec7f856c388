"""ircwire: IRC Protocol Message Codec

A Python library for decoding and encoding RFC 1459/2812 protocol lines.
It turns a raw line into an immutable Message and back again, under the
512 byte line limit, and tolerates the common ways real servers and clients
bend the grammar.

Key Features:
- Pydantic-based immutable Message model
- Lenient parsing: bare LF endings, stray trailing spaces, loose commands
- Byte-exact truncation that never produces an invalid line
- Truncation reported as a status, not as an error
- No I/O: plug it into any socket or event loop

Quick Start:
    >>> from ircwire import Message, decode, encode
    >>>
    >>> result = decode(":nick!user@host PRIVMSG #test :hi there\\r\\n")
    >>> result.message.params
    ('#test', 'hi there')
    >>> result.message.source_nick
    'nick'
    >>> encode(Message(command="PONG", params=["irc.example.com"])).data
    b'PONG irc.example.com\\r\\n'
"""

from __future__ import annotations

from .codec import DecodeResult, EncodeResult, Status, decode, encode, needs_trailing
from .config import DEFAULT_CONFIG, CodecConfig
from .constants import MAX_LINE_LENGTH, MAX_PARAMS, REPLY_WELCOME, REPLY_YOUREOPER
from .exceptions import (
    CommandError,
    DecodeError,
    EncodeError,
    ErrorKind,
    HeaderTooLongError,
    IrcwireError,
    MalformedTerminatorError,
    MissingTerminatorError,
    ParameterError,
    PrefixError,
    TooManyParametersError,
    TrailingNotLastError,
    TruncatedError,
)
from .framing import fix_line_ending, split_lines
from .models import Message, source_nick
from .utils import available_bytes, encoded_length, fits

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Message",
    "source_nick",
    "encode",
    "decode",
    "needs_trailing",
    # Results
    "DecodeResult",
    "EncodeResult",
    "Status",
    # Configuration and constants
    "CodecConfig",
    "DEFAULT_CONFIG",
    "MAX_LINE_LENGTH",
    "MAX_PARAMS",
    "REPLY_WELCOME",
    "REPLY_YOUREOPER",
    # Exceptions
    "ErrorKind",
    "IrcwireError",
    "DecodeError",
    "EncodeError",
    "MalformedTerminatorError",
    "PrefixError",
    "CommandError",
    "ParameterError",
    "MissingTerminatorError",
    "TooManyParametersError",
    "TrailingNotLastError",
    "HeaderTooLongError",
    "TruncatedError",
    # Framing
    "fix_line_ending",
    "split_lines",
    # Sizing
    "encoded_length",
    "available_bytes",
    "fits",
    # Version
    "__version__",
]
