"""Exception hierarchy for ircwire.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from IrcwireError for easy catching of any ircwire-specific error.

Every exception carries an ErrorKind so callers can dispatch on the failure
without matching message strings, plus the offending byte and its position
where the parser knows them.
"""

from __future__ import annotations

import enum
from typing import Any


class ErrorKind(enum.Enum):
    """Closed set of codec failure kinds."""

    MALFORMED_TERMINATOR = "malformed terminator"
    EMPTY_PREFIX = "empty prefix"
    INVALID_PREFIX_BYTE = "invalid byte in prefix"
    NO_PREFIX_SPACE = "no space after prefix"
    PREFIX_ONLY = "prefix only"
    EMPTY_COMMAND = "empty command"
    UNEXPECTED_CHARACTER = "unexpected character after command"
    MALFORMED_PARAMETER = "malformed parameter"
    NOT_TERMINATED = "parameters not terminated"
    TOO_MANY_PARAMETERS = "too many parameters"
    MISSING_TERMINATOR = "missing terminator"
    TRAILING_NOT_LAST = "trailing parameter not last"
    HEADER_TOO_LONG = "prefix and command too long"
    UNENCODABLE_TEXT = "text not representable in the configured encoding"
    TRUNCATED = "message truncated"


class IrcwireError(Exception):
    """Base exception for all ircwire errors.

    Attributes:
        kind: Which failure occurred
        position: Byte offset into the line where the problem was found, if known
        byte: The offending byte value, if there is one
    """

    default_kind: ErrorKind | None = None

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        position: int | None = None,
        byte: int | None = None,
    ) -> None:
        super().__init__(message)
        resolved = kind if kind is not None else self.default_kind
        if resolved is None:
            raise TypeError(f"{type(self).__name__} requires an error kind")
        self.kind = resolved
        self.position = position
        self.byte = byte


class DecodeError(IrcwireError):
    """Raised when a wire line cannot be parsed into a Message.

    Examples:
        - Line has no CRLF or LF ending
        - Prefix is empty or holds NUL, CR or LF
        - Command is empty or followed by an invalid byte
        - Parameters are malformed or there are more than 15
        - Text input the configured encoding cannot represent
    """

    pass


class EncodeError(IrcwireError):
    """Raised when a Message cannot be rendered to the wire.

    Examples:
        - A parameter needing the ':' form is not the last one
        - Prefix and command alone exceed the line limit
        - More than 15 parameters
        - Text the configured encoding cannot represent
    """

    pass


class MalformedTerminatorError(DecodeError):
    """Raised when a line has no valid CRLF or LF ending."""

    default_kind = ErrorKind.MALFORMED_TERMINATOR


class PrefixError(DecodeError):
    """Raised when the ':prefix ' portion of a line is invalid."""

    pass


class CommandError(DecodeError):
    """Raised when the command token is empty or followed by an invalid byte."""

    pass


class ParameterError(DecodeError):
    """Raised when a parameter is malformed."""

    pass


class MissingTerminatorError(DecodeError):
    """Raised when parsing does not end exactly at the final CRLF."""

    default_kind = ErrorKind.MISSING_TERMINATOR


class TooManyParametersError(DecodeError, EncodeError):
    """Raised on either direction when a message has more than 15 parameters."""

    default_kind = ErrorKind.TOO_MANY_PARAMETERS


class TrailingNotLastError(EncodeError):
    """Raised when a parameter other than the last needs the ':' form."""

    default_kind = ErrorKind.TRAILING_NOT_LAST


class HeaderTooLongError(EncodeError):
    """Raised when prefix and command alone do not fit in a line.

    There is nothing meaningful left to cut, so this is never truncated.
    """

    default_kind = ErrorKind.HEADER_TOO_LONG


class TruncatedError(IrcwireError):
    """Raised by ``unwrap(strict=True)`` when a result was truncated.

    Truncation is normally reported as a status on the result, not raised.
    The partial result is kept on ``result`` so it is not lost.
    """

    default_kind = ErrorKind.TRUNCATED

    def __init__(self, message: str, result: Any) -> None:
        super().__init__(message)
        self.result = result
