"""Protocol line encoder.

This module provides the encode() function that renders a Message as a raw
protocol line ending in CRLF.
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_CONFIG, CodecConfig
from ..constants import CRLF
from ..exceptions import (
    EncodeError,
    ErrorKind,
    HeaderTooLongError,
    TooManyParametersError,
    TrailingNotLastError,
)
from ..models.message import Message
from .result import EncodeResult, Status

logger = logging.getLogger(__name__)


def needs_trailing(param: str) -> bool:
    """Whether a parameter must be written in the ':' (trailing) form.

    That is the case when it holds a space, starts with ':', or is empty. An
    empty last parameter is written as ':' so it stays visible, as in a TOPIC
    unset.
    """
    return param == "" or " " in param or param.startswith(":")


def text_to_bytes(text: str, config: CodecConfig = DEFAULT_CONFIG) -> bytes:
    """Convert one message field to wire bytes.

    Raises:
        EncodeError: If the configured encoding cannot represent the text
    """
    try:
        return config.to_bytes(text)
    except UnicodeEncodeError as e:
        raise EncodeError(
            f"Cannot encode {e.object[e.start : e.end]!r} as {config.encoding}: {e.reason}",
            kind=ErrorKind.UNENCODABLE_TEXT,
        ) from e


def encode(message: Message, config: CodecConfig = DEFAULT_CONFIG) -> EncodeResult:
    """Encode a Message into a raw protocol line.

    The line always ends in CRLF. If rendering the message would exceed the
    line limit, as much as fits is kept and the result is flagged as
    truncated. The truncated line may still be usable.

    Command specific semantics are not enforced.

    Args:
        message: Message to encode
        config: Codec configuration (line limit, parameter limit, encoding)

    Returns:
        EncodeResult holding the line and Status.OK or Status.TRUNCATED

    Raises:
        HeaderTooLongError: If prefix and command alone do not fit
        TooManyParametersError: If there are more than 15 parameters
        TrailingNotLastError: If a parameter other than the last needs the ':' form
        EncodeError: If a field cannot be represented in the configured encoding

    Examples:
        ```python
        from ircwire import Message, encode

        msg = Message(source="nick", command="PRIVMSG", params=["nick2", "hi there"])
        encode(msg).data   # b':nick PRIVMSG nick2 :hi there\\r\\n'
        ```
    """
    limit = config.max_line_length
    buf = bytearray()

    if message.source:
        buf += b":" + text_to_bytes(message.source, config) + b" "
    buf += text_to_bytes(message.command, config)

    if len(buf) + len(CRLF) > limit:
        raise HeaderTooLongError(
            f"Message with only prefix/command is too long ({len(buf) + len(CRLF)} bytes, "
            f"limit {limit})"
        )

    if len(message.params) > config.max_params:
        raise TooManyParametersError(
            f"Too many parameters: {len(message.params)} (maximum {config.max_params})"
        )

    truncated = False
    last = len(message.params) - 1

    for i, param in enumerate(message.params):
        if needs_trailing(param):
            # There can only be one <trailing>.
            if i != last:
                raise TrailingNotLastError(
                    f"Parameter {i} needs ':' or holds ' ' but is not the last parameter"
                )
            param = ":" + param

        data = text_to_bytes(param, config)

        if len(buf) + 1 + len(data) + len(CRLF) > limit:
            # Claim the separator and CRLF as used, then see what is left for
            # the parameter. If nothing is, drop the separator too. With a ':'
            # prefixed parameter this may leave only the ':'.
            available = limit - (len(buf) + 1 + len(CRLF))
            if available > 0:
                buf += b" " + data[:available]

            logger.debug(
                "Truncated %s at parameter %d; kept %d of %d bytes",
                message.command,
                i,
                max(available, 0),
                len(data),
            )
            truncated = True
            break

        buf += b" " + data

    buf += CRLF

    return EncodeResult(bytes(buf), Status.TRUNCATED if truncated else Status.OK)
