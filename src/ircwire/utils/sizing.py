"""Message size calculation utilities.

This module provides functions to calculate the encoded size of messages
without actually encoding them, so callers can split long text before it would
be truncated.
"""

from __future__ import annotations

from ..codec.encoder import needs_trailing, text_to_bytes
from ..config import DEFAULT_CONFIG, CodecConfig
from ..constants import CRLF
from ..models.message import Message


def encoded_length(message: Message, config: CodecConfig = DEFAULT_CONFIG) -> int:
    """Calculate the untruncated encoded length of a message in bytes.

    The length includes CRLF and any ':' the encoder would add. It does not
    check parameter placement or count.

    Args:
        message: Message to measure
        config: Codec configuration (for the text encoding)

    Returns:
        Length in bytes

    Raises:
        EncodeError: If a field cannot be represented in the configured encoding

    Example:
        >>> encoded_length(Message(source="nick", command="PRIVMSG", params=["#a", "hi there"]))
        28  # ':nick PRIVMSG #a :hi there\\r\\n'
    """
    length = len(text_to_bytes(message.command, config)) + len(CRLF)

    if message.source:
        length += 1 + len(text_to_bytes(message.source, config)) + 1

    for param in message.params:
        length += 1 + len(text_to_bytes(param, config))
        if needs_trailing(param):
            length += 1

    return length


def available_bytes(message: Message, config: CodecConfig = DEFAULT_CONFIG) -> int:
    """Bytes left before the line limit. Negative when the message is too long.

    Example:
        >>> available_bytes(Message(command="PING", params=["x"]))
        504
    """
    return config.max_line_length - encoded_length(message, config)


def fits(message: Message, config: CodecConfig = DEFAULT_CONFIG) -> bool:
    """Whether the message encodes without truncation."""
    return available_bytes(message, config) >= 0
