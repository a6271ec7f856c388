"""Line decoding and encoding CLI commands."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import BinaryIO

from ..codec import decode, encode
from ..config import CodecConfig
from ..exceptions import IrcwireError
from ..framing import split_lines
from ..models.message import Message

logger = logging.getLogger(__name__)


def decode_stream(stream: BinaryIO, config: CodecConfig) -> int:
    """Decode every line of a binary stream and print one JSON object per line.

    Failed lines are reported on stderr and skipped.

    Args:
        stream: Binary stream to read lines from
        config: Codec configuration

    Returns:
        Number of lines that failed to decode
    """
    lines, remainder = split_lines(stream.read())
    if remainder:
        # Without a final LF the last line would be rejected.
        logger.debug("Adding missing LF to final line")
        lines.append(remainder + b"\n")

    failures = 0
    for number, line in enumerate(lines, start=1):
        try:
            result = decode(line, config=config)
        except IrcwireError as e:
            print(f"Error: line {number}: {e.kind.value}: {e}", file=sys.stderr)
            failures += 1
            continue

        message = result.message
        print(
            json.dumps(
                {
                    "source": message.source,
                    "command": message.command,
                    "params": list(message.params),
                    "truncated": result.truncated,
                }
            )
        )

    logger.info("Decoded %d lines, %d failed", len(lines), failures)
    return failures


def decode_file(file_path: Path, config: CodecConfig) -> int:
    """Decode every line of a file. See decode_stream()."""
    with open(file_path, "rb") as f:
        return decode_stream(f, config)


def encode_json(document: str, config: CodecConfig, as_repr: bool = False) -> bool:
    """Encode a JSON message object and write the line to stdout.

    Args:
        document: JSON object with "command" and optional "source"/"params"
        config: Codec configuration
        as_repr: If True, print the Python repr of the bytes instead of raw bytes

    Returns:
        True if the line was truncated

    Raises:
        ValidationError: If the JSON is not a valid message
        IrcwireError: If the message cannot be encoded
    """
    message = Message.model_validate_json(document)
    result = encode(message, config=config)

    if result.truncated:
        print("Warning: message truncated to fit the line limit", file=sys.stderr)

    if as_repr:
        print(repr(result.data))
    else:
        sys.stdout.buffer.write(result.data)
        sys.stdout.flush()

    return result.truncated
