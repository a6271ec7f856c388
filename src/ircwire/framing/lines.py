"""Line termination utilities.

This module normalizes line endings before parsing and splits a receive
buffer into complete lines. Lines are bytes throughout; the terminator is
CRLF on the wire, though many peers send a bare LF.
"""

from __future__ import annotations

from ..constants import CR, CRLF, LF
from ..exceptions import MalformedTerminatorError


def fix_line_ending(line: bytes) -> bytes:
    """Ensure a line ends with CRLF.

    If it ends with only LF, the LF is replaced by CRLF. A line that is
    already CRLF-terminated is returned unchanged.

    Args:
        line: Raw line, terminator included

    Returns:
        The line ending in CRLF

    Raises:
        MalformedTerminatorError: If the line is empty or has no LF ending

    Example:
        >>> fix_line_ending(b"hi\\n")
        b'hi\\r\\n'
        >>> fix_line_ending(b"hi\\r\\n")
        b'hi\\r\\n'
    """
    if not line:
        raise MalformedTerminatorError("Line is blank", position=0)

    if len(line) == 1:
        if line[0] == LF:
            return CRLF
        raise MalformedTerminatorError(
            "Line does not end with LF", position=0, byte=line[0]
        )

    if line[-2] == CR and line[-1] == LF:
        return line

    if line[-1] == LF:
        return line[:-1] + CRLF

    raise MalformedTerminatorError(
        "Line has no ending CRLF or LF", position=len(line) - 1, byte=line[-1]
    )


def split_lines(buffer: bytes) -> tuple[list[bytes], bytes]:
    """Split a receive buffer into complete lines.

    Each returned line keeps its LF (or CRLF) terminator so it can be passed
    straight to decode(). Bytes after the last LF are returned as the
    remainder, to be prepended to the next read.

    Args:
        buffer: Bytes read from a connection

    Returns:
        Tuple of (complete lines, unterminated remainder)

    Example:
        >>> split_lines(b"PING :a\\r\\nPING :b\\nPI")
        ([b'PING :a\\r\\n', b'PING :b\\n'], b'PI')
    """
    lines: list[bytes] = []
    start = 0

    while True:
        end = buffer.find(b"\n", start)
        if end == -1:
            break
        lines.append(buffer[start : end + 1])
        start = end + 1

    return lines, buffer[start:]
