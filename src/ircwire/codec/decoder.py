"""Protocol line decoder.

This module provides the decode() function that parses a raw protocol line
into a Message. Parsing is a single forward pass over the line's bytes: each
sub-parser takes the current index and returns what it parsed together with
the index just after it.

We are parsing this (RFC 1459/2812 section 2.3.1):

    message    =  [ ":" prefix SPACE ] command [ params ] crlf
    prefix     =  servername / ( nickname [ [ "!" user ] "@" host ] )
    command    =  1*letter / 3digit
    params     =  *14( SPACE middle ) [ SPACE ":" trailing ]
    middle     =  nospcrlfcl *( ":" / nospcrlfcl )
    trailing   =  *( ":" / " " / nospcrlfcl )

Deviations seen in the wild are accepted: a bare LF ending, stray
spaces before CRLF, and command bytes outside the strict letter/digit rule.
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_CONFIG, CodecConfig
from ..constants import COLON, CR, CRLF, LF, NUL, SPACE
from ..exceptions import (
    CommandError,
    DecodeError,
    ErrorKind,
    MissingTerminatorError,
    ParameterError,
    PrefixError,
    TooManyParametersError,
)
from ..framing.lines import fix_line_ending
from ..models.message import Message
from .result import DecodeResult, Status

logger = logging.getLogger(__name__)


class _EmptyMiddle(Exception):
    """A middle parameter with zero bytes. Handled inside parse_params."""

    def __init__(self, position: int) -> None:
        super().__init__(position)
        self.position = position


def decode(line: str | bytes, config: CodecConfig = DEFAULT_CONFIG) -> DecodeResult:
    """Decode a protocol line into a Message.

    The line should include its CRLF (a bare LF is accepted). Lines longer than
    the configured limit are cut to fit before parsing, and the result is
    flagged as truncated rather than rejected.

    Args:
        line: Raw line, as text or bytes
        config: Codec configuration (line limit, parameter limit, encoding)

    Returns:
        DecodeResult holding the message and Status.OK or Status.TRUNCATED

    Raises:
        MalformedTerminatorError: If the line has no CRLF or LF ending
        PrefixError: If the prefix is empty, holds NUL/CR/LF, or is all there is
        CommandError: If the command is empty or followed by an invalid byte
        ParameterError: If a parameter is malformed
        TooManyParametersError: If there are more than 15 parameters
        MissingTerminatorError: If parsing does not end at the final CRLF
        DecodeError: If text cannot be converted with the configured encoding

    Examples:
        ```python
        from ircwire import decode

        result = decode(":nick!user@host PRIVMSG #test :hi there\\r\\n")
        result.message.command   # 'PRIVMSG'
        result.message.params    # ('#test', 'hi there')
        result.truncated         # False
        ```
    """
    if isinstance(line, str):
        try:
            raw = config.to_bytes(line)
        except UnicodeEncodeError as e:
            raise DecodeError(
                f"Cannot encode line as {config.encoding}: {e.reason}",
                kind=ErrorKind.UNENCODABLE_TEXT,
                position=e.start,
            ) from e
    else:
        raw = bytes(line)
    data = fix_line_ending(raw)

    truncated = False
    if len(data) > config.max_line_length:
        logger.debug(
            "Truncating %d byte line to %d bytes", len(data), config.max_line_length
        )
        data = data[: config.max_line_length - 2] + CRLF
        truncated = True

    index = 0
    source = b""

    # It is optional to have a prefix.
    if data[0] == COLON:
        source, index = parse_prefix(data)
        if index >= len(data):
            raise PrefixError(
                "Malformed message: prefix only", kind=ErrorKind.PREFIX_ONLY, position=index
            )

    command, index = parse_command(data, index)

    params, index = parse_params(data, index, max_params=config.max_params)

    # index should be pointing at the CR.
    if index != len(data) - 2 or data[index] != CR or data[index + 1] != LF:
        raise MissingTerminatorError(
            f"Malformed message: no CRLF found at position {index}",
            position=index,
            byte=data[index] if index < len(data) else None,
        )

    try:
        message = Message(
            source=config.to_text(source),
            command=config.to_text(command),
            params=tuple(config.to_text(p) for p in params),
        )
    except UnicodeDecodeError as e:
        raise DecodeError(
            f"Cannot decode line as {config.encoding}: {e.reason}",
            kind=ErrorKind.UNENCODABLE_TEXT,
        ) from e

    return DecodeResult(message, Status.TRUNCATED if truncated else Status.OK)


def parse_prefix(line: bytes) -> tuple[bytes, int]:
    """Parse the prefix portion of a line.

    The line begins with ':'. We return the prefix without the ':' and the
    index after the SPACE, which in a well formed message is the first byte of
    the command. We do not confirm there is such a byte.

    Servername and hosts should be far stricter, but nicknames may hold
    anything except NUL, CR, LF and SPACE, so that is all we check.

    Raises:
        PrefixError: If there is no ':', no space, an invalid byte, or no prefix text
    """
    if not line:
        raise PrefixError("Line is empty", kind=ErrorKind.EMPTY_PREFIX, position=0)

    if line[0] != COLON:
        raise PrefixError(
            f"Line does not start with ':': {bytes([line[0]])!r}",
            kind=ErrorKind.INVALID_PREFIX_BYTE,
            position=0,
            byte=line[0],
        )

    pos = 0
    while pos < len(line):
        byte = line[pos]
        # Prefix ends with a space.
        if byte == SPACE:
            break
        if byte in (NUL, CR, LF):
            raise PrefixError(
                f"Invalid character found in prefix: {bytes([byte])!r}",
                kind=ErrorKind.INVALID_PREFIX_BYTE,
                position=pos,
                byte=byte,
            )
        pos += 1

    if pos == len(line):
        raise PrefixError(
            "No space found after prefix", kind=ErrorKind.NO_PREFIX_SPACE, position=pos
        )

    if pos == 1:
        raise PrefixError("Prefix is zero length", kind=ErrorKind.EMPTY_PREFIX, position=pos)

    return line[1:pos], pos + 1


def parse_command(line: bytes, index: int) -> tuple[bytes, int]:
    """Parse the command starting at index.

    We return the upper-cased command and the index of the SPACE or CR that
    ends it.

    The accepted range is loose: digits plus every byte from 'A'
    to 'z', which lets through a few punctuation bytes and mixed
    letter/digit commands. We do not enforce "all letters or exactly 3 digits".

    Raises:
        CommandError: If the command is empty or ends in something other than SPACE/CR
    """
    pos = index

    while pos < len(line):
        byte = line[pos]
        # Digit
        if 0x30 <= byte <= 0x39:
            pos += 1
            continue
        # Letter ('A' through 'z')
        if 0x41 <= byte <= 0x7A:
            pos += 1
            continue
        if byte != SPACE and byte != CR:
            raise CommandError(
                f"Unexpected character after command: {bytes([byte])!r}",
                kind=ErrorKind.UNEXPECTED_CHARACTER,
                position=pos,
                byte=byte,
            )
        break

    if pos == index:
        raise CommandError(
            "Zero length command found", kind=ErrorKind.EMPTY_COMMAND, position=index
        )

    return line[index:pos].upper(), pos


def parse_params(
    line: bytes, index: int, max_params: int = DEFAULT_CONFIG.max_params
) -> tuple[list[bytes], int]:
    """Parse the parameters starting at index.

    It is valid for there to be no parameters. Each parameter is returned
    stripped of its ':' in the trailing case, along with the index after the
    parameters end. A trailing parameter may be blank.

    Stray spaces before CRLF are common in the wild (ratbox, quassel). They
    are arguably invalid, but we consume them and return the index of the CR
    as though they were never there.

    Raises:
        ParameterError: If a parameter is malformed or the line ends without CR
        TooManyParametersError: If more than max_params parameters are found
    """
    pos = index
    params: list[bytes] = []

    while pos < len(line):
        if line[pos] != SPACE:
            return params, pos

        try:
            param, pos = parse_param(line, pos)
        except _EmptyMiddle as e:
            cr_index = trailing_space_end(line, pos)
            if cr_index != -1:
                return params, cr_index
            raise ParameterError(
                f"Malformed parameter at position {e.position}",
                kind=ErrorKind.MALFORMED_PARAMETER,
                position=e.position,
                byte=line[e.position] if e.position < len(line) else None,
            ) from None

        params.append(param)
        if len(params) > max_params:
            raise TooManyParametersError(
                f"Too many parameters: more than {max_params}", position=pos
            )

    raise ParameterError(
        "Malformed params: not terminated properly",
        kind=ErrorKind.NOT_TERMINATED,
        position=pos,
    )


def parse_param(line: bytes, index: int) -> tuple[bytes, int]:
    """Parse one parameter. index points at the SPACE before it.

    We return the parameter (without ':' when it is trailing) and the index
    after it ends.

    Raises:
        ParameterError: If there is no leading space or the line ends early
    """
    if line[index] != SPACE:
        raise ParameterError(
            "Malformed parameter: no leading space",
            kind=ErrorKind.MALFORMED_PARAMETER,
            position=index,
            byte=line[index],
        )

    pos = index + 1
    if pos == len(line):
        raise ParameterError(
            "Malformed parameter: end of line after space",
            kind=ErrorKind.NOT_TERMINATED,
            position=pos,
        )

    # SPACE ":" trailing
    if line[pos] == COLON:
        pos += 1
        if pos == len(line):
            raise ParameterError(
                "Malformed parameter: end of line after ':'",
                kind=ErrorKind.NOT_TERMINATED,
                position=pos,
            )

        start = pos
        while pos < len(line) and line[pos] not in (NUL, CR, LF):
            pos += 1
        return line[start:pos], pos

    # middle: anything except NUL, CR, LF. A space ends it.
    start = pos
    while pos < len(line) and line[pos] not in (NUL, CR, LF, SPACE):
        pos += 1

    if pos == start:
        raise _EmptyMiddle(start)

    return line[start:pos], pos


def trailing_space_end(line: bytes, index: int) -> int:
    """Return the index of CR if only spaces lie between index and it.

    Returns -1 when anything else comes first, or if the line ends without CR.
    """
    for pos in range(index, len(line)):
        if line[pos] == SPACE:
            continue
        if line[pos] == CR:
            return pos
        return -1
    return -1
