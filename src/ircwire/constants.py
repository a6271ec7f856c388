"""Protocol constants shared by the decoder and encoder.

See RFC 1459/2812 section 2.3.
"""

from __future__ import annotations

# Maximum protocol message line length in bytes. It includes CRLF.
MAX_LINE_LENGTH = 512

# Both RFC 1459 and RFC 2812 allow at most 15 parameters.
MAX_PARAMS = 15

CR = 0x0D
LF = 0x0A
NUL = 0x00
SPACE = 0x20
COLON = 0x3A

CRLF = b"\r\n"

# Text <-> wire conversion. surrogateescape keeps arbitrary bytes intact.
DEFAULT_ENCODING = "utf-8"
DEFAULT_ERRORS = "surrogateescape"

# RPL_WELCOME
REPLY_WELCOME = "001"

# RPL_YOUREOPER
REPLY_YOUREOPER = "381"
