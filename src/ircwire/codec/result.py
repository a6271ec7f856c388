"""Codec result types.

Hard failures are raised as exceptions. A line that had to be cut to fit the
length limit is still usable, so it is reported as a status on the result
rather than raised.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..constants import DEFAULT_ENCODING, DEFAULT_ERRORS
from ..exceptions import TruncatedError
from ..models.message import Message


class Status(enum.Enum):
    """Outcome of a successful encode or decode."""

    OK = "ok"
    TRUNCATED = "truncated"


@dataclass(frozen=True)
class DecodeResult:
    """A decoded message and whether the line was truncated first.

    When status is TRUNCATED the message is the best-effort parse of the
    shortened line: usable, but missing whatever was cut.
    """

    message: Message
    status: Status = Status.OK

    @property
    def truncated(self) -> bool:
        return self.status is Status.TRUNCATED

    def unwrap(self, strict: bool = False) -> Message:
        """Return the message.

        Args:
            strict: If True, raise instead of returning a truncated message

        Raises:
            TruncatedError: If strict and the line was truncated
        """
        if strict and self.truncated:
            raise TruncatedError("Line was truncated before parsing", self)
        return self.message


@dataclass(frozen=True)
class EncodeResult:
    """An encoded line and whether it had to be truncated.

    The data always ends in CRLF and never exceeds the line limit.
    """

    data: bytes
    status: Status = Status.OK

    @property
    def truncated(self) -> bool:
        return self.status is Status.TRUNCATED

    @property
    def text(self) -> str:
        """The line as text, CRLF included, using the default encoding."""
        return self.data.decode(DEFAULT_ENCODING, DEFAULT_ERRORS)

    def unwrap(self, strict: bool = False) -> bytes:
        """Return the encoded bytes.

        Args:
            strict: If True, raise instead of returning a truncated line

        Raises:
            TruncatedError: If strict and the line was truncated
        """
        if strict and self.truncated:
            raise TruncatedError("Message was truncated to fit the line limit", self)
        return self.data
