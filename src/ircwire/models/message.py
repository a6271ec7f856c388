"""Protocol message model.

This module provides the Message class: the structured form of one protocol
line. See section 2.3.1 in RFC 1459/2812.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Bytes that would end or corrupt a line on the wire
_LINE_BREAKING = ("\x00", "\r", "\n")


class Message(BaseModel):
    """A protocol message.

    Messages are immutable once created. The decoder builds them from wire
    lines, and callers build them directly to hand to the encoder.

    Example:
        >>> msg = Message(source="nick!user@host", command="PRIVMSG",
        ...               params=["#test", "hi there"])
        >>> msg.source_nick
        'nick'

    Attributes:
        source: Prefix text without the leading ':'. Empty when there is no prefix.
        command: The command, for example PRIVMSG. It may be a numeric.
        params: Ordered parameters. The decoder never returns more than 15.

    No field may contain NUL, CR or LF, and source and command may not
    contain a space, so an encoded message is always exactly one line with
    the fields it was built from.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        # Parameters must stay strings; "1" and 1 are not interchangeable
        strict=True,
    )

    source: str = ""
    command: str = Field(min_length=1)
    # Lists are accepted and stored as tuples
    params: tuple[str, ...] = Field(default=(), strict=False)

    @field_validator("source", "command")
    @classmethod
    def _check_token(cls, value: str) -> str:
        """Source and command are single tokens: no line breaks and no spaces."""
        _check_line_safe(value)
        if " " in value:
            raise ValueError("must not contain a space")
        return value

    @field_validator("command")
    @classmethod
    def _check_command(cls, value: str) -> str:
        # A leading ':' would be read back as a prefix
        if value.startswith(":"):
            raise ValueError("must not start with ':'")
        return value

    @field_validator("params")
    @classmethod
    def _check_params(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for i, param in enumerate(value):
            try:
                _check_line_safe(param)
            except ValueError as e:
                raise ValueError(f"parameter {i} {e}") from None
        return value

    @property
    def source_nick(self) -> str:
        """Nickname portion of the source.

        It is valid for this to be blank as not all messages have a source, and
        server sources have no '!'.
        """
        nick, sep, _ = self.source.partition("!")
        return nick if sep else ""

    def __str__(self) -> str:
        params = "[" + " ".join(f'"{p}"' for p in self.params) + "]"
        return f"Prefix [{self.source}] Command [{self.command}] Params{params}"


def _check_line_safe(value: str) -> None:
    for char in _LINE_BREAKING:
        if char in value:
            raise ValueError(f"must not contain {char!r}")


def source_nick(message: Message) -> str:
    """Return the nickname portion of a message's source."""
    return message.source_nick
