"""Unit tests for decoding."""

from __future__ import annotations

import pytest

from ircwire import (
    CodecConfig,
    CommandError,
    DecodeError,
    ErrorKind,
    MalformedTerminatorError,
    Message,
    MissingTerminatorError,
    ParameterError,
    PrefixError,
    Status,
    TooManyParametersError,
    TruncatedError,
    decode,
)
from ircwire.codec.decoder import parse_command, parse_params, parse_prefix

NUMBERS = ["1", "2", "3", "4", "5", "6", "7", "8", "9", "0", "1", "2", "3", "4"]

VALID_LINES = [
    (":irc PRIVMSG\r\n", "irc", "PRIVMSG", []),
    ("PRIVMSG\r\n", "", "PRIVMSG", []),
    ("PRIVMSG :hi there\r\n", "", "PRIVMSG", ["hi there"]),
    (":irc PRIVMSG blah\r\n", "irc", "PRIVMSG", ["blah"]),
    (":irc 001 :Welcome\r\n", "irc", "001", ["Welcome"]),
    (":irc 001\r\n", "irc", "001", []),
    # Trailing space is invalid per the grammar but common in the wild
    (":irc PRIVMSG \r\n", "irc", "PRIVMSG", []),
    (":irc 000 hi\r\n", "irc", "000", ["hi"]),
    (":irc 000 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5\r\n", "irc", "000", NUMBERS + ["5"]),
    # Empty 15th without ':' is stray whitespace, not a parameter
    (":irc 000 1 2 3 4 5 6 7 8 9 0 1 2 3 4 \r\n", "irc", "000", NUMBERS),
    (":irc 000 1 2 3 4 5 6 7 8 9 0 1 2 3 4 :\r\n", "irc", "000", NUMBERS + [""]),
    (
        ":irc 000 1 2 3 4 5 6 7 8 9 0 1 2 3 4 :hi there\r\n",
        "irc",
        "000",
        NUMBERS + ["hi there"],
    ),
    (":irc 000 \r\n", "irc", "000", []),
    (":irc 000 0a 1b\r\n", "irc", "000", ["0a", "1b"]),
    (":irc 000 0 1 \r\n", "irc", "000", ["0", "1"]),
    (":irc 000 a:bc\r\n", "irc", "000", ["a:bc"]),
    (":irc 000 hi :there yes\r\n", "irc", "000", ["hi", "there yes"]),
    (":irc 000 hi:hi :no no\r\n", "irc", "000", ["hi:hi", "no no"]),
    (":irc 000 hi:hi :no no :yes yes\r\n", "irc", "000", ["hi:hi", "no no :yes yes"]),
    (":irc 000 hi:hi :no no :yes yes\n", "irc", "000", ["hi:hi", "no no :yes yes"]),
    (":irc MODE #test +o user  \r\n", "irc", "MODE", ["#test", "+o", "user"]),
    (":irc MODE #test +o user          \r\n", "irc", "MODE", ["#test", "+o", "user"]),
    (":irc MODE #test +o u:ser\r\n", "irc", "MODE", ["#test", "+o", "u:ser"]),
    # Blank topic unsets the topic
    (":nick!user@host TOPIC #test :\r\n", "nick!user@host", "TOPIC", ["#test", ""]),
    (":nick!user@host MODE #test +o :blah\r\n", "nick!user@host", "MODE", ["#test", "+o", "blah"]),
    (
        ":nick!user@host MODE #test +o blah1 :blah\r\n",
        "nick!user@host",
        "MODE",
        ["#test", "+o", "blah1", "blah"],
    ),
    (
        ":nick!user@host MODE #test +o :blah1 blah\r\n",
        "nick!user@host",
        "MODE",
        ["#test", "+o", "blah1 blah"],
    ),
    (":nick!user@host PRIVMSG #test \r\n", "nick!user@host", "PRIVMSG", ["#test"]),
    (":nick!user@host PRIVMSG #test :\r\n", "nick!user@host", "PRIVMSG", ["#test", ""]),
    ("hi\n", "", "HI", []),
    ("privmsg #a :lower\r\n", "", "PRIVMSG", ["#a", "lower"]),
]


class TestDecode:
    """Test decoding well formed and tolerated lines."""

    @pytest.mark.parametrize("line,source,command,params", VALID_LINES)
    def test_valid_line(self, line: str, source: str, command: str, params: list[str]) -> None:
        """Test a line decodes to the expected parts."""
        result = decode(line)

        assert result.status is Status.OK
        assert result.truncated is False
        assert result.message.source == source
        assert result.message.command == command
        assert result.message.params == tuple(params)

    def test_bytes_input(self, sample_line: bytes, sample_message: Message) -> None:
        """Test bytes and text input decode the same."""
        assert decode(sample_line).message == sample_message
        assert decode(sample_line.decode()).message == sample_message

    def test_unwrap(self, sample_line: bytes, sample_message: Message) -> None:
        """Test unwrap returns the message when not truncated."""
        assert decode(sample_line).unwrap(strict=True) == sample_message

    def test_source_nick(self, sample_line: bytes) -> None:
        """Test source nick of a decoded message."""
        assert decode(sample_line).message.source_nick == "nick"

    def test_utf8_params(self) -> None:
        """Test UTF-8 text survives decoding."""
        result = decode(":nick PRIVMSG #café :héllo wörld\r\n".encode())
        assert result.message.params == ("#café", "héllo wörld")

    def test_invalid_utf8_preserved(self) -> None:
        """Test bytes that are not UTF-8 are kept, not replaced."""
        result = decode(b":nick PRIVMSG #a :\xff\xfe\r\n")
        assert result.message.params[1] == "\udcff\udcfe"


class TestDecodeErrors:
    """Test decoding rejects malformed lines."""

    @pytest.mark.parametrize(
        "line,error,kind",
        [
            (":irc PRIVMSG", MalformedTerminatorError, ErrorKind.MALFORMED_TERMINATOR),
            (":irc PRIVMSG one", MalformedTerminatorError, ErrorKind.MALFORMED_TERMINATOR),
            ("", MalformedTerminatorError, ErrorKind.MALFORMED_TERMINATOR),
            (":irc \r\n", CommandError, ErrorKind.EMPTY_COMMAND),
            (": PRIVMSG \r\n", PrefixError, ErrorKind.EMPTY_PREFIX),
            (":irc\r\n", PrefixError, ErrorKind.INVALID_PREFIX_BYTE),
            ("ir\rc\r\n", MissingTerminatorError, ErrorKind.MISSING_TERMINATOR),
            (":irc @01\r\n", CommandError, ErrorKind.UNEXPECTED_CHARACTER),
            (":irc  PRIVMSG\r\n", CommandError, ErrorKind.EMPTY_COMMAND),
            ("@tag=1 :irc PRIVMSG\r\n", CommandError, ErrorKind.UNEXPECTED_CHARACTER),
            (
                ":irc 000 1 2 3 4 5 6 7 8 9 0 1 2 3 4 hi there\r\n",
                TooManyParametersError,
                ErrorKind.TOO_MANY_PARAMETERS,
            ),
            (":irc 000 \r\r\n", MissingTerminatorError, ErrorKind.MISSING_TERMINATOR),
            (":irc 000 a\x00 1 \r\n", MissingTerminatorError, ErrorKind.MISSING_TERMINATOR),
            (":irc 000 a  b\r\n", ParameterError, ErrorKind.MALFORMED_PARAMETER),
        ],
    )
    def test_rejected(self, line: str, error: type[DecodeError], kind: ErrorKind) -> None:
        """Test a malformed line raises the expected error kind."""
        with pytest.raises(error) as exc_info:
            decode(line)
        assert exc_info.value.kind is kind
        assert isinstance(exc_info.value, DecodeError)

    def test_invalid_command_byte_reported(self) -> None:
        """Test the offending byte and its position are reported."""
        with pytest.raises(CommandError) as exc_info:
            decode(":irc @01\r\n")
        assert exc_info.value.byte == ord("@")
        assert exc_info.value.position == 5

    def test_nul_in_prefix(self) -> None:
        """Test a NUL byte inside the prefix."""
        with pytest.raises(PrefixError) as exc_info:
            decode(b":ir\x00c PRIVMSG\r\n")
        assert exc_info.value.kind is ErrorKind.INVALID_PREFIX_BYTE
        assert exc_info.value.byte == 0

    def test_sixteen_middles(self) -> None:
        """Test 16 middle parameters are too many."""
        line = "CMD " + " ".join(str(i) for i in range(16)) + "\r\n"
        with pytest.raises(TooManyParametersError):
            decode(line)

    def test_fifteen_middles(self) -> None:
        """Test 15 middle parameters are allowed."""
        line = "CMD " + " ".join(str(i) for i in range(15)) + "\r\n"
        assert len(decode(line).message.params) == 15

    def test_unencodable_text(self) -> None:
        """Test a text line the encoding cannot represent raises DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            decode("PRIVMSG \ud800\r\n")
        assert exc_info.value.kind is ErrorKind.UNENCODABLE_TEXT
        assert exc_info.value.position == 8
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)

    def test_undecodable_bytes(self) -> None:
        """Test bytes the configured encoding cannot read raise DecodeError."""
        config = CodecConfig(encoding="ascii", errors="strict")
        with pytest.raises(DecodeError) as exc_info:
            decode(b"PRIVMSG #a h\xc3\xa9llo\r\n", config=config)
        assert exc_info.value.kind is ErrorKind.UNENCODABLE_TEXT
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestDecodeTruncation:
    """Test decoding of lines over the length limit."""

    header = ":nick PRIVMSG0 #test "

    def test_truncated_middle(self) -> None:
        """Test an overlong line is cut and flagged."""
        line = self.header + "a" * 600 + "\r\n"
        result = decode(line)

        assert result.status is Status.TRUNCATED
        assert result.truncated is True
        assert result.message.source == "nick"
        assert result.message.command == "PRIVMSG0"
        assert result.message.params == ("#test", "a" * (510 - len(self.header)))

    def test_truncation_leaves_trailing_space(self) -> None:
        """Test cutting right after a separator leaves a tolerated stray space."""
        line = self.header + "a" * 488 + " bb\r\n"
        assert len(line) == 514

        result = decode(line)
        assert result.truncated
        assert result.message.params == ("#test", "a" * 488)

    def test_truncation_leaves_only_colon(self) -> None:
        """Test cutting right after ':' leaves an empty trailing parameter."""
        line = self.header + "a" * 487 + " :b\r\n"
        assert len(line) == 513

        result = decode(line)
        assert result.truncated
        assert result.message.params == ("#test", "a" * 487, "")

    def test_exact_limit_not_truncated(self) -> None:
        """Test a 512 byte line is not truncated."""
        line = self.header + "a" * (510 - len(self.header)) + "\r\n"
        assert len(line) == 512
        assert decode(line).status is Status.OK

    def test_strict_unwrap(self) -> None:
        """Test strict unwrap raises and keeps the partial result."""
        result = decode(self.header + "a" * 600 + "\r\n")

        with pytest.raises(TruncatedError) as exc_info:
            result.unwrap(strict=True)
        assert exc_info.value.kind is ErrorKind.TRUNCATED
        assert exc_info.value.result is result
        assert result.unwrap() == result.message

    def test_custom_limit(self) -> None:
        """Test truncation honours a configured limit."""
        config = CodecConfig(max_line_length=17)
        result = decode("PRIVMSG #test :hello world\r\n", config=config)

        assert result.truncated
        assert result.message.params == ("#test", "")


class TestParsePrefix:
    """Test prefix parsing."""

    @pytest.mark.parametrize(
        "line,prefix,index",
        [
            (b":irc.example.com PRIVMSG", b"irc.example.com", 17),
            (b":irc.example.com ", b"irc.example.com", 17),
            (b":irc PRIVMSG ", b"irc", 5),
        ],
    )
    def test_valid(self, line: bytes, prefix: bytes, index: int) -> None:
        """Test prefix and index after the space."""
        assert parse_prefix(line) == (prefix, index)

    @pytest.mark.parametrize(
        "line,kind",
        [
            (b"irc.example.com", ErrorKind.INVALID_PREFIX_BYTE),
            (b"", ErrorKind.EMPTY_PREFIX),
            (b": PRIVMSG ", ErrorKind.EMPTY_PREFIX),
            (b":irc\rexample.com", ErrorKind.INVALID_PREFIX_BYTE),
            (b":irc.example.com", ErrorKind.NO_PREFIX_SPACE),
        ],
    )
    def test_invalid(self, line: bytes, kind: ErrorKind) -> None:
        """Test prefix errors."""
        with pytest.raises(PrefixError) as exc_info:
            parse_prefix(line)
        assert exc_info.value.kind is kind

    def test_missing_colon_reported(self) -> None:
        """Test a line without ':' reports its first byte."""
        with pytest.raises(PrefixError) as exc_info:
            parse_prefix(b"irc.example.com PRIVMSG")
        assert exc_info.value.kind is ErrorKind.INVALID_PREFIX_BYTE
        assert exc_info.value.byte == ord("i")
        assert exc_info.value.position == 0


class TestParseCommand:
    """Test command parsing."""

    @pytest.mark.parametrize(
        "line,start,command,index",
        [
            (b":irc PRIVMSG blah\r\n", 5, b"PRIVMSG", 12),
            (b":irc 001 :Welcome\r\n", 5, b"001", 8),
            (b":irc 001\r\n", 5, b"001", 8),
            (b":irc PRIVMSG ", 5, b"PRIVMSG", 12),
            (b":irc privmsg ", 5, b"PRIVMSG", 12),
            # Loose on purpose: '_' lies between 'A' and 'z'
            (b"A_1 x\r\n", 0, b"A_1", 3),
        ],
    )
    def test_valid(self, line: bytes, start: int, command: bytes, index: int) -> None:
        """Test command and index after it."""
        assert parse_command(line, start) == (command, index)

    @pytest.mark.parametrize(
        "line,kind",
        [
            (b":irc @01\r\n", ErrorKind.UNEXPECTED_CHARACTER),
            (b":irc \r\n", ErrorKind.EMPTY_COMMAND),
            (b":irc  PRIVMSG\r\n", ErrorKind.EMPTY_COMMAND),
        ],
    )
    def test_invalid(self, line: bytes, kind: ErrorKind) -> None:
        """Test command errors."""
        with pytest.raises(CommandError) as exc_info:
            parse_command(line, 5)
        assert exc_info.value.kind is kind


class TestParseParams:
    """Test parameter parsing."""

    @pytest.mark.parametrize(
        "line,params,index",
        [
            (b":irc 000 hi\r\n", [b"hi"], 11),
            (b":irc 000\r\n", [], 8),
            (b":irc 000 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5\r\n", [n.encode() for n in NUMBERS] + [b"5"], 38),
            (b":irc 000 1 2 3 4 5 6 7 8 9 0 1 2 3 4 \r\n", [n.encode() for n in NUMBERS], 37),
            (b":irc 000 1 2 3 4 5 6 7 8 9 0 1 2 3 4 :\r\n", [n.encode() for n in NUMBERS] + [b""], 38),
            # Stops at the first CR; full decoding rejects the line
            (b":irc 000 \r\r\n", [], 9),
            (b":irc 000 \r\n", [], 9),
            (b":irc 000 0a 1b\r\n", [b"0a", b"1b"], 14),
            (b":irc 000 0 1 \r\n", [b"0", b"1"], 13),
            # Stops at the NUL; full decoding rejects the line
            (b":irc 000 a\x00 1 \r\n", [b"a"], 10),
            (b":irc 000 a:bc\r\n", [b"a:bc"], 13),
        ],
    )
    def test_valid(self, line: bytes, params: list[bytes], index: int) -> None:
        """Test parameters and index after them."""
        assert parse_params(line, 8) == (params, index)

    def test_unterminated(self) -> None:
        """Test a line that ends without CR."""
        with pytest.raises(ParameterError) as exc_info:
            parse_params(b":irc 000 hi ", 8)
        assert exc_info.value.kind is ErrorKind.NOT_TERMINATED

    def test_max_params(self) -> None:
        """Test the parameter limit is configurable."""
        with pytest.raises(TooManyParametersError):
            parse_params(b"CMD a b c\r\n", 3, max_params=2)
