"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from ircwire import Message

ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"


@pytest.fixture
def sample_line() -> bytes:
    """Sample protocol line for testing."""
    return b":nick!user@host PRIVMSG #test :hi there\r\n"


@pytest.fixture
def sample_message() -> Message:
    """Message matching sample_line."""
    return Message(source="nick!user@host", command="PRIVMSG", params=("#test", "hi there"))


@pytest.fixture
def long_param() -> str:
    """A 530 byte parameter with no spaces."""
    return (ALPHABET * 15)[:530]
