#!/usr/bin/env python3
"""Basic usage example for ircwire.

This example demonstrates:
1. Decoding raw protocol lines into Message values
2. Handling lines the parser tolerates and lines it rejects
3. Encoding messages, including one that has to be truncated
4. Checking sizes before sending
"""

from __future__ import annotations

from ircwire import IrcwireError, Message, decode, encode, encoded_length, fits


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("ircwire Basic Usage Example")
    print("=" * 60)
    print()

    # Decode a few lines as they might arrive from a server
    print("1. Decoding lines...")
    lines = [
        b":irc.example.com 001 bot :Welcome to IRC\r\n",
        b":alice!a@host PRIVMSG #room :hello there\r\n",
        b":irc MODE #room +o alice  \r\n",  # stray trailing spaces
        b"PING :irc.example.com\n",  # bare LF
        b":irc @01\r\n",  # invalid command
    ]
    for line in lines:
        try:
            result = decode(line)
        except IrcwireError as e:
            print(f"   {line!r}: rejected ({e.kind.value})")
            continue
        msg = result.message
        print(f"   {line!r}")
        print(f"      source={msg.source!r} nick={msg.source_nick!r}")
        print(f"      command={msg.command!r} params={list(msg.params)!r}")
    print()

    # Encode a reply
    print("2. Encoding a reply...")
    reply = Message(command="PRIVMSG", params=["#room", "hi alice"])
    print(f"   {encode(reply).data!r}")
    print()

    # Encode something too long
    print("3. Encoding an overlong message...")
    long_msg = Message(command="PRIVMSG", params=["#room", "x" * 600])
    print(f"   Untruncated length: {encoded_length(long_msg)} bytes, fits: {fits(long_msg)}")
    result = encode(long_msg)
    print(f"   Encoded length: {len(result.data)} bytes, status: {result.status.value}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
