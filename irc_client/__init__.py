"""Minimal blocking IRC client: line decoder, registration loop, writer."""

from irc_client.connection import (
    ACCEPTED,
    Connection,
    Handler,
    Registering,
    open_socket,
)
from irc_client.errors import (
    IRCError,
    MalformedCommandError,
    MalformedLineError,
    NicknamesExhaustedError,
    ProtocolViolationError,
)
from irc_client.message import IRCEvent
from irc_client.nicks import nick_sequence
from irc_client.validators import is_valid_nick, no_newline
from irc_client.writer import IRCWriter

__all__ = [
    "ACCEPTED",
    "Connection",
    "Handler",
    "Registering",
    "open_socket",
    "IRCError",
    "MalformedCommandError",
    "MalformedLineError",
    "NicknamesExhaustedError",
    "ProtocolViolationError",
    "IRCEvent",
    "nick_sequence",
    "is_valid_nick",
    "no_newline",
    "IRCWriter",
]
