"""Exceptions raised by the IRC client.

Every error listed here ends the current :meth:`Connection.eventloop`
call.  Transport failures are not wrapped: the ``OSError`` raised by the
socket propagates as is.  Invalid *locally built* protocol fields raise
plain ``ValueError``.
"""


class IRCError(Exception):
    """Base class for all protocol-level errors of this package."""


class MalformedLineError(IRCError):
    """A received line has no command and cannot be decoded."""

    def __init__(self, line):
        super().__init__(f"Malformed line: {line!r}")
        self.line = line


class MalformedCommandError(IRCError):
    """A known command arrived with the wrong number of arguments."""

    def __init__(self, event, expected):
        super().__init__(
            f"Malformed {event.cmd}: expected {expected} argument(s), "
            f"got {len(event.args)}"
        )
        self.event = event


class ProtocolViolationError(IRCError):
    """The server sent something that is impossible in the current state."""

    def __init__(self, event, reason):
        super().__init__(f"Protocol violation ({event.cmd}): {reason}")
        self.event = event


class NicknamesExhaustedError(IRCError):
    """The nickname source ran out of candidates."""
