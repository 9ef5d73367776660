"""Client side of a single IRC connection.

:class:`Connection` owns the registration state of one socket.  It sends
the first ``NICK``/``USER`` pair on :meth:`Connection.connect`, then
:meth:`Connection.eventloop` reads the server's lines one by one and

* answers ``PING`` with ``PONG``,
* retries registration with the next nickname on ``433``/``436``,
* marks the nickname as accepted on ``001`` and notifies the handler,
* forwards ``PRIVMSG`` to the handler.

Everything else is ignored.  The loop is blocking and single-threaded;
only the :class:`~irc_client.writer.IRCWriter` may be used from other
threads.
"""

import logging
import socket

from irc_client.errors import (
    MalformedCommandError,
    MalformedLineError,
    NicknamesExhaustedError,
    ProtocolViolationError,
)
from irc_client.message import IRCEvent
from irc_client.validators import is_valid_nick, no_newline
from irc_client.writer import IRCWriter

logger = logging.getLogger(__name__)

RPL_WELCOME = "001"
# ERR_NICKNAMEINUSE, ERR_NICKCOLLISION
NICK_COLLISIONS = frozenset({"433", "436"})


def open_socket(host, port, timeout=None):
    """Open a blocking TCP connection to an IRC server.

    *timeout* applies to every later read and write on the socket.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.settimeout(timeout)
        sock.connect((host, port))
    except OSError:
        sock.close()
        raise
    return sock


# ====================================================================== #
#  Nickname state                                                          #
# ====================================================================== #

class Registering:
    """Registration in progress; *names* yields the remaining candidates."""

    __slots__ = ("names",)

    def __init__(self, names):
        self.names = names

    def __repr__(self):
        return "Registering()"


class _Accepted:
    __slots__ = ()

    def __repr__(self):
        return "ACCEPTED"


#: The server accepted our nickname (``001`` received).  Terminal.
ACCEPTED = _Accepted()


# ====================================================================== #
#  Handler                                                                 #
# ====================================================================== #

class Handler:
    """Bot logic plugged into :meth:`Connection.eventloop`.

    Both callbacks are no-ops here.  **Override in sub-classes.**  An
    exception raised by either one aborts the event loop.
    """

    def on_registered(self, writer):
        """Called once, when the server sends ``001``."""

    def on_privmsg(self, text, event, writer):
        """Called for every ``PRIVMSG``; *text* is its trailing argument."""


# ====================================================================== #
#  Connection                                                              #
# ====================================================================== #

class Connection:
    """Registration state machine and read loop for one server.

    Use :meth:`connect` to build an instance; it performs the first login.

    Parameters
    ----------
    rfile : io.BufferedReader
        Binary stream of server lines (``sock.makefile("rb")``).
    writer : IRCWriter
        Outbound half of the same socket.
    nicknames : iterable of str
        Candidate nicknames, consumed lazily.
    user_name : str
        Username sent with ``USER``; must be a valid nickname.
    real_name : str
        Real-name field of ``USER``; must not contain line breaks.
    """

    def __init__(self, rfile, writer, nicknames, user_name, real_name):
        if not is_valid_nick(user_name):
            raise ValueError(f"Invalid user name: {user_name!r}")
        if not no_newline(real_name):
            raise ValueError(f"Real name must not contain line breaks: "
                             f"{real_name!r}")
        self.user_name = user_name
        self.real_name = real_name
        self.writer = writer
        self.nick = None
        self.nick_status = Registering(iter(nicknames))
        self._rfile = rfile

    @classmethod
    def connect(cls, sock, nicknames, user_name, real_name):
        """Wrap a connected socket and send the first ``NICK``/``USER``.

        Raises
        ------
        NicknamesExhaustedError
            If *nicknames* is empty.
        """
        conn = cls(sock.makefile("rb"), IRCWriter(sock),
                   nicknames, user_name, real_name)
        conn._login_next()
        return conn

    @property
    def registered(self):
        """``True`` once the server has accepted a nickname."""
        return self.nick_status is ACCEPTED

    def close(self):
        """Release the read stream.  The socket itself is left open."""
        self._rfile.close()

    # ------------------------------------------------------------------ #
    #  Registration                                                        #
    # ------------------------------------------------------------------ #

    def _login_next(self):
        """Pull the next candidate nickname and register with it."""
        try:
            nick = next(self.nick_status.names)
        except StopIteration:
            raise NicknamesExhaustedError(
                "No nickname candidates left") from None
        if not is_valid_nick(nick):
            raise ValueError(f"Invalid nickname candidate: {nick!r}")
        self.nick = nick
        logger.info("Registering as %s", nick)
        self.writer.login(nick, self.user_name, self.real_name)

    # ------------------------------------------------------------------ #
    #  Event loop                                                          #
    # ------------------------------------------------------------------ #

    def eventloop(self, handler=None):
        """Read and dispatch server lines until the server closes.

        Returns normally at end of stream.

        Raises
        ------
        MalformedLineError
            A line without a command was received.
        MalformedCommandError
            ``PING`` or ``PRIVMSG`` had the wrong number of arguments.
        ProtocolViolationError
            ``433``/``436`` arrived after registration succeeded.
        NicknamesExhaustedError
            Every candidate nickname was rejected.
        OSError
            The socket failed.
        """
        if handler is None:
            handler = Handler()

        for raw in self._rfile:
            line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
            logger.debug("<<< %s", line)
            event = IRCEvent.parse(line)
            if event is None:
                raise MalformedLineError(line)
            self._dispatch(event, handler)

        logger.info("Server closed the connection")

    def _dispatch(self, event, handler):
        cmd = event.cmd.upper()

        if cmd == RPL_WELCOME:
            if self.registered:
                logger.warning("Ignoring repeated %s", RPL_WELCOME)
                return
            self.nick_status = ACCEPTED
            logger.info("Registered as %s", self.nick)
            handler.on_registered(self.writer)

        elif cmd in NICK_COLLISIONS:
            if self.registered:
                raise ProtocolViolationError(
                    event, "nickname rejected after registration")
            logger.info("Nickname %s rejected (%s)", self.nick, cmd)
            self._login_next()

        elif cmd == "PING":
            if len(event.args) != 1:
                raise MalformedCommandError(event, 1)
            self.writer.pong(event.args[0])

        elif cmd == "PRIVMSG":
            if len(event.args) != 2:
                raise MalformedCommandError(event, 2)
            handler.on_privmsg(event.args[1], event, self.writer)

        else:
            logger.debug("Ignoring %s", event.cmd)
