"""Outbound side of an IRC connection.

:class:`IRCWriter` formats each supported client command and hands the
complete line to the socket in a single ``sendall`` call.  An internal
lock serialises callers, so one writer may be shared between the event
loop and other threads without lines interleaving on the wire.
"""

import logging
import socket
import threading

from irc_client.validators import is_valid_nick, no_newline

logger = logging.getLogger(__name__)


def _check_field(name, value):
    """Raise ``ValueError`` if *value* would break out of its line."""
    if not no_newline(value):
        raise ValueError(f"{name} must not contain line breaks: {value!r}")


class IRCWriter:
    """Serialise client commands onto a socket.

    Parameters
    ----------
    sock : socket.socket
        Any object providing ``sendall(bytes)`` and ``shutdown(how)``.
    """

    #: Command used by :meth:`channel_notice`.  Some networks expect bots
    #: to answer with NOTICE so that two bots never reply to each other.
    CHANNEL_NOTICE_COMMAND = "NOTICE"

    def __init__(self, sock):
        self._socket = sock
        self._lock = threading.Lock()

    # ================================================================== #
    #  Low-level send                                                      #
    # ================================================================== #

    def _send(self, *lines):
        r"""Write *lines*, each terminated by ``\r\n``, as one unit."""
        data = "".join(line + "\r\n" for line in lines).encode("utf-8")
        with self._lock:
            self._socket.sendall(data)
        for line in lines:
            logger.debug(">>> %s", line)

    # ================================================================== #
    #  Commands                                                            #
    # ================================================================== #

    def login(self, nick, user, real):
        """Send ``NICK`` and ``USER`` for registration."""
        if not is_valid_nick(nick):
            raise ValueError(f"Invalid nickname: {nick!r}")
        _check_field("user", user)
        _check_field("real name", real)
        self._send(f"NICK {nick}", f"USER {user} 8 * :{real}")

    def quit(self, reason=None):
        """Send ``QUIT`` and half-close the outbound side of the socket."""
        if reason is None:
            self._send("QUIT")
        else:
            _check_field("reason", reason)
            self._send(f"QUIT :{reason}")
        with self._lock:
            self._socket.shutdown(socket.SHUT_WR)

    def join(self, channel):
        """Send ``JOIN`` for *channel*."""
        _check_field("channel", channel)
        self._send(f"JOIN :{channel}")

    def part(self, channel, reason=None):
        """Send ``PART`` for *channel*."""
        _check_field("channel", channel)
        if reason is None:
            self._send(f"PART {channel}")
        else:
            _check_field("reason", reason)
            self._send(f"PART {channel} :{reason}")

    def pong(self, data):
        """Answer a server ``PING`` carrying *data*."""
        _check_field("pong data", data)
        self._send(f"PONG :{data}")

    def notice(self, target, text):
        """Send ``NOTICE`` to *target* (nick or channel)."""
        self._text_command("NOTICE", target, text)

    def message(self, target, text):
        """Send ``PRIVMSG`` to *target* (nick or channel)."""
        self._text_command("PRIVMSG", target, text)

    def channel_notice(self, target, text):
        """Send an automated reply using :attr:`CHANNEL_NOTICE_COMMAND`."""
        self._text_command(self.CHANNEL_NOTICE_COMMAND, target, text)

    def _text_command(self, command, target, text):
        _check_field("target", target)
        _check_field("text", text)
        self._send(f"{command} {target} :{text}")
