"""Decoder turning one received IRC line into an :class:`IRCEvent`.

A server line has the general form:
    [:prefix] command [params ...] [:trailing]

Where:
    - prefix   is optional and starts with ':'
    - command  is either a word (PRIVMSG, PING …) or a three-digit numeric
    - params   are space-separated tokens
    - trailing is the final parameter, introduced by ':' and may contain
      spaces, further ':' characters, or nothing at all

The trailing parameter starts at the first ':' after the prefix marker,
not only at a ' :' sequence.
"""


class IRCEvent:
    """A single decoded server line.

    Attributes
    ----------
    raw : str
        The line without its ``\\r\\n`` terminator.
    prefix : str
        Origin annotation (``nick!user@host`` or a server name), ``""``
        when the line carries none.
    sender : str
        *prefix* cut at the first ``!``.
    user, host : str
        The ``user`` / ``host`` parts of a ``nick!user@host`` prefix.
    cmd : str
        Command name or numeric reply code.
    args : list[str]
        Middle parameters followed by the trailing parameter, if any.
    """

    __slots__ = ("raw", "prefix", "sender", "user", "host", "cmd", "args")

    def __init__(self, raw="", prefix="", cmd="", args=None):
        self.raw = raw
        self.prefix = prefix
        self.cmd = cmd
        self.args = args if args is not None else []
        self.sender = prefix.split("!", 1)[0]
        self.user = ""
        self.host = ""
        if "!" in prefix:
            self._parse_userhost(prefix.split("!", 1)[1])

    # ------------------------------------------------------------------ #
    #  Prefix helpers                                                      #
    # ------------------------------------------------------------------ #

    def _parse_userhost(self, rest):
        """Extract user and host from the part after ``!``."""
        if "@" in rest:
            self.user, self.host = rest.split("@", 1)
        else:
            self.user = rest

    # ------------------------------------------------------------------ #
    #  Parsing                                                             #
    # ------------------------------------------------------------------ #

    @classmethod
    def parse(cls, line):
        """Decode a raw IRC line.

        Parameters
        ----------
        line : str
            One protocol line; a trailing ``\\r\\n`` or ``\\n`` is
            stripped first.

        Returns
        -------
        IRCEvent | None
            ``None`` when no command can be extracted.
        """
        line = line.rstrip("\r\n")
        if not line:
            return None

        has_prefix = line[0] == ":"
        if has_prefix:
            parts = line.split(":", 2)[1:]
        else:
            parts = line.split(":", 1)

        segments = parts[0].split(" ")
        prefix = segments.pop(0) if has_prefix else ""

        tokens = [s for s in segments if s]
        if not tokens:
            return None
        cmd = tokens[0]
        args = tokens[1:]

        # Trailing parameter, kept verbatim even when empty
        if len(parts) > 1:
            args.append(parts[1])

        return cls(line, prefix, cmd, args)

    # ------------------------------------------------------------------ #
    #  Representation                                                      #
    # ------------------------------------------------------------------ #

    def __repr__(self):
        return (
            f"IRCEvent(prefix={self.prefix!r}, cmd={self.cmd!r}, "
            f"args={self.args!r})"
        )

    def __str__(self):
        return self.raw
