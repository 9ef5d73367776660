#!/usr/bin/env python3
"""IRC bot - entry point.

Usage
-----
    python main.py --host HOST [--port PORT] --nick NICK
                   [--channel CHAN ...] [--owner NICK] [--verbose]

Connects, registers (trying NICK, NICK2, NICK3, … on collisions), joins
the given channels and answers a couple of chat commands:

    !ping   replies "pong" to the channel or sender
    !quit   disconnects (only from --owner)
"""

import argparse
import logging
import sys

from irc_client import Connection, Handler, IRCError, nick_sequence, open_socket

logger = logging.getLogger("ircbot")


class EchoBot(Handler):
    """Demo handler: joins channels and answers ``!ping`` / ``!quit``."""

    def __init__(self, conn, channels, owner=None):
        self.conn = conn
        self.channels = channels
        self.owner = owner

    def on_registered(self, writer):
        for channel in self.channels:
            writer.join(channel)

    def on_privmsg(self, text, event, writer):
        target = event.args[0]
        # Private messages are answered to the sender
        reply_to = event.sender if target == self.conn.nick else target

        command = text.strip()
        if command == "!ping":
            writer.channel_notice(reply_to, "pong")
        elif command == "!quit" and self.owner and event.sender == self.owner:
            logger.info("Quit requested by %s", event.sender)
            writer.quit("Requested by owner")


def main():
    parser = argparse.ArgumentParser(
        description="Minimal IRC bot",
    )
    parser.add_argument(
        "--host", default="127.0.0.1",
        help="Server hostname or IP (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port", type=int, default=6667,
        help="Server port (default: 6667)",
    )
    parser.add_argument(
        "--nick", default="PyBot",
        help="Preferred nickname (default: PyBot)",
    )
    parser.add_argument(
        "--user", default=None,
        help="Username for USER (default: the nickname)",
    )
    parser.add_argument(
        "--realname", default="Python IRC bot",
        help="Real name for USER",
    )
    parser.add_argument(
        "--channel", action="append", default=[],
        help="Channel to join once registered (repeatable)",
    )
    parser.add_argument(
        "--owner", default=None,
        help="Nickname allowed to make the bot quit",
    )
    parser.add_argument(
        "--timeout", type=float, default=300,
        help="Socket read/write timeout in seconds (default: 300)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every line sent and received",
    )
    args = parser.parse_args()

    config = {
        "host": args.host,
        "port": args.port,
        "nick": args.nick,
        "user": args.user or args.nick,
        "realname": args.realname,
        "channels": args.channel,
        "owner": args.owner,
        "timeout": args.timeout,
    }

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info("Connecting to %s:%s", config["host"], config["port"])
    try:
        sock = open_socket(config["host"], config["port"], config["timeout"])
    except OSError as exc:
        logger.error("Connection failed: %s", exc)
        return 1

    conn = None
    try:
        conn = Connection.connect(
            sock,
            nick_sequence(config["nick"]),
            config["user"],
            config["realname"],
        )
        bot = EchoBot(conn, config["channels"], config["owner"])
        conn.eventloop(bot)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1
    except IRCError as exc:
        logger.error("Protocol error: %s", exc)
        return 1
    except OSError as exc:
        logger.error("Connection lost: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        if conn is not None:
            conn.close()
        sock.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
