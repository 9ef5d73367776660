"""Tests for the IRCEvent line decoder."""
import pytest

from irc_client.message import IRCEvent


def test_privmsg_with_full_prefix():
    ev = IRCEvent.parse(":nick!user@host PRIVMSG #chan :hello world")
    assert ev.prefix == "nick!user@host"
    assert ev.sender == "nick"
    assert ev.user == "user"
    assert ev.host == "host"
    assert ev.cmd == "PRIVMSG"
    assert ev.args == ["#chan", "hello world"]


def test_ping_without_prefix():
    ev = IRCEvent.parse("PING :12345")
    assert ev.prefix == ""
    assert ev.sender == ""
    assert ev.cmd == "PING"
    assert ev.args == ["12345"]


def test_server_numeric_with_trailing():
    ev = IRCEvent.parse(":server 001 nick :Welcome to IRC")
    assert ev.sender == "server"
    assert ev.cmd == "001"
    assert ev.args == ["nick", "Welcome to IRC"]


def test_no_trailing_parameter():
    ev = IRCEvent.parse("JOIN #chan")
    assert ev.cmd == "JOIN"
    assert ev.args == ["#chan"]


def test_middle_params_keep_order_before_trailing():
    ev = IRCEvent.parse(":op KICK #chan target :you are kicked")
    assert ev.cmd == "KICK"
    assert ev.args == ["#chan", "target", "you are kicked"]


def test_empty_tokens_are_dropped():
    ev = IRCEvent.parse(":op  MODE   #chan +o  user")
    assert ev.cmd == "MODE"
    assert ev.args == ["#chan", "+o", "user"]


def test_empty_trailing_parameter_is_kept():
    ev = IRCEvent.parse(":a!b@c PRIVMSG #chan :")
    assert ev.args == ["#chan", ""]


def test_trailing_keeps_further_colons():
    ev = IRCEvent.parse(":a PRIVMSG #chan :see: http://example.org")
    assert ev.args == ["#chan", "see: http://example.org"]


def test_line_terminators_are_stripped():
    ev = IRCEvent.parse("PING :abc\r\n")
    assert ev.args == ["abc"]
    ev = IRCEvent.parse("PING :abc\n")
    assert ev.args == ["abc"]


def test_prefix_without_bang_is_sender():
    ev = IRCEvent.parse(":irc.example.net NOTICE * :hi")
    assert ev.sender == "irc.example.net"
    assert ev.user == ""
    assert ev.host == ""


def test_empty_prefix():
    ev = IRCEvent.parse(": PING :x")
    assert ev.prefix == ""
    assert ev.cmd == "PING"
    assert ev.args == ["x"]


@pytest.mark.parametrize("line", ["", "\r\n", ":", ":prefix", ":prefix ",
                                  "   ", ":only :trailing"])
def test_lines_without_command_are_rejected(line):
    assert IRCEvent.parse(line) is None


def test_str_is_raw_line():
    ev = IRCEvent.parse("PING :abc\r\n")
    assert str(ev) == "PING :abc"
