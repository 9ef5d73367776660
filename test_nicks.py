"""Tests for the nickname candidate generator."""
import itertools

from irc_client.nicks import nick_sequence
from irc_client.validators import is_valid_nick


def test_sequence_is_unbounded():
    names = list(itertools.islice(nick_sequence("Bot"), 4))
    assert names == ["Bot", "Bot2", "Bot3", "Bot4"]


def test_limit():
    assert list(nick_sequence("Bot", limit=3)) == ["Bot", "Bot2", "Bot3"]
    assert list(nick_sequence("Bot", limit=0)) == []


def test_candidates_are_valid_nicks():
    assert all(is_valid_nick(n) for n in nick_sequence("Bot", limit=50))
