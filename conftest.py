"""Shared fixtures: an in-memory stand-in for a connected TCP socket."""

import io

import pytest


class FakeSocket:
    """Socket double.

    *incoming* is what the "server" sends; everything written through
    ``sendall`` is collected in :attr:`sent`.
    """

    def __init__(self, incoming=b""):
        if isinstance(incoming, str):
            incoming = incoming.encode("utf-8")
        self._incoming = incoming
        self.sent = bytearray()
        self.shutdowns = []

    def makefile(self, mode="rb"):
        return io.BytesIO(self._incoming)

    def sendall(self, data):
        self.sent.extend(data)

    def shutdown(self, how):
        self.shutdowns.append(how)

    def sent_lines(self):
        """Return what was sent, split into lines without terminators."""
        return self.sent.decode("utf-8").split("\r\n")[:-1]


@pytest.fixture
def make_socket():
    return FakeSocket
