"""Pytest fixtures: an in-memory socket standing in for a sentinel."""

import io
import socket

import pytest


class FakeSocket:
    """Records what the client sends and replays a canned reply stream."""

    def __init__(self, reply=b""):
        self.sent = b""
        self.reply = io.BytesIO(reply)
        self.closed = False

    def sendall(self, data):
        self.sent += data

    def makefile(self, mode):
        assert mode == 'rb'
        return self.reply

    def close(self):
        self.closed = True


@pytest.fixture
def fake_server(monkeypatch):
    """Patch socket.create_connection to hand out a FakeSocket.

    Call the fixture with the raw reply bytes; it returns the socket so tests
    can inspect what was sent and whether it was closed.
    """
    sockets = []

    def install(reply):
        sock = FakeSocket(reply)

        def create_connection(address, *args, **kwargs):
            sockets.append(address)
            return sock

        monkeypatch.setattr(socket, "create_connection", create_connection)
        sock.addresses = sockets
        return sock

    return install


@pytest.fixture
def refused_port():
    """A loopback port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]

