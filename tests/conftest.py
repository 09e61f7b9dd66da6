from __future__ import annotations

import io
import os
import socket
import threading
import time
from typing import Callable

import pytest


class TrickleRaw(io.RawIOBase):
    """Raw stream that hands out at most `step` bytes per read, like a slow socket."""

    def __init__(self, data: bytes, step: int = 1, fail_at_eof: OSError | None = None) -> None:
        self._data = data
        self._pos = 0
        self._step = step
        self._fail_at_eof = fail_at_eof

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        remaining = len(self._data) - self._pos
        if remaining == 0 and self._fail_at_eof is not None:
            raise self._fail_at_eof
        n = min(len(buffer), self._step, remaining)
        buffer[:n] = self._data[self._pos:self._pos + n]
        self._pos += n
        return n


def trickle(data: bytes, step: int = 1, fail_at_eof: OSError | None = None) -> io.BufferedReader:
    return io.BufferedReader(TrickleRaw(data, step, fail_at_eof), buffer_size=max(step, 1))


Responder = Callable[[socket.socket, bytes], None]


class CannedServer:
    """One-thread TCP server that answers every connection with canned bytes."""

    def __init__(self, response: bytes | Responder) -> None:
        self.response = response
        self.requests: list[bytes] = []
        self._stop = threading.Event()
        self._sock = socket.create_server(("127.0.0.1", 0))
        self._sock.settimeout(0.1)
        self.port = self._sock.getsockname()[1]
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    @property
    def url(self) -> str:
        return f"http://127.0.0.1:{self.port}/"

    def _serve(self) -> None:
        while not self._stop.is_set():
            try:
                conn, _ = self._sock.accept()
            except OSError:
                continue
            with conn:
                conn.settimeout(5)
                data = b""
                try:
                    while b"\r\n\r\n" not in data:
                        part = conn.recv(4096)
                        if not part:
                            break
                        data += part
                    self.requests.append(data)
                    if callable(self.response):
                        self.response(conn, data)
                    else:
                        conn.sendall(self.response)
                except OSError:
                    pass

    def close(self) -> None:
        self._stop.set()
        self._thread.join(timeout=2)
        self._sock.close()


@pytest.fixture
def canned_server():
    servers: list[CannedServer] = []

    def start(response: bytes | Responder) -> CannedServer:
        server = CannedServer(response)
        servers.append(server)
        return server

    yield start
    for server in servers:
        server.close()


@pytest.fixture
def closed_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def slow_body(head: bytes, body: bytes, delay: float = 0.2) -> Responder:
    def respond(conn: socket.socket, _request: bytes) -> None:
        conn.sendall(head)
        time.sleep(delay)
        conn.sendall(body)

    return respond


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """No TINYHTTP_* variables and no .env from the developer's checkout."""

    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.upper().startswith("TINYHTTP_"):
            monkeypatch.delenv(name)
