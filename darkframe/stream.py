"""Byte streams with line reading: the base class, files and TCP sockets."""

from __future__ import annotations

import abc
import os
import re
import socket
from typing import Optional, Union

BUFFER_SIZE = 4096

_O_BINARY = getattr(os, "O_BINARY", 0)

DEFAULT_MODE = 0o666

_MODES = {
    "r": os.O_RDONLY,
    "rb": os.O_RDONLY | _O_BINARY,
    "r+": os.O_RDWR,
    "rb+": os.O_RDWR | _O_BINARY,
    "r+b": os.O_RDWR | _O_BINARY,
    "w": os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    "wb": os.O_WRONLY | os.O_CREAT | os.O_TRUNC | _O_BINARY,
    "w+": os.O_RDWR | os.O_CREAT | os.O_TRUNC,
    "wb+": os.O_RDWR | os.O_CREAT | os.O_TRUNC | _O_BINARY,
    "w+b": os.O_RDWR | os.O_CREAT | os.O_TRUNC | _O_BINARY,
    "a": os.O_WRONLY | os.O_CREAT | os.O_APPEND,
    "ab": os.O_WRONLY | os.O_CREAT | os.O_APPEND | _O_BINARY,
    "a+": os.O_RDWR | os.O_CREAT | os.O_APPEND,
    "ab+": os.O_RDWR | os.O_CREAT | os.O_APPEND | _O_BINARY,
    "a+b": os.O_RDWR | os.O_CREAT | os.O_APPEND | _O_BINARY,
}

_LINE_END = re.compile(rb"[\n\0]")


def parse_mode(mode: str) -> int:
    """Translate an fopen-style mode string into os.open flags.

    Raises ValueError for an unknown mode.
    """
    try:
        return _MODES[mode]
    except KeyError:
        raise ValueError(f"invalid file mode: {mode!r}") from None


def _finish_line(line: bytes) -> str:
    if line.endswith(b"\r"):
        line = line[:-1]
    return line.decode("utf-8", errors="replace")


class Stream(abc.ABC):
    """A byte stream with a read-ahead cache used for line reading.

    Subclasses provide the raw operations; this class adds buffering,
    line splitting and the context-manager protocol.
    """

    def __init__(self) -> None:
        self._cache: Optional[bytes] = None
        self._closed = False

    @abc.abstractmethod
    def _read_raw(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the underlying source."""

    @abc.abstractmethod
    def _write_raw(self, data: bytes) -> None:
        """Write all of ``data`` to the underlying sink."""

    @abc.abstractmethod
    def _at_end_raw(self) -> bool:
        """True once the underlying source has reported end of data."""

    @abc.abstractmethod
    def _close_raw(self) -> None:
        """Release the underlying resource."""

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed stream")

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes, serving cached data first."""
        self._check_open()
        if size < 0:
            raise ValueError(f"read size must not be negative: {size}")
        if self._cache is None:
            return self._read_raw(size)
        if size >= len(self._cache):
            data, self._cache = self._cache, None
            return data
        data, self._cache = self._cache[:size], self._cache[size:]
        return data

    def read_line(self) -> Optional[str]:
        """Read one line ended by a newline or NUL, without the terminator.

        A trailing carriage return is dropped. Returns None once the stream
        is exhausted.
        """
        self._check_open()
        if self._cache is not None:
            match = _LINE_END.search(self._cache)
            if match:
                pos = match.start()
                line, self._cache = self._cache[:pos], self._cache[pos + 1:]
                return _finish_line(line)

        while True:
            if self._at_end_raw():
                if self._cache is None:
                    return None
                line, self._cache = self._cache, None
                return _finish_line(line)

            chunk = self._read_raw(BUFFER_SIZE)
            pending = self._cache or b""
            match = _LINE_END.search(chunk)
            if match:
                pos = match.start()
                self._cache = chunk[pos + 1:]
                return _finish_line(pending + chunk[:pos])
            self._cache = pending + chunk

    def write(self, data: Union[bytes, bytearray, memoryview]) -> None:
        """Write all of ``data``."""
        self._check_open()
        self._write_raw(bytes(data))

    def write_string(self, text: str) -> None:
        """Write ``text`` encoded as UTF-8."""
        self.write(text.encode("utf-8"))

    def write_line(self, text: str) -> None:
        """Write ``text`` followed by a newline."""
        self.write((text + "\n").encode("utf-8"))

    def at_end(self) -> bool:
        """True when nothing is cached and the source is exhausted."""
        if self._closed:
            return True
        if self._cache is not None:
            return False
        return self._at_end_raw()

    def close(self) -> None:
        """Close the stream; closing twice does nothing."""
        if self._closed:
            return
        self._closed = True
        self._close_raw()

    def __enter__(self) -> "Stream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FileStream(Stream):
    """A stream over a file opened with an fopen-style mode string."""

    def __init__(self, path: Union[str, os.PathLike], mode: str = "r") -> None:
        super().__init__()
        flags = parse_mode(mode)
        self._eof = False
        self._fd = os.open(path, flags, DEFAULT_MODE)

    @classmethod
    def _from_fd(cls, fd: int) -> "FileStream":
        stream = cls.__new__(cls)
        Stream.__init__(stream)
        stream._eof = False
        stream._fd = fd
        return stream

    def fileno(self) -> int:
        return self._fd

    def _read_raw(self, size: int) -> bytes:
        data = os.read(self._fd, size)
        if not data:
            self._eof = True
        return data

    def _write_raw(self, data: bytes) -> None:
        written = os.write(self._fd, data)
        if written < len(data):
            raise OSError(f"short write: {written} of {len(data)} bytes")

    def _at_end_raw(self) -> bool:
        return self._eof

    def _close_raw(self) -> None:
        os.close(self._fd)


STDIN = FileStream._from_fd(0)
STDOUT = FileStream._from_fd(1)
STDERR = FileStream._from_fd(2)


class TCPSocket(Stream):
    """A stream over a TCP connection."""

    def __init__(self) -> None:
        super().__init__()
        self._sock: Optional[socket.socket] = None
        self._eof = False

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def connect(self, host: str, port: int) -> None:
        """Connect to the first reachable address of ``host``.

        Raises RuntimeError if already connected, ValueError for a bad
        port and OSError if no address accepts the connection.
        """
        if self._sock is not None:
            raise RuntimeError("socket is already connected")
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"port out of range: {port}")

        last_error: Optional[OSError] = None
        for family, socktype, proto, _, address in socket.getaddrinfo(
            host, str(port), socket.AF_UNSPEC, socket.SOCK_STREAM
        ):
            try:
                sock = socket.socket(family, socktype, proto)
            except OSError as error:
                last_error = error
                continue
            try:
                sock.connect(address)
            except OSError as error:
                sock.close()
                last_error = error
                continue
            self._sock = sock
            return
        if last_error is not None:
            raise last_error
        raise OSError(f"no address found for {host}:{port}")

    def _require_socket(self) -> socket.socket:
        if self._sock is None:
            raise OSError("socket is not connected")
        return self._sock

    def _read_raw(self, size: int) -> bytes:
        data = self._require_socket().recv(size)
        if not data:
            self._eof = True
        return data

    def _write_raw(self, data: bytes) -> None:
        self._require_socket().sendall(data)

    def _at_end_raw(self) -> bool:
        return self._eof

    def _close_raw(self) -> None:
        if self._sock is not None:
            self._sock.close()