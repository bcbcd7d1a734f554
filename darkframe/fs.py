"""Path helpers relative to the working directory and whole-file reading."""

from __future__ import annotations

import os
from typing import Union

from .stream import FileStream
from .strings import strnlen

_BINARY_PREFIX = "../../../"


def get_root() -> str:
    """The current working directory, or an empty string if it is unavailable."""
    try:
        return os.getcwd()
    except OSError:
        return ""


def path_relative_root(path: str) -> str:
    """``path`` placed under the working directory."""
    return f"{get_root()}/{path}"


def path_relative_binary(path: str) -> str:
    """``path`` relative to the location of the built binary."""
    return _BINARY_PREFIX + path


def get_path(path: str) -> str:
    """Resolve ``path`` against the working directory when one is known."""
    if get_root():
        return path_relative_root(path)
    return path_relative_binary(path)


def read_text_file(path: Union[str, os.PathLike]) -> str:
    """Return the text of a file, up to its first NUL character.

    If the file cannot be opened, a message is printed and an empty
    string is returned.
    """
    try:
        stream = FileStream(path, "r")
    except OSError:
        print(f"Unable to open {os.fspath(path)}")
        return ""
    with stream:
        try:
            size = os.fstat(stream.fileno()).st_size
        except OSError:
            print(f"Unable to stat {os.fspath(path)}")
            return ""
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
    text = b"".join(chunks).decode("utf-8", errors="replace")
    return text[: strnlen(text, len(text))]