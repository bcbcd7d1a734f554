"""Core object framework: collections, streams, random numbers, identifiers and a game loop."""

__version__ = "0.1.0"

__all__ = [
    "objects",
    "strings",
    "array",
    "hashmap",
    "stream",
    "fs",
    "mtrandom",
    "guid",
    "bitvector",
    "game",
]