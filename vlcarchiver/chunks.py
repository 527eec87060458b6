"""Conversion between bit strings, 8-bit chunks and their hex text form."""

from __future__ import annotations

from collections.abc import Iterable

CHUNK_SIZE = 8
HEX_CHUNK_SEPARATOR = " "

_BINARY_DIGITS = frozenset("01")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class ChunkError(ValueError):
    """Raised when a chunk cannot be read as an 8-bit value."""


def _parse_byte(chunk: str, digits: frozenset[str], base: int, kind: str) -> int:
    if not chunk or not set(chunk) <= digits:
        raise ChunkError(f"can't parse {kind} chunk: {chunk!r}")
    value = int(chunk, base)
    if value > 0xFF:
        raise ChunkError(f"can't parse {kind} chunk: {chunk!r} is out of range")
    return value


def split_by_chunks(binary_string: str) -> list[str]:
    """Split a bit string into 8-bit chunks, padding the last one with zeros."""
    return [
        binary_string[start : start + CHUNK_SIZE].ljust(CHUNK_SIZE, "0")
        for start in range(0, len(binary_string), CHUNK_SIZE)
    ]


def binary_chunk_to_hex(chunk: str) -> str:
    """Return the two-digit upper-case hex form of a binary chunk."""
    return f"{_parse_byte(chunk, _BINARY_DIGITS, 2, 'binary'):02X}"


def hex_chunk_to_binary(chunk: str) -> str:
    """Return the eight-digit binary form of a hex chunk."""
    return f"{_parse_byte(chunk, _HEX_DIGITS, 16, 'hex'):08b}"


def binary_chunks_to_hex(chunks: Iterable[str]) -> list[str]:
    """Convert every binary chunk to hex."""
    return [binary_chunk_to_hex(chunk) for chunk in chunks]


def hex_chunks_to_binary(chunks: Iterable[str]) -> list[str]:
    """Convert every hex chunk to binary."""
    return [hex_chunk_to_binary(chunk) for chunk in chunks]


def join_binary_chunks(chunks: Iterable[str]) -> str:
    """Concatenate binary chunks into one bit string."""
    return "".join(chunks)


def parse_hex_chunks(text: str) -> list[str]:
    """Split separator-delimited hex text into chunks."""
    return text.split(HEX_CHUNK_SEPARATOR)


def format_hex_chunks(chunks: Iterable[str]) -> str:
    """Join hex chunks with the separator."""
    return HEX_CHUNK_SEPARATOR.join(chunks)