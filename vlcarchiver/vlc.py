"""Variable-length code text compression."""

from __future__ import annotations

from functools import lru_cache

from .chunks import (
    binary_chunks_to_hex,
    format_hex_chunks,
    hex_chunks_to_binary,
    join_binary_chunks,
    parse_hex_chunks,
    split_by_chunks,
)
from .decoding_tree import DecodingTree

CAPITAL_MARK = "!"

_ENCODING_TABLE = {
    " ": "11",
    "t": "1001",
    "n": "10000",
    "s": "0101",
    "r": "01000",
    "d": "00101",
    "!": "001000",
    "c": "000101",
    "m": "000011",
    "g": "0000100",
    "b": "0000010",
    "v": "00000001",
    "k": "0000000001",
    "q": "0000000000001",
    "e": "101",
    "o": "10001",
    "a": "011",
    "i": "01001",
    "h": "0011",
    "l": "001001",
    "u": "00011",
    "f": "000100",
    "p": "0000101",
    "w": "0000011",
    "y": "0000001",
    "j": "0000000001",
    "x": "0000000000001",
    "z": "00000000000000",
}


class UnknownSymbolError(ValueError):
    """Raised when text holds a symbol the code table does not cover."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"unknown symbol: {symbol}")
        self.symbol = symbol


def encoding_table() -> dict[str, str]:
    """Return a copy of the symbol-to-code table."""
    return dict(_ENCODING_TABLE)


@lru_cache(maxsize=1)
def _decoding_tree() -> DecodingTree:
    return DecodingTree.from_table(_ENCODING_TABLE)


def prepare_text(text: str) -> str:
    """Replace each upper-case letter with the capital mark and its lower case."""
    return "".join(
        CAPITAL_MARK + ch.lower() if ch.isupper() else ch for ch in text
    )


def export_text(text: str) -> str:
    """Undo prepare_text: upper-case the character after each capital mark."""
    out: list[str] = []
    capital = False
    for ch in text:
        if capital:
            out.append(ch.upper())
            capital = False
        elif ch == CAPITAL_MARK:
            capital = True
        else:
            out.append(ch)
    return "".join(out)


def encode_bin(text: str) -> str:
    """Encode prepared text as a bit string."""
    try:
        return "".join(_ENCODING_TABLE[ch] for ch in text)
    except KeyError as exc:
        raise UnknownSymbolError(exc.args[0]) from None


def encode(text: str) -> str:
    """Compress text into space-separated hex bytes."""
    bits = encode_bin(prepare_text(text))
    return format_hex_chunks(binary_chunks_to_hex(split_by_chunks(bits)))


def decode(encoded: str) -> str:
    """Restore text from space-separated hex bytes."""
    bits = join_binary_chunks(hex_chunks_to_binary(parse_hex_chunks(encoded)))
    return export_text(_decoding_tree().decode(bits))