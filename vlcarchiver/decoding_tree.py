"""Binary prefix tree that turns bit strings back into symbols."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional


@dataclass
class DecodingTree:
    """A node of the prefix tree; a non-empty value marks a complete code."""

    value: str = ""
    zero: Optional[DecodingTree] = None
    one: Optional[DecodingTree] = None

    @classmethod
    def from_table(cls, table: Mapping[str, str]) -> DecodingTree:
        """Build a tree from a mapping of symbol to bit code."""
        root = cls()
        for symbol, code in table.items():
            root.add(code, symbol)
        return root

    def add(self, code: str, value: str) -> None:
        """Insert the symbol at the node reached by following the code."""
        node = self
        for bit in code:
            if bit == "0":
                if node.zero is None:
                    node.zero = DecodingTree()
                node = node.zero
            elif bit == "1":
                if node.one is None:
                    node.one = DecodingTree()
                node = node.one
        node.value = value

    def decode(self, bits: str) -> str:
        """Decode a bit string; an unfinished trailing code is dropped."""
        out: list[str] = []
        node = self
        for position, bit in enumerate(bits):
            if node.value:
                out.append(node.value)
                node = self
            if bit == "0":
                step = node.zero
            elif bit == "1":
                step = node.one
            else:
                continue
            if step is None:
                raise ValueError(f"no code matches the bits up to position {position}")
            node = step
        if node.value:
            out.append(node.value)
        return "".join(out)