"""Configuration module for thicket.

This module defines the symbol alphabets understood by the trie. An alphabet
fixes the set of symbols a trie may store and the order in which they are
visited, which is also the order of the sorted dump.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Optional

__all__ = [
    "ALPHANUMERIC",
    "Alphabet",
    "DEFAULT_ALPHABET",
    "LOWERCASE",
]


@dataclass(frozen=True)
class Alphabet:
    """An ordered set of single-character symbols.

    Symbols are ranked by their position in `symbols`, so the trie
    enumerates keys in that order rather than by code point.
    """

    symbols: str

    def __post_init__(self) -> None:
        if not self.symbols:
            raise ValueError("Alphabet must contain at least one symbol")
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError(f"Alphabet has duplicate symbols: {self.symbols!r}")

    @cached_property
    def _lookup(self) -> Dict[str, int]:
        return {symbol: index for index, symbol in enumerate(self.symbols)}

    @property
    def size(self) -> int:
        """Number of symbols in the alphabet."""
        return len(self.symbols)

    def lookup(self, symbol: str) -> Optional[int]:
        """Find the index of a symbol.

        Args:
            symbol: The symbol to look up.

        Returns:
            The index of the symbol, or None if it is not in the alphabet.
        """
        return self._lookup.get(symbol)

    def index(self, symbol: str) -> int:
        """Get the index of a symbol.

        Args:
            symbol: The symbol to look up.

        Returns:
            The index of the symbol in 0..size-1.

        Raises:
            ValueError: If the symbol is not in the alphabet.
        """
        index = self.lookup(symbol)
        if index is None:
            raise ValueError(f"Symbol {symbol!r} is not in the alphabet")
        return index

    def symbol(self, index: int) -> str:
        """Get the symbol at an index."""
        return self.symbols[index]

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol in self._lookup


LOWERCASE = Alphabet(string.ascii_lowercase)
"""Lowercase ASCII letters, a to z."""

ALPHANUMERIC = Alphabet(string.digits + string.ascii_lowercase)
"""Digits followed by lowercase ASCII letters."""

DEFAULT_ALPHABET = LOWERCASE
"""Alphabet used by a Trie when none is given."""
