"""Prefix tree over a fixed alphabet with per-key multiplicity.

Each node keeps one child slot per alphabet symbol and a count of how many
times the key ending at that node is currently stored. Nodes are created on
first insert along a path and are never pruned, so removing a key only
decrements its count.

Example:
    >>> trie = Trie.mk(["abc", "ab", "abc"])
    >>> trie.search("abc"), trie.count("abc")
    (True, 2)
    >>> trie.enumerate_sorted()
    ['ab', 'abc', 'abc']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, override

from thicket.common import Iterating, NotFoundError, Sized
from thicket.config import DEFAULT_ALPHABET, Alphabet

__all__ = ["Trie", "TrieNode"]


@dataclass(eq=False)
class TrieNode:
    """A trie node owning one optional child per alphabet symbol.

    Attributes:
        children: Child slots indexed by symbol index; None marks an absent child.
        count: Number of times the key ending here is stored.
    """

    children: List[Optional[TrieNode]]
    count: int = 0

    @staticmethod
    def blank(width: int) -> TrieNode:
        return TrieNode([None] * width)


@dataclass(eq=False)
class Trie(Sized, Iterating[str]):
    """A mutable multiset of strings over a fixed alphabet."""

    alphabet: Alphabet = DEFAULT_ALPHABET
    _root: TrieNode = field(init=False)
    _size: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self._root = TrieNode.blank(self.alphabet.size)

    @staticmethod
    def mk(keys: Iterable[str], alphabet: Alphabet = DEFAULT_ALPHABET) -> Trie:
        """Create a trie holding the given keys (with repeats)."""
        trie = Trie(alphabet)
        for key in keys:
            trie.insert(key)
        logging.debug("built trie of %d keys", trie.size())
        return trie

    @override
    def size(self) -> int:
        """Return the total multiplicity of stored keys."""
        return self._size

    @override
    def iter(self) -> Iterator[str]:
        """Lazily yield every stored key in sorted order, with repeats."""
        # Children are pushed in reverse so the smallest symbol is visited first.
        stack: List[Tuple[TrieNode, str]] = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            for _ in range(node.count):
                yield prefix
            for index in range(len(node.children) - 1, -1, -1):
                child = node.children[index]
                if child is not None:
                    stack.append((child, prefix + self.alphabet.symbol(index)))

    def insert(self, key: str) -> None:
        """Store one more copy of a key.

        Time Complexity: O(len(key))

        Raises:
            ValueError: If the key has a symbol outside the alphabet. The trie
                is left unchanged.
        """
        indices = [self.alphabet.index(symbol) for symbol in key]
        node = self._root
        for index in indices:
            child = node.children[index]
            if child is None:
                child = TrieNode.blank(self.alphabet.size)
                node.children[index] = child
            node = child
        node.count += 1
        self._size += 1

    def search(self, key: str) -> bool:
        """Check whether at least one copy of a key is stored.

        Time Complexity: O(len(key))
        """
        return self.count(key) > 0

    def count(self, key: str) -> int:
        """Return how many copies of a key are stored."""
        node = self._find(key)
        return 0 if node is None else node.count

    def remove(self, key: str) -> None:
        """Remove one copy of a key. Nodes are kept even when their count reaches 0.

        Time Complexity: O(len(key))

        Raises:
            NotFoundError: If the key is not stored.
        """
        node = self._find(key)
        if node is None or node.count == 0:
            raise NotFoundError(f"Key {key!r} not found")
        node.count -= 1
        self._size -= 1

    def enumerate_sorted(self) -> List[str]:
        """Return every stored key in alphabet order, each repeated by its count.

        Time Complexity: O(total count + nodes visited)
        """
        return self.list()

    def _find(self, key: str) -> Optional[TrieNode]:
        node: Optional[TrieNode] = self._root
        for symbol in key:
            index = self.alphabet.lookup(symbol)
            if index is None or node is None:
                return None
            node = node.children[index]
        return node

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key)

    def __repr__(self) -> str:
        return f"Trie({self.list()!r})"
