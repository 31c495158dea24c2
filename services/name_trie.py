"""
Prefix tree over the Latin keys of the name dictionary.

Each terminal node carries the set of Ethiopic renderings of the key that
ends there. The trie is built once with NameTrie.from_mappings and is only
read afterwards.
"""
import logging
from typing import Dict, Mapping, Set

logger = logging.getLogger(__name__)


class TrieNode:
    """A single trie node; the parent owns its children."""

    __slots__ = ("children", "amharic_variants", "is_end")

    def __init__(self):
        self.children: Dict[str, "TrieNode"] = {}
        self.amharic_variants: Set[str] = set()
        self.is_end = False


class NameTrie:
    """
    Trie for fast English -> Amharic name lookups.

    Supports exact, prefix and suffix-anchored ("contains") search. All
    lookups are case-insensitive.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, english: str, amharic: str) -> None:
        """Insert a Latin key with one of its Ethiopic renderings."""
        node = self.root
        for char in english.lower():
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child

        if not node.is_end:
            self._size += 1
        node.is_end = True
        node.amharic_variants.add(amharic)

    def _walk(self, text: str):
        """Return the node reached by text, or None if the path is missing."""
        node = self.root
        for char in text.lower():
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def search_exact(self, query: str) -> Set[str]:
        """Variants of the key equal to query, or an empty set."""
        node = self._walk(query)
        if node is None or not node.is_end:
            return set()
        return set(node.amharic_variants)

    def search_prefix(self, prefix: str) -> Set[str]:
        """Variants of every key starting with prefix."""
        node = self._walk(prefix)
        if node is None:
            return set()
        return self._collect_variants(node)

    def search_contains(self, query: str) -> Set[str]:
        """
        Variants of every key that starts with some suffix of query.

        For "xamanuel" this finds "amanuel" (suffix starting at offset 1), but
        it does NOT find keys that merely contain the query in their middle:
        "man" finds keys starting with "man", "an" or "n", not "amanuel".
        """
        normalized = query.lower()
        results: Set[str] = set()
        for i in range(len(normalized)):
            results |= self.search_prefix(normalized[i:])
        return results

    @staticmethod
    def _collect_variants(node: TrieNode) -> Set[str]:
        results: Set[str] = set()
        stack = [node]
        while stack:
            current = stack.pop()
            results |= current.amharic_variants
            stack.extend(current.children.values())
        return results

    def __len__(self) -> int:
        """Number of distinct Latin keys inserted."""
        return self._size

    def __contains__(self, english: str) -> bool:
        """True if english is a complete key, not just a prefix of one."""
        node = self._walk(english)
        return node is not None and node.is_end

    @classmethod
    def from_mappings(cls, mappings: Mapping[str, str]) -> "NameTrie":
        """Build a trie from an English -> Amharic mapping."""
        trie = cls()
        for english, amharic in mappings.items():
            trie.insert(english, amharic)
        logger.debug(f"Built name trie with {len(trie)} keys")
        return trie
