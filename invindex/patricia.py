"""Inverted index stored in a PATRICIA tree keyed by characters."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from .words import TermEntry

_END = "\0"


def _char_at(word: str, index: int) -> str:
    """Character of ``word`` at ``index``, or the end marker past its end."""
    return word[index] if index < len(word) else _END


@dataclass
class _Leaf:
    entry: TermEntry


@dataclass
class _Branch:
    index: int
    char: str
    left: "_Node"
    right: "_Node"

    def child_for(self, word: str) -> "_Node":
        return self.right if _char_at(word, self.index) >= self.char else self.left


_Node = Union[_Leaf, _Branch]


class PatriciaTree:
    """Inverted index as a PATRICIA tree, with comparison counters.

    Each branch holds a character position and a character; a word whose
    character at that position is greater than or equal to it goes right,
    otherwise left.  Leaves hold the term entries.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self.insert_comparisons = 0
        self.search_comparisons = 0

    def _descend(self, word: str) -> tuple[_Leaf, int]:
        """Walk to the leaf ``word`` leads to; return it and the branches passed."""
        node = self._root
        comparisons = 0
        while isinstance(node, _Branch):
            comparisons += 1
            node = node.child_for(word)
        assert isinstance(node, _Leaf)
        return node, comparisons

    def insert(self, word: str, doc_id: int) -> TermEntry:
        """Record one occurrence of ``word`` in ``doc_id``; return its entry."""
        if self._root is None:
            entry = TermEntry(word)
            entry.add(doc_id)
            self._root = _Leaf(entry)
            return entry

        leaf, comparisons = self._descend(word)
        self.insert_comparisons += comparisons
        stored = leaf.entry.word

        index = 0
        while index <= len(word) and _char_at(word, index) == _char_at(stored, index):
            index += 1
        if index > len(word):
            leaf.entry.add(doc_id)
            return leaf.entry

        # The larger differing character is kept, so a prefix (ending in the
        # end marker, smaller than every character) always goes left.
        split_char = max(_char_at(word, index), _char_at(stored, index))
        return self._insert_between(word, doc_id, index, split_char)

    def _insert_between(self, word: str, doc_id: int, index: int, split_char: str) -> TermEntry:
        parent: _Branch | None = None
        go_right = False
        node = self._root
        while isinstance(node, _Branch) and index >= node.index:
            self.insert_comparisons += 1
            parent = node
            go_right = _char_at(word, node.index) >= node.char
            node = node.right if go_right else node.left
        assert node is not None

        entry = TermEntry(word)
        entry.add(doc_id)
        new_leaf = _Leaf(entry)
        if _char_at(word, index) >= split_char:
            branch = _Branch(index, split_char, left=node, right=new_leaf)
        else:
            branch = _Branch(index, split_char, left=new_leaf, right=node)

        if parent is None:
            self._root = branch
        elif go_right:
            parent.right = branch
        else:
            parent.left = branch
        return entry

    def search(self, word: str) -> TermEntry | None:
        """Return the entry for ``word``, or None if it is not indexed."""
        if self._root is None:
            return None
        leaf, comparisons = self._descend(word)
        self.search_comparisons += comparisons
        return leaf.entry if leaf.entry.word == word else None

    def __iter__(self) -> Iterator[TermEntry]:
        if self._root is None:
            return
        stack: list[_Node] = [self._root]
        while stack:
            node = stack.pop()
            if isinstance(node, _Leaf):
                yield node.entry
            else:
                stack.append(node.right)
                stack.append(node.left)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or self._root is None:
            return False
        node = self._root
        while isinstance(node, _Branch):
            node = node.child_for(word)
        return node.entry.word == word

    def distinct_terms(self, doc_id: int) -> int:
        """Number of distinct indexed terms that occur in ``doc_id``."""
        return sum(1 for entry in self if entry.count_in(doc_id) > 0)

    def entries(self) -> list[TermEntry]:
        """All entries in tree order, left to right."""
        return list(self)

    def format(self) -> str:
        """Render every entry in tree order, one term per line."""
        return "".join(entry.format() + "\n" for entry in self)