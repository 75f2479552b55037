"""Inverted-index entries: a term and the documents it occurs in."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TermEntry:
    """A term with its postings, mapping document id to occurrence count.

    Postings keep the order in which documents were first seen.
    """

    word: str
    postings: dict[int, int] = field(default_factory=dict)

    @property
    def n_files(self) -> int:
        """Number of documents that contain the term."""
        return len(self.postings)

    @property
    def total_occurrences(self) -> int:
        """Number of occurrences of the term across all documents."""
        return sum(self.postings.values())

    def add(self, doc_id: int) -> None:
        """Record one more occurrence of the term in ``doc_id``."""
        self.postings[doc_id] = self.postings.get(doc_id, 0) + 1

    def remove(self, doc_id: int) -> bool:
        """Drop one occurrence from ``doc_id``.

        Returns False when the term does not occur in that document.
        """
        count = self.postings.get(doc_id)
        if count is None:
            return False
        if count > 1:
            self.postings[doc_id] = count - 1
        else:
            del self.postings[doc_id]
        return True

    def count_in(self, doc_id: int) -> int:
        """Occurrences of the term in ``doc_id`` (0 if absent)."""
        return self.postings.get(doc_id, 0)

    def format(self) -> str:
        """Render the entry as ``word: <count , doc> | ...``."""
        pairs = list(self.postings.items())
        if not pairs:
            return f"{self.word}: "
        head = "".join(f"<{count} , {doc}> | " for doc, count in pairs[:-1])
        last_doc, last_count = pairs[-1]
        return f"{self.word}: {head} <{last_count} , {last_doc}> "