"""Information about the documents of one collection."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DocumentInfo:
    """Original file names of a collection; document ids start at 1."""

    names: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of documents in the collection."""
        return len(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def original_name(self, doc_id: int) -> str:
        """Return the original file name of document ``doc_id``."""
        if not 1 <= doc_id <= len(self.names):
            raise IndexError(f"no document with id {doc_id}")
        return self.names[doc_id - 1]