"""Reading a collection, building its indexes, ranking and reporting."""

from __future__ import annotations

import itertools
import logging
import math
import random
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from .docinfo import DocumentInfo
from .hashindex import HashIndex
from .patricia import PatriciaTree
from .text import normalize_token, strip_accents, to_lower, tokenize
from .words import TermEntry

_log = logging.getLogger(__name__)

_LEADING_COUNT = re.compile(r"\s*([+-]?\d+)")
_LINE_END = re.compile(r"[\r\n]")

NO_RESULTS = "Nenhum documento corresponde a pesquisa\n"
PATRICIA_HEADER = "--- Indice Invertido da Patricia ---"


class ReadError(Exception):
    """Raised when a collection listing or one of its documents cannot be read."""


class _Index(Protocol):
    def search(self, word: str) -> TermEntry | None: ...

    def distinct_terms(self, doc_id: int) -> int: ...


def _processed_path(output_dir: Path, doc_id: int) -> Path:
    return output_dir / f"arquivo{doc_id}.txt"


def _listed_names(text: str) -> tuple[int, list[str]]:
    """Parse a listing: a document count, then one file name per line."""
    match = _LEADING_COUNT.match(text)
    if match is None:
        return 0, []
    count = int(match.group(1))
    # The remainder of the line holding the count is ignored.
    lines = text[match.end():].split("\n")[1:]
    names = [_LINE_END.split(line, maxsplit=1)[0] for line in lines]
    return count, names


def read_collection(
    listing_path: str | Path,
    docs_dir: str | Path = "pocs",
    output_dir: str | Path = "arquivosTratados",
) -> DocumentInfo:
    """Read the documents named in a listing and write their indexable words.

    Each document ``docs_dir/<name>`` is split into tokens; the tokens that
    survive normalisation are written one per line to
    ``output_dir/arquivo<id>.txt``.  Processed files left over from a larger
    earlier collection are removed.  Raises ReadError on failure.
    """
    try:
        text = Path(listing_path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ReadError("Erro ao abrir o arquivo") from exc

    count, names = _listed_names(text)
    if count <= 0:
        raise ReadError("N de arquivos invalido")
    names = (names + [""] * count)[:count]

    output = Path(output_dir)
    try:
        output.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        _log.warning("could not create %s: %s", output, exc)

    info = DocumentInfo()
    for doc_id, name in enumerate(names, start=1):
        try:
            source = (Path(docs_dir) / name).open(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise ReadError(
                f"Erro ao abrir o poc '{name}'. Confira o nome dos pocs da entrada."
            ) from exc
        info.names.append(name)
        with source:
            try:
                target = _processed_path(output, doc_id).open("w", encoding="utf-8")
            except OSError:
                _log.warning("erro ao criar o arquivo de saida %d", doc_id)
                continue
            with target:
                for line in source:
                    for token in tokenize(line):
                        word = normalize_token(token)
                        if word is not None:
                            target.write(word + "\n")

    remove_leftovers(output, count)
    return info


def remove_leftovers(output_dir: str | Path, last_id: int) -> list[Path]:
    """Delete processed files numbered after ``last_id`` up to the first gap.

    Returns the paths that were removed.
    """
    output = Path(output_dir)
    removed: list[Path] = []
    for doc_id in itertools.count(last_id + 1):
        path = _processed_path(output, doc_id)
        if not path.is_file():
            break
        try:
            path.unlink()
        except OSError:
            _log.warning("Erro ao remover arquivo%d.txt", doc_id)
        else:
            removed.append(path)
    return removed


def build_indexes(
    output_dir: str | Path = "arquivosTratados",
    rng: random.Random | None = None,
) -> tuple[HashIndex, PatriciaTree]:
    """Build both inverted indexes from the processed files in ``output_dir``.

    Files ``arquivo1.txt``, ``arquivo2.txt``, ... are read until one is
    missing; each line is one word of the document with that number.
    """
    hash_index = HashIndex(rng=rng)
    tree = PatriciaTree()
    output = Path(output_dir)
    for doc_id in itertools.count(1):
        try:
            handle = _processed_path(output, doc_id).open(encoding="utf-8", errors="replace")
        except OSError:
            break
        with handle:
            for line in handle:
                word = line.split("\n", 1)[0]
                hash_index.insert(word, doc_id)
                tree.insert(word, doc_id)
    return hash_index, tree


def parse_query(line: str) -> list[str]:
    """Split a query line at spaces and normalise each term."""
    line = _LINE_END.split(line, maxsplit=1)[0]
    return [to_lower(strip_accents(word)) for word in line.split(" ") if word]


def _lookup(index: _Index, term: str) -> TermEntry | None:
    try:
        return index.search(term)
    except ValueError:
        # A term the index cannot even hash is certainly not in it.
        return None


def rank_documents(index: _Index, terms: Iterable[str], n_docs: int) -> list[tuple[int, float]]:
    """Score documents 1..n_docs against the query terms by TF-IDF.

    Returns ``(doc_id, relevance)`` pairs, most relevant first; documents
    of equal relevance keep their id order.
    """
    if n_docs <= 0:
        return []
    found = [entry for entry in (_lookup(index, term) for term in terms) if entry is not None]
    idf_base = math.log2(n_docs)

    ranking: list[tuple[int, float]] = []
    for doc_id in range(1, n_docs + 1):
        total = sum(
            entry.count_in(doc_id) * (idf_base / entry.n_files)
            for entry in found
            if entry.count_in(doc_id) > 0 and entry.n_files > 0
        )
        distinct = index.distinct_terms(doc_id)
        ranking.append((doc_id, total / distinct if distinct else 0.0))

    ranking.sort(key=lambda pair: -pair[1])
    return ranking


def format_ranking(info: DocumentInfo, ranking: Iterable[tuple[int, float]]) -> str:
    """Render the leading documents with positive relevance, one per line."""
    lines = []
    for doc_id, relevance in ranking:
        if relevance <= 0.0:
            break
        lines.append(
            f"'{info.original_name(doc_id)}' (arquivo{doc_id}.txt): relev.: {relevance:.3f}"
        )
    if not lines:
        return NO_RESULTS
    return "\n".join(lines) + "\n"


def format_indexes(hash_index: HashIndex, tree: PatriciaTree) -> str:
    """Render the hash index followed by the PATRICIA index."""
    return f"{hash_index.format()}\n{PATRICIA_HEADER}\n{tree.format()}"