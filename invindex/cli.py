"""Interactive menu for reading a collection, indexing it and searching it."""

from __future__ import annotations

import argparse
import random
import re
import sys
from typing import TextIO

from .docinfo import DocumentInfo
from .engine import (
    ReadError,
    build_indexes,
    format_indexes,
    format_ranking,
    parse_query,
    rank_documents,
    read_collection,
)
from .hashindex import HashIndex
from .patricia import PatriciaTree

MENU = (
    "--- Menu ---\n"
    "1 - Ler o arquivo com os textos\n"
    "2 - Construir os indices invertidos\n"
    "3 - Exibir os indices invertidos\n"
    "4 - Busca\n"
    "0 - Fechar"
)

_WORD_PATTERN = re.compile(r"\S+")


class _Console:
    """Reads whitespace-separated words, single characters and lines."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pending = ""

    def word(self) -> str | None:
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                self._pending = stripped
                break
            line = self._stream.readline()
            if not line:
                self._pending = ""
                return None
            self._pending = line
        match = _WORD_PATTERN.match(self._pending)
        assert match is not None
        self._pending = self._pending[match.end():]
        return match.group()

    def char(self) -> str:
        if not self._pending:
            self._pending = self._stream.readline()
        char, self._pending = self._pending[:1], self._pending[1:]
        return char

    def line(self) -> str:
        if self._pending:
            line, self._pending = self._pending, ""
            return line
        return self._stream.readline()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invindex",
        description="Build inverted indexes of a document collection and search them.",
    )
    parser.add_argument("--docs-dir", default="pocs", help="directory holding the documents")
    parser.add_argument(
        "--output-dir",
        default="arquivosTratados",
        help="directory for the processed word files",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the hash weights")
    return parser


def _search(console: _Console, index, info: DocumentInfo, *, skip_char: bool) -> None:
    print("Palavras da pesquisa:")
    if skip_char:
        console.char()
    terms = parse_query(console.line())
    ranking = rank_documents(index, terms, info.count)
    print(format_ranking(info, ranking), end="")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    console = _Console(sys.stdin)

    info = DocumentInfo()
    hash_index = HashIndex(rng=rng)
    tree = PatriciaTree()

    while True:
        print(MENU)
        choice = console.word()
        if choice is None:
            return 0
        try:
            option = int(choice)
        except ValueError:
            option = -1

        if option == 1:
            print("Nome do arquivo:")
            name = console.word()
            if name is None:
                return 0
            try:
                info = read_collection(name, args.docs_dir, args.output_dir)
            except ReadError as exc:
                info = DocumentInfo()
                print(exc)
                print(
                    "Leitura sem sucesso. Entre com outro arquivo "
                    "ou o concerte para executar de novo."
                )
        elif option == 2:
            hash_index, tree = build_indexes(args.output_dir, rng)
        elif option == 3:
            print(format_indexes(hash_index, tree), end="")
        elif option == 4:
            print("\n----------- Hash -------------")
            _search(console, hash_index, info, skip_char=True)
            print("\n--------- Patricia -----------")
            _search(console, tree, info, skip_char=False)
        elif option == 0:
            return 0
        else:
            print("Entrada invalida.")


if __name__ == "__main__":
    raise SystemExit(main())