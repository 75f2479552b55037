"""Word normalisation and tokenisation for indexing and querying."""

from __future__ import annotations

import re
import string

_UTF8_GROUPS = {
    "a": "áàãâÁÀÃÂÄä",
    "e": "éêÉÊÈËèë",
    "i": "íÍîïìÌÎÏ",
    "o": "óòôõÓÒÔÕöÖ",
    "u": "úùûÚÙÛÜü",
    "c": "çÇ",
    "n": "Ññ",
}

# Every character of the Latin-1 letter block is either folded to its base
# letter or dropped; characters outside the block are left untouched.
_UTF8_TABLE: dict[int, str | None] = {code: None for code in range(0xC0, 0x100)}
for _base, _chars in _UTF8_GROUPS.items():
    for _char in _chars:
        _UTF8_TABLE[ord(_char)] = _base

_CP850_GROUPS = {
    "a": (0xA0, 0x85, 0x83, 0xC6, 0xB5, 0xB7, 0xB6, 0xC7, 0x84, 0x8E),
    "e": (0x82, 0x88, 0x90, 0xD2, 0x89, 0x8A, 0xD4, 0xD3),
    "i": (0xA1, 0xD6, 0xD7, 0xD8, 0xDE, 0x8B, 0x8C),
    "o": (0xA2, 0x93, 0x94, 0x99, 0xE4, 0xE0, 0xE5, 0xE2),
    "u": (0xA6, 0xA7, 0xA8, 0xE9, 0xEB, 0xEA, 0x96, 0x9A, 0x97),
    "c": (0x87, 0x80),
    "n": (0xA5, 0xA4),
}

_CP850_TABLE: dict[int, str] = {
    ord(bytes([code]).decode("cp850")): base
    for base, codes in _CP850_GROUPS.items()
    for code in codes
}

_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

STOPWORDS = frozenset({
    "isso", "uma", "com", "por", "the", "sua", "elas", "that", "not",
    "seu", "como", "nao", "que", "para", "dos", "ela", "ele", "nem", "eles",
    "this", "are", "das", "mas", "desse", "dessa", "esta", "esse", "essa",
    "desta", "tem", "for", "and", "with", "such", "but",
})

_DELIMITERS = re.compile(r"[ .,:;()\"'\-/?\r\n]+")


def strip_accents(word: str) -> str:
    """Fold accented Latin letters to plain lower-case ones.

    Other characters of the Latin-1 letter block are removed; everything
    else is kept as it is.
    """
    return word.translate(_UTF8_TABLE)


def strip_accents_cp850(word: str) -> str:
    """Fold the accented letters a CP850 console produces to plain ones.

    Characters without a replacement are kept as they are.
    """
    return word.translate(_CP850_TABLE)


def to_lower(word: str) -> str:
    """Turn ASCII capitals into lower-case letters, leaving the rest."""
    return word.translate(_LOWER_TABLE)


def is_relevant(word: str) -> bool:
    """Return False for the stop words that are not indexed."""
    return word not in STOPWORDS


def normalize_token(word: str) -> str | None:
    """Normalise a token for indexing, or return None if it is rejected.

    Accents are folded first.  Tokens with anything but ASCII letters,
    single letters, two-letter words that are not all capitals (acronyms)
    and stop words are rejected; accepted tokens are lower-cased.
    """
    word = strip_accents(word)
    if any(char not in string.ascii_letters for char in word):
        return None
    if len(word) == 1:
        return None
    if len(word) == 2 and any(char.islower() for char in word):
        return None
    word = to_lower(word)
    if not is_relevant(word):
        return None
    return word


def tokenize(line: str) -> list[str]:
    """Split a line of text into tokens at spaces and punctuation."""
    return [token for token in _DELIMITERS.split(line) if token]