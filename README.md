# invindex

`invindex` builds an inverted index over a small collection of text
documents and ranks the documents against a search query with TF-IDF. The
same index is held in two structures: a hash table with separate chaining
(`invindex.hashindex.HashIndex`) and a Patricia tree
(`invindex.patricia.PatriciaTree`). Each search from the menu is answered
by both of them.

It needs nothing beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Preparing a collection

Write a listing file. Its first line gives the number of documents. Each
line after it gives the name of one document in the documents directory
(`pocs/` unless `--docs-dir` says otherwise):

```
2
first.txt
second.txt
```

Reading the collection splits each line of each document at spaces and at
the characters `. , : ; ( ) " ' - / ?`. Every token is then normalised
(`invindex.text.normalize_token`):

- accented Latin letters are folded to plain lower-case letters, and the
  other characters of the Latin-1 letter block are dropped;
- tokens that still hold anything other than ASCII letters are rejected;
- one-letter tokens are rejected, and so are two-letter tokens unless both
  letters are capitals (an acronym);
- the token is lower-cased, and common Portuguese and English stop words
  are rejected.

The surviving words of document N are written one per line to
`arquivosTratados/arquivoN.txt` (or under `--output-dir`). Processed files
numbered after the last document, left by an earlier and larger
collection, are removed.

## Running

```
invindex [--docs-dir DIR] [--output-dir DIR] [--seed N]
```

- `--docs-dir` – directory holding the documents (default `pocs`)
- `--output-dir` – directory for the processed word files (default
  `arquivosTratados`)
- `--seed` – seed for the random weights of the hash function, for
  repeatable bucket placement

The program reads standard input and shows a menu:

1. read the listing file (it asks for the file's name)
2. build both inverted indexes from the processed files in the output
   directory, reading `arquivo1.txt`, `arquivo2.txt`, … until one is missing
3. print both indexes: the hash index in alphabetical order, then the
   Patricia tree in tree order, one `word: <count , doc> | ...` line per term
4. search: enter the query words once for the hash table and once for the
   Patricia tree
0. quit

Query words are split at spaces, their accents folded and their capitals
lowered; they are not filtered further. Each document's relevance is the
sum, over the query terms it contains, of
`occurrences × log2(number of documents) / documents containing the term`,
divided by the number of distinct terms in the document. Documents with a
positive relevance are listed from the highest down:

```
'first.txt' (arquivo1.txt): relev.: 0.500
```

If none qualifies, the program prints
`Nenhum documento corresponde a pesquisa`.

## Using it as a library

```python
from invindex.patricia import PatriciaTree
from invindex.engine import rank_documents, format_ranking
from invindex.docinfo import DocumentInfo

tree = PatriciaTree()
for doc_id, words in enumerate([["casa", "verde"], ["casa", "azul"]], start=1):
    for word in words:
        tree.insert(word, doc_id)

ranking = rank_documents(tree, ["verde"], 2)   # [(1, 0.5), (2, 0.0)]
info = DocumentInfo(["first.txt", "second.txt"])
print(format_ranking(info, ranking), end="")
```

`HashIndex` and `PatriciaTree` both provide `insert`, `search`,
`distinct_terms`, `entries` and `format`, and count the comparisons they
make in `insert_comparisons` and `search_comparisons`, so
`rank_documents` works with either of them. Each term is a
`invindex.words.TermEntry`, holding its postings as a mapping from document
id to occurrence count.

`invindex.engine` also offers `read_collection`, `remove_leftovers`,
`build_indexes`, `parse_query` and `format_indexes`, the steps the menu is
built from; `read_collection` raises `ReadError` when the listing or a
document cannot be read.

## What it does not do

The indexes live only in memory: they are not saved, and must be built
again (menu option 2) each time the program starts. Only the processed
word files are kept on disk. The menu does not report the comparison
counts; they are available only through the library.