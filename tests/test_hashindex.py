import random

import pytest

from invindex.hashindex import (
    ALPHABET_SIZE,
    MAX_WEIGHT,
    MAX_WORD_LENGTH,
    MIN_WEIGHT,
    TABLE_SIZE,
    HashIndex,
    generate_weights,
    hash_word,
)

UNIFORM = tuple(tuple(1 for _ in range(ALPHABET_SIZE)) for _ in range(MAX_WORD_LENGTH))


def make_index(seed=7):
    return HashIndex(generate_weights(random.Random(seed)))


def test_weights_shape_and_range():
    weights = generate_weights(random.Random(1))
    assert len(weights) == MAX_WORD_LENGTH
    assert all(len(row) == ALPHABET_SIZE for row in weights)
    assert all(MIN_WEIGHT <= w <= MAX_WEIGHT for row in weights for w in row)


def test_weights_are_reproducible_with_same_seed():
    first = generate_weights(random.Random(3))
    second = generate_weights(random.Random(3))
    assert list(map(list, first)) == list(map(list, second))
    assert len(first) == 50
    assert all(len(row) == 256 for row in first)
    assert all(1 <= w <= 10000 for row in first for w in row)


def test_table_dimensions_fixed_by_format():
    weights = generate_weights(random.Random(4))
    assert len(weights) == 50
    assert {len(row) for row in weights} == {256}
    assert hash_word("abc", UNIFORM) == 3
    assert hash_word("z" * 50, UNIFORM) == 50
    assert TABLE_SIZE == 223


@pytest.mark.parametrize("word", ["casa", "a", "palavra", "z" * MAX_WORD_LENGTH])
def test_hash_is_within_table(word):
    weights = generate_weights(random.Random(5))
    value = hash_word(word, weights)
    assert 0 <= value < TABLE_SIZE
    assert hash_word(word, weights) == value


def test_empty_word_hashes_to_zero():
    assert hash_word("", generate_weights(random.Random(2))) == 0


def test_hash_rejects_too_long_word():
    with pytest.raises(ValueError):
        hash_word("a" * (MAX_WORD_LENGTH + 1), UNIFORM)


def test_hash_rejects_character_outside_alphabet():
    with pytest.raises(ValueError):
        hash_word("a\u0100", UNIFORM)


def test_insert_then_search_round_trip():
    index = make_index()
    index.insert("casa", 1)
    index.insert("casa", 1)
    index.insert("casa", 2)
    entry = index.search("casa")
    assert entry.word == "casa"
    assert entry.count_in(1) == 2
    assert entry.count_in(2) == 1
    assert entry.n_files == 2
    assert len(index) == 1


def test_search_missing_word_returns_none():
    index = make_index()
    index.insert("casa", 1)
    assert index.search("carro") is None
    assert "carro" not in index
    assert "casa" in index


def test_insert_returns_the_stored_entry():
    index = make_index()
    entry = index.insert("livro", 3)
    assert index.search("livro") is entry


def test_distinct_terms_per_document():
    index = make_index()
    for word, doc in [("casa", 1), ("casa", 1), ("carro", 1), ("casa", 2), ("livro", 2), ("mesa", 2)]:
        index.insert(word, doc)
    assert index.distinct_terms(1) == 2
    assert index.distinct_terms(2) == 3
    assert index.distinct_terms(9) == 0


def test_entries_sorted_alphabetically():
    index = make_index()
    words = ["zebra", "abacaxi", "mesa", "casa", "bola"]
    for word in words:
        index.insert(word, 1)
    assert [entry.word for entry in index.entries()] == ["abacaxi", "bola", "casa", "mesa", "zebra"]


def test_collisions_keep_words_apart_and_count_comparisons():
    index = HashIndex(UNIFORM)
    index.insert("abc", 1)
    index.insert("abd", 1)
    assert index.insert_comparisons == 1
    assert index.search("abd").word == "abd"
    assert index.search_comparisons == 2
    assert len(index) == 2


def test_format_empty_index():
    assert make_index().format() == "Dicionário está vazio.\n"


def test_format_lists_entries_in_order():
    index = make_index()
    index.insert("mesa", 1)
    index.insert("casa", 2)
    lines = index.format().splitlines()
    assert lines[0] == "--- Indice Invertido da Hash ---"
    assert lines[1:] == [
        index.search("casa").format(),
        index.search("mesa").format(),
    ]


def test_default_weights_are_generated():
    index = HashIndex(rng=random.Random(11))
    assert index.weights == generate_weights(random.Random(11))