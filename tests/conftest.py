import pytest

from reverse_index import DocumentReverseIndex, WordReverseIndex


@pytest.fixture
def words():
    return ["app", "apple", "banana", "yeet", "hello", "hell"]


@pytest.fixture
def word_index(words):
    return WordReverseIndex(words)


@pytest.fixture
def documents():
    return [
        "the quick brown fox jumps over the lazy dog",
        "lorem ipsum dolor sit",
        "brown jumps",
    ]


@pytest.fixture
def document_index(documents):
    return DocumentReverseIndex(documents)
