import pytest

from reverse_index import Document, DocumentReverseIndex, IndexConsumedError, Navigator


def test_get(document_index):
    found = document_index.search("the", 10)
    assert len(found) == 1


def test_get_ordered(document_index, documents):
    found = document_index.search("brown fox jumps", 10)
    assert len(found) == 2
    # The document matching more words comes first
    assert found[0] == documents[0]


def test_get_equal_query_quality(document_index, documents):
    found = document_index.search("brown jumps", 10)
    assert found == [documents[0], documents[2]]


def test_tie_goes_to_earliest_document():
    index = DocumentReverseIndex(["the quick brown fox", "lorem ipsum", "brown fox"])
    assert index.search_with_counts("brown fox", 10) == [
        ("the quick brown fox", 2),
        ("brown fox", 2),
    ]


def test_ranking_prefers_count_over_position():
    index = DocumentReverseIndex(["red", "red green", "red green blue"])
    assert index.search("blue green red") == ["red green blue", "red green", "red"]


def test_no_match_is_empty(document_index):
    assert document_index.search("zzz_no_match", 5) == []
    assert document_index.search_with_navigators("zzz_no_match", 5) == []


def test_empty_query_is_empty(document_index):
    assert document_index.search("   ") == []


def test_empty_index():
    assert DocumentReverseIndex().search("anything") == []


def test_limit_truncates():
    index = DocumentReverseIndex(["a", "a b", "a c", "a d"])
    assert index.search("a", 2) == ["a", "a b"]
    assert index.search("a", 0) == []


def test_negative_limit_raises(document_index):
    with pytest.raises(ValueError):
        document_index.search("brown", -1)


def test_default_limit_comes_from_config():
    documents = [f"doc {i}" for i in range(5)]
    assert len(DocumentReverseIndex(documents).search("doc")) == 5
    limited = DocumentReverseIndex(documents, config={"DEFAULT_SEARCH_LIMIT": 3})
    assert limited.search("doc") == ["doc 0", "doc 1", "doc 2"]


def test_repeated_query_term_counts_once():
    index = DocumentReverseIndex(["fox", "fox dog"])
    assert index.search_with_counts("fox fox fox dog") == [("fox dog", 2), ("fox", 1)]


@pytest.mark.parametrize("dedupe", [True, False])
def test_repeated_document_word_counts_once(dedupe):
    index = DocumentReverseIndex(
        ["fox fox fox", "fox dog"],
        config={"DEDUPLICATE_DOCUMENT_TOKENS": dedupe},
    )
    assert index.search_with_counts("fox dog") == [("fox dog", 2), ("fox fox fox", 1)]
    expected = (0, 1) if dedupe else (0, 0, 0, 1)
    assert index.core.positions("fox") == expected


def test_ranking_property():
    documents = [
        "a b c",
        "b c d",
        "c d e",
        "a c e",
        "e f",
        "a b c d e",
    ]
    index = DocumentReverseIndex(documents)
    for query in ["a", "a b", "c e", "a b c d e f", "f e d"]:
        navigators = index.search_with_navigators(query, len(documents))
        counts = [count for _, count in index.search_with_counts(query, len(documents))]
        positions = [navigator.position for navigator in navigators]
        for i in range(len(positions) - 1):
            assert counts[i] >= counts[i + 1]
            if counts[i] == counts[i + 1]:
                assert positions[i] < positions[i + 1]


def test_search_with_navigators_matches_search(document_index):
    navigators = document_index.search_with_navigators("brown jumps", 10)
    assert all(isinstance(navigator, Navigator) for navigator in navigators)
    assert [navigator.position for navigator in navigators] == [0, 2]
    assert [navigator.current() for navigator in navigators] == document_index.search("brown jumps", 10)


def test_add_document():
    index = DocumentReverseIndex(["lorem ipsum"])
    index = index.add_document("dolor sit")
    assert index.search("sit") == ["dolor sit"]
    assert index.search("lorem") == ["lorem ipsum"]


def test_merge_dedup_reindex_invalidates_navigators():
    index = DocumentReverseIndex(["b doc", "a doc"])
    navigator = index.search_with_navigators("b")[0]

    merged = index.merge_dedup_reindex(["a doc", "c doc"])

    assert list(merged) == ["a doc", "b doc", "c doc"]
    assert merged.search("doc") == ["a doc", "b doc", "c doc"]
    with pytest.raises(IndexConsumedError):
        navigator.current()
    with pytest.raises(IndexConsumedError):
        index.search("doc")


def test_merge_keeps_configured_strategy():
    index = DocumentReverseIndex(["x x"], config={"DEDUPLICATE_DOCUMENT_TOKENS": False})
    merged = index.merge_dedup_reindex(["y"])
    assert merged.core.positions("x") == (0, 0)


def test_documents():
    docs = [
        Document("zeta", "brown fox"),
        Document("alpha", "lazy dog"),
        Document("mid", "quick brown dog"),
    ]
    index = DocumentReverseIndex(docs)

    found = index.search("brown dog")
    assert [doc.name for doc in found] == ["mid", "zeta", "alpha"]

    merged = index.merge_dedup_reindex([Document("alpha", "lazy dog")])
    assert [doc.name for doc in merged] == ["alpha", "mid", "zeta"]


def test_document_text_view_and_order():
    doc = Document("name", "body text")
    assert str(doc) == "body text"
    assert Document("a", "z") < Document("b", "a")
    assert Document("a", "a") < Document("a", "b")


def test_failed_merge_keeps_documents_searchable():
    index = DocumentReverseIndex(["brown fox", Document("a", "lazy dog")])
    with pytest.raises(TypeError):
        index.merge_dedup_reindex(["cat"])

    assert index.search("fox") == ["brown fox"]
    assert index.search("dog") == [Document("a", "lazy dog")]
    assert len(index) == 2


def test_summary_uses_configured_top_keys(capsys):
    index = DocumentReverseIndex(["a b c", "a b", "a"], config={"SUMMARY_TOP_KEYS": 1})
    index.core.summarize_index()
    index.summarize_index()
    out = capsys.readouterr().out
    assert out.count("Top 1 keys: a:3") == 2
    assert "Top 5 keys" not in out


def test_get_stats_and_eject_buffer(document_index, documents):
    assert document_index.get_stats()["num_items"] == 3
    assert document_index.eject_buffer() == documents
    assert document_index.core.is_consumed
