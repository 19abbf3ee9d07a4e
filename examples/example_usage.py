#!/usr/bin/env python3
"""
Example usage of the Reverse Index library.

This script demonstrates word completion, ranked document search and
navigation around search matches.
"""

import sys
from pathlib import Path

# Add parent directory to path to import reverse_index
sys.path.append(str(Path(__file__).parent.parent))

from reverse_index import Document, DocumentReverseIndex, WordReverseIndex, configure_logging


def completion_example():
    """Demonstrate prefix completion."""
    print("=== Word Completion Example ===")

    words = WordReverseIndex(["app", "apple", "banana", "hello", "hell"])

    for prefix in ["app", "apple", "hel", "b", "zzz"]:
        print(f"'{prefix}' -> {words.get_completions(prefix)}")

    # Cheap append: no sort, no dedup
    words = words.add_word("yeet")
    print(f"After add_word: 'ye' -> {words.get_completions('ye')}")

    # Sorted, deduplicated rebuild
    words = words.merge_dedup_reindex(["apricot", "apple"])
    print(f"After merge: buffer = {list(words)}")


def document_search_example():
    """Demonstrate ranked multi-term search."""
    print("\n=== Document Search Example ===")

    docs = DocumentReverseIndex([
        "the quick brown fox jumps over the lazy dog",
        "lorem ipsum dolor sit",
        "brown jumps",
    ])

    queries = [
        "brown fox jumps",
        "brown jumps",
        "lorem",
        "zzz_no_match",
    ]

    for query in queries:
        results = docs.search_with_counts(query, limit=5)
        print(f"\nSearching for: '{query}'")
        if results:
            for rank, (document, count) in enumerate(results, start=1):
                print(f"  {rank}. [{count} terms] {document}")
        else:
            print("  No results found.")


def navigation_example():
    """Demonstrate walking around a search match."""
    print("\n=== Navigation Example ===")

    docs = DocumentReverseIndex([
        Document("ch1", "it was a dark and stormy night"),
        Document("ch2", "the storm passed by morning"),
        Document("ch3", "morning light over the hills"),
    ])

    for navigator in docs.search_with_navigators("storm passed"):
        print(f"Match at position {navigator.position}: {navigator.current().name}")
        print(f"  before: {[doc.name for doc in navigator.backwards()]}")
        print(f"  after:  {[doc.name for doc in navigator.forwards()]}")

    docs.core.summarize_index(top_n=3)


def main():
    """Run all examples."""
    configure_logging()
    print("Reverse Index - Example Usage")
    print("=" * 50)

    completion_example()
    document_search_example()
    navigation_example()

    print("\n" + "=" * 50)
    print("All examples completed successfully!")


if __name__ == "__main__":
    main()
