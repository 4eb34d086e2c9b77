#!/usr/bin/env python3
"""
Quick Start Examples: Simplest possible usage of tfidf

This file walks through the core functions over a tiny Danish corpus, then
shows how to reuse intermediate results and swap the tokenizer.
"""
import sys
sys.path.insert(0, "../src")

from tfidf import (
    document_frequencies,
    idf,
    make_tokenizer,
    term_frequencies,
    tf_idf,
    top_max_terms,
    top_n_terms,
    top_sum_terms,
    use_tokenizer,
    vocabulary,
)

documents = [
    "",  # garbage data
    "...!",  # garbage data
    "Jeg har fri i dag.",
    "Dagen i dag er en rigtig god dag.",
    "Gode minder har vi heldigvis mange af.",
]

print("=" * 80)
print("EXAMPLE 1: Frequencies")
print("=" * 80)
tf_results = term_frequencies(documents)
for doc, tf in zip(documents, tf_results):
    print(f"  {doc!r:45s} -> {tf}")
print(f"\n  Document frequencies: {dict(document_frequencies(tf_results))}")
print(f"  IDF: {dict(idf(tf_results))}")

print("\n" + "=" * 80)
print("EXAMPLE 2: Vocabulary")
print("=" * 80)
print(f"  Full vocabulary: {sorted(vocabulary(documents))}")
print(f"  Terms in more than one document: {sorted(vocabulary(documents, 1))}")

print("\n" + "=" * 80)
print("EXAMPLE 3: Top terms")
print("=" * 80)
scores = tf_idf(documents)
print(f"  By max score: {top_max_terms(scores)[:6]}")
print(f"  By sum score: {top_sum_terms(scores)[:6]}")
print(f"  Top 2 per document: {top_n_terms(2, scores)}")

# Score a new document against the IDF of the corpus
print(f"\n  New document: {tf_idf(idf(documents), 'God dag til jer')}")

print("\n" + "=" * 80)
print("EXAMPLE 4: Rebinding the tokenizer")
print("=" * 80)
with use_tokenizer(make_tokenizer(tokenize=lambda s: s.split("a"))):
    for result in tf_idf(documents):
        print(f"  {result}")
