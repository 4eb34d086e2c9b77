"""Vocabulary extraction and term ranking."""
from __future__ import annotations

import heapq
import operator
from collections import Counter
from collections.abc import Iterable, Mapping
from functools import cmp_to_key
from itertools import groupby
from typing import Callable

from .frequencies import list_terms
from .models import TermFrequencies
from .tokens import Tokenizer

Aggregator = Callable[[float, float], float]
Comparator = Callable[[float, float], bool]


def vocabulary(
    documents: Iterable[str] | TermFrequencies | Mapping[str, float],
    limit: float | None = None,
    *,
    tokenizer: Tokenizer | None = None,
) -> set[str]:
    """The vocabulary of the ``documents``.

    If a ``limit`` is provided, only terms with a per-document frequency higher
    than this limit are returned.

    A document or inverse document frequency result may be used as input
    instead, but ONLY for the full vocabulary! For a limited vocabulary,
    substituting a document frequency result is OK, but an IDF result is
    usually not, UNLESS the ``limit`` is also adjusted to account for the
    difference in values.

    Term frequency maps are only recognised when wrapped in
    :class:`TermFrequencies`; a plain list of dicts is read as documents.
    """
    if isinstance(documents, Mapping):
        frequencies: Mapping[str, float] = documents
    elif limit is None:
        return set(list_terms(documents, tokenizer=tokenizer))
    else:
        frequencies = Counter(list_terms(documents, tokenizer=tokenizer))
    if limit is None:
        return set(frequencies)
    return {term for term, freq in frequencies.items() if freq > limit}


def merge_scores(tf_idf_results: Iterable[Mapping[str, float]], aggregator: Aggregator) -> dict[str, float]:
    """Merge per-document scores into one map, combining repeats with ``aggregator``."""
    merged: dict[str, float] = {}
    for result in tf_idf_results:
        for term, score in result.items():
            merged[term] = aggregator(merged[term], score) if term in merged else score
    return merged


def pick_terms(
    tf_idf_results: Iterable[Mapping[str, float]],
    aggregator: Aggregator,
    comparator: Comparator = operator.gt,
) -> list[str]:
    """Pick terms in ``tf_idf_results`` according to an ``aggregator``.

    The ``aggregator`` works as a reducing function for the scores of each term.
    A different ``comparator`` (a "ranks before" predicate over two scores) may
    be supplied to rank the results in another way.
    """

    def _cmp(a: tuple[str, float], b: tuple[str, float]) -> int:
        if comparator(a[1], b[1]):
            return -1
        if comparator(b[1], a[1]):
            return 1
        return 0

    ranked = sorted(merge_scores(tf_idf_results, aggregator).items(), key=cmp_to_key(_cmp))
    return [term for term, _ in ranked]


def top_sum_terms(tf_idf_results: Iterable[Mapping[str, float]]) -> list[str]:
    """Top terms in ``tf_idf_results`` according to the sum TF-IDF score."""
    return pick_terms(tf_idf_results, operator.add)


def top_max_terms(tf_idf_results: Iterable[Mapping[str, float]]) -> list[str]:
    """Top terms in ``tf_idf_results`` according to the max TF-IDF score."""
    return pick_terms(tf_idf_results, max)


def top_n_terms(n: int, tf_idf_results: Iterable[Mapping[str, float]]) -> list[str]:
    """Top ``n`` scoring terms for each of the ``tf_idf_results``.

    Only immediately repeated terms are collapsed; a term that tops two
    documents which are not next to each other is listed twice.
    """
    picked = (
        term
        for result in tf_idf_results
        for term, _ in heapq.nlargest(n, result.items(), key=operator.itemgetter(1))
    )
    return [term for term, _ in groupby(picked)]
