"""Term and document frequency computation."""
from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping

from loguru import logger

from .models import DocumentFrequencies, TermFrequencies
from .tokens import Tokenizer, get_tokenizer


def normalize_frequencies(frequencies: Mapping[str, float], n: float | None = None) -> dict[str, float]:
    """Divide every value of ``frequencies`` by ``n``.

    If ``n`` is not provided, the sum of the frequencies is used in its place.
    """
    if n is None:
        n = sum(frequencies.values())
    return {term: freq / n for term, freq in frequencies.items()}


def _iter_term_frequencies(documents: Iterable[str], tokenizer: Tokenizer) -> Iterator[dict[str, float]]:
    for document in documents:
        yield normalize_frequencies(Counter(tokenizer.tokens(document)))


def term_frequencies(documents: Iterable[str], *, tokenizer: Tokenizer | None = None) -> TermFrequencies:
    """Normalized term frequencies for each of the ``documents``.

    Documents without tokens keep their position with an empty map.
    """
    result = TermFrequencies(_iter_term_frequencies(documents, get_tokenizer(tokenizer)))
    logger.debug("computed term frequencies for {} documents", len(result))
    return result


def list_terms(
    documents: Iterable[str] | TermFrequencies, *, tokenizer: Tokenizer | None = None
) -> Iterator[str]:
    """Unique terms of each document, concatenated.

    A term is repeated once for every document that contains it. If
    ``term_frequencies`` results exist they may be used as input instead.
    Term frequency maps from elsewhere (e.g. loaded from JSON) must be wrapped
    in :class:`TermFrequencies` first; a plain list of dicts is read as
    documents and fails in the tokenizer.
    """
    if isinstance(documents, TermFrequencies):
        for tf_result in documents:
            yield from tf_result
        return
    for tokens in get_tokenizer(tokenizer)(documents):
        yield from dict.fromkeys(tokens)


def document_frequencies(
    documents: Iterable[str] | TermFrequencies, *, tokenizer: Tokenizer | None = None
) -> DocumentFrequencies:
    """Number of documents each term occurs in (not normalized).

    Input can be either a collection of documents or the output of
    :func:`term_frequencies`. Precomputed maps are only recognised as such
    when wrapped in :class:`TermFrequencies`.
    """
    n_documents = 0

    def _counted(items: Iterable) -> Iterator:
        nonlocal n_documents
        for item in items:
            n_documents += 1
            yield item

    if isinstance(documents, TermFrequencies):
        counts = Counter(list_terms(documents))
        n_documents = len(documents)
    else:
        counts = Counter(list_terms(_counted(documents), tokenizer=tokenizer))
    logger.debug("counted {} terms over {} documents", len(counts), n_documents)
    return DocumentFrequencies(counts, n_documents=n_documents)
