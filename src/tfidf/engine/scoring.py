"""TF-IDF score composition."""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from loguru import logger

from .frequencies import document_frequencies, term_frequencies
from .idf import invert
from .tokens import Tokenizer


def apply_idf(idf_result: Mapping[str, float], tf_result: Mapping[str, float]) -> dict[str, float]:
    """Multiply a document's term frequencies by the matching IDF scores.

    Only terms of the document that the IDF map knows about are kept.
    """
    return {term: freq * idf_result[term] for term, freq in tf_result.items() if term in idf_result}


def score_document(
    idf_result: Mapping[str, float], document: str, *, tokenizer: Tokenizer | None = None
) -> dict[str, float]:
    """TF-IDF scores of one ``document`` against a precomputed ``idf_result``."""
    return apply_idf(idf_result, term_frequencies([document], tokenizer=tokenizer)[0])


def tf_idf(
    documents: Iterable[str] | Mapping[str, float],
    document: str | None = None,
    *,
    tokenizer: Tokenizer | None = None,
) -> list[dict[str, float]] | dict[str, float]:
    """TF-IDF scores keyed to each term for all ``documents``.

    Called as ``tf_idf(idf_result, document)`` it returns the scores for that
    single document instead, leaving the corpus out of it.
    """
    if isinstance(documents, Mapping):
        if document is None:
            raise TypeError("tf_idf() needs a document when given a precomputed IDF map")
        return score_document(documents, document, tokenizer=tokenizer)
    if document is not None:
        raise TypeError("tf_idf() takes a document only together with a precomputed IDF map")

    tf_results = term_frequencies(documents, tokenizer=tokenizer)
    idf_result = invert(document_frequencies(tf_results))
    logger.debug("scoring {} documents against {} terms", len(tf_results), len(idf_result))
    return [apply_idf(idf_result, tf_result) for tf_result in tf_results]
