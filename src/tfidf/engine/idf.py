"""Inverse document frequency."""
from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

from loguru import logger

from .frequencies import document_frequencies
from .models import DocumentFrequencies, InverseDocumentFrequencies, TermFrequencies
from .tokens import Tokenizer


def invert(df_result: Mapping[str, int], n: int | None = None) -> InverseDocumentFrequencies:
    """Invert ``df_result`` into ``log(n / (df + 1))`` per term.

    ``n`` defaults to the corpus size recorded on a :class:`DocumentFrequencies`
    result. For a plain mapping it falls back to the number of entries, which is
    only meaningful when the mapping covers the full vocabulary. Terms found in
    nearly every document get a negative score; they are not clamped.
    """
    if n is None:
        n = df_result.n_documents if isinstance(df_result, DocumentFrequencies) else len(df_result)
    scores = {term: math.log(n / (freq + 1)) for term, freq in df_result.items()}
    return InverseDocumentFrequencies(scores, n_documents=n)


def inverse_document_frequency(
    documents: Iterable[str] | TermFrequencies | Mapping[str, int],
    *,
    tokenizer: Tokenizer | None = None,
) -> InverseDocumentFrequencies:
    """Inverted frequencies of each term in ``documents``.

    Accepts documents, :func:`term_frequencies` output, or a document
    frequency mapping.
    """
    if isinstance(documents, Mapping):
        df_result = documents
    else:
        df_result = document_frequencies(documents, tokenizer=tokenizer)
    result = invert(df_result)
    logger.debug("inverted {} terms with n={}", len(result), result.n_documents)
    return result


idf = inverse_document_frequency
