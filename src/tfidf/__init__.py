"""tfidf term weighting toolkit."""

from loguru import logger

from .engine.frequencies import document_frequencies, list_terms, normalize_frequencies, term_frequencies
from .engine.idf import idf, invert, inverse_document_frequency
from .engine.models import DocumentFrequencies, InverseDocumentFrequencies, TermFrequencies
from .engine.scoring import apply_idf, score_document, tf_idf
from .engine.selection import merge_scores, pick_terms, top_max_terms, top_n_terms, top_sum_terms, vocabulary
from .engine.tokens import Tokenizer, get_tokenizer, make_tokenizer, split_tokens, use_tokenizer
from .log_setup import setup_logging

logger.disable(__name__)

__all__ = [
    "DocumentFrequencies",
    "InverseDocumentFrequencies",
    "TermFrequencies",
    "Tokenizer",
    "apply_idf",
    "document_frequencies",
    "get_tokenizer",
    "idf",
    "inverse_document_frequency",
    "invert",
    "list_terms",
    "make_tokenizer",
    "merge_scores",
    "normalize_frequencies",
    "pick_terms",
    "score_document",
    "setup_logging",
    "split_tokens",
    "term_frequencies",
    "tf_idf",
    "top_max_terms",
    "top_n_terms",
    "top_sum_terms",
    "use_tokenizer",
    "vocabulary",
]
