"""Tokenization helpers."""
from __future__ import annotations

import re
import string
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Callable

_PUNCT = f"[{re.escape(string.punctuation)}]"

# Should do a decent job with most text using English-like punctuation.
_SPLIT_RE = re.compile(
    rf"(?:\d|\s{_PUNCT}+\s|{_PUNCT}+\s|\s{_PUNCT}+|{_PUNCT}+$|\s)+"
)

Preprocess = Callable[[str], str]
Tokenize = Callable[[str], Sequence[str]]
Postprocess = Callable[[Sequence[str]], Sequence[str]]
Ignored = Callable[[Sequence[str]], bool]


def split_tokens(text: str) -> list[str]:
    """Split ``text`` on whitespace, digits and punctuation next to whitespace."""
    return [token for token in _SPLIT_RE.split(text) if token]


def _identity(tokens: Sequence[str]) -> Sequence[str]:
    return tokens


def _is_blank(tokens: Sequence[str]) -> bool:
    # str.split and friends return [""] for empty input
    return len(tokens) == 1 and tokens[0] == ""


@dataclass(frozen=True)
class Tokenizer:
    """Four-stage tokenizer: preprocess, tokenize, postprocess, then filter.

    preprocess: applied to each raw document (default: lower-case).
    tokenize: turns a preprocessed document into a sequence of tokens.
    postprocess: applied to the token sequence (default: identity).
    ignored: predicate over the token sequence; matching results are dropped,
        as are empty ones.
    """

    preprocess: Preprocess = str.lower
    tokenize: Tokenize = split_tokens
    postprocess: Postprocess = _identity
    ignored: Ignored = _is_blank

    def _run(self, document: str) -> list[str] | None:
        tokens = list(self.postprocess(self.tokenize(self.preprocess(document))))
        if self.ignored(tokens) or not tokens:
            return None
        return tokens

    def tokens(self, document: str) -> list[str]:
        """Tokens of one document; ignored or empty results give ``[]``."""
        return self._run(document) or []

    def __call__(self, documents: Iterable[str]) -> Iterator[list[str]]:
        for document in documents:
            tokens = self._run(document)
            if tokens is not None:
                yield tokens

    def replace(self, **stages: Callable) -> Tokenizer:
        return replace(self, **stages)


def make_tokenizer(
    *,
    preprocess: Preprocess | None = None,
    tokenize: Tokenize | None = None,
    postprocess: Postprocess | None = None,
    ignored: Ignored | None = None,
) -> Tokenizer:
    stages = {
        "preprocess": preprocess,
        "tokenize": tokenize,
        "postprocess": postprocess,
        "ignored": ignored,
    }
    return Tokenizer(**{name: fn for name, fn in stages.items() if fn is not None})


DEFAULT_TOKENIZER = Tokenizer()

_ACTIVE: ContextVar[Tokenizer] = ContextVar("tfidf_tokenizer", default=DEFAULT_TOKENIZER)


def get_tokenizer(tokenizer: Tokenizer | None = None) -> Tokenizer:
    """Return ``tokenizer`` if given, otherwise the active one."""
    if tokenizer is not None:
        return tokenizer
    return _ACTIVE.get()


@contextmanager
def use_tokenizer(tokenizer: Tokenizer) -> Iterator[Tokenizer]:
    """Make ``tokenizer`` the active tokenizer for the duration of the block.

    Consider this for other languages, e.g.::

        with use_tokenizer(make_tokenizer(tokenize=jieba.lcut)):
            scores = tf_idf(documents)
    """
    token = _ACTIVE.set(tokenizer)
    try:
        yield tokenizer
    finally:
        _ACTIVE.reset(token)
