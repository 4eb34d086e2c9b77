"""Result types shared across the tfidf engine.

Each stage returns its own type so later stages can tell a precomputed result
from raw documents without inspecting the elements.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import overload


class TermFrequencies(Sequence[dict[str, float]]):
    """Normalized term frequencies, one map per document in input order."""

    __slots__ = ("_maps",)

    def __init__(self, maps: Iterable[dict[str, float]]) -> None:
        self._maps: tuple[dict[str, float], ...] = tuple(maps)

    @overload
    def __getitem__(self, index: int) -> dict[str, float]: ...

    @overload
    def __getitem__(self, index: slice) -> TermFrequencies: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return TermFrequencies(self._maps[index])
        return self._maps[index]

    def __len__(self) -> int:
        return len(self._maps)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, str):
            return list(self._maps) == list(other)
        return NotImplemented

    def __repr__(self) -> str:  # pragma: no cover - debug convenience
        return f"TermFrequencies({list(self._maps)!r})"


class _FrequencyMapping(Mapping[str, float]):
    __slots__ = ("_values", "n_documents")

    def __init__(self, values: Mapping[str, float], n_documents: int) -> None:
        self._values: dict[str, float] = dict(values)
        self.n_documents = n_documents

    def __getitem__(self, term: str) -> float:
        return self._values[term]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:  # pragma: no cover - debug convenience
        return f"{type(self).__name__}({self._values!r}, n_documents={self.n_documents})"


class DocumentFrequencies(_FrequencyMapping):
    """Number of documents each term occurs in, over ``n_documents`` documents."""


class InverseDocumentFrequencies(_FrequencyMapping):
    """Log-scaled inverse document frequencies computed over ``n_documents``."""
