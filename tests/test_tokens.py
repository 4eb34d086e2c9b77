"""Tokenization tests."""
from __future__ import annotations

import asyncio
import threading

import pytest

from tfidf.engine import tokens
from tfidf.engine.tokens import Tokenizer, get_tokenizer, make_tokenizer, use_tokenizer


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", []),
        ("...!", []),
        ("a a b", ["a", "a", "b"]),
        ("hello, world", ["hello", "world"]),
        ("room 101 is here", ["room", "is", "here"]),
        (
            "thomas' wife -- a true believer -- didn't think so.",
            ["thomas", "wife", "a", "true", "believer", "didn't", "think", "so"],
        ),
        ("en to-hovedet drage", ["en", "to-hovedet", "drage"]),
    ],
)
def test_split_tokens(text: str, expected: list[str]) -> None:
    assert tokens.split_tokens(text) == expected


def test_default_tokenizer_lowercases_and_drops_garbage(danish: list[str]) -> None:
    result = list(Tokenizer()(danish))
    assert len(result) == 3
    assert result[0] == ["jeg", "har", "fri", "i", "dag"]


def test_tokens_for_single_document() -> None:
    tk = Tokenizer()
    assert tk.tokens("Dagen i dag") == ["dagen", "i", "dag"]
    assert tk.tokens("...!") == []


def test_ignored_marker_from_custom_split() -> None:
    tk = make_tokenizer(tokenize=lambda s: s.split("a"))
    assert "".split("a") == [""]
    assert list(tk(["", "banana"])) == [["b", "n", "n", ""]]


def test_custom_ignored_and_postprocess() -> None:
    stop = {"i", "har"}
    tk = make_tokenizer(
        postprocess=lambda toks: [t for t in toks if t not in stop],
        ignored=lambda toks: "skip" in toks,
    )
    assert list(tk(["Jeg har fri i dag", "skip me", "i har"])) == [["jeg", "fri", "dag"]]


def test_tokenizer_is_lazy() -> None:
    seen: list[str] = []

    def record(doc: str) -> str:
        seen.append(doc)
        return doc

    stream = make_tokenizer(preprocess=record)(["one", "two"])
    assert seen == []
    assert next(stream) == ["one"]
    assert seen == ["one"]


def test_stage_errors_propagate() -> None:
    def broken(doc: str) -> list[str]:
        raise ValueError("bad document")

    with pytest.raises(ValueError, match="bad document"):
        list(make_tokenizer(tokenize=broken)(["text"]))


def test_replace_keeps_other_stages() -> None:
    tk = Tokenizer().replace(preprocess=str.upper)
    assert tk.tokens("a b") == ["A", "B"]
    assert tk.tokenize is tokens.split_tokens


def test_use_tokenizer_scopes_and_restores() -> None:
    default = get_tokenizer()
    outer = make_tokenizer(preprocess=str.upper)
    inner = make_tokenizer(tokenize=str.split)
    with use_tokenizer(outer):
        assert get_tokenizer() is outer
        with use_tokenizer(inner):
            assert get_tokenizer() is inner
        assert get_tokenizer() is outer
    assert get_tokenizer() is default

    with pytest.raises(RuntimeError):
        with use_tokenizer(outer):
            raise RuntimeError("boom")
    assert get_tokenizer() is default


def test_explicit_tokenizer_wins_over_active() -> None:
    explicit = make_tokenizer(preprocess=str.upper)
    with use_tokenizer(make_tokenizer(tokenize=str.split)):
        assert get_tokenizer(explicit) is explicit


def test_override_in_thread_does_not_leak() -> None:
    default = get_tokenizer()
    other = make_tokenizer(tokenize=str.split)
    entered = threading.Event()
    checked = threading.Event()
    seen: list[Tokenizer] = []

    def worker() -> None:
        with use_tokenizer(other):
            entered.set()
            checked.wait(timeout=5)
            seen.append(get_tokenizer())

    thread = threading.Thread(target=worker)
    thread.start()
    assert entered.wait(timeout=5)
    assert get_tokenizer() is default
    checked.set()
    thread.join(timeout=5)
    assert seen == [other]
    assert get_tokenizer() is default


def test_override_is_task_local() -> None:
    first = make_tokenizer(tokenize=str.split)
    second = make_tokenizer(preprocess=str.upper)

    async def scoped(tokenizer: Tokenizer) -> Tokenizer:
        with use_tokenizer(tokenizer):
            await asyncio.sleep(0)
            return get_tokenizer()

    async def main() -> tuple[list[Tokenizer], Tokenizer]:
        results = await asyncio.gather(scoped(first), scoped(second))
        return list(results), get_tokenizer()

    results, after = asyncio.run(main())
    assert results[0] is first
    assert results[1] is second
    assert after is get_tokenizer()
