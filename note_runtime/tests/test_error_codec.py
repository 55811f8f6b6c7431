"""Behavioral coverage for the error text codec."""

from __future__ import annotations

import pytest

from note_runtime.base.errors import (
    ERR_AUTH,
    ERR_CARD_IO,
    ERR_NOTE_NOEXIST,
    ERR_TIMEOUT,
    ERR_TOO_BIG,
    ErrorTextCodec,
    KeywordRegistry,
    append_keyword,
    contains_keyword,
    leading_keyword,
    resolve_status,
    strip_keywords,
    to_display_string,
)
from note_runtime.base.errors_parts.registry import DEFAULT_KEYWORD_STATUSES


def test_request_timeout_scenario(codec):
    msg = "request failed {timeout}"
    assert codec.resolve_status(msg) == 408  # nosec B101
    assert codec.strip_keywords(msg) == "request failed"  # nosec B101


def test_auth_in_middle_scenario(codec):
    msg = "invalid credentials {auth} on retry"
    assert codec.resolve_status(msg) == 401  # nosec B101
    assert codec.strip_keywords(msg) == "invalid credentials on retry"  # nosec B101


def test_empty_message_is_success(codec):
    assert codec.resolve_status("") == 200  # nosec B101
    assert codec.resolve_status(None) == 200  # nosec B101


@pytest.mark.parametrize(
    "msg",
    [
        "plain failure without keyword",
        "unbalanced {open-only",
        "closing only } here",
        "well formed {unknown-token}",
        "{}",
    ],
)
def test_unstructured_or_unknown_is_internal_error(codec, msg):
    assert codec.resolve_status(msg) == 500  # nosec B101


@pytest.mark.parametrize("keyword,status", DEFAULT_KEYWORD_STATUSES)
def test_every_default_keyword_resolves_with_surrounding_text(keyword, status):
    codec = ErrorTextCodec()
    assert codec.resolve_status(f"prefix text {keyword} suffix text") == status  # nosec B101


def test_leftmost_keyword_wins(codec):
    assert codec.resolve_status("a {auth} b {timeout}") == 401  # nosec B101
    assert codec.resolve_status("a {timeout} b {auth}") == 408  # nosec B101


def test_unknown_leftmost_keyword_shadows_later_known_one(codec):
    assert codec.resolve_status("a {mystery} b {auth}") == 500  # nosec B101


def test_closing_delimiter_before_opening_is_skipped(codec):
    # the closing delimiter is searched forward from the opening one
    assert codec.resolve_status("odd } prefix {auth}") == 401  # nosec B101


def test_nested_opening_yields_unregistered_candidate(codec):
    assert codec.leading_keyword("x {a {auth} y") == "{a {auth}"  # nosec B101
    assert codec.resolve_status("x {a {auth} y") == 500  # nosec B101


def test_resolve_is_idempotent(codec):
    msg = "device said {auth} then {timeout}"
    assert codec.resolve_status(msg) == codec.resolve_status(msg)  # nosec B101


def test_resolve_accepts_exceptions(codec):
    assert codec.resolve_status(RuntimeError("link lost {timeout}")) == 408  # nosec B101


def test_leading_keyword_returns_candidate_or_none(codec):
    assert codec.leading_keyword("x {auth} y") == "{auth}"  # nosec B101
    assert codec.leading_keyword("x {unknown} y") == "{unknown}"  # nosec B101
    assert codec.leading_keyword("no keyword") is None  # nosec B101
    assert codec.leading_keyword("open {only") is None  # nosec B101


def test_contains_keyword_is_plain_substring():
    assert contains_keyword("read failed {io}", ERR_CARD_IO)  # nosec B101
    assert contains_keyword(OSError("read failed {io}"), ERR_CARD_IO)  # nosec B101
    assert not contains_keyword("read failed {io}", ERR_NOTE_NOEXIST)  # nosec B101
    assert not contains_keyword(None, ERR_CARD_IO)  # nosec B101
    # no delimiter awareness: the raw token must appear
    assert not contains_keyword("read failed io", ERR_CARD_IO)  # nosec B101


def test_strip_without_keywords_returns_text_unchanged(codec):
    for msg in ["", "plain", "  padded  ", "closing } only"]:
        assert codec.strip_keywords(msg) == msg  # nosec B101


def test_strip_removes_every_keyword(codec):
    assert codec.strip_keywords("{io} open failed {timeout}") == "open failed"  # nosec B101
    assert codec.strip_keywords("a {x}{y}") == "a"  # nosec B101
    assert codec.strip_keywords("{auth}") == ""  # nosec B101


def test_strip_trims_only_one_following_space(codec):
    assert codec.strip_keywords("a {x}  b") == "a  b"  # nosec B101


def test_strip_keeps_unbalanced_remainder(codec):
    assert codec.strip_keywords("unbalanced {open-only") == "unbalanced {open-only"  # nosec B101
    assert codec.strip_keywords("a {x} b {open") == "a b {open"  # nosec B101


@pytest.mark.parametrize(
    "msg",
    [
        "request failed {timeout}",
        "invalid credentials {auth} on retry",
        "unbalanced {open-only",
        "a {x} b {open",
        "{{x}}",
        "}{",
        "a {x}  {y}  b",
        "x {a}{b} {c",
        "",
        "nothing here",
    ],
)
def test_strip_is_idempotent(codec, msg):
    once = codec.strip_keywords(msg)
    assert codec.strip_keywords(once) == once  # nosec B101


@pytest.mark.parametrize("keyword", [ERR_TIMEOUT, ERR_AUTH])
def test_compose_strip_and_resolve_round_trip(codec, small_registry, keyword):
    msg = "human text " + keyword
    assert codec.strip_keywords(msg) == "human text"  # nosec B101
    assert codec.resolve_status(msg) == small_registry.lookup(keyword)  # nosec B101


def test_strip_accepts_exceptions(codec):
    assert codec.strip_keywords(ValueError("bad body {not-json}")) == "bad body"  # nosec B101


def test_codec_uses_its_own_registry_only():
    codec = ErrorTextCodec(KeywordRegistry({"{auth}": 499}))
    assert codec.resolve_status("x {auth}") == 499  # nosec B101
    assert codec.resolve_status("x {timeout}") == 500  # nosec B101


def test_module_functions_use_default_registry():
    assert resolve_status("x {too-big}") == 413  # nosec B101
    assert strip_keywords("x {too-big}") == "x"  # nosec B101
    assert leading_keyword("x {too-big}") == ERR_TOO_BIG  # nosec B101


def test_to_display_string():
    assert to_display_string(None) == ""  # nosec B101
    assert to_display_string("text") == "text"  # nosec B101
    assert to_display_string(KeyError("k")) == "'k'"  # nosec B101


def test_to_display_string_survives_broken_str():
    class Broken(Exception):
        def __str__(self):
            raise RuntimeError("cannot render")

    assert to_display_string(Broken()) == "<unprintable Broken>"  # nosec B101


def test_append_keyword():
    assert append_keyword("lease lost", ERR_CARD_IO) == "lease lost {io}"  # nosec B101
    assert append_keyword(None, ERR_CARD_IO) == "{io}"  # nosec B101
    assert append_keyword(OSError("port closed"), ERR_CARD_IO) == "port closed {io}"  # nosec B101
