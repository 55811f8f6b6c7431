from __future__ import annotations

import json
import types

import httpx

from note_runtime.base.errors import (
    ERR_ACCESS_DENIED,
    ERR_AUTH,
    ERR_CARD_IO,
    ERR_HOST_UNREACHABLE,
    ERR_JSON,
    ERR_NETWORK,
    ERR_TIMEOUT,
    ErrorClass,
    NoteError,
    classify_message,
    keyword_for_exception,
    keyword_for_status,
    wrap_exception,
)


def test_classify_message_taxonomy():
    assert classify_message("") is ErrorClass.NONE  # nosec B101
    assert classify_message(None) is ErrorClass.NONE  # nosec B101
    assert classify_message("x {auth}") is ErrorClass.CLASSIFIED  # nosec B101
    assert classify_message("x {unknown-token}") is ErrorClass.UNCLASSIFIED  # nosec B101
    assert classify_message("plain") is ErrorClass.UNCLASSIFIED  # nosec B101
    assert classify_message("broken {auth") is ErrorClass.UNCLASSIFIED  # nosec B101
    # only the leading keyword counts
    assert classify_message("{heartbeat} then {auth}") is ErrorClass.UNCLASSIFIED  # nosec B101


def test_keyword_for_status_mapping():
    assert keyword_for_status(401) == ERR_AUTH  # nosec B101
    assert keyword_for_status(403) == ERR_ACCESS_DENIED  # nosec B101
    assert keyword_for_status(408) == ERR_TIMEOUT  # nosec B101
    assert keyword_for_status(503) == ERR_NETWORK  # nosec B101
    assert keyword_for_status(404) is None  # nosec B101
    assert keyword_for_status(None) is None  # nosec B101


def test_keyword_for_exception_passthrough():
    assert keyword_for_exception(NoteError("x", ERR_AUTH)) == ERR_AUTH  # nosec B101
    assert keyword_for_exception(NoteError("x {closed}")) == "{closed}"  # nosec B101


def test_keyword_for_exception_timeouts():
    assert keyword_for_exception(TimeoutError()) == ERR_TIMEOUT  # nosec B101
    assert keyword_for_exception(httpx.ReadTimeout("slow")) == ERR_TIMEOUT  # nosec B101


def test_keyword_for_exception_transport():
    assert keyword_for_exception(httpx.ConnectError("refused")) == ERR_HOST_UNREACHABLE  # nosec B101
    assert keyword_for_exception(httpx.ReadError("reset")) == ERR_NETWORK  # nosec B101
    assert keyword_for_exception(ConnectionResetError()) == ERR_NETWORK  # nosec B101


def test_keyword_for_exception_http_status():
    request = httpx.Request("GET", "https://api.example.invalid/v1/devices")
    response = httpx.Response(401, request=request)
    err = httpx.HTTPStatusError("unauthorized", request=request, response=response)
    assert keyword_for_exception(err) == ERR_AUTH  # nosec B101
    assert keyword_for_exception(types.SimpleNamespace(status_code=503)) == ERR_NETWORK  # nosec B101


def test_keyword_for_exception_json_and_io():
    try:
        json.loads("{")
    except json.JSONDecodeError as e:
        assert keyword_for_exception(e) == ERR_JSON  # nosec B101
    assert keyword_for_exception(OSError("port vanished")) == ERR_CARD_IO  # nosec B101
    assert keyword_for_exception(ValueError("random")) is None  # nosec B101


def test_wrap_exception_tags_message():
    err = wrap_exception(TimeoutError("no reply"))
    assert str(err) == "no reply {timeout}"  # nosec B101
    assert err.status == 408  # nosec B101
    assert isinstance(err.raw, TimeoutError)  # nosec B101


def test_wrap_exception_does_not_double_tag():
    err = wrap_exception(OSError("read failed {io}"))
    assert str(err) == "read failed {io}"  # nosec B101
    err = wrap_exception(OSError("read failed {io}"), ERR_CARD_IO)
    assert str(err) == "read failed {io}"  # nosec B101


def test_wrap_exception_explicit_keyword_wins():
    err = wrap_exception(ValueError("bad"), ERR_AUTH)
    assert err.keyword == ERR_AUTH  # nosec B101
    assert err.status == 401  # nosec B101


def test_wrap_exception_returns_note_error_unchanged():
    original = NoteError("x", ERR_AUTH)
    assert wrap_exception(original) is original  # nosec B101
