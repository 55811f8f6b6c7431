from __future__ import annotations

import pytest

from note_runtime import NoteError
from note_runtime.base.errors import ERR_AUTH, ERR_DEVICE_NOT_FOUND, ErrorClass, contains_keyword


def test_str_is_wire_form():
    assert str(NoteError("x", ERR_AUTH)) == "x {auth}"  # nosec B101
    assert str(NoteError("just text")) == "just text"  # nosec B101
    assert str(NoteError("", ERR_AUTH)) == "{auth}"  # nosec B101


def test_status_clean_message_and_class():
    err = NoteError("device dev:1234 not found", ERR_DEVICE_NOT_FOUND)
    assert err.status == 404  # nosec B101
    assert err.clean_message == "device dev:1234 not found"  # nosec B101
    assert err.error_class is ErrorClass.CLASSIFIED  # nosec B101
    assert NoteError("boom").status == 500  # nosec B101
    assert NoteError("boom").error_class is ErrorClass.UNCLASSIFIED  # nosec B101


def test_raises_and_is_matchable_by_keyword():
    with pytest.raises(NoteError) as info:
        raise NoteError("ticket expired", "{ticket}")
    assert contains_keyword(info.value, "{ticket}")  # nosec B101
    assert info.value.status == 401  # nosec B101
