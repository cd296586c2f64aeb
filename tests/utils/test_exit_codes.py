"""Unit tests for todolist_cli.utils.exit_codes."""

from __future__ import annotations

import pytest

from todolist_cli.exceptions import (
    AppError,
    ConfirmationMismatch,
    DateParseError,
    DuplicateListName,
    InvalidListName,
    ListNotFound,
    NoFocusedList,
    StoreLoadFailure,
    StoreWriteFailure,
)
from todolist_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_USAGE,
    SUCCESS,
    get_exit_code_name,
)


class TestExitCodeConstants:
    def test_values(self):
        assert (SUCCESS, ERROR_GENERAL, ERROR_USAGE) == (0, 1, 2)


class TestLookups:
    @pytest.mark.parametrize(
        "code, name",
        [(SUCCESS, "SUCCESS"), (ERROR_GENERAL, "ERROR_GENERAL"), (ERROR_USAGE, "ERROR_USAGE")],
    )
    def test_names(self, code, name):
        assert get_exit_code_name(code) == name

    def test_unknown_name(self):
        assert get_exit_code_name(42) == "UNKNOWN(42)"


class TestErrorsExitWithGeneralError:
    @pytest.mark.parametrize(
        "error",
        [
            DuplicateListName("a"),
            ListNotFound("a"),
            ConfirmationMismatch("b", "a"),
            NoFocusedList(),
            InvalidListName("a b"),
            DateParseError("x", "bad"),
            StoreLoadFailure("bad"),
            StoreWriteFailure("bad"),
        ],
    )
    def test_exit_code(self, error):
        assert isinstance(error, AppError)
        assert error.exit_code == ERROR_GENERAL
