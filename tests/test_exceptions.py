"""Tests for the hvengine exception hierarchy."""

from __future__ import annotations

import pytest

from hvengine.exceptions import (
    DependencyError,
    HVEngineError,
    InvalidInputError,
    OutOfRangeError,
    UnknownAlgorithmError,
    UnsupportedOperationError,
)


class TestHVEngineError:
    def test_basic_error(self):
        err = HVEngineError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None
        assert err.details == {}

    def test_error_with_suggestion(self):
        err = HVEngineError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)


@pytest.mark.parametrize(
    "err, builtin",
    [
        (InvalidInputError("bad"), ValueError),
        (OutOfRangeError(4, 3), IndexError),
        (UnknownAlgorithmError("x", ["wfg"]), ValueError),
        (UnsupportedOperationError("fpras", "exclusive"), NotImplementedError),
        (DependencyError("moocore", "tests"), ImportError),
    ],
)
def test_errors_are_builtin_compatible(err, builtin):
    assert isinstance(err, HVEngineError)
    assert isinstance(err, builtin)


def test_out_of_range_message():
    err = OutOfRangeError(5, 3)
    assert "5" in str(err)
    assert "[0, 3)" in str(err)


def test_dependency_error_install_hint():
    err = DependencyError("moocore", "the moocore algorithm", install_cmd="pip install moocore")
    assert "pip install moocore" in str(err)
    assert err.details == {"package": "moocore", "feature": "the moocore algorithm"}
