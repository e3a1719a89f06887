# tests/test_utils.py
"""Tests for utility functions."""

import pytest

from fixtures2respec.internals import constants
from fixtures2respec.utils import get_debug_mode, str_to_bool


# region str_to_bool tests
@pytest.mark.parametrize(
    "input_str,expected",
    [
        # True values
        ("true", True),
        ("TRUE", True),
        ("t", True),
        ("1", True),
        ("yEs", True),
        ("  true", True),
        # False values
        ("false", False),
        ("fALsE", False),
        ("0", False),
        ("no", False),
        ("n  ", False),
    ],
)
def test_str_to_bool_returns_expected(input_str: str, expected: bool) -> None:
    """Test valid true/false string variations"""
    assert str_to_bool(input_str) == expected


@pytest.mark.parametrize("input_str", ["bob", "", "2", "truthy"])
def test_str_to_bool_invalid(input_str: str) -> None:
    with pytest.raises(ValueError, match="not a valid boolean"):
        str_to_bool(input_str)


# endregion


# region get_debug_mode tests
def test_debug_mode_default(clean_debug_env: pytest.MonkeyPatch) -> None:
    assert get_debug_mode() is constants.DEBUG_MODE_DEFAULT


@pytest.mark.parametrize("value,expected", [("true", True), ("0", False)])
def test_debug_mode_from_env(
    clean_debug_env: pytest.MonkeyPatch, value: str, expected: bool
) -> None:
    clean_debug_env.setenv(constants.DEBUG_ENV_VAR, value)
    assert get_debug_mode() is expected


def test_debug_mode_invalid_env_falls_back(
    clean_debug_env: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    clean_debug_env.setenv(constants.DEBUG_ENV_VAR, "bob")
    assert get_debug_mode() is constants.DEBUG_MODE_DEFAULT
    assert "Invalid value for FIXTURES2RESPEC_DEBUG" in caplog.text


# endregion
