"""Pytest configuration and shared fixtures."""

import pytest

from odometer_app.config.defaults import CounterParams

ALL_LETTERS = "ABCEHIKLNOPRSTUWXYZ"
ALL_NUMERALS = "123456789"


@pytest.fixture
def full_maximum() -> str:
    """Largest ten-group counter value."""
    return "-".join(["Z9"] * 10)


@pytest.fixture
def single_group_sequence() -> list:
    """Every single-group value in counting order, A1 through Z9."""
    return [letter + numeral for letter in ALL_LETTERS for numeral in ALL_NUMERALS]


@pytest.fixture
def short_counter_params() -> CounterParams:
    """Counter that holds at most three groups."""
    return CounterParams(max_groups=3)


@pytest.fixture
def config_dir(tmp_path):
    """Empty configuration directory (defaults only)."""
    return tmp_path
