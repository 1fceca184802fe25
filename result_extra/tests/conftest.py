"""Pytest configuration and fixtures."""

import pytest

from result_extra.result import Err, Ok


@pytest.fixture
def ok_four():
    """A plain success."""
    return Ok(4)


@pytest.fixture
def err_oh():
    """A plain failure."""
    return Err("Oh")


@pytest.fixture
def mixed_results():
    """Successes and failures interleaved."""
    return [Ok(99), Err("Nope"), Ok(-5), Err("Again")]


@pytest.fixture
def add1():
    return lambda x: x + 1
