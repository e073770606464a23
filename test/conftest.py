"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest

from linquad import Model, Variable, options
from linquad.common import reset_deprecation_notice


@pytest.fixture(autouse=True)
def reset_options() -> Iterator[None]:
    """Restore the global display options after every test."""
    yield
    options.reset()


@pytest.fixture
def rearm_deprecation() -> Iterator[None]:
    """Make the one-shot comparison notice fire again."""
    reset_deprecation_notice()
    yield
    reset_deprecation_notice()


@pytest.fixture
def m() -> Model:
    return Model()


@pytest.fixture
def x(m: Model) -> Variable:
    return m.add_variables(name="x")


@pytest.fixture
def y(m: Model) -> Variable:
    return m.add_variables(name="y")


@pytest.fixture
def z(m: Model) -> Variable:
    return m.add_variables(name="z")
