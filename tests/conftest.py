"""Shared pytest fixtures for investo tests."""

import decimal

import pytest


@pytest.fixture
def low_precision():
    """Run the test with the caller's decimal context cut to 3 digits."""
    with decimal.localcontext() as ctx:
        ctx.prec = 3
        ctx.rounding = decimal.ROUND_DOWN
        yield ctx
