from __future__ import annotations

import pytest

from rational import Rounding
from rational.core.context import (
    get_dflt_rounding_mode,
    set_dflt_rounding_mode,
    reset_dflt_rounding_mode,
)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture(params=list(Rounding), ids=[r.name for r in Rounding])
def rnd(request) -> Rounding:
    """Every rounding mode, installed as context default for the test."""
    token = set_dflt_rounding_mode(request.param)
    yield request.param
    reset_dflt_rounding_mode(token)


@pytest.fixture()
def round_half_up() -> Rounding:
    """Switch the default rounding mode to ROUND_HALF_UP, restore afterwards."""
    token = set_dflt_rounding_mode(Rounding.ROUND_HALF_UP)
    yield get_dflt_rounding_mode()
    reset_dflt_rounding_mode(token)
