"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from router_sdk import RouterConfig, V2Router
from router_sdk.entities import Pair
from tests.helpers import NOW, TOKEN0, TOKEN1, WETH, make_pair


@pytest.fixture
def router() -> V2Router:
    """Router with a clock frozen at NOW (+0.75s, to exercise flooring)."""
    return V2Router(RouterConfig(clock=lambda: NOW + 0.75))


@pytest.fixture
def pair_0_1() -> Pair:
    """TOKEN0/TOKEN1 pair with 1000/1000 reserves."""
    return make_pair(1000, 1000, TOKEN0, TOKEN1)


@pytest.fixture
def pair_weth_0() -> Pair:
    """WETH/TOKEN0 pair with 1000/1000 reserves."""
    return make_pair(1000, 1000, WETH, TOKEN0)


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after a test reconfigures it."""
    yield
    structlog.reset_defaults()
