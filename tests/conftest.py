"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from pokerheat.game.cards import Card, Rank, Suit
from pokerheat.game.reference import ReferenceEvaluator


@pytest.fixture(scope="session")
def full_deck():
    """All 52 cards, deuces first."""
    return [Card(rank, suit) for rank in Rank for suit in Suit]


@pytest.fixture
def rng():
    """Seeded generator so random deals are reproducible."""
    return np.random.default_rng(20240611)


@pytest.fixture(scope="session")
def reference():
    return ReferenceEvaluator()
