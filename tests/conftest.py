"""
Basic test fixtures for the skirmish test suite.

Provides fresh combatants, event buses and stub combat modes.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from skirmish.core.events import EventManager
from skirmish.game.entities.combatant import Combatant
from skirmish.game.log_manager import LogManager
from skirmish.game.strategies import (
    AggressiveFightStrategy,
    DefensiveFightStrategy,
    EvasiveFightStrategy,
)


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager()


@pytest.fixture
def log_manager(event_manager):
    """Create a log manager listening on the test event manager."""
    return LogManager(event_manager)


@pytest.fixture
def ranger():
    """Create the Ranger used throughout the battle scenarios."""
    return Combatant("Ranger", 15, 12, 8)


@pytest.fixture
def skeleton():
    """Create a sturdy Skeleton (30 health)."""
    return Combatant("Skeleton", 30, 5, 5)


@pytest.fixture
def weak_skeleton():
    """Create a Skeleton with only 6 health."""
    return Combatant("Skeleton", 6, 5, 5)


@pytest.fixture
def aggressive():
    return AggressiveFightStrategy()


@pytest.fixture
def defensive():
    return DefensiveFightStrategy()


@pytest.fixture
def evasive():
    return EvasiveFightStrategy()
