"""Pytest fixtures for live scoreboard tests."""

import logging

import pytest
import structlog

from live_scoreboard.config import reset_config
from live_scoreboard.core.entities import Team
from live_scoreboard.core.scoreboard import InMemoryScoreBoard


@pytest.fixture(autouse=True)
def quiet_logging():
    """Only emit warnings and above so busy tests don't flood the output."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()


@pytest.fixture
def scoreboard():
    """Create an empty scoreboard."""
    return InMemoryScoreBoard()


@pytest.fixture
def mexico():
    return Team("Mexico")


@pytest.fixture
def canada():
    return Team("Canada")


@pytest.fixture
def spain():
    return Team("Spain")


@pytest.fixture
def brazil():
    return Team("Brazil")


@pytest.fixture
def clean_config():
    """Reset global config before and after a test."""
    reset_config()
    yield
    reset_config()
