"""Shared test fixtures."""

import pytest

from cybertime import CyberDate


@pytest.fixture
def full_date():
    return CyberDate(klik=54, chord=4, cycle=593, solar_cycle=129)


@pytest.fixture
def short_date():
    return CyberDate(klik=5, chord=3)


@pytest.fixture
def cycle_date():
    return CyberDate(cycle=7)
