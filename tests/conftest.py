"""Shared fixtures for the Flightpath test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from flightpath.api.app import app
from flightpath.models.path import Edge


def make_edges(*pairs: tuple[str, str]) -> list[Edge]:
    """Build legs from ``(source, destination)`` tuples."""
    return [Edge.from_pair(pair) for pair in pairs]


@pytest.fixture
def client():
    """Create a FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def connecting_legs() -> list[Edge]:
    """Five legs forming two itineraries: SFO->EWR and IAD->JFK."""
    return make_edges(
        ("IND", "EWR"),
        ("SFO", "ATL"),
        ("GSO", "IND"),
        ("ATL", "GSO"),
        ("IAD", "JFK"),
    )
