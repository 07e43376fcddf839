"""Pydantic v2 data models for flight legs and resolved chains."""

from flightpath.models.path import Chain, Edge

__all__ = [
    "Edge",
    "Chain",
]
