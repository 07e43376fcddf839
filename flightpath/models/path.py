"""Data models for flight legs and the chains resolved from them.

Both models are frozen so a leg cannot change once the wire codec has
built it, and a resolved chain can be hashed and compared as a value.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Edge(BaseModel):
    """A single directed leg from ``source`` to ``destination``.

    Attributes:
        source: Identifier of the departure point (e.g. ``"SFO"``).
        destination: Identifier of the arrival point (e.g. ``"EWR"``).
    """

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Departure point identifier.")
    destination: str = Field(..., description="Arrival point identifier.")

    @classmethod
    def from_pair(cls, pair: tuple[str, str] | list[str]) -> Edge:
        """Build an edge from its two-element wire form."""
        source, destination = pair
        return cls(source=source, destination=destination)

    def __repr__(self) -> str:
        return f"Edge({self.source!r} -> {self.destination!r})"


class Chain(BaseModel):
    """The endpoints of one maximal chain of legs.

    Attributes:
        start: The chain's primary source.
        end: The chain's final destination.
    """

    model_config = ConfigDict(frozen=True)

    start: str = Field(..., description="Primary source of the chain.")
    end: str = Field(..., description="Final destination of the chain.")

    def as_pair(self) -> tuple[str, str]:
        return (self.start, self.end)
