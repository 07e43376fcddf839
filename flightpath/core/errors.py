"""Exception hierarchy for request validation and chain resolution.

Transport-level problems raise :class:`MalformedRequestError`; the
resolver raises one of the :class:`ChainResolutionError` subclasses.
The ``/calculate`` route handler maps each branch to an HTTP status.
"""

from __future__ import annotations


class FlightpathError(Exception):
    """Base class for every error raised by this package."""


class MalformedRequestError(FlightpathError):
    """The request body could not be decoded into a list of legs."""


class ChainResolutionError(FlightpathError):
    """The legs do not decompose into a clean set of linear chains."""

    message = "Flight paths could not be resolved"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NoPrimarySourceError(ChainResolutionError):
    message = "No primary sources could be identified"


class NoFinalDestinationError(ChainResolutionError):
    message = "No final destinations could be identified"


class CountMismatchError(ChainResolutionError):
    message = "Mismatch in primary sources and final destinations"

    def __init__(self, primary_sources: int, final_destinations: int) -> None:
        super().__init__()
        self.primary_sources = primary_sources
        self.final_destinations = final_destinations


class CycleDetectedError(ChainResolutionError):
    message = "Cycle detected in flight paths"

    def __init__(self, start: str, node: str) -> None:
        super().__init__()
        self.start = start
        self.node = node
