"""Chain resolution core and its error taxonomy."""

from flightpath.core.resolver import resolve

__all__ = ["resolve"]
