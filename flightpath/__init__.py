"""Flightpath: reconstructs itineraries from unordered flight legs."""

__version__ = "0.1.0"
