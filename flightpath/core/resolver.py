"""Chain resolver: stitches unordered legs into start/end pairs.

Given an arbitrary collection of legs that may form several disjoint
chains, :func:`resolve` identifies every chain start (a point that is
only ever departed from) and every chain end (a point that is only ever
arrived at), validates that the two sets line up, then walks each chain
forward from its start.

The resolver is a pure function over its input.  It never touches the
HTTP layer, so it can be exercised directly with generated legs.
"""

from __future__ import annotations

from typing import Iterable

import structlog

from flightpath.core.errors import (
    CountMismatchError,
    CycleDetectedError,
    NoFinalDestinationError,
    NoPrimarySourceError,
)
from flightpath.models.path import Chain, Edge

logger = structlog.get_logger(__name__)


def _index_edges(
    edges: Iterable[Edge],
) -> tuple[dict[str, str], dict[str, None], dict[str, None]]:
    """Build the adjacency map and the source/destination sets.

    Dict keys stand in for the sets so that iteration follows the order
    in which identifiers first appear.  A source that appears twice keeps
    only its last destination.

    Args:
        edges: The legs to index.

    Returns:
        A ``(adjacency, sources, destinations)`` tuple.
    """
    adjacency: dict[str, str] = {}
    sources: dict[str, None] = {}
    destinations: dict[str, None] = {}

    for edge in edges:
        previous = adjacency.get(edge.source)
        if previous is not None and previous != edge.destination:
            logger.warning(
                "duplicate_source_overwritten",
                source=edge.source,
                previous=previous,
                destination=edge.destination,
            )
        adjacency[edge.source] = edge.destination
        sources[edge.source] = None
        destinations[edge.destination] = None

    return adjacency, sources, destinations


def _walk(start: str, adjacency: dict[str, str]) -> str:
    """Follow the adjacency map from *start* until it runs out.

    Raises:
        CycleDetectedError: If a point is visited twice on this walk.
    """
    visited: set[str] = set()
    current = start
    while current not in visited:
        visited.add(current)
        following = adjacency.get(current)
        if following is None:
            return current
        current = following
    raise CycleDetectedError(start=start, node=current)


def resolve(edges: Iterable[Edge]) -> list[Chain]:
    """Resolve *edges* into one :class:`Chain` per disjoint chain.

    Checks run in a fixed order: missing primary sources, missing final
    destinations, then a count mismatch between the two.  Only when all
    three pass are the chains walked, so a pure cycle (where every point
    is both a source and a destination) reports
    :class:`NoPrimarySourceError` rather than a cycle.

    Chains are returned in the order their primary sources first appear
    as a leg's source.

    Args:
        edges: The legs to resolve.

    Returns:
        One ``Chain(start, end)`` per primary source.

    Raises:
        NoPrimarySourceError: Every source is also a destination
            (includes the empty input).
        NoFinalDestinationError: Every destination is also a source.
        CountMismatchError: Starts and ends do not pair up.
        CycleDetectedError: A walk from a primary source loops.
    """
    adjacency, sources, destinations = _index_edges(edges)

    primary_sources = [point for point in sources if point not in destinations]
    if not primary_sources:
        raise NoPrimarySourceError()

    final_destinations = [point for point in destinations if point not in sources]
    if not final_destinations:
        raise NoFinalDestinationError()

    if len(primary_sources) != len(final_destinations):
        raise CountMismatchError(
            primary_sources=len(primary_sources),
            final_destinations=len(final_destinations),
        )

    chains = [Chain(start=start, end=_walk(start, adjacency)) for start in primary_sources]

    logger.debug("chains_resolved", sources=len(sources), chains=len(chains))
    return chains
