"""Wire codec for the ``/calculate`` endpoint.

Requests are a JSON array of ``[source, destination]`` string pairs and
responses are a JSON array of ``[start, end]`` string pairs::

    [["SFO", "EWR"], ["EWR", "JFK"]]  ->  [["SFO", "JFK"]]

Every structural problem with a request body is reported as a
:class:`MalformedRequestError` whose message is safe to return to the
caller verbatim.
"""

from __future__ import annotations

import json
from typing import Iterable

from pydantic import StrictStr, TypeAdapter, ValidationError

from flightpath.core.errors import MalformedRequestError
from flightpath.models.path import Chain, Edge

_LEGS_ADAPTER = TypeAdapter(list[list[StrictStr]])


def _format_location(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as an index path like ``[1][0]``."""
    if not loc:
        return "body"
    return "".join(f"[{part}]" for part in loc)


def decode_edges(body: bytes) -> list[Edge]:
    """Decode a raw request body into legs.

    Args:
        body: The raw HTTP request body.

    Returns:
        The legs in request order.

    Raises:
        MalformedRequestError: If the body is empty, is not valid JSON,
            holds a value of the wrong type, or holds a pair that does
            not have exactly two members.
    """
    if not body.strip():
        raise MalformedRequestError("Request body must not be empty")

    try:
        payload = json.loads(body.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise MalformedRequestError(
            f"Request body contains badly-formed JSON (at position {exc.start})"
        ) from exc
    except json.JSONDecodeError as exc:
        # exc.pos counts characters; report the offset in bytes
        offset = len(exc.doc[: exc.pos].encode("utf-8"))
        raise MalformedRequestError(
            f"Request body contains badly-formed JSON (at position {offset})"
        ) from exc
    except (RecursionError, ValueError) as exc:
        # nesting too deep, or an integer literal over the digit limit
        raise MalformedRequestError("Request body contains badly-formed JSON") from exc

    try:
        pairs = _LEGS_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        location = _format_location(exc.errors()[0]["loc"])
        raise MalformedRequestError(
            f'Request body contains an invalid value for the "{location}" field'
        ) from exc

    if any(len(pair) != 2 for pair in pairs):
        raise MalformedRequestError("Request body contains invalid structure")

    return [Edge.from_pair(pair) for pair in pairs]


def encode_chains(chains: Iterable[Chain]) -> bytes:
    """Encode resolved chains as a JSON array of ``[start, end]`` pairs."""
    return json.dumps([list(chain.as_pair()) for chain in chains], ensure_ascii=False).encode("utf-8")
