"""Tests for the request/response wire codec."""

from __future__ import annotations

import json

import pytest

from flightpath.api.wire import decode_edges, encode_chains
from flightpath.core.errors import MalformedRequestError
from flightpath.core.resolver import resolve
from flightpath.models.path import Chain, Edge


class TestDecodeEdges:
    def test_decodes_pairs_in_order(self):
        edges = decode_edges(b'[["SFO","EWR"],["EWR","JFK"]]')

        assert edges == [
            Edge(source="SFO", destination="EWR"),
            Edge(source="EWR", destination="JFK"),
        ]

    def test_empty_array_is_valid(self):
        assert decode_edges(b"[]") == []

    @pytest.mark.parametrize("body", [b"", b"   ", b"\n\t"])
    def test_empty_body(self, body):
        with pytest.raises(MalformedRequestError, match="Request body must not be empty"):
            decode_edges(body)

    def test_badly_formed_json_reports_position(self):
        with pytest.raises(MalformedRequestError) as excinfo:
            decode_edges(b'[["SFO","EWR"],')

        assert str(excinfo.value) == "Request body contains badly-formed JSON (at position 15)"

    def test_position_is_a_byte_offset(self):
        body = '[["Zürich","Genève"],'.encode("utf-8")

        with pytest.raises(MalformedRequestError) as excinfo:
            decode_edges(body)

        assert str(excinfo.value) == f"Request body contains badly-formed JSON (at position {len(body)})"

    def test_excessive_nesting_is_badly_formed(self):
        body = b"[" * 100000 + b"]" * 100000

        with pytest.raises(MalformedRequestError) as excinfo:
            decode_edges(body)

        assert str(excinfo.value) == "Request body contains badly-formed JSON"

    def test_oversized_integer_is_rejected(self):
        """Interpreters with an integer digit limit fail while decoding."""
        body = b'[["SFO", ' + b"1" * 5000 + b"]]"

        with pytest.raises(MalformedRequestError):
            decode_edges(body)

    def test_invalid_utf8_is_badly_formed(self):
        with pytest.raises(MalformedRequestError, match="badly-formed JSON"):
            decode_edges(b'[["SFO","\xff"]]')

    def test_non_string_field_reports_location(self):
        with pytest.raises(MalformedRequestError) as excinfo:
            decode_edges(b'[["SFO","EWR"],["EWR",42]]')

        assert str(excinfo.value) == 'Request body contains an invalid value for the "[1][1]" field'

    def test_non_array_body_reports_body(self):
        with pytest.raises(MalformedRequestError) as excinfo:
            decode_edges(b'{"SFO": "EWR"}')

        assert str(excinfo.value) == 'Request body contains an invalid value for the "body" field'

    def test_null_body_is_an_invalid_value(self):
        with pytest.raises(MalformedRequestError, match="invalid value"):
            decode_edges(b"null")

    def test_flat_pair_is_an_invalid_value(self):
        with pytest.raises(MalformedRequestError, match=r'"\[0\]"'):
            decode_edges(b'["SFO","EWR"]')

    @pytest.mark.parametrize(
        "body",
        [b'[["SFO"]]', b'[["SFO","EWR","JFK"]]', b"[[]]", b'[["SFO","EWR"],["JFK"]]'],
    )
    def test_wrong_arity(self, body):
        with pytest.raises(MalformedRequestError, match="Request body contains invalid structure"):
            decode_edges(body)


class TestEncodeChains:
    def test_encodes_pairs(self):
        body = encode_chains([Chain(start="SFO", end="JFK"), Chain(start="IAD", end="ORD")])

        assert json.loads(body) == [["SFO", "JFK"], ["IAD", "ORD"]]

    def test_encodes_empty(self):
        assert encode_chains([]) == b"[]"

    def test_resolved_pairs_survive_the_wire(self):
        edges = decode_edges(b'[["IND","EWR"],["SFO","ATL"],["GSO","IND"],["ATL","GSO"],["IAD","JFK"]]')
        chains = resolve(edges)

        decoded = {tuple(pair) for pair in json.loads(encode_chains(chains))}

        assert decoded == {chain.as_pair() for chain in chains}
