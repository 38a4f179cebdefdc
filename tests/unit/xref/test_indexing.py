"""Unit tests for collection indexing helpers."""

from __future__ import annotations

from xref.indexing import create_index, create_unique_index, flatten_index


def test_create_index_groups_by_name() -> None:
    """Each record should land in the group named by its key."""
    collection = [{"name": "mbland"}, {"name": "afeld"}]

    index = create_index(collection, "name")

    assert index == {"mbland": [{"name": "mbland"}], "afeld": [{"name": "afeld"}]}


def test_create_index_keeps_relative_order_and_drops_missing_keys() -> None:
    """Groups should keep input order and skip records without the key."""
    alice = {"name": "alice", "location": "DCA"}
    bob = {"name": "bob", "location": "SFO"}
    carol = {"name": "carol", "location": "DCA"}
    nomad = {"name": "nomad"}
    unset = {"name": "unset", "location": None}

    index = create_index([alice, bob, nomad, carol, unset], "location")

    assert index == {"DCA": [alice, carol], "SFO": [bob]}
    assert index["DCA"][0] is alice
    assert None not in index


def test_create_index_accepts_missing_collection() -> None:
    """A missing collection should produce an empty index."""
    assert create_index(None, "name") == {}


def test_create_unique_index_keeps_last_duplicate() -> None:
    """Later records with a duplicate key should win."""
    first = {"name": "mbland", "location": "DCA"}
    second = {"name": "mbland", "location": "SFO"}

    index = create_unique_index([first, second, {"location": "NYC"}], "name")

    assert list(index) == ["mbland"]
    assert index["mbland"] is second


def test_flatten_index_empty() -> None:
    """An empty index should flatten to an empty list."""
    assert flatten_index({}) == []


def test_flatten_index_returns_values_in_order() -> None:
    """Index values should be returned in index order."""
    index = {
        "mbland": {"name": "mbland"},
        "afeld": {"name": "afeld"},
        "mhz": {"name": "mhz"},
    }

    assert flatten_index(index) == [{"name": "mbland"}, {"name": "afeld"}, {"name": "mhz"}]


def test_flatten_index_nests_private_values() -> None:
    """The private entry should become a list of its own records."""
    index = {
        "mbland": {"name": "mbland"},
        "afeld": {"name": "afeld"},
        "mhz": {"name": "mhz"},
        "private": {
            "gboone": {"name": "gboone"},
            "ekamlley": {"name": "ekamlley"},
        },
    }

    assert flatten_index(index) == [
        {"name": "mbland"},
        {"name": "afeld"},
        {"name": "mhz"},
        {"private": [{"name": "gboone"}, {"name": "ekamlley"}]},
    ]
