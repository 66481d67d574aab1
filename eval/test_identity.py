"""Tests for random hex ids and the session visitor id."""
import re
import unittest.mock as mock

from rztracker.identity import (
    MemorySessionStore, get_visitor_id, random_hex, random_rand,
)
from rztracker.models import MAX_INT32, VISITOR_ID_KEY

HEX32 = re.compile(r"^[0-9a-f]{32}$")


def test_random_hex_shape():
    for _ in range(200):
        value = random_hex()
        assert len(value) == 32
        assert HEX32.match(value)


def test_random_hex_pads_small_blocks():
    """Small random values are left-padded to 8 digits per block."""
    with mock.patch("rztracker.identity.random.randint", side_effect=[1, 0xABC, 0x12345, 0xFFFFFFF]):
        assert random_hex() == "00000001" + "00000abc" + "00012345" + "0fffffff"


def test_random_hex_max_block():
    with mock.patch("rztracker.identity.random.randint", return_value=MAX_INT32):
        assert random_hex() == "ffffffff" * 4


def test_random_rand_range():
    for _ in range(200):
        value = random_rand()
        assert 1 <= value <= MAX_INT32


# ── Visitor id ──────────────────────────────────────────────────────


def test_visitor_id_stable_with_store():
    store = MemorySessionStore()
    first = get_visitor_id(store)
    second = get_visitor_id(store)
    assert first == second
    assert HEX32.match(first)
    assert store.get_item(VISITOR_ID_KEY) == first


def test_visitor_id_reuses_existing_value():
    """An id already in the store is returned unchanged."""
    store = MemorySessionStore({VISITOR_ID_KEY: "custom-id"})
    assert get_visitor_id(store) == "custom-id"
    assert store.get_item(VISITOR_ID_KEY) == "custom-id"


def test_visitor_id_without_store_is_fresh_each_call():
    with mock.patch("rztracker.identity.random_hex", side_effect=["a" * 32, "b" * 32]):
        assert get_visitor_id(None) == "a" * 32
        assert get_visitor_id(None) == "b" * 32


def test_new_session_gets_new_id():
    store = MemorySessionStore()
    with mock.patch("rztracker.identity.random_hex", side_effect=["a" * 32, "b" * 32]):
        first = get_visitor_id(store)
        store.clear()
        second = get_visitor_id(store)
    assert first != second
    assert len(store) == 1
