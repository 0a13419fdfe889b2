import pytest
from hypothesis import given, strategies as st

from dg_keyring import KeyRing
from dg_keyring.errors import KeyAlreadyExists

key_ids = st.from_regex(r"[A-Za-z0-9_-]{1,64}", fullmatch=True)
hex_keys = st.binary(min_size=1, max_size=128).map(bytes.hex)


@given(key_ids, st.binary(max_size=512))
def test_bytes_round_trip(key_id: str, key: bytes) -> None:
    ring = KeyRing().add_key(key_id, key)
    stored = ring.get_key_by_id(key_id)
    assert stored is not None
    assert stored.get_secret_value() == key


@given(key_ids, hex_keys, st.booleans())
def test_hex_round_trip(key_id: str, hex_key: str, upper: bool) -> None:
    ring = KeyRing().add_key(key_id, hex_key.upper() if upper else hex_key)
    assert ring.assert_key_by_id(key_id).get_secret_value() == bytes.fromhex(hex_key)


@given(key_ids, st.binary(max_size=64), st.binary(max_size=64))
def test_identifier_uniqueness(key_id: str, first: bytes, second: bytes) -> None:
    ring = KeyRing().add_key(key_id, first)
    with pytest.raises(KeyAlreadyExists):
        ring.add_key(key_id, second)
    assert ring.assert_key_by_id(key_id).get_secret_value() == first
    assert len(ring) == 1


@given(st.lists(key_ids, min_size=1, max_size=10, unique=True), st.data())
def test_random_pick_respects_eligibility(ids: list, data: st.DataObject) -> None:
    ring = KeyRing()
    for key_id in ids:
        ring.add_key(key_id, key_id.encode())
    excluded = data.draw(st.lists(st.sampled_from(ids), max_size=len(ids) - 1, unique=True))
    for key_id in excluded:
        ring.prevent_random_pick(key_id)
    for _ in range(20):
        assert ring.get_random_key().id not in excluded
    assert len(ring) == len(ids)
