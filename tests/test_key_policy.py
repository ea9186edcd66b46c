from __future__ import annotations

from casetree.key_policy import as_index, fold_key, is_dense_sequence, next_index
from casetree.payload import MappingPayload


def test_fold_key_lowercases_strings_and_stringifies_indexes() -> None:
    assert fold_key("MixedCase") == "mixedcase"
    assert fold_key(3) == "3"


def test_as_index_accepts_canonical_decimal_strings_only() -> None:
    assert as_index("0") == 0
    assert as_index("12") == 12
    assert as_index(7) == 7
    assert as_index("012") is None
    assert as_index("1\n") is None
    assert as_index("a1") is None
    assert as_index(True) is None


def test_next_index_follows_highest_integer_key() -> None:
    assert next_index([]) == 0
    assert next_index(["a", "b"]) == 0
    assert next_index([0, "x", 4]) == 5


def test_is_dense_sequence() -> None:
    assert is_dense_sequence([0, 1, 2])
    assert is_dense_sequence([])
    assert not is_dense_sequence([1, 2])
    assert not is_dense_sequence(["0", "1"])


def test_mapping_payload_keeps_key_index_in_sync() -> None:
    payload = MappingPayload()
    sentinel = object()
    payload.store("Name", sentinel)  # type: ignore[arg-type]

    assert payload.key_index == {"name": "Name"}
    assert payload.find("NAME", case_sensitive=False) == "Name"
    assert payload.find("NAME", case_sensitive=True) is None

    payload.discard("Name")
    assert payload.entries == {}
    assert payload.key_index == {}


def test_mapping_payload_append_marks_sequence() -> None:
    payload = MappingPayload()
    assert payload.store(None, object()) == 0  # type: ignore[arg-type]
    assert payload.store(None, object()) == 1  # type: ignore[arg-type]
    assert payload.kind == "sequence"
    assert payload.find("1", case_sensitive=True) == 1
