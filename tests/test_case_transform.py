from __future__ import annotations

import logging

from casetree.case_transform import parse_case_transform, transform_keys, transform_values, transform_view


def test_parse_case_transform_normalizes_known_modes() -> None:
    assert parse_case_transform("UPPER") == "upper"
    assert parse_case_transform(" lower ") == "lower"
    assert parse_case_transform(None) is None
    assert parse_case_transform("original") is None


def test_parse_case_transform_warns_and_falls_back_on_unknown_mode(caplog) -> None:
    caplog.set_level(logging.WARNING)
    assert parse_case_transform("title") is None
    assert any("invalid case transform" in record.getMessage() for record in caplog.records)


def test_transform_values_recases_only_strings() -> None:
    data = {"Key": ["Mixed", 1, None, {"Inner": "Text"}], "Flag": True}
    assert transform_values(data, "upper") == {"Key": ["MIXED", 1, None, {"Inner": "TEXT"}], "Flag": True}


def test_transform_keys_recases_nested_string_keys_only() -> None:
    data = {"Outer": {"Inner": "Value"}, 3: [{"Deep": 1}]}
    assert transform_keys(data, "lower") == {"outer": {"inner": "Value"}, 3: [{"deep": 1}]}


def test_transform_keys_later_key_wins_on_collision() -> None:
    assert transform_keys({"name": 1, "NAME": 2}, "upper") == {"NAME": 2}


def test_transform_view_without_modes_returns_input_unchanged() -> None:
    data = {"Key": "Value"}
    assert transform_view(data, value_mode=None, key_mode=None) is data
