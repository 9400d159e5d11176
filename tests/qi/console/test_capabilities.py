"""Tests for QI console capabilities catalog"""

import pytest

from qi.console.capabilities import (
    BOOLEAN_NAMES,
    CAPABILITIES,
    NUMBER_NAMES,
    STRING_NAMES,
    get_definition,
    is_standard,
)


def test_get_definition():
    definition = get_definition("cup")
    assert definition.code == "cup"
    assert definition.variable_name == "cursor_address"
    assert definition.tcap_code == "cm"
    assert definition.description == "move to row #1 columns #2"


def test_get_definition_missing():
    assert get_definition("barnacle") is None
    assert get_definition("meml") is None
    assert is_standard("setaf") is True
    assert is_standard("XM") is False


def test_catalog_keys_match_codes():
    for code, definition in CAPABILITIES.items():
        assert definition.code == code


def test_ordinal_tables():
    assert len(BOOLEAN_NAMES) == 44
    assert len(NUMBER_NAMES) == 39
    assert len(STRING_NAMES) == 414

    assert BOOLEAN_NAMES[:2] == ("bw", "am")
    assert NUMBER_NAMES[0] == "cols"
    assert STRING_NAMES[:3] == ("cbt", "bel", "cr")


def test_ordinal_tables_are_catalogued():
    for name in BOOLEAN_NAMES + NUMBER_NAMES + STRING_NAMES:
        if name.startswith("OT") or name in ("meml", "memu", "box1"):
            continue
        assert is_standard(name), name


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        CAPABILITIES["cup"] = None
    with pytest.raises(TypeError):
        del CAPABILITIES["cup"]


def test_definition_is_read_only():
    definition = get_definition("cup")
    with pytest.raises(AttributeError):
        definition.description = "teleport"
    assert get_definition("cup").description == "move to row #1 columns #2"
