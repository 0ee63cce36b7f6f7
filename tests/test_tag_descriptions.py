"""Tests for tag and sub-tag description lookups."""
import pytest

from thaiqr.parsing.tags import (
    field_description,
    sub_tag_description,
    FIELD_DESCRIPTIONS,
    GENERIC_SUB_TAG_DESCRIPTIONS,
    SUB_TAG_DESCRIPTIONS,
)


def test_known_field_descriptions():
    assert field_description("00") == "Payload Format Indicator"
    assert field_description("29") == "Merchant Account Information (PromptPay)"
    assert field_description("53") == "Transaction Currency"
    assert field_description("63") == "CRC"
    assert field_description("10") == "Merchant Account Information"


def test_unreserved_range():
    for tag in range(80, 100):
        assert field_description(f"{tag:02d}") == "Unreserved Templates"


def test_unknown_field():
    assert field_description("42") == "Unknown field (42)"


def test_parent_specific_sub_tag():
    assert sub_tag_description("62", "01") == "Bill Number"
    assert sub_tag_description("29", "02") == "Mobile Number"
    assert sub_tag_description("30", "02") == "Merchant Identifier"
    assert sub_tag_description("64", "00") == "Language Preference"


def test_sub_tag_falls_back_to_generic_table():
    # Parent 62 has no entry for 00; the generic table does.
    assert sub_tag_description("62", "00") == "Globally Unique Identifier"
    # Parent without its own table.
    assert sub_tag_description("26", "05") == "Amount/Reference Data"
    assert sub_tag_description("26", "15") == "Reserved Data Element"


def test_sub_tag_final_fallback():
    assert sub_tag_description("26", "42") == "Sub-tag 42"


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        FIELD_DESCRIPTIONS["42"] = "x"
    with pytest.raises(TypeError):
        SUB_TAG_DESCRIPTIONS["62"]["99"] = "x"
    with pytest.raises(TypeError):
        GENERIC_SUB_TAG_DESCRIPTIONS["99"] = "x"
