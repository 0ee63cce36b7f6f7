"""Tests for generator input validation."""
from dataclasses import replace

from thaiqr.generation import sample_input, validate_input, ThaiQRGeneratorInput


def _valid(**overrides) -> ThaiQRGeneratorInput:
    return replace(sample_input(), **overrides)


def test_sample_input_is_valid():
    assert validate_input(sample_input()) == []


def test_missing_required_fields():
    errors = validate_input(ThaiQRGeneratorInput(aid="", biller_id="", reference1=""))
    assert errors == [
        "AID (Application Identifier) is required",
        "Biller ID is required",
        "Reference 1 is required",
    ]


def test_blank_required_field():
    assert validate_input(_valid(reference1="   ")) == ["Reference 1 is required"]


def test_reports_every_violation_at_once():
    errors = validate_input(_valid(aid="A" * 50, biller_id=""))
    assert "Biller ID is required" in errors
    assert "AID must be 32 characters or less" in errors
    assert len(errors) == 2


def test_length_limits():
    errors = validate_input(
        _valid(
            biller_id="1" * 33,
            reference1="R" * 26,
            reference2="R" * 26,
            merchant_name="N" * 26,
            merchant_city="C" * 16,
        )
    )
    assert errors == [
        "Biller ID must be 32 characters or less",
        "Reference 1 must be 25 characters or less",
        "Reference 2 must be 25 characters or less",
        "Merchant name must be 25 characters or less",
        "Merchant city must be 15 characters or less",
    ]


def test_length_limits_inclusive():
    data = _valid(
        aid="A" * 32,
        biller_id="1" * 32,
        reference1="R" * 25,
        reference2="R" * 25,
        merchant_name="N" * 25,
        merchant_city="C" * 15,
    )
    assert validate_input(data) == []


def test_negative_amount():
    assert validate_input(_valid(amount=-0.01)) == ["Amount must be positive"]


def test_amount_upper_bound():
    assert validate_input(_valid(amount=999999.99)) == []
    assert validate_input(_valid(amount=1000000)) == ["Amount must be less than 1,000,000"]


def test_amount_zero_and_missing_are_valid():
    assert validate_input(_valid(amount=0)) == []
    assert validate_input(_valid(amount=None)) == []


def test_amount_not_a_number():
    assert validate_input(_valid(amount=float("nan"))) == ["Amount must be a number"]
