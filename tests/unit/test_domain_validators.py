"""Unit tests for ledger input validators."""

from datetime import UTC, datetime

import pytest

from portfolio_ledger.core.enums import ErrorCode
from portfolio_ledger.domain.validators import (
    InvalidFieldError,
    validate_disambiguator,
    validate_positive,
    validate_signed,
    validate_text,
    validate_timestamp,
    validate_unsigned,
)


@pytest.mark.unit
class TestValidateText:
    """Test bounded string validation."""

    def test_accepts_value_at_limit(self):
        assert validate_text("x" * 32, field="symbol", max_bytes=32) == "x" * 32

    def test_rejects_value_over_limit(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            validate_text("x" * 33, field="symbol", max_bytes=32)

        assert exc_info.value.field == "symbol"
        assert exc_info.value.code == ErrorCode.INVALID_INPUT
        assert "33" in str(exc_info.value)

    def test_required_rejects_whitespace(self):
        with pytest.raises(InvalidFieldError):
            validate_text("  ", field="owner", max_bytes=64, required=True)

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_allowed_by_default(self, value):
        assert validate_text(value, field="symbol", max_bytes=32) == value

    def test_rejects_non_string(self):
        with pytest.raises(InvalidFieldError):
            validate_text(42, field="name", max_bytes=64)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_text("x" * 65, field="name", max_bytes=64)


@pytest.mark.unit
class TestValidateAmounts:
    """Test unsigned, positive and signed amount validation."""

    def test_unsigned_allows_zero(self):
        assert validate_unsigned(0, field="amount") == 0

    def test_unsigned_negative_is_invalid_amount(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            validate_unsigned(-5, field="amount")

        assert exc_info.value.code == ErrorCode.INVALID_AMOUNT

    def test_unsigned_rejects_bool(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            validate_unsigned(True, field="amount")

        assert exc_info.value.code == ErrorCode.INVALID_INPUT

    def test_unsigned_upper_bound(self):
        assert validate_unsigned(2**64 - 1, field="amount") == 2**64 - 1
        with pytest.raises(InvalidFieldError):
            validate_unsigned(2**64, field="amount")

    def test_positive_rejects_zero(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            validate_positive(0, field="amount")

        assert exc_info.value.code == ErrorCode.INVALID_AMOUNT
        assert exc_info.value.field == "amount"

    @pytest.mark.parametrize("value", [-(2**63), 0, 2**63 - 1])
    def test_signed_accepts_range(self, value):
        assert validate_signed(value, field="amount") == value

    @pytest.mark.parametrize("value", [-(2**63) - 1, 2**63])
    def test_signed_rejects_outside_range(self, value):
        with pytest.raises(InvalidFieldError):
            validate_signed(value, field="amount")


@pytest.mark.unit
class TestValidateTimestampAndDisambiguator:
    """Test timestamp and disambiguator validation."""

    def test_aware_timestamp_accepted(self):
        now = datetime(2026, 1, 1, tzinfo=UTC)

        assert validate_timestamp(now, field="created_at") is now

    def test_naive_timestamp_rejected(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            validate_timestamp(datetime(2026, 1, 1), field="created_at")

        assert exc_info.value.field == "created_at"

    @pytest.mark.parametrize("value", [0, 254, 255])
    def test_disambiguator_accepts_byte(self, value):
        assert validate_disambiguator(value) == value

    @pytest.mark.parametrize("value", [-1, 256, "7", None])
    def test_disambiguator_rejects_others(self, value):
        with pytest.raises(InvalidFieldError) as exc_info:
            validate_disambiguator(value)

        assert exc_info.value.field == "disambiguator"
        assert exc_info.value.code == ErrorCode.INVALID_INPUT
