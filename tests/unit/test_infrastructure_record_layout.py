"""Unit tests for the fixed binary record layouts.

Tests cover:
- Constant payload size per kind
- Header checks (version, kind code, size)
- Oversized text rejected, never truncated
- Decoding dispatch by kind code
"""

import pytest

from portfolio_ledger.domain.enums import RecordKind
from portfolio_ledger.domain.value_objects.fixed_point import I64_MIN, U64_MAX
from portfolio_ledger.infrastructure.persistence.record_layout import (
    CRYPTO_ASSET_LAYOUT,
    FINANCIAL_GOAL_LAYOUT,
    LAYOUT_VERSION,
    PORTFOLIO_LAYOUT,
    RecordLayoutError,
    decode_record,
    encode_record,
)
from tests.conftest import (
    create_test_asset,
    create_test_goal,
    create_test_portfolio,
    create_test_transaction,
)


@pytest.mark.unit
class TestEncodeDecode:
    """Test encoding and decoding records."""

    def test_portfolio_with_extreme_totals(self):
        portfolio = create_test_portfolio(
            disambiguator=0, total_assets=U64_MAX, total_value_usd=U64_MAX
        )

        kind, payload = encode_record(portfolio)

        assert kind == RecordKind.PORTFOLIO
        assert decode_record(payload) == portfolio

    def test_transaction_with_minimum_amount_and_multibyte_text(self):
        record = create_test_transaction(
            create_test_portfolio(), amount=I64_MIN, description="café ☕"
        )

        kind, payload = encode_record(record)

        assert kind == RecordKind.TRANSACTION_RECORD
        assert decode_record(payload) == record

    def test_completed_goal_keeps_flag(self):
        goal = create_test_goal(
            create_test_portfolio(), current_amount=2_000_000, is_completed=True
        )

        restored = decode_record(encode_record(goal)[1])

        assert restored.is_completed is True
        assert restored.target_date == goal.target_date

    def test_payload_size_constant_per_kind(self):
        portfolio = create_test_portfolio()
        short = create_test_asset(portfolio, symbol="X", network="n")
        long = create_test_asset(portfolio, symbol="S" * 32, network="N" * 32)

        short_payload = encode_record(short)[1]
        long_payload = encode_record(long)[1]

        assert len(short_payload) == len(long_payload) == CRYPTO_ASSET_LAYOUT.size

    def test_header_carries_version_and_code(self):
        payload = encode_record(create_test_goal(create_test_portfolio()))[1]

        assert payload[0] == LAYOUT_VERSION
        assert payload[1] == FINANCIAL_GOAL_LAYOUT.code


@pytest.mark.unit
class TestLayoutErrors:
    """Test layout rejections."""

    def test_oversized_text_rejected(self):
        portfolio = create_test_portfolio()
        # Bypass entity validation to exercise the layout bound itself
        object.__setattr__(portfolio, "owner", "o" * 65)

        with pytest.raises(RecordLayoutError):
            PORTFOLIO_LAYOUT.encode(portfolio)

    def test_wrong_size_rejected(self):
        payload = encode_record(create_test_portfolio())[1]

        with pytest.raises(RecordLayoutError):
            decode_record(payload[:-1])

    def test_unknown_kind_code_rejected(self):
        payload = bytearray(encode_record(create_test_portfolio())[1])
        payload[1] = 99

        with pytest.raises(RecordLayoutError):
            decode_record(bytes(payload))

    def test_version_mismatch_rejected(self):
        payload = bytearray(encode_record(create_test_portfolio())[1])
        payload[0] = LAYOUT_VERSION + 1

        with pytest.raises(RecordLayoutError):
            decode_record(bytes(payload))

    def test_decode_with_wrong_layout_rejected(self):
        payload = encode_record(create_test_portfolio())[1]

        with pytest.raises(RecordLayoutError):
            CRYPTO_ASSET_LAYOUT.decode(payload)

    def test_short_payload_rejected(self):
        with pytest.raises(RecordLayoutError):
            decode_record(b"\x01")
