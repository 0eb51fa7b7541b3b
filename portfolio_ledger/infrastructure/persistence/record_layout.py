"""Fixed-size binary layouts for ledger records.

Every record is persisted as a fixed-size payload: a two-byte header
(layout version, kind code) followed by the record's fields in declaration
order. Variable-length text is stored as a 4-byte length prefix plus a
zero-padded region reserved at its maximum size, so every record of a kind
has the same payload size.

Field encodings (big-endian):
    ADDRESS     32 raw digest bytes
    TEXT(n)     u32 byte length + n reserved bytes
    U8 / U64    unsigned integers
    I64         signed integer
    BOOL        one byte
    TIMESTAMP   i64 microseconds since the Unix epoch (UTC)

Oversized values are rejected with RecordLayoutError, never truncated.

Usage:
    kind, payload = encode_record(portfolio)
    restored = decode_record(payload)
"""

import struct
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from portfolio_ledger.core.constants import (
    CATEGORY_MAX_BYTES,
    DESCRIPTION_MAX_BYTES,
    GOAL_NAME_MAX_BYTES,
    NETWORK_MAX_BYTES,
    OWNER_IDENTITY_MAX_BYTES,
    SYMBOL_MAX_BYTES,
    TRANSACTION_ID_MAX_BYTES,
    TRANSACTION_TYPE_MAX_BYTES,
)
from portfolio_ledger.domain.entities import (
    CryptoAsset,
    FinancialGoal,
    Portfolio,
    TransactionRecord,
)
from portfolio_ledger.domain.enums.record_kind import RecordKind
from portfolio_ledger.domain.protocols.ledger_repository import LedgerRecord
from portfolio_ledger.domain.value_objects.address import Address

LAYOUT_VERSION = 1

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_HEADER = ">BB"


class RecordLayoutError(ValueError):
    """Raised when a record cannot be encoded into (or decoded from) its layout."""


@dataclass(frozen=True, slots=True)
class _Field:
    name: str
    encoding: str
    size: int = 0

    @property
    def format(self) -> str:
        match self.encoding:
            case "address":
                return "32s"
            case "text":
                return f"I{self.size}s"
            case "u8":
                return "B"
            case "u64":
                return "Q"
            case "i64" | "timestamp":
                return "q"
            case "bool":
                return "?"
        raise RecordLayoutError(f"Unknown field encoding: {self.encoding}")


def _address(name: str) -> _Field:
    return _Field(name, "address")


def _text(name: str, size: int) -> _Field:
    return _Field(name, "text", size)


def _to_micros(value: datetime) -> int:
    return (value - _EPOCH) // timedelta(microseconds=1)


def _from_micros(value: int) -> datetime:
    return _EPOCH + timedelta(microseconds=value)


class RecordLayout:
    """Fixed binary layout for one record kind.

    Attributes:
        kind: Record kind this layout encodes.
        code: One-byte kind code written in the header.
        fields: Fields in payload order.
    """

    def __init__(
        self,
        kind: RecordKind,
        code: int,
        entity_type: type,
        fields: list[_Field],
    ) -> None:
        self.kind = kind
        self.code = code
        self.entity_type = entity_type
        self.fields = fields
        self._struct = struct.Struct(
            _HEADER + "".join(field.format for field in fields)
        )

    @property
    def size(self) -> int:
        """Payload size in bytes (identical for every record of this kind)."""
        return self._struct.size

    def encode(self, record: LedgerRecord) -> bytes:
        """Encode a record into its fixed-size payload.

        Args:
            record: Entity of this layout's kind.

        Returns:
            bytes: Payload of exactly `size` bytes.

        Raises:
            RecordLayoutError: If a value does not fit its field.
        """
        values: list[Any] = [LAYOUT_VERSION, self.code]
        for field in self.fields:
            value = getattr(record, field.name)
            match field.encoding:
                case "address":
                    values.append(value.to_bytes())
                case "text":
                    data = value.encode("utf-8")
                    if len(data) > field.size:
                        raise RecordLayoutError(
                            f"{field.name} is {len(data)} bytes, "
                            f"layout reserves {field.size}"
                        )
                    values.extend([len(data), data])
                case "timestamp":
                    values.append(_to_micros(value))
                case _:
                    values.append(value)

        try:
            return self._struct.pack(*values)
        except struct.error as e:
            raise RecordLayoutError(
                f"Cannot encode {self.kind.value} record: {e}"
            ) from e

    def decode(self, payload: bytes) -> LedgerRecord:
        """Decode a payload back into its entity.

        Args:
            payload: Bytes produced by encode().

        Returns:
            The decoded entity.

        Raises:
            RecordLayoutError: On size, version or kind mismatch.
        """
        if len(payload) != self.size:
            raise RecordLayoutError(
                f"{self.kind.value} payload is {len(payload)} bytes, "
                f"expected {self.size}"
            )

        raw = iter(self._struct.unpack(payload))
        version, code = next(raw), next(raw)
        if version != LAYOUT_VERSION or code != self.code:
            raise RecordLayoutError(
                f"Header mismatch: version={version} kind_code={code}"
            )

        kwargs: dict[str, Any] = {}
        for field in self.fields:
            match field.encoding:
                case "address":
                    kwargs[field.name] = Address.from_digest(next(raw))
                case "text":
                    length = next(raw)
                    data = next(raw)
                    if length > field.size:
                        raise RecordLayoutError(
                            f"{field.name} length {length} exceeds {field.size}"
                        )
                    kwargs[field.name] = data[:length].decode("utf-8")
                case "timestamp":
                    kwargs[field.name] = _from_micros(next(raw))
                case _:
                    kwargs[field.name] = next(raw)

        try:
            return self.entity_type(**kwargs)
        except ValueError as e:
            raise RecordLayoutError(
                f"Decoded {self.kind.value} record is invalid: {e}"
            ) from e


# =============================================================================
# Layouts
# =============================================================================

PORTFOLIO_LAYOUT = RecordLayout(
    RecordKind.PORTFOLIO,
    1,
    Portfolio,
    [
        _address("address"),
        _text("owner", OWNER_IDENTITY_MAX_BYTES),
        _Field("disambiguator", "u8"),
        _Field("total_assets", "u64"),
        _Field("total_value_usd", "u64"),
        _Field("created_at", "timestamp"),
        _Field("updated_at", "timestamp"),
    ],
)

CRYPTO_ASSET_LAYOUT = RecordLayout(
    RecordKind.CRYPTO_ASSET,
    2,
    CryptoAsset,
    [
        _address("address"),
        _address("portfolio_address"),
        _text("symbol", SYMBOL_MAX_BYTES),
        _Field("amount", "u64"),
        _Field("price_usd", "u64"),
        _text("network", NETWORK_MAX_BYTES),
        _Field("last_updated", "timestamp"),
    ],
)

TRANSACTION_RECORD_LAYOUT = RecordLayout(
    RecordKind.TRANSACTION_RECORD,
    3,
    TransactionRecord,
    [
        _address("address"),
        _address("portfolio_address"),
        _text("transaction_id", TRANSACTION_ID_MAX_BYTES),
        _Field("amount", "i64"),
        _text("transaction_type", TRANSACTION_TYPE_MAX_BYTES),
        _text("category", CATEGORY_MAX_BYTES),
        _text("description", DESCRIPTION_MAX_BYTES),
        _Field("timestamp", "timestamp"),
    ],
)

FINANCIAL_GOAL_LAYOUT = RecordLayout(
    RecordKind.FINANCIAL_GOAL,
    4,
    FinancialGoal,
    [
        _address("address"),
        _address("portfolio_address"),
        _text("name", GOAL_NAME_MAX_BYTES),
        _Field("target_amount", "u64"),
        _Field("current_amount", "u64"),
        _Field("target_date", "timestamp"),
        _Field("is_completed", "bool"),
        _text("category", CATEGORY_MAX_BYTES),
        _Field("created_at", "timestamp"),
        _Field("updated_at", "timestamp"),
    ],
)

LAYOUTS_BY_TYPE: dict[type, RecordLayout] = {
    layout.entity_type: layout
    for layout in (
        PORTFOLIO_LAYOUT,
        CRYPTO_ASSET_LAYOUT,
        TRANSACTION_RECORD_LAYOUT,
        FINANCIAL_GOAL_LAYOUT,
    )
}
LAYOUTS_BY_KIND: dict[RecordKind, RecordLayout] = {
    layout.kind: layout for layout in LAYOUTS_BY_TYPE.values()
}
_LAYOUTS_BY_CODE: dict[int, RecordLayout] = {
    layout.code: layout for layout in LAYOUTS_BY_TYPE.values()
}


def layout_for(record: LedgerRecord) -> RecordLayout:
    """Return the layout for a record instance.

    Raises:
        RecordLayoutError: If the record type has no layout.
    """
    layout = LAYOUTS_BY_TYPE.get(type(record))
    if layout is None:
        raise RecordLayoutError(f"No layout for {type(record).__name__}")
    return layout


def encode_record(record: LedgerRecord) -> tuple[RecordKind, bytes]:
    """Encode any ledger record.

    Args:
        record: Portfolio, CryptoAsset, TransactionRecord or FinancialGoal.

    Returns:
        Tuple of (kind, payload).

    Raises:
        RecordLayoutError: If the record does not fit its layout.
    """
    layout = layout_for(record)
    return layout.kind, layout.encode(record)


def decode_record(payload: bytes) -> LedgerRecord:
    """Decode any ledger payload using its header kind code.

    Args:
        payload: Stored bytes.

    Returns:
        The decoded entity.

    Raises:
        RecordLayoutError: On unknown kind, bad size or bad header.
    """
    if len(payload) < struct.calcsize(_HEADER):
        raise RecordLayoutError("Payload shorter than header")
    _, code = struct.unpack_from(_HEADER, payload)
    layout = _LAYOUTS_BY_CODE.get(code)
    if layout is None:
        raise RecordLayoutError(f"Unknown kind code: {code}")
    return layout.decode(payload)
