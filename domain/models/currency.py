from dataclasses import dataclass
from datetime import date as date_type, datetime
from decimal import Decimal, InvalidOperation
from typing import Any


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    symbol: str | None = None
    is_supported: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "symbol": self.symbol,
            "is_supported": self.is_supported,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Currency":
        return cls(
            code=data["code"],
            name=data["name"],
            symbol=data.get("symbol"),
            is_supported=bool(data.get("is_supported", True)),
        )


@dataclass(frozen=True)
class ExchangeRate:
    base_currency: str
    target_currency: str
    rate: Decimal
    provider: str
    fetched_at: datetime
    is_stale: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_currency": self.base_currency,
            "target_currency": self.target_currency,
            "rate": str(self.rate),
            "provider": self.provider,
            "fetched_at": self.fetched_at.isoformat(),
            "is_stale": self.is_stale,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExchangeRate":
        return cls(
            base_currency=data["base_currency"],
            target_currency=data["target_currency"],
            rate=_positive_decimal(data["rate"]),
            provider=data["provider"],
            fetched_at=datetime.fromisoformat(data["fetched_at"]),
            is_stale=bool(data.get("is_stale", False)),
        )


@dataclass(frozen=True)
class HistoricalRate:
    base_currency: str
    target_currency: str
    rate: Decimal
    date: date_type
    provider: str
    fetched_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_currency": self.base_currency,
            "target_currency": self.target_currency,
            "rate": str(self.rate),
            "date": self.date.isoformat(),
            "provider": self.provider,
            "fetched_at": self.fetched_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HistoricalRate":
        return cls(
            base_currency=data["base_currency"],
            target_currency=data["target_currency"],
            rate=_positive_decimal(data["rate"]),
            date=date_type.fromisoformat(data["date"]),
            provider=data["provider"],
            fetched_at=datetime.fromisoformat(data["fetched_at"]),
        )


@dataclass(frozen=True)
class ConversionRequest:
    from_currency: str
    to_currency: str
    amount: Decimal
    date: date_type | None = None


@dataclass(frozen=True)
class ConversionResult:
    from_currency: str
    to_currency: str
    amount: Decimal
    converted_amount: Decimal
    rate: Decimal
    provider: str
    fetched_at: datetime
    date: date_type | None = None


def _positive_decimal(value: Any) -> Decimal:
    try:
        rate = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"rate is not a number: {value!r}") from e

    if not rate.is_finite() or rate <= 0:
        raise ValueError(f"rate must be positive, got {rate}")
    return rate
