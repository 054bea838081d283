"""Coupon record and the closed vocabularies it is built from."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping


class CouponStatus(str, Enum):
    ACTIVE = "Active"
    EXPIRED = "Expired"
    DRAFT = "Draft"
    INACTIVE = "Inactive"


class CouponCategory(str, Enum):
    GENERAL = "General"
    SERVICE = "Service"
    STUDIO = "Studio"
    FIRST_BOOKING = "First Booking"
    SEASONAL = "Seasonal"


class DiscountType(str, Enum):
    FLAT = "Flat"
    PERCENT = "Percent"


class CouponPayloadError(ValueError):
    """Raised when an upstream coupon mapping cannot be turned into a record."""


def _lookup_enum(enum_cls: type[Enum], raw: Any) -> Any:
    if isinstance(raw, enum_cls):
        return raw
    text = str(raw or "").strip()
    for member in enum_cls:
        if text.lower() in (member.value.lower(), member.name.lower()):
            return member
    raise CouponPayloadError(f"unknown {enum_cls.__name__} value: {raw!r}")


def _parse_date(raw: Any) -> date | None:
    if raw in (None, ""):
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    text = str(raw).strip()
    try:
        # ISO timestamps from a JSON snapshot carry a time part and maybe "Z"
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError as exc:
        raise CouponPayloadError(f"invalid date: {raw!r}") from exc


def _parse_amount(raw: Any, field_name: str) -> Decimal:
    try:
        value = Decimal(str(raw))
    except InvalidOperation as exc:
        raise CouponPayloadError(f"{field_name} must be a number, got {raw!r}") from exc
    if not value.is_finite() or value < 0:
        raise CouponPayloadError(f"{field_name} must be a non-negative number, got {raw!r}")
    return value


def _parse_count(raw: Any, field_name: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise CouponPayloadError(f"{field_name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise CouponPayloadError(f"{field_name} must not be negative, got {raw!r}")
    return value


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


def _require(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    raise CouponPayloadError(f"missing required field: {keys[0]}")


def _optional_text(raw: Any) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


@dataclass(frozen=True, slots=True)
class Coupon:
    """Read-only snapshot of a coupon as handed over by the catalog owner.

    ``usage_limit == 0`` means unlimited. ``max_discount`` only caps
    PERCENT discounts. "Historical" is never stored here; see
    :mod:`coupon_catalog.services.visibility`.
    """

    id: str
    code: str
    title: str
    category: CouponCategory
    discount_type: DiscountType
    discount_value: Decimal
    status: CouponStatus
    usage_limit: int = 0
    usage_count: int = 0
    max_discount: Decimal | None = None
    start_date: date | None = None
    end_date: date | None = None
    service_name: str | None = None
    studio_name: str | None = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Coupon":
        max_discount = _pick(data, "maxDiscount", "max_discount")
        return cls(
            id=str(_require(data, "id")),
            code=str(_require(data, "code")).strip(),
            title=str(_pick(data, "title", default="")),
            category=_lookup_enum(CouponCategory, _require(data, "category")),
            discount_type=_lookup_enum(DiscountType, _require(data, "discountType", "discount_type")),
            discount_value=_parse_amount(
                _require(data, "discountValue", "discount_value"), "discountValue"
            ),
            status=_lookup_enum(CouponStatus, _require(data, "status")),
            usage_limit=_parse_count(_pick(data, "usageLimit", "usage_limit", default=0), "usageLimit"),
            usage_count=_parse_count(_pick(data, "usageCount", "usage_count", default=0), "usageCount"),
            max_discount=None if max_discount in (None, "") else _parse_amount(max_discount, "maxDiscount"),
            start_date=_parse_date(_pick(data, "startDate", "start_date")),
            end_date=_parse_date(_pick(data, "endDate", "end_date")),
            service_name=_optional_text(_pick(data, "serviceName", "service_name")),
            studio_name=_optional_text(_pick(data, "studioName", "studio_name")),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "code": self.code,
            "title": self.title,
            "category": self.category.value,
            "discountType": self.discount_type.value,
            "discountValue": str(self.discount_value),
            "maxDiscount": None if self.max_discount is None else str(self.max_discount),
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
            "usageLimit": self.usage_limit,
            "usageCount": self.usage_count,
            "status": self.status.value,
            "serviceName": self.service_name,
            "studioName": self.studio_name,
        }

    @property
    def is_unlimited(self) -> bool:
        return self.usage_limit == 0


__all__ = [
    "Coupon",
    "CouponCategory",
    "CouponPayloadError",
    "CouponStatus",
    "DiscountType",
]
