from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from coupon_catalog.models import (
    Coupon,
    CouponCategory,
    CouponPayloadError,
    CouponStatus,
    DiscountType,
)


def _payload(**overrides):
    data = {
        "id": "c1",
        "code": " WELCOME20 ",
        "title": "Welcome offer",
        "category": "Service",
        "discountType": "PERCENT",
        "discountValue": 20,
        "maxDiscount": 500,
        "startDate": "2026-01-05T00:00:00.000Z",
        "endDate": "2026-03-31",
        "usageLimit": 100,
        "usageCount": 12,
        "status": "Active",
        "serviceName": "Haircut",
        "studioName": "",
    }
    data.update(overrides)
    return data


def test_from_payload_camel_case():
    coupon = Coupon.from_payload(_payload())
    assert coupon.code == "WELCOME20"
    assert coupon.category is CouponCategory.SERVICE
    assert coupon.discount_type is DiscountType.PERCENT
    assert coupon.discount_value == Decimal("20")
    assert coupon.max_discount == Decimal("500")
    assert coupon.start_date == date(2026, 1, 5)
    assert coupon.end_date == date(2026, 3, 31)
    assert coupon.status is CouponStatus.ACTIVE
    assert coupon.service_name == "Haircut"
    assert coupon.studio_name is None


def test_from_payload_snake_case_and_missing_optionals():
    coupon = Coupon.from_payload(
        {
            "id": 7,
            "code": "FLAT150",
            "category": "general",
            "discount_type": "flat",
            "discount_value": "150",
            "status": "draft",
        }
    )
    assert coupon.id == "7"
    assert coupon.usage_limit == 0
    assert coupon.is_unlimited
    assert coupon.max_discount is None
    assert coupon.start_date is None
    assert coupon.end_date is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"status": "Archived"},
        {"discountValue": -1},
        {"discountValue": "abc"},
        {"usageCount": -3},
        {"usageLimit": "many"},
        {"endDate": "31/03/2026"},
    ],
)
def test_from_payload_rejects_malformed(overrides):
    with pytest.raises(CouponPayloadError):
        Coupon.from_payload(_payload(**overrides))


def test_from_payload_requires_code():
    data = _payload()
    del data["code"]
    with pytest.raises(CouponPayloadError, match="code"):
        Coupon.from_payload(data)


def test_to_payload_uses_camel_case():
    coupon = Coupon.from_payload(_payload())
    payload = coupon.to_payload()
    assert payload["discountType"] == "Percent"
    assert payload["startDate"] == "2026-01-05"
    assert Coupon.from_payload(payload) == coupon


def test_coupon_is_immutable(make_coupon):
    coupon = make_coupon()
    with pytest.raises(AttributeError):
        coupon.usage_count = 5  # type: ignore[misc]
