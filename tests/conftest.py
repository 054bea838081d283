"""Test configuration helpers."""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from coupon_catalog import i18n  # noqa: E402
from coupon_catalog.models import Coupon, CouponCategory, CouponStatus, DiscountType  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_locale_cache():
    i18n.clear_cache()
    yield
    i18n.clear_cache()


@pytest.fixture
def make_coupon() -> Callable[..., Coupon]:
    counter = {"n": 0}

    def _factory(**overrides: Any) -> Coupon:
        counter["n"] += 1
        fields: dict[str, Any] = {
            "id": f"cpn-{counter['n']}",
            "code": f"SAVE{counter['n']}",
            "title": "Test coupon",
            "category": CouponCategory.GENERAL,
            "discount_type": DiscountType.FLAT,
            "discount_value": Decimal("100"),
            "status": CouponStatus.ACTIVE,
            "usage_limit": 100,
            "usage_count": 0,
        }
        fields.update(overrides)
        return Coupon(**fields)

    return _factory
