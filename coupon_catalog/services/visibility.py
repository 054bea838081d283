"""Live versus historical classification of coupons.

A coupon is historical when it is expired, inactive or has used up its
redemption limit. The flag is recomputed on every call and never stored.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from coupon_catalog.config import settings
from coupon_catalog.models import Coupon, CouponStatus

logger = logging.getLogger(__name__)

_HISTORY_STATUSES = frozenset({CouponStatus.EXPIRED, CouponStatus.INACTIVE})


class HistoryReason(str, Enum):
    EXPIRED = "expired"
    INACTIVE = "inactive"
    USAGE_EXHAUSTED = "usage_exhausted"


def is_usage_exhausted(coupon: Coupon) -> bool:
    return coupon.usage_limit > 0 and coupon.usage_count >= coupon.usage_limit


def has_usage_overflow(coupon: Coupon) -> bool:
    """True when more redemptions were recorded than the limit allows."""

    return coupon.usage_limit > 0 and coupon.usage_count > coupon.usage_limit


def historical_reason(coupon: Coupon) -> HistoryReason | None:
    """Return the first rule that moves ``coupon`` to history, if any."""

    if coupon.status is CouponStatus.EXPIRED:
        return HistoryReason.EXPIRED
    if coupon.status is CouponStatus.INACTIVE:
        return HistoryReason.INACTIVE
    if is_usage_exhausted(coupon):
        return HistoryReason.USAGE_EXHAUSTED
    return None


def classify_visibility(coupon: Coupon) -> bool:
    """Return ``True`` when the coupon is historical (hidden from the main view)."""

    return coupon.status in _HISTORY_STATUSES or is_usage_exhausted(coupon)


def is_live(coupon: Coupon) -> bool:
    return not classify_visibility(coupon)


def warn_usage_overflow(coupon: Coupon) -> None:
    if settings.WARN_ON_USAGE_OVERFLOW and has_usage_overflow(coupon):
        logger.warning(
            "coupon usage overflow id=%s code=%s count=%s limit=%s",
            coupon.id,
            coupon.code,
            coupon.usage_count,
            coupon.usage_limit,
        )


def live_coupons(coupons: Iterable[Coupon]) -> list[Coupon]:
    result: list[Coupon] = []
    for coupon in coupons:
        warn_usage_overflow(coupon)
        if is_live(coupon):
            result.append(coupon)
    return result


def historical_coupons(coupons: Iterable[Coupon]) -> list[Coupon]:
    return [coupon for coupon in coupons if classify_visibility(coupon)]


__all__ = [
    "HistoryReason",
    "classify_visibility",
    "has_usage_overflow",
    "historical_coupons",
    "historical_reason",
    "is_live",
    "is_usage_exhausted",
    "live_coupons",
    "warn_usage_overflow",
]
