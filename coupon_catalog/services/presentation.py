"""Display values for a single coupon row.

Nothing here mutates the coupon: every call builds a fresh
:class:`DisplayRecord` from the record and the display settings
(currency symbol, locale, date formatter, unlimited marker).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Callable, Iterable

from coupon_catalog.config import settings
from coupon_catalog.i18n import format_date, gettext, resolve_locale
from coupon_catalog.models import Coupon, CouponCategory, CouponStatus, DiscountType

DateFormatter = Callable[[date], str]


class BadgeStyle(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    MUTED = "muted"


BADGE_STYLES: dict[CouponStatus, BadgeStyle] = {
    CouponStatus.ACTIVE: BadgeStyle.POSITIVE,
    CouponStatus.EXPIRED: BadgeStyle.NEGATIVE,
    CouponStatus.DRAFT: BadgeStyle.NEUTRAL,
    CouponStatus.INACTIVE: BadgeStyle.MUTED,
}


@dataclass(frozen=True, slots=True)
class Redemption:
    ratio: float
    label: str
    unlimited: bool

    @property
    def percent(self) -> float:
        return self.ratio * 100


@dataclass(frozen=True, slots=True)
class DisplayRecord:
    id: str
    code: str
    title: str
    category: CouponCategory
    associations: tuple[str, ...]
    discount_text: str
    discount_caption: str | None
    validity: tuple[str, str]
    redemption: Redemption
    status: CouponStatus
    status_label: str
    badge: BadgeStyle


def format_number(value: Decimal | float | int) -> str:
    """Render an amount without a trailing ``.0`` (``150.0`` -> ``150``)."""

    number = Decimal(str(value))
    if number == number.to_integral_value():
        return str(number.quantize(Decimal(1)))
    return format(number.normalize(), "f")


def badge_style(status: CouponStatus) -> BadgeStyle:
    return BADGE_STYLES[status]


def discount_text(coupon: Coupon, currency: str, locale: str) -> str:
    if coupon.discount_type is DiscountType.FLAT:
        amount = f"{currency}{format_number(coupon.discount_value)}"
    else:
        amount = f"{format_number(coupon.discount_value)}%"
    return gettext("coupon.discount_off", locale, amount=amount)


def discount_caption(coupon: Coupon, currency: str, locale: str) -> str | None:
    # A zero cap is treated as absent.
    if not coupon.max_discount:
        return None
    amount = f"{currency}{format_number(coupon.max_discount)}"
    return gettext("coupon.up_to", locale, amount=amount)


def validity_lines(coupon: Coupon, locale: str, date_formatter: DateFormatter) -> tuple[str, str]:
    missing = gettext("coupon.not_available", locale)
    start = date_formatter(coupon.start_date) if coupon.start_date else missing
    end = date_formatter(coupon.end_date) if coupon.end_date else missing
    return (
        gettext("coupon.start", locale, date=start),
        gettext("coupon.end", locale, date=end),
    )


def redemption(coupon: Coupon, unlimited_marker: str | None = None) -> Redemption:
    """Progress of redemptions against the limit, clamped to ``[0, 1]``.

    A zero limit means unlimited: the ratio is reported as ``0`` and the
    label carries the unlimited marker instead of the limit.
    """

    if coupon.usage_limit == 0:
        marker = unlimited_marker or settings.UNLIMITED_MARKER
        return Redemption(ratio=0.0, label=f"{coupon.usage_count}/{marker}", unlimited=True)
    ratio = min(max(coupon.usage_count / coupon.usage_limit, 0.0), 1.0)
    return Redemption(
        ratio=ratio,
        label=f"{coupon.usage_count}/{coupon.usage_limit}",
        unlimited=False,
    )


def associations(coupon: Coupon) -> tuple[str, ...]:
    return tuple(name for name in (coupon.service_name, coupon.studio_name) if name)


def format_for_display(
    coupon: Coupon,
    *,
    currency: str | None = None,
    locale: str | None = None,
    date_formatter: DateFormatter | None = None,
    unlimited_marker: str | None = None,
) -> DisplayRecord:
    """Build the display record for one live coupon."""

    currency = currency or settings.CURRENCY_SYMBOL
    locale = resolve_locale(locale or settings.LOCALE)
    formatter = date_formatter or (lambda value: format_date(value, locale))
    return DisplayRecord(
        id=coupon.id,
        code=coupon.code,
        title=coupon.title,
        category=coupon.category,
        associations=associations(coupon),
        discount_text=discount_text(coupon, currency, locale),
        discount_caption=discount_caption(coupon, currency, locale),
        validity=validity_lines(coupon, locale, formatter),
        redemption=redemption(coupon, unlimited_marker),
        status=coupon.status,
        status_label=gettext(f"status.{coupon.status.name}", locale),
        badge=badge_style(coupon.status),
    )


def format_many(
    coupons: Iterable[Coupon],
    *,
    currency: str | None = None,
    locale: str | None = None,
    date_formatter: DateFormatter | None = None,
    unlimited_marker: str | None = None,
) -> list[DisplayRecord]:
    return [
        format_for_display(
            coupon,
            currency=currency,
            locale=locale,
            date_formatter=date_formatter,
            unlimited_marker=unlimited_marker,
        )
        for coupon in coupons
    ]


__all__ = [
    "BADGE_STYLES",
    "BadgeStyle",
    "DisplayRecord",
    "Redemption",
    "associations",
    "badge_style",
    "discount_caption",
    "discount_text",
    "format_for_display",
    "format_many",
    "format_number",
    "redemption",
    "validity_lines",
]
