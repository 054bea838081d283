"""Status and category filters applied on top of the live coupon set."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from coupon_catalog.i18n import gettext
from coupon_catalog.models import Coupon, CouponCategory, CouponStatus
from coupon_catalog.services.visibility import live_coupons

logger = logging.getLogger(__name__)

ALL = "All"

# Expired and inactive coupons never reach the live view, so they are not offered.
SELECTABLE_STATUSES: tuple[CouponStatus, ...] = tuple(
    status
    for status in CouponStatus
    if status not in (CouponStatus.EXPIRED, CouponStatus.INACTIVE)
)


@dataclass(frozen=True, slots=True)
class FilterChoice:
    value: str
    label: str


def _normalize(raw: CouponStatus | CouponCategory | str | None, enum_cls: type[Enum]) -> str:
    if raw is None:
        return ALL
    if isinstance(raw, enum_cls):
        return raw.value
    text = str(raw).strip()
    if not text or text.lower() == ALL.lower():
        return ALL
    for member in enum_cls:
        if text.lower() in (member.value.lower(), member.name.lower()):
            return member.value
    return text


@dataclass(frozen=True, slots=True)
class FilterSelection:
    """Caller-held filter state; each side is ``ALL`` or one enum value.

    Enum members, member names and any letter case are normalized on
    construction, so ``FilterSelection(status="draft")`` equals
    ``FilterSelection(status="Draft")``.
    """

    status: str = ALL
    category: str = ALL

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", _normalize(self.status, CouponStatus))
        object.__setattr__(self, "category", _normalize(self.category, CouponCategory))

    @classmethod
    def from_raw(
        cls,
        status: CouponStatus | str | None = ALL,
        category: CouponCategory | str | None = ALL,
    ) -> "FilterSelection":
        return cls(status=status, category=category)  # type: ignore[arg-type]

    @property
    def is_wildcard(self) -> bool:
        return self.status == ALL and self.category == ALL


def matches_selection(coupon: Coupon, selection: FilterSelection) -> bool:
    if selection.status != ALL and coupon.status.value != selection.status:
        return False
    if selection.category != ALL and coupon.category.value != selection.category:
        return False
    return True


def filter_coupons(
    coupons: Iterable[Coupon],
    status: CouponStatus | str | None = ALL,
    category: CouponCategory | str | None = ALL,
) -> list[Coupon]:
    """Return live coupons matching both criteria, in input order."""

    selection = FilterSelection.from_raw(status, category)
    live = live_coupons(coupons)
    result = [coupon for coupon in live if matches_selection(coupon, selection)]
    logger.debug(
        "filter_coupons status=%s category=%s live=%s matched=%s",
        selection.status,
        selection.category,
        len(live),
        len(result),
    )
    return result


def status_filter_choices(locale: str = "en") -> tuple[FilterChoice, ...]:
    choices = [FilterChoice(ALL, gettext("filters.all_status", locale))]
    for status in SELECTABLE_STATUSES:
        choices.append(FilterChoice(status.value, gettext(f"status.{status.name}", locale)))
    return tuple(choices)


def category_filter_choices(locale: str = "en") -> tuple[FilterChoice, ...]:
    choices = [FilterChoice(ALL, gettext("filters.all_categories", locale))]
    for category in CouponCategory:
        choices.append(FilterChoice(category.value, category.value))
    return tuple(choices)


__all__ = [
    "ALL",
    "FilterChoice",
    "FilterSelection",
    "SELECTABLE_STATUSES",
    "category_filter_choices",
    "filter_coupons",
    "matches_selection",
    "status_filter_choices",
]
