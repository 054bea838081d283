"""Classify, filter and format a coupon snapshot for the management view."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from coupon_catalog.config import settings
from coupon_catalog.i18n import gettext, resolve_locale
from coupon_catalog.models import Coupon
from coupon_catalog.services.filters import (
    FilterChoice,
    FilterSelection,
    category_filter_choices,
    filter_coupons,
    status_filter_choices,
)
from coupon_catalog.services.presentation import DateFormatter, DisplayRecord, format_many
from coupon_catalog.services.visibility import live_coupons

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogView:
    rows: tuple[DisplayRecord, ...]
    selection: FilterSelection
    total: int
    live_count: int
    status_choices: tuple[FilterChoice, ...]
    category_choices: tuple[FilterChoice, ...]
    empty_message: str

    @property
    def is_empty(self) -> bool:
        return not self.rows


def build_catalog_view(
    coupons: Sequence[Coupon],
    selection: FilterSelection | None = None,
    *,
    currency: str | None = None,
    locale: str | None = None,
    date_formatter: DateFormatter | None = None,
    unlimited_marker: str | None = None,
) -> CatalogView:
    """Run the whole pipeline over ``coupons`` for the given filter selection."""

    selection = selection or FilterSelection()
    locale = resolve_locale(locale or settings.LOCALE)
    live = live_coupons(coupons)
    matched = filter_coupons(live, selection.status, selection.category)
    rows = format_many(
        matched,
        currency=currency,
        locale=locale,
        date_formatter=date_formatter,
        unlimited_marker=unlimited_marker,
    )
    logger.debug(
        "catalog view built total=%s live=%s rows=%s locale=%s",
        len(coupons),
        len(live),
        len(rows),
        locale,
    )
    return CatalogView(
        rows=tuple(rows),
        selection=selection,
        total=len(coupons),
        live_count=len(live),
        status_choices=status_filter_choices(locale),
        category_choices=category_filter_choices(locale),
        empty_message=gettext("coupon.empty", locale),
    )


__all__ = ["CatalogView", "build_catalog_view"]
