"""Coupon visibility, filtering and presentation services."""

from coupon_catalog.services.catalog import CatalogView, build_catalog_view
from coupon_catalog.services.filters import ALL, FilterSelection, filter_coupons
from coupon_catalog.services.presentation import DisplayRecord, format_for_display
from coupon_catalog.services.visibility import classify_visibility, is_live

__all__ = [
    "ALL",
    "CatalogView",
    "DisplayRecord",
    "FilterSelection",
    "build_catalog_view",
    "classify_visibility",
    "filter_coupons",
    "format_for_display",
    "is_live",
]
