"""Coupon catalog view: visibility, filtering and display formatting."""

__version__ = "0.1.0"
