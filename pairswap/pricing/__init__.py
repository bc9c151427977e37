"""Pricing curves for two-asset pools."""

from pairswap.pricing.base import PricingCurve
from pairswap.pricing.constant_product import BPS_DENOMINATOR, ConstantProductCurve

__all__ = [
    "PricingCurve",
    "ConstantProductCurve",
    "BPS_DENOMINATOR",
]
