"""Storefront facade for the presentation layer"""

from .product_finder import ProductFinder
from .service import Storefront
from .factory import build_storefront

__all__ = ["ProductFinder", "Storefront", "build_storefront"]
