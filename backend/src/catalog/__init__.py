"""Catalog domain module for catalogue records and variant combinations"""

from .schemas import (
    PRICE_ON_REQUEST,
    BodyType,
    CatalogueRecord,
    CataloguePage,
    Chassis,
    ChassisType,
    Pagination,
    Size,
    SizeType,
    VariantCombination,
)
from .display import chassis_label, featured_catalogues, price_label, size_label

__all__ = [
    "PRICE_ON_REQUEST",
    "BodyType",
    "CatalogueRecord",
    "CataloguePage",
    "Chassis",
    "ChassisType",
    "Pagination",
    "Size",
    "SizeType",
    "VariantCombination",
    "chassis_label",
    "featured_catalogues",
    "price_label",
    "size_label",
]
