"""Variant options and filtering for the product finder"""

from .options import (
    ChassisOption,
    VariantOptionCache,
    chassis_key,
    chassis_option_label,
    extract_chassis_options,
    extract_variant_options,
)
from .filter import filter_variants, variant_passes
from .selection import VariantSelection

__all__ = [
    "ChassisOption",
    "VariantOptionCache",
    "chassis_key",
    "chassis_option_label",
    "extract_chassis_options",
    "extract_variant_options",
    "filter_variants",
    "variant_passes",
    "VariantSelection",
]
