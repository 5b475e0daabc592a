"""Narrowing of a product's variant combinations by finder selections.

Semantics:
- chassis: OR over the selected chassis keys (no keys -> no constraint)
- categories: AND across selected categories, OR within a category's values
- a variant without a value for a selected category is filtered out
"""

from typing import Collection, Iterable, List, Mapping, Optional

from catalog.schemas import VariantCombination
from .options import chassis_key


def variant_passes(
    variant: VariantCombination,
    selected_chassis_keys: Collection[str],
    selected_variants: Mapping[str, Collection[str]],
) -> bool:
    """Check one variant against the chassis and category clauses."""
    if selected_chassis_keys and chassis_key(variant.chassis_data) not in selected_chassis_keys:
        return False

    for category, selected_values in selected_variants.items():
        value = variant.variant_selections.get(category)
        if not value or value not in selected_values:
            return False

    return True


def filter_variants(
    variants: Optional[Iterable[VariantCombination]],
    selected_chassis_keys: Optional[Collection[str]] = None,
    selected_variants: Optional[Mapping[str, Collection[str]]] = None,
) -> List[VariantCombination]:
    """Return the variants matching the current selections, input order kept.

    Args:
        variants: Variant combinations of one product
        selected_chassis_keys: Derived chassis keys (see options.chassis_key)
        selected_variants: Category name -> selected values

    Returns:
        Matching variants; all of them when nothing is selected
    """
    variants = list(variants or ())
    selected_chassis_keys = selected_chassis_keys or ()
    selected_variants = selected_variants or {}

    if not selected_chassis_keys and not selected_variants:
        return variants

    return [
        variant for variant in variants
        if variant_passes(variant, selected_chassis_keys, selected_variants)
    ]
