"""Derivation of product finder options from a product's variant combinations.

Chassis identity is a derived key: ``{chassis type id}_{sorted details joined by "|"}``,
with "no-type" / "no-details" standing in for missing parts. The same key
function is used by the variant filter; never build the key anywhere else.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from catalog.schemas import Chassis, VariantCombination

NO_TYPE = "no-type"
NO_DETAILS = "no-details"
UNKNOWN_CHASSIS_LABEL = "Unknown"


@dataclass(frozen=True)
class ChassisOption:
    """One distinct chassis observed across a product's variants.

    Attributes:
        key: Derived chassis key (see chassis_key)
        label: Type display name plus parenthesized details
        chassis_data: Chassis of the first variant seen with this key
    """
    key: str
    label: str
    chassis_data: Chassis


def chassis_key(chassis: Optional[Chassis]) -> str:
    """Derive the identity key of a chassis.

    Args:
        chassis: Chassis data of a variant (None for variants without one)

    Returns:
        Key such as "64ab_6x4|Euro 6" or "no-type_no-details"
    """
    type_id = NO_TYPE
    details = NO_DETAILS
    if chassis is not None:
        if chassis.chassis_type is not None and chassis.chassis_type.id:
            type_id = chassis.chassis_type.id
        if chassis.chassis_details:
            details = "|".join(sorted(chassis.chassis_details))
    return f"{type_id}_{details}"


def chassis_option_label(chassis: Chassis) -> str:
    """Type display name plus sorted details, e.g. "MAN TGS (6x4, Euro 6)"."""
    type_label = UNKNOWN_CHASSIS_LABEL
    if chassis.chassis_type is not None and chassis.chassis_type.display_name:
        type_label = chassis.chassis_type.display_name
    if chassis.chassis_details:
        return f"{type_label} ({', '.join(sorted(chassis.chassis_details))})"
    return type_label


def extract_chassis_options(variants: Optional[Iterable[VariantCombination]]) -> List[ChassisOption]:
    """Distinct chassis options in first-seen order.

    Variants without chassis data contribute no option. When several
    variants share a key, the first one's label and chassis data win.
    """
    options: Dict[str, ChassisOption] = {}
    for variant in variants or ():
        if variant.chassis_data is None:
            continue
        key = chassis_key(variant.chassis_data)
        if key not in options:
            options[key] = ChassisOption(
                key=key,
                label=chassis_option_label(variant.chassis_data),
                chassis_data=variant.chassis_data,
            )
    return list(options.values())


def extract_variant_options(variants: Optional[Iterable[VariantCombination]]) -> Dict[str, List[str]]:
    """Distinct values per variant category, each list sorted.

    Args:
        variants: Variant combinations of one product

    Returns:
        Mapping of category name to sorted distinct values
    """
    categories: Dict[str, Set[str]] = {}
    for variant in variants or ():
        for category, value in variant.variant_selections.items():
            categories.setdefault(category, set()).add(value)
    return {category: sorted(values) for category, values in categories.items()}


class VariantOptionCache:
    """Single-entry cache of derived options for the last variant list seen.

    The cache is reused only when the new list holds the very same variant
    objects in the same order; any change recomputes both option sets.
    """

    def __init__(self) -> None:
        self._source: Optional[Tuple[VariantCombination, ...]] = None
        self._chassis_options: List[ChassisOption] = []
        self._variant_options: Dict[str, List[str]] = {}

    def _refresh(self, variants: Optional[Sequence[VariantCombination]]) -> None:
        snapshot = tuple(variants or ())
        if self._source is not None and len(snapshot) == len(self._source) and all(
            new is old for new, old in zip(snapshot, self._source)
        ):
            return
        self._source = snapshot
        self._chassis_options = extract_chassis_options(snapshot)
        self._variant_options = extract_variant_options(snapshot)

    def chassis_options(self, variants: Optional[Sequence[VariantCombination]]) -> List[ChassisOption]:
        self._refresh(variants)
        return list(self._chassis_options)

    def variant_options(self, variants: Optional[Sequence[VariantCombination]]) -> Dict[str, List[str]]:
        self._refresh(variants)
        return {category: list(values) for category, values in self._variant_options.items()}
