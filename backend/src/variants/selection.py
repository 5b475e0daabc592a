"""Product finder selection state (selected chassis keys and category values)."""

from typing import Dict, List, Optional, Sequence, Set

from catalog.schemas import VariantCombination
from .filter import filter_variants


class VariantSelection:
    """Mutable finder selections for one product page.

    Selections keep insertion order so the UI can render chips in the
    order they were clicked. A category disappears when its last value
    is toggled off.
    """

    def __init__(self) -> None:
        self._chassis: List[str] = []
        self._values: Dict[str, List[str]] = {}

    @property
    def selected_chassis(self) -> List[str]:
        return list(self._chassis)

    @property
    def selected_values(self) -> Dict[str, List[str]]:
        return {category: list(values) for category, values in self._values.items()}

    @property
    def has_active_filters(self) -> bool:
        return bool(self._chassis) or bool(self._values)

    def is_chassis_selected(self, key: str) -> bool:
        return key in self._chassis

    def is_value_selected(self, category: str, value: str) -> bool:
        return value in self._values.get(category, ())

    def toggle_chassis(self, key: str) -> None:
        if key in self._chassis:
            self._chassis.remove(key)
        else:
            self._chassis.append(key)

    def toggle_value(self, category: str, value: str) -> None:
        values = self._values.setdefault(category, [])
        if value in values:
            values.remove(value)
            if not values:
                del self._values[category]
        else:
            values.append(value)

    def clear(self) -> None:
        self._chassis = []
        self._values = {}

    def apply(self, variants: Optional[Sequence[VariantCombination]]) -> List[VariantCombination]:
        """Filter variants with the current selections."""
        chassis_keys: Set[str] = set(self._chassis)
        category_values = {category: set(values) for category, values in self._values.items()}
        return filter_variants(variants, chassis_keys, category_values)
