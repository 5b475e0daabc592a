"""Product finder: option lists and filtered variants for one product page."""

from typing import Dict, List

from catalog.schemas import CatalogueRecord, VariantCombination
from variants.options import ChassisOption, VariantOptionCache
from variants.selection import VariantSelection


class ProductFinder:
    """Binds a catalogue record's variants to the shopper's selections.

    Option lists are derived once per variant list and reused while the
    shopper toggles filters.
    """

    def __init__(self, catalogue: CatalogueRecord):
        self.catalogue = catalogue
        self.selection = VariantSelection()
        self._options = VariantOptionCache()

    @property
    def variants(self) -> List[VariantCombination]:
        return list(self.catalogue.variants)

    @property
    def chassis_options(self) -> List[ChassisOption]:
        return self._options.chassis_options(self.catalogue.variants)

    @property
    def variant_options(self) -> Dict[str, List[str]]:
        return self._options.variant_options(self.catalogue.variants)

    @property
    def filtered_variants(self) -> List[VariantCombination]:
        return self.selection.apply(self.catalogue.variants)
