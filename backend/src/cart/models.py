"""Cart line schema and line identity derivation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog.schemas import CatalogueRecord, VariantCombination


def cart_line_id(catalogue: CatalogueRecord, variant: Optional[VariantCombination] = None) -> str:
    """Derive the cart line id of a (product, variant) pair.

    Returns:
        "{catalogue id}-{combination id}" for variants,
        "catalogue-{catalogue id}" for the record itself
    """
    if variant is not None:
        return f"{catalogue.id}-{variant.combination_id}"
    return f"catalogue-{catalogue.id}"


class CartLine(BaseModel):
    """One row of the price-inquiry cart.

    Catalogue and variant are snapshots taken when the line was created;
    later changes to the source records don't reach the cart.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    catalogue_id: str = Field(..., alias="catalogueId")
    catalogue: CatalogueRecord
    variant: Optional[VariantCombination] = None
    quantity: int = Field(..., ge=1)
    added_at: datetime = Field(..., alias="addedAt")

    @property
    def variant_combination_id(self) -> Optional[str]:
        if self.variant is None or not self.variant.combination_id:
            return None
        return self.variant.combination_id
