"""Pydantic schemas for catalog domain (catalogue records, variant combinations)

Records arrive from the content API as camelCase JSON. Every optional field
degrades to an empty default instead of failing validation, so one sloppy
record never takes the whole catalogue page down with it.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Sentinel price meaning "price on request"
PRICE_ON_REQUEST = "ask"


def coerce_text(value: Any) -> str:
    """Coerce a loosely typed scalar to text ("" for None and containers)"""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _coerce_id(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


def _coerce_items(value: Any) -> Tuple[Any, ...]:
    """Keep only mapping/model items of a list-like field"""
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, (dict, BaseModel)))


class CatalogueModel(BaseModel):
    """Base for all catalogue schemas: immutable, alias-aware, extra keys ignored"""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class TypeReference(CatalogueModel):
    """Reference to a catalogue type document (body, size or chassis type)"""
    id: Optional[str] = Field(None, alias="_id")
    name: str = ""
    short_name: str = Field("", alias="shortName")

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, v: Any) -> Optional[str]:
        return _coerce_id(v)

    @field_validator("name", "short_name", mode="before")
    @classmethod
    def normalize_text(cls, v: Any) -> str:
        return coerce_text(v)

    @property
    def display_name(self) -> str:
        return self.name or self.short_name


class BodyType(TypeReference):
    """Body type of a catalogue record (e.g. "Dump Truck")"""


class SizeType(TypeReference):
    """Standard size type"""


class ChassisType(TypeReference):
    """Chassis type; its id takes part in chassis identity"""


class Size(CatalogueModel):
    """Size entry of a catalogue record"""
    size_type: Optional[SizeType] = Field(None, alias="sizeType")
    size_custom: str = Field("", alias="sizeCustom")

    @field_validator("size_type", mode="before")
    @classmethod
    def normalize_size_type(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, BaseModel)) else None

    @field_validator("size_custom", mode="before")
    @classmethod
    def normalize_custom(cls, v: Any) -> str:
        return coerce_text(v)


class Chassis(CatalogueModel):
    """Chassis type plus its ordered detail list"""
    chassis_type: Optional[ChassisType] = Field(None, alias="chassisType")
    chassis_details: Tuple[str, ...] = Field(default_factory=tuple, alias="chassisDetails")

    @field_validator("chassis_type", mode="before")
    @classmethod
    def normalize_chassis_type(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, BaseModel)) else None

    @field_validator("chassis_details", mode="before")
    @classmethod
    def normalize_details(cls, v: Any) -> Tuple[str, ...]:
        if not isinstance(v, (list, tuple)):
            return ()
        return tuple(coerce_text(detail) for detail in v if detail is not None)


class VariantCombination(CatalogueModel):
    """One independently priced configuration of a catalogue record.

    Attributes:
        combination_id: Identity, unique within the owning record
        chassis_data: Optional chassis reference and detail list
        variant_selections: Category name -> selected value
        price: Price text; "ask" means price on request
        base_model: True for the record's base configuration
    """
    combination_id: str = Field("", alias="combinationId")
    chassis_data: Optional[Chassis] = Field(None, alias="chassisData")
    variant_selections: Dict[str, str] = Field(default_factory=dict, alias="variantSelections")
    price: str = ""
    base_model: bool = Field(False, alias="baseModel")

    @field_validator("combination_id", "price", mode="before")
    @classmethod
    def normalize_text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("chassis_data", mode="before")
    @classmethod
    def normalize_chassis(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, BaseModel)) else None

    @field_validator("variant_selections", mode="before")
    @classmethod
    def normalize_selections(cls, v: Any) -> Dict[str, str]:
        """Drop selections whose value is missing or not a scalar"""
        if not isinstance(v, dict):
            return {}
        selections = {}
        for category, value in v.items():
            text = coerce_text(value)
            if text:
                selections[coerce_text(category)] = text
        return selections

    @field_validator("base_model", mode="before")
    @classmethod
    def normalize_base_model(cls, v: Any) -> bool:
        return bool(v)

    @property
    def is_price_on_request(self) -> bool:
        return self.price == PRICE_ON_REQUEST


class CatalogueRecord(CatalogueModel):
    """One sellable product template as returned by the content API"""
    id: str = Field("", alias="_id")
    body_type: Optional[BodyType] = Field(None, alias="bodyType")
    article: str = ""
    lead_time: str = Field("", alias="leadTime")
    notes: str = ""
    featured: bool = False
    front_image: str = Field("", alias="frontImage")
    carousel_images: Tuple[str, ...] = Field(default_factory=tuple, alias="carouselImages")
    sizes: Tuple[Size, ...] = Field(default_factory=tuple)
    chassis: Tuple[Chassis, ...] = Field(default_factory=tuple)
    variants: Tuple[VariantCombination, ...] = Field(default_factory=tuple, alias="shopCatalogue")

    @field_validator("id", "article", "lead_time", "notes", "front_image", mode="before")
    @classmethod
    def normalize_text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("body_type", mode="before")
    @classmethod
    def normalize_body_type(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, BaseModel)) else None

    @field_validator("featured", mode="before")
    @classmethod
    def normalize_featured(cls, v: Any) -> bool:
        """Only a literal true marks a record as featured"""
        return v is True

    @field_validator("carousel_images", mode="before")
    @classmethod
    def normalize_images(cls, v: Any) -> Tuple[str, ...]:
        if not isinstance(v, (list, tuple)):
            return ()
        return tuple(img for img in v if isinstance(img, str) and img.strip())

    @field_validator("sizes", "chassis", "variants", mode="before")
    @classmethod
    def normalize_items(cls, v: Any) -> Tuple[Any, ...]:
        return _coerce_items(v)

    @property
    def body_type_name(self) -> str:
        return self.body_type.name if self.body_type else ""

    @property
    def images(self) -> Tuple[str, ...]:
        """Front image followed by carousel images"""
        if self.front_image:
            return (self.front_image,) + self.carousel_images
        return self.carousel_images

    def to_api(self) -> Dict[str, Any]:
        """Serialize back to the content API's JSON shape"""
        return self.model_dump(by_alias=True, mode="json")


class Pagination(BaseModel):
    """Pagination block of a catalogue list response"""
    page: int = 1
    limit: int = 10
    total: int = 0
    pages: int = 0


class CataloguePage(BaseModel):
    """One page of catalogue records"""
    records: Tuple[CatalogueRecord, ...] = ()
    pagination: Pagination = Field(default_factory=Pagination)
