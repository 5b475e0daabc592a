"""Display labels for catalogue records and variants"""

from typing import Iterable, List, Optional

from .schemas import CatalogueRecord, Chassis, Size, PRICE_ON_REQUEST

PRICE_ON_REQUEST_LABEL = "Ask for Price"


def size_label(size: Optional[Size]) -> str:
    """Size type name plus optional custom label, e.g. "Large - 12m3"."""
    if size is None:
        return "Unknown"
    type_label = size.size_type.display_name if size.size_type else ""
    if size.size_custom:
        return f"{type_label} - {size.size_custom}"
    return type_label or "Not specified"


def chassis_label(chassis: Optional[Chassis], default: str = "Not specified") -> str:
    """Chassis type name plus parenthesized details, e.g. "MAN TGS (6x4, Euro 6)"."""
    if chassis is None:
        return "Unknown"
    type_label = chassis.chassis_type.display_name if chassis.chassis_type else ""
    details = f" ({', '.join(chassis.chassis_details)})" if chassis.chassis_details else ""
    return (type_label + details) or default


def price_label(price: str) -> str:
    return PRICE_ON_REQUEST_LABEL if price == PRICE_ON_REQUEST else price


def featured_catalogues(records: Optional[Iterable[CatalogueRecord]]) -> List[CatalogueRecord]:
    """Records flagged as featured, in input order"""
    return [record for record in records or () if record.featured]
