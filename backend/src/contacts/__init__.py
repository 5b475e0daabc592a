"""Remembered contact identity for inquiry forms"""

from .store import ContactInfoStore, RememberedContact, DEFAULT_CONTACT_STORAGE_KEY

__all__ = ["ContactInfoStore", "RememberedContact", "DEFAULT_CONTACT_STORAGE_KEY"]
