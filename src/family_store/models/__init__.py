"""Models for the family store."""

from family_store.models.family import PARTITION_KEY_FIELD, Address, Child, Family, Parent, Pet
from family_store.models.outcome import EnsureResult, ItemResponse, ReadResult, ReadStatus

__all__ = [
    "PARTITION_KEY_FIELD",
    "Address",
    "Child",
    "EnsureResult",
    "Family",
    "ItemResponse",
    "Parent",
    "Pet",
    "ReadResult",
    "ReadStatus",
]
