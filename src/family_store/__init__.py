"""Family store package."""

from family_store.exceptions import (
    ConfigurationError,
    FamilyAlreadyExistsError,
    FamilyNotFoundError,
    FamilyServiceError,
    FamilyStoreError,
    PartitionKeyMismatchError,
)
from family_store.family_repository import FamilyRepository
from family_store.models import Address, Child, EnsureResult, Family, ItemResponse, Parent, Pet, ReadResult, ReadStatus
from family_store.provisioning import delete_database, ensure_container, ensure_database

__all__ = [
    # Repository and provisioning
    "FamilyRepository",
    "delete_database",
    "ensure_container",
    "ensure_database",
    # Models
    "Address",
    "Child",
    "EnsureResult",
    "Family",
    "ItemResponse",
    "Parent",
    "Pet",
    "ReadResult",
    "ReadStatus",
    # Exceptions
    "ConfigurationError",
    "FamilyAlreadyExistsError",
    "FamilyNotFoundError",
    "FamilyServiceError",
    "FamilyStoreError",
    "PartitionKeyMismatchError",
]
