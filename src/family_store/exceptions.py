"""Custom exceptions for the family store module."""

from typing import Optional


class FamilyStoreError(Exception):
    """Base exception for family store errors."""

    pass


class FamilyServiceError(FamilyStoreError):
    """Raised when the database service rejects an operation."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is None:
            return message
        return f"{message} (status code {self.status_code})"


class FamilyNotFoundError(FamilyServiceError):
    """Raised when a family document, container or database does not exist."""

    pass


class FamilyAlreadyExistsError(FamilyServiceError):
    """Raised when creating a family whose id is already taken in its partition."""

    pass


class PartitionKeyMismatchError(FamilyStoreError):
    """Raised when an existing container is partitioned on another path."""

    pass


class ConfigurationError(FamilyStoreError):
    """Raised when the endpoint or credentials are missing."""

    pass
