"""Family document models.

Field aliases carry the document layout stored in the container: ``id`` plus
PascalCase property names. ``LastName`` is the partition key.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

PARTITION_KEY_FIELD = "LastName"


class CosmosModel(BaseModel):
    """Base model for documents and sub-documents stored in Cosmos DB."""

    # Server metadata (_rid, _etag, _ts, ...) is dropped on validation
    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the JSON-compatible dict sent to the service."""
        return self.model_dump(mode="json", by_alias=True)


class Pet(CosmosModel):
    given_name: str = Field(alias="GivenName")


class Parent(CosmosModel):
    family_name: Optional[str] = Field(default=None, alias="FamilyName")
    first_name: str = Field(alias="FirstName")


class Child(CosmosModel):
    family_name: Optional[str] = Field(default=None, alias="FamilyName")
    first_name: str = Field(alias="FirstName")
    gender: str = Field(alias="Gender")
    grade: int = Field(alias="Grade")
    pets: List[Pet] = Field(default_factory=list, alias="Pets")


class Address(CosmosModel):
    state: str = Field(alias="State")
    county: str = Field(alias="County")
    city: str = Field(alias="City")


class Family(CosmosModel):
    """A family document, partitioned by last name."""

    id: str = Field(description="Document id, unique within its partition")
    last_name: str = Field(alias=PARTITION_KEY_FIELD, description="Partition key value")
    parents: List[Parent] = Field(default_factory=list, alias="Parents")
    children: List[Child] = Field(default_factory=list, alias="Children")
    address: Address = Field(alias="Address")
    is_registered: bool = Field(default=False, alias="IsRegistered")

    @property
    def partition_key(self) -> str:
        return self.last_name

    def __str__(self) -> str:
        return self.model_dump_json(by_alias=True)
