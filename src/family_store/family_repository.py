"""Family repository over a single Azure Cosmos DB container."""

from typing import Any, AsyncIterator, Dict, List, Optional

from azure.cosmos import exceptions
from azure.cosmos.aio import ContainerProxy

from family_store.exceptions import FamilyAlreadyExistsError, FamilyNotFoundError, FamilyServiceError
from family_store.models import PARTITION_KEY_FIELD, EnsureResult, Family, ItemResponse, ReadResult, ReadStatus
from utils.logging import logger

REQUEST_CHARGE_HEADER = "x-ms-request-charge"
LAST_NAME_QUERY = f"SELECT * FROM c WHERE c.{PARTITION_KEY_FIELD} = @last_name"


class RequestChargeRecorder:
    """Response hook accumulating the request units reported by the service."""

    def __init__(self) -> None:
        self.total = 0.0

    def __call__(self, headers: Optional[Dict[str, Any]], _result: Any = None) -> None:
        if not headers:
            return
        charge = headers.get(REQUEST_CHARGE_HEADER)
        if charge is not None:
            self.total += float(charge)


def to_service_error(error: exceptions.CosmosHttpResponseError, action: str) -> FamilyServiceError:
    """Map an SDK error onto the family store exception hierarchy."""
    detail = f"Failed to {action}: {error.message}"
    if isinstance(error, exceptions.CosmosResourceNotFoundError):
        return FamilyNotFoundError(detail, status_code=error.status_code)
    if isinstance(error, exceptions.CosmosResourceExistsError):
        return FamilyAlreadyExistsError(detail, status_code=error.status_code)
    return FamilyServiceError(detail, status_code=error.status_code)


class FamilyRepository:
    """Point operations and queries on family documents.

    Every point operation is addressed by (id, partition key). Writes are full
    document overwrites; no etag is sent so the last writer wins.
    """

    def __init__(self, container: ContainerProxy) -> None:
        self._container = container

    async def read_family(self, family_id: str, partition_key: str) -> ReadResult:
        """Point read a family. Service errors are reported in the result, never raised."""
        recorder = RequestChargeRecorder()
        try:
            document = await self._container.read_item(item=family_id, partition_key=partition_key, response_hook=recorder)
        except exceptions.CosmosResourceNotFoundError as e:
            logger.debug(f"Family {family_id} not found in partition {partition_key}")
            return ReadResult.not_found(detail=e.message)
        except exceptions.CosmosHttpResponseError as e:
            logger.error(f"Error reading family {family_id}: {e.status_code} {e.message}")
            return ReadResult.failure(status_code=e.status_code, detail=str(e.message))

        return ReadResult.found(Family.model_validate(document), request_charge=recorder.total)

    async def create_family(self, family: Family) -> ItemResponse:
        """Create a family document; the partition key is taken from its last name."""
        recorder = RequestChargeRecorder()
        try:
            document = await self._container.create_item(body=family.to_document(), response_hook=recorder)
        except exceptions.CosmosHttpResponseError as e:
            raise to_service_error(e, f"create family {family.id}") from e

        logger.info(f"Created family {family.id} ({recorder.total} RUs)")
        return ItemResponse(family=Family.model_validate(document), request_charge=recorder.total)

    async def ensure_family(self, family: Family) -> EnsureResult:
        """Create the family unless a point read finds it already stored.

        This is a read followed by a create, not an atomic upsert: a concurrent
        writer may create the same id in between, surfacing as
        FamilyAlreadyExistsError.
        """
        result = await self.read_family(family.id, family.partition_key)

        if result.status == ReadStatus.FOUND:
            return EnsureResult(family=result.family, request_charge=result.request_charge, created=False)
        elif result.status == ReadStatus.NOT_FOUND:
            response = await self.create_family(family)
            return EnsureResult(family=response.family, request_charge=response.request_charge, created=True)
        else:
            raise FamilyServiceError(f"Failed to read family {family.id}: {result.detail}", status_code=result.status_code)

    async def replace_family(self, family: Family) -> ItemResponse:
        """Overwrite the stored document with ``family``."""
        recorder = RequestChargeRecorder()
        try:
            document = await self._container.replace_item(item=family.id, body=family.to_document(), response_hook=recorder)
        except exceptions.CosmosHttpResponseError as e:
            raise to_service_error(e, f"replace family {family.id}") from e

        logger.info(f"Replaced family {family.id} ({recorder.total} RUs)")
        return ItemResponse(family=Family.model_validate(document), request_charge=recorder.total)

    async def delete_family(self, family_id: str, partition_key: str) -> float:
        """Delete a family and return the request units consumed."""
        recorder = RequestChargeRecorder()
        try:
            await self._container.delete_item(item=family_id, partition_key=partition_key, response_hook=recorder)
        except exceptions.CosmosHttpResponseError as e:
            raise to_service_error(e, f"delete family {family_id}") from e

        logger.info(f"Deleted family {family_id} from partition {partition_key}")
        return recorder.total

    async def iter_families(
        self,
        query: str,
        parameters: Optional[List[Dict[str, Any]]] = None,
        partition_key: Optional[str] = None,
        max_item_count: Optional[int] = None,
    ) -> AsyncIterator[Family]:
        """Yield query results page by page.

        The next page is requested only once the items of the current page
        have been consumed.
        """
        kwargs: Dict[str, Any] = {"query": query}
        if parameters:
            kwargs["parameters"] = parameters
        if partition_key is not None:
            kwargs["partition_key"] = partition_key
        if max_item_count is not None:
            kwargs["max_item_count"] = max_item_count

        try:
            pages = self._container.query_items(**kwargs).by_page()
            async for page in pages:
                async for document in page:
                    yield Family.model_validate(document)
        except exceptions.CosmosHttpResponseError as e:
            raise to_service_error(e, f"run query {query!r}") from e

    async def query_families(
        self,
        query: str,
        parameters: Optional[List[Dict[str, Any]]] = None,
        partition_key: Optional[str] = None,
        max_item_count: Optional[int] = None,
    ) -> List[Family]:
        """Run a query and drain every page before returning."""
        return [family async for family in self.iter_families(query, parameters, partition_key, max_item_count)]

    async def find_by_last_name(self, last_name: str, max_item_count: Optional[int] = None) -> List[Family]:
        """Return every family stored under ``last_name``."""
        logger.debug(f"Running query: {LAST_NAME_QUERY} with @last_name={last_name}")
        return await self.query_families(LAST_NAME_QUERY, parameters=[{"name": "@last_name", "value": last_name}], max_item_count=max_item_count)
