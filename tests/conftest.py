"""In-memory doubles of the azure.cosmos.aio proxies used by the tests."""

import copy
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest
from azure.cosmos import exceptions

from config import Settings

REQUEST_CHARGES = {
    "read_item": "1.0",
    "create_item": "6.29",
    "replace_item": "10.67",
    "delete_item": "6.1",
    "query_items": "2.85",
}


def not_found(message: str = "Entity with the specified id does not exist in the system.") -> exceptions.CosmosResourceNotFoundError:
    return exceptions.CosmosResourceNotFoundError(status_code=404, message=message)


class FakePage:
    """One page of query results."""

    def __init__(self, documents: List[Dict[str, Any]]) -> None:
        self._documents = documents

    async def __aiter__(self):
        for document in self._documents:
            yield document


class FakeItemPaged:
    """Paged query result recording when each page is requested."""

    def __init__(self, pages: List[List[Dict[str, Any]]], fetch_log: List[int]) -> None:
        self._pages = pages
        self._fetch_log = fetch_log

    def by_page(self, continuation_token: Optional[str] = None):
        return self._iter_pages()

    async def _iter_pages(self):
        for number, documents in enumerate(self._pages):
            self._fetch_log.append(number)
            yield FakePage(documents)


class FakeContainer:
    """Container proxy storing documents keyed by (id, partition key)."""

    def __init__(self, container_id: str, partition_key_path: str = "/LastName", page_size: int = 1) -> None:
        self.id = container_id
        self.partition_key_path = partition_key_path
        self.page_size = page_size
        self.documents: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self.calls: List[Tuple[str, Any]] = []
        self.failures: Dict[str, Exception] = {}
        self.page_fetches: List[int] = []
        self.queries: List[Dict[str, Any]] = []

    @property
    def partition_field(self) -> str:
        return self.partition_key_path.lstrip("/")

    def _enter(self, operation: str, response_hook: Optional[Callable], *args: Any) -> None:
        self.calls.append((operation, args))
        if operation in self.failures:
            raise self.failures[operation]
        if response_hook is not None:
            response_hook({"x-ms-request-charge": REQUEST_CHARGES[operation]}, None)

    def _stored(self, document: Dict[str, Any]) -> Dict[str, Any]:
        stored = copy.deepcopy(document)
        stored.update({"_rid": "rid==", "_self": "dbs/rid==/colls/rid==/docs/rid==/", "_etag": '"etag"', "_attachments": "attachments/", "_ts": 1700000000})
        return stored

    async def read(self, **kwargs: Any) -> Dict[str, Any]:
        return {"id": self.id, "partitionKey": {"paths": [self.partition_key_path], "kind": "Hash"}}

    async def read_item(self, item: str, partition_key: str, response_hook: Optional[Callable] = None, **kwargs: Any) -> Dict[str, Any]:
        self._enter("read_item", response_hook, item, partition_key)
        if (item, partition_key) not in self.documents:
            raise not_found()
        return copy.deepcopy(self.documents[(item, partition_key)])

    async def create_item(self, body: Dict[str, Any], response_hook: Optional[Callable] = None, **kwargs: Any) -> Dict[str, Any]:
        key = (body["id"], body[self.partition_field])
        self._enter("create_item", response_hook, key)
        if key in self.documents:
            raise exceptions.CosmosResourceExistsError(status_code=409, message="Entity with the specified id already exists in the system.")
        self.documents[key] = self._stored(body)
        return copy.deepcopy(self.documents[key])

    async def replace_item(self, item: str, body: Dict[str, Any], response_hook: Optional[Callable] = None, **kwargs: Any) -> Dict[str, Any]:
        key = (item, body[self.partition_field])
        self._enter("replace_item", response_hook, key)
        if key not in self.documents:
            raise not_found()
        self.documents[key] = self._stored(body)
        return copy.deepcopy(self.documents[key])

    async def delete_item(self, item: str, partition_key: str, response_hook: Optional[Callable] = None, **kwargs: Any) -> None:
        self._enter("delete_item", response_hook, item, partition_key)
        if (item, partition_key) not in self.documents:
            raise not_found()
        del self.documents[(item, partition_key)]

    def query_items(
        self,
        query: str,
        parameters: Optional[List[Dict[str, Any]]] = None,
        partition_key: Optional[str] = None,
        max_item_count: Optional[int] = None,
        **kwargs: Any,
    ) -> FakeItemPaged:
        """Supports equality filters on the partition key field passed as ``@last_name``."""
        self.calls.append(("query_items", (query,)))
        self.queries.append({"query": query, "parameters": parameters, "partition_key": partition_key, "max_item_count": max_item_count})
        if "query_items" in self.failures:
            raise self.failures["query_items"]

        values = {parameter["name"]: parameter["value"] for parameter in parameters or []}
        documents = [copy.deepcopy(document) for document in self.documents.values()]
        if "@last_name" in values:
            documents = [document for document in documents if document[self.partition_field] == values["@last_name"]]
        if partition_key is not None:
            documents = [document for document in documents if document[self.partition_field] == partition_key]

        size = max_item_count or self.page_size
        pages = [documents[start : start + size] for start in range(0, len(documents), size)]
        return FakeItemPaged(pages, self.page_fetches)


class FakeDatabase:
    """Database proxy holding containers by id."""

    def __init__(self, database_id: str) -> None:
        self.id = database_id
        self.containers: Dict[str, FakeContainer] = {}
        self.failures: Dict[str, Exception] = {}

    async def create_container_if_not_exists(self, id: str, partition_key: Any, offer_throughput: Optional[int] = None, **kwargs: Any) -> FakeContainer:
        if "create_container_if_not_exists" in self.failures:
            raise self.failures["create_container_if_not_exists"]
        if id not in self.containers:
            self.containers[id] = FakeContainer(id, partition_key["paths"][0])
        return self.containers[id]


class FakeCosmosClient:
    """Client double usable as an async context manager, counting how often it is closed."""

    def __init__(self, url: str = "https://localhost:8081/", credential: Any = None, **options: Any) -> None:
        self.url = url
        self.credential = credential
        self.options = options
        self.databases: Dict[str, FakeDatabase] = {}
        self.failures: Dict[str, Exception] = {}
        self.close_count = 0

    async def __aenter__(self) -> "FakeCosmosClient":
        if "connect" in self.failures:
            raise self.failures["connect"]
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        self.close_count += 1

    async def create_database_if_not_exists(self, id: str, offer_throughput: Optional[int] = None, **kwargs: Any) -> FakeDatabase:
        if "create_database_if_not_exists" in self.failures:
            raise self.failures["create_database_if_not_exists"]
        if id not in self.databases:
            self.databases[id] = FakeDatabase(id)
        return self.databases[id]

    async def delete_database(self, database: Any, **kwargs: Any) -> None:
        database_id = database if isinstance(database, str) else database.id
        if "delete_database" in self.failures:
            raise self.failures["delete_database"]
        if database_id not in self.databases:
            raise not_found(f"Database {database_id} does not exist")
        del self.databases[database_id]


@pytest.fixture
def container() -> FakeContainer:
    return FakeContainer("FamilyContainer")


@pytest.fixture
def cosmos_client() -> FakeCosmosClient:
    return FakeCosmosClient()


@pytest.fixture
def demo_settings() -> Settings:
    """Settings pointing at the default demo resources, never waiting for input."""
    return Settings(
        cosmos_endpoint="https://localhost:8081/",
        cosmos_key="test-key",
        cosmos_use_aad=False,
        database_id="FamilyDatabase",
        container_id="FamilyContainer",
        partition_key_path="/LastName",
        offer_throughput=None,
        wait_for_keypress=False,
    )
