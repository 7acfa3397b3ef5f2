"""Database and container provisioning."""

from typing import Optional

from azure.cosmos import PartitionKey, exceptions
from azure.cosmos.aio import ContainerProxy, CosmosClient, DatabaseProxy

from family_store.exceptions import PartitionKeyMismatchError
from family_store.family_repository import to_service_error
from utils.logging import logger


async def ensure_database(client: CosmosClient, database_id: str, offer_throughput: Optional[int] = None) -> DatabaseProxy:
    """Create the database unless it already exists."""
    try:
        database = await client.create_database_if_not_exists(id=database_id, offer_throughput=offer_throughput)
    except exceptions.CosmosHttpResponseError as e:
        raise to_service_error(e, f"create database {database_id}") from e

    logger.info(f"Database ready: {database.id}")
    return database


async def ensure_container(
    database: DatabaseProxy,
    container_id: str,
    partition_key_path: str,
    offer_throughput: Optional[int] = None,
) -> ContainerProxy:
    """Create the container unless it exists; an existing one must share the partition key path."""
    try:
        container = await database.create_container_if_not_exists(
            id=container_id,
            partition_key=PartitionKey(path=partition_key_path),
            offer_throughput=offer_throughput,
        )
        properties = await container.read()
    except exceptions.CosmosHttpResponseError as e:
        raise to_service_error(e, f"create container {container_id}") from e

    paths = properties.get("partitionKey", {}).get("paths", [])
    if paths != [partition_key_path]:
        raise PartitionKeyMismatchError(f"Container {container_id} is partitioned on {paths}, expected [{partition_key_path!r}]")

    logger.info(f"Container ready: {container.id} (partition key {partition_key_path})")
    return container


async def delete_database(client: CosmosClient, database_id: str) -> None:
    """Delete a database together with its containers and documents."""
    try:
        await client.delete_database(database_id)
    except exceptions.CosmosHttpResponseError as e:
        raise to_service_error(e, f"delete database {database_id}") from e

    logger.info(f"Deleted database {database_id}")
