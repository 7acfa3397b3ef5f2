"""Cosmos DB client session."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from azure.cosmos.aio import CosmosClient

from config import Settings
from family_store.exceptions import ConfigurationError
from utils.azure_auth import get_azure_credential
from utils.logging import logger


def client_options(settings: Settings) -> Dict[str, Any]:
    """Transport options passed to the client; retry settings left unset keep the SDK defaults."""
    options: Dict[str, Any] = {"connection_verify": settings.cosmos_connection_verify}
    if settings.cosmos_retry_total is not None:
        options["retry_total"] = settings.cosmos_retry_total
    if settings.cosmos_retry_backoff_max is not None:
        options["retry_backoff_max"] = settings.cosmos_retry_backoff_max
    return options


@asynccontextmanager
async def open_client(settings: Settings) -> AsyncIterator[CosmosClient]:
    """Connect to the account and close the client when the block exits, whatever happened inside it."""
    if not settings.cosmos_endpoint:
        raise ConfigurationError("Cosmos DB endpoint is not configured")

    options = client_options(settings)
    logger.info(f"Connecting to Cosmos DB at {settings.cosmos_endpoint}")

    if settings.cosmos_use_aad:
        async with get_azure_credential(do_async=True) as credential:
            async with CosmosClient(settings.cosmos_endpoint, credential=credential, **options) as client:
                yield client
    else:
        if not settings.cosmos_key:
            raise ConfigurationError("Cosmos DB key is not configured and Azure AD authentication is disabled")
        async with CosmosClient(settings.cosmos_endpoint, credential=settings.cosmos_key, **options) as client:
            yield client

    logger.info("Cosmos DB client closed")
