"""Azure Authentication utilities.

Used when the Cosmos DB account is accessed with Azure AD instead of an
account key.
"""

import os

from azure import identity
from azure.identity import aio as identity_async

from utils.logging import logger

TRUTHY = ("true", "1", "t", "yes", "y")


def is_local() -> bool:
    return os.environ.get("IS_LOCAL", "false").lower() in TRUTHY


def get_azure_credential(do_async: bool = False):
    """Get the appropriate Azure credential based on the environment."""
    module = identity_async if do_async else identity

    if is_local():
        tenant_id = os.environ.get("AZURE_TENANT_ID")
        client_id = os.environ.get("AZURE_CLIENT_ID")
        client_secret = os.environ.get("AZURE_CLIENT_SECRET")

        if tenant_id and client_id and client_secret:
            logger.info("Using Service Principal authentication for local development")
            return module.ClientSecretCredential(tenant_id=tenant_id, client_id=client_id, client_secret=client_secret)

        logger.info("Using default Azure credential chain for local development")
        return module.DefaultAzureCredential()

    client_id = os.environ.get("AZURE_CLIENT_ID")
    if client_id:
        logger.info(f"Using User Managed Identity authentication with client ID: {client_id}")
        return module.ManagedIdentityCredential(client_id=client_id)

    logger.info("Using User Managed Identity authentication without client ID")
    return module.ManagedIdentityCredential()
