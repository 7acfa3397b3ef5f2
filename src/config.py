"""Cosmos DB demo settings."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from constants import (
    COSMOS_CONNECTION_VERIFY,
    COSMOS_CONTAINER_ID,
    COSMOS_DATABASE_ID,
    COSMOS_ENDPOINT,
    COSMOS_KEY,
    COSMOS_OFFER_THROUGHPUT,
    COSMOS_PARTITION_KEY_PATH,
    COSMOS_RETRY_BACKOFF_MAX,
    COSMOS_RETRY_TOTAL,
    COSMOS_USE_AAD,
    DEMO_WAIT_FOR_KEYPRESS,
    LOGGING_LEVEL,
)


class Settings(BaseSettings):
    """Cosmos DB demo settings."""

    # Defaults come from constants; FAMILY_DEMO_* variables override them
    model_config = SettingsConfigDict(env_prefix="FAMILY_DEMO_")

    # Cosmos DB account
    cosmos_endpoint: str = COSMOS_ENDPOINT
    cosmos_key: Optional[str] = COSMOS_KEY
    cosmos_use_aad: bool = COSMOS_USE_AAD
    cosmos_connection_verify: bool = COSMOS_CONNECTION_VERIFY
    cosmos_retry_total: Optional[int] = COSMOS_RETRY_TOTAL
    cosmos_retry_backoff_max: Optional[int] = COSMOS_RETRY_BACKOFF_MAX

    # Demo resources
    database_id: str = COSMOS_DATABASE_ID
    container_id: str = COSMOS_CONTAINER_ID
    partition_key_path: str = COSMOS_PARTITION_KEY_PATH
    offer_throughput: Optional[int] = COSMOS_OFFER_THROUGHPUT

    # Console
    wait_for_keypress: bool = DEMO_WAIT_FOR_KEYPRESS

    # Logging
    logging_level: str = LOGGING_LEVEL


settings = Settings()
