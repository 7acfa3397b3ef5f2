"""Constants for the application."""

from typing import Set

from dotenv import load_dotenv

from utils.azure_config import AzureConfigProvider

# Load environment variables from .env file
load_dotenv()

# Local Cosmos DB emulator endpoint and its published well-known key
EMULATOR_ENDPOINT = "https://localhost:8081/"
EMULATOR_KEY = "C2y6yDjf5/R+ob0N8A7Cgv30VRDJIWEHLM+4QDU5DE2nQ9nDuVTqobD4b8mGGyPMbIZnqyMsEcaGQy67XIw/Jw=="

APP_CONFIG_KEYS: Set[str] = {
    "LOGGING_LEVEL",
    "COSMOS_ENDPOINT",
    "COSMOS_USE_AAD",
    "COSMOS_CONNECTION_VERIFY",
    "COSMOS_DATABASE_ID",
    "COSMOS_CONTAINER_ID",
    "COSMOS_PARTITION_KEY_PATH",
    "COSMOS_OFFER_THROUGHPUT",
    "COSMOS_RETRY_TOTAL",
    "COSMOS_RETRY_BACKOFF_MAX",
    "DEMO_WAIT_FOR_KEYPRESS",
}

KEY_VAULT_SECRETS: Set[str] = {"cosmos-primary-key"}

config = AzureConfigProvider(
    app_config_keys=APP_CONFIG_KEYS,
    key_vault_secrets=KEY_VAULT_SECRETS,
)

LOGGING_LEVEL = config.get_config("LOGGING_LEVEL", "DEBUG")

# Cosmos DB account
COSMOS_ENDPOINT = config.get_config("COSMOS_ENDPOINT", EMULATOR_ENDPOINT)
COSMOS_KEY = config.get_secret("cosmos-primary-key", env_key="COSMOS_KEY", default=EMULATOR_KEY)
COSMOS_USE_AAD = config.get_config("COSMOS_USE_AAD", "false")
COSMOS_CONNECTION_VERIFY = config.get_config("COSMOS_CONNECTION_VERIFY", "true")
COSMOS_RETRY_TOTAL = config.get_optional_config("COSMOS_RETRY_TOTAL")
COSMOS_RETRY_BACKOFF_MAX = config.get_optional_config("COSMOS_RETRY_BACKOFF_MAX")

# Demo resources
COSMOS_DATABASE_ID = config.get_config("COSMOS_DATABASE_ID", "FamilyDatabase")
COSMOS_CONTAINER_ID = config.get_config("COSMOS_CONTAINER_ID", "FamilyContainer")
COSMOS_PARTITION_KEY_PATH = config.get_config("COSMOS_PARTITION_KEY_PATH", "/LastName")
COSMOS_OFFER_THROUGHPUT = config.get_optional_config("COSMOS_OFFER_THROUGHPUT")

DEMO_WAIT_FOR_KEYPRESS = config.get_config("DEMO_WAIT_FOR_KEYPRESS", "true")
