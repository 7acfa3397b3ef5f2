"""Azure Configuration Provider.

Resolves configuration values from Azure App Configuration and secrets from
Azure Key Vault. Either store is optional: when ``APP_CONFIG_URI`` or
``KEY_VAULT_URI`` is unset the corresponding keys are read from the process
environment only.
"""

import asyncio
import os
from typing import Any, Dict, Optional, Set

from azure.appconfiguration.aio import AzureAppConfigurationClient
from azure.core.exceptions import ResourceNotFoundError
from azure.keyvault.secrets.aio import SecretClient

from utils.azure_auth import get_azure_credential
from utils.logging import logger
from utils.singleton import Singleton


class AzureConfigProvider(metaclass=Singleton):

    def __init__(self, app_config_keys: Set[str], key_vault_secrets: Set[str]):
        """Initialize the provider and load every requested key."""
        self.app_config_base_url: Optional[str] = os.environ.get("APP_CONFIG_URI")
        self.key_vault_url: Optional[str] = os.environ.get("KEY_VAULT_URI")

        self.config_values: Dict[str, Any] = {}
        self.secrets: Dict[str, Any] = {}

        if not (self.app_config_base_url or self.key_vault_url):
            logger.debug("No App Configuration or Key Vault configured, using environment variables")
            return

        # Runs before any event loop exists (module import time)
        loop = asyncio.new_event_loop()
        try:
            loop.run_until_complete(self._async_init(app_config_keys, key_vault_secrets))
        finally:
            loop.close()

    async def _async_init(self, app_config_keys: Set[str], key_vault_secrets: Set[str]):
        """Load configuration values and secrets concurrently."""
        credential = get_azure_credential(do_async=True)
        tasks = []

        async with credential:
            if self.app_config_base_url:
                app_config_client = AzureAppConfigurationClient(base_url=self.app_config_base_url, credential=credential)
                tasks += [self._load_value(app_config_client, key, is_secret=False) for key in app_config_keys]
            else:
                app_config_client = None

            if self.key_vault_url:
                key_vault_client = SecretClient(vault_url=self.key_vault_url, credential=credential)
                tasks += [self._load_value(key_vault_client, name, is_secret=True) for name in key_vault_secrets]
            else:
                key_vault_client = None

            try:
                if tasks:
                    await asyncio.gather(*tasks)
            finally:
                for client in (app_config_client, key_vault_client):
                    if client is not None:
                        await client.close()

    async def _load_value(self, client: Any, key: str, is_secret: bool):
        """Load one value from either App Configuration or Key Vault."""
        store_dict = self.secrets if is_secret else self.config_values
        source_name = "secret" if is_secret else "configuration value"

        try:
            if is_secret:
                result = await client.get_secret(name=key)
            else:
                result = await client.get_configuration_setting(key=key)
            store_dict[key] = result.value
            logger.debug(f"Loaded {source_name}: {key}")
        except ResourceNotFoundError:
            logger.debug(f"{source_name.capitalize()} {key} not stored remotely, falling back to environment")
        except Exception as e:
            logger.error(f"Error loading {source_name} {key}: {str(e)}")

    def _get_value(self, key: str, store_dict: Dict[str, Any], env_key: str, value_type: str, default: Any = None) -> Any:
        value = store_dict.get(key, os.environ.get(env_key, default))
        if value is None:
            raise ValueError(f"{value_type.capitalize()} not found: {key}")
        return value

    def get_config(self, key: str, default: Any = None) -> Any:
        return self._get_value(key, self.config_values, key, "configuration key", default)

    def get_optional_config(self, key: str) -> Optional[Any]:
        """Return a configuration value, or None when it is set nowhere."""
        return self.config_values.get(key, os.environ.get(key))

    def get_secret(self, key: str, env_key: Optional[str] = None, default: Any = None) -> Any:
        """Return a secret; Key Vault names use dashes so the env fallback may differ."""
        return self._get_value(key, self.secrets, env_key or key, "secret", default)
