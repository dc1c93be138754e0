import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

import dotenv
from cachetools import LRUCache

from dbxclient.config.constants.service import DropboxEnv, config_node_constants

dotenv.load_dotenv()

ConfigValue = Union[str, int, float, bool, dict, list, None]


class KeyValueStore(ABC):
    """Minimal async key/value store the configuration service reads from"""

    @abstractmethod
    async def get_key(self, key: str) -> ConfigValue:
        pass

    @abstractmethod
    async def create_key(self, key: str, value: ConfigValue, overwrite: bool = True) -> None:
        pass

    @abstractmethod
    async def delete_key(self, key: str) -> bool:
        pass


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary backed store, used when no external store is wired in"""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = dict(initial or {})

    async def get_key(self, key: str) -> ConfigValue:
        return self._data.get(key)

    async def create_key(self, key: str, value: ConfigValue, overwrite: bool = True) -> None:
        if not overwrite and key in self._data:
            raise KeyError(f"Key {key} already exists")
        self._data[key] = value

    async def delete_key(self, key: str) -> bool:
        return self._data.pop(key, None) is not None


class ConfigurationService:
    """Service to manage configuration using a key/value store with caching."""

    def __init__(self, logger, key_value_store: Optional[KeyValueStore] = None) -> None:
        self.logger = logger
        self.logger.debug("🔧 Initializing ConfigurationService")

        self.cache = LRUCache(maxsize=1000)
        self.logger.debug("📦 Initialized LRU cache with max size 1000")

        self.store = key_value_store or InMemoryKeyValueStore()
        self.logger.debug("✅ ConfigurationService initialized successfully")

    async def get_config(self, key: str, default: ConfigValue = None, use_cache: bool = True) -> ConfigValue:
        """Get configuration value with LRU cache and environment variable fallback"""
        try:
            if use_cache and key in self.cache:
                self.logger.debug("📦 Cache hit for key: %s", key)
                return self.cache[key]

            value = await self.store.get_key(key)
            if value is None:
                env_fallback = self._get_env_fallback(key)
                if env_fallback is not None:
                    self.logger.debug("📦 Using environment variable fallback for key: %s", key)
                    self.cache[key] = env_fallback
                    return env_fallback

                self.logger.debug("📦 Cache miss for key: %s", key)
                return default
            self.cache[key] = value
            return value
        except Exception as e:
            self.logger.error("❌ Failed to get config %s: %s", key, str(e))
            env_fallback = self._get_env_fallback(key)
            if env_fallback is not None:
                self.logger.debug("📦 Using environment variable fallback due to error for key: %s", key)
                return env_fallback
            return default

    def _get_env_fallback(self, key: str) -> Union[dict, None]:
        """Get environment variable fallback for specific configuration keys"""
        if key == config_node_constants.DROPBOX.value:
            access_token = os.getenv(DropboxEnv.ACCESS_TOKEN.value)
            if access_token:
                timeout = os.getenv(DropboxEnv.TIMEOUT.value)
                return {
                    "auth": {
                        "authType": "ACCESS_TOKEN",
                        "accessToken": access_token,
                    },
                    "asMemberId": os.getenv(DropboxEnv.AS_MEMBER_ID.value),
                    "domain": os.getenv(DropboxEnv.DOMAIN.value),
                    "timeout": float(timeout) if timeout else None,
                    "verbose": os.getenv(DropboxEnv.VERBOSE.value, "").lower() in ("1", "true", "yes"),
                }
        return None

    async def set_config(self, key: str, value: ConfigValue) -> bool:
        """Set configuration value"""
        try:
            await self.store.create_key(key, value, overwrite=True)
        except Exception as e:
            self.logger.error("❌ Failed to set config %s: %s", key, str(e))
            return False
        self.cache[key] = value
        self.logger.debug("✅ Successfully set config for key: %s", key)
        return True

    async def delete_config(self, key: str) -> bool:
        """Delete configuration value"""
        try:
            success = await self.store.delete_key(key)
        except Exception as e:
            self.logger.error("❌ Failed to delete config %s: %s", key, str(e))
            return False

        self.cache.pop(key, None)
        if not success:
            self.logger.error("❌ Failed to delete config for key: %s", key)
        return success

    def clear_cache(self) -> None:
        """Clear the entire in-memory LRU cache."""
        self.cache.clear()
        self.logger.info("📦 In-memory configuration cache cleared")
