# store/factory.py

"""
Builds the configured `EntityStore` backend.
"""

import logging
import os

from core.config import Settings
from store.base import EntityStore
from store.memory_store import InMemoryStore
from store.sql_store import SqlStore

logger = logging.getLogger(__name__)


def create_store(settings: Settings) -> EntityStore:
    """
    Creates the entity store selected by `settings.store_backend`.

    Args:
        settings (Settings): Application settings.

    Returns:
        - `SqlStore` for "sql", connected to `settings.database_url`.
        - `InMemoryStore` for "memory", empty and non-durable.
        - `InMemoryStore` for "json", loaded from and saving to `settings.data_dir`.

    Raises:
        StoreError: If the database cannot be opened or the snapshot cannot be read.
    """
    match settings.store_backend:
        case "sql":
            logger.info("Opening SQL store at %s", settings.database_url)
            return SqlStore(settings.database_url, echo=settings.sql_echo)

        case "json":
            dir_path = os.path.abspath(os.path.expanduser(settings.data_dir))
            os.makedirs(dir_path, exist_ok=True)
            logger.info("Loading JSON snapshot store from %s", dir_path)
            return InMemoryStore.load(dir_path)

        case _:
            logger.info("Using non-durable in-memory store")
            return InMemoryStore()
