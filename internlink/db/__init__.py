"""
Database module - repository construction.

build_storage() is called once by create_app(); the result lives on
app.state.storage for the lifetime of the process.
"""
import logging

from internlink.core.config import Settings
from internlink.db.match_store import InMemoryMatchScoreStore, MatchScoreStore
from internlink.db.memory import MemStorage
from internlink.db.sql import SqlMatchScoreStore, create_db_engine

logger = logging.getLogger(__name__)


def build_match_store(settings: Settings) -> MatchScoreStore:
    """Pick the match score backend named by settings.match_store_backend."""
    if settings.match_store_backend == "sql":
        store = SqlMatchScoreStore(create_db_engine(settings.database_url, echo=settings.debug))
        store.init_schema()
        return store
    return InMemoryMatchScoreStore()


def build_storage(settings: Settings) -> MemStorage:
    storage = MemStorage(match_scores=build_match_store(settings))
    logger.info("Storage ready (match scores: %s)", settings.match_store_backend)
    return storage


__all__ = [
    "MemStorage",
    "MatchScoreStore",
    "InMemoryMatchScoreStore",
    "SqlMatchScoreStore",
    "build_match_store",
    "build_storage",
]
