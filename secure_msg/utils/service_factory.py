"""Factory for creating the history store and its storage backend."""

import logging

from secure_msg.config import SecureMsgConfig
from secure_msg.services import HistoryService, JsonFileStorage, MemoryStorage

logger = logging.getLogger(__name__)


def create_history_service(config: SecureMsgConfig, persist: bool = True) -> HistoryService:
    """Create a history service and load its persisted log.

    Args:
        config: Configuration supplying the storage path and key
        persist: Use the JSON file at config.storage_path; otherwise keep
            history in memory for this process only

    Returns:
        A loaded HistoryService
    """
    if persist:
        storage = JsonFileStorage(config.storage_path)
    else:
        logger.debug("History persistence disabled, using in-memory storage")
        storage = MemoryStorage()

    history = HistoryService(storage, storage_key=config.history_storage_key)
    history.load()
    return history
