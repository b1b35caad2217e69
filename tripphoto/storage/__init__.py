from typing import Optional

import structlog

from ..config import Settings, StorageBackend
from .provider import StorageProvider
from .local_provider import LocalStorageProvider
from .blob_provider import BlobStorageProvider


logger = structlog.get_logger(__name__)


def build_storage_provider(settings: Settings) -> Optional[StorageProvider]:
    """
    Construct the single storage provider for this process.
    Returns None when the backend cannot be initialized; the app keeps serving
    routes that do not need storage and uploads answer with StorageUnavailable.
    """
    backend = StorageBackend(settings.storage_provider)
    try:
        if backend is StorageBackend.BLOB:
            provider: StorageProvider = BlobStorageProvider(
                settings.azure_blob_connection, settings.azure_blob_container
            )
        else:
            provider = LocalStorageProvider()
    except Exception as e:
        logger.warning("storage_init_failed", backend=backend.value, error=str(e))
        return None
    logger.info("storage_initialized", backend=backend.value)
    return provider


__all__ = [
    "StorageProvider",
    "LocalStorageProvider",
    "BlobStorageProvider",
    "build_storage_provider",
]
