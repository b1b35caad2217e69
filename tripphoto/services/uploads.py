"""
Upload orchestration.

Decodes every photo in a request before storing any of them, then stores
them in a fixed order (odometer, cargo). A storage failure part way through
removes the artifacts this request newly created unless rollback is switched
off; an artifact that replaced an earlier one of the same name is kept.
"""
from typing import List, Optional, Tuple

import structlog

from ..errors import ErrorKind, StorageFailure, StorageUnavailable
from ..schemas.uploads import UploadRequest
from ..storage.provider import StorageProvider
from .image_codec import decode_image
from .validation import ValidatedUpload, validate_upload_request


logger = structlog.get_logger(__name__)

# Processing order is part of the response contract
PHOTO_FIELDS = (
    ("odometer_photo", "odometer"),
    ("cargo_photo", "cargo"),
)


def logical_filename(trip_num: str, kind: str) -> str:
    return f"{trip_num}_{kind}.jpg"


class UploadOrchestrator:
    def __init__(
        self,
        storage: Optional[StorageProvider],
        destination: Optional[str],
        rollback_on_failure: bool = True,
    ):
        self.storage = storage
        self.destination = destination
        self.rollback_on_failure = rollback_on_failure

    def _stage(self, upload: ValidatedUpload) -> List[Tuple[str, bytes]]:
        staged = []
        for field, kind in PHOTO_FIELDS:
            encoded = getattr(upload, field)
            if encoded is None:
                continue
            staged.append((logical_filename(upload.trip_num, kind), decode_image(encoded)))
        return staged

    def _rollback(self, stored: List[str]) -> None:
        for identifier in stored:
            try:
                self.storage.delete(identifier)
            except StorageFailure as e:
                logger.error("rollback_delete_failed", file_id=identifier, error=e.message)
        logger.warning("upload_rolled_back", file_ids=stored)

    def upload(self, req: UploadRequest) -> List[str]:
        upload = validate_upload_request(req)
        if not self.destination:
            raise StorageFailure(
                "STORAGE_DESTINATION is not configured",
                kind=ErrorKind.DESTINATION_NOT_CONFIGURED,
            )
        staged = self._stage(upload)
        if not staged:
            return []
        if self.storage is None:
            raise StorageUnavailable("Storage backend is not initialized")

        stored: List[str] = []
        # Only artifacts this request created are rolled back; replaced ones stay
        created: List[str] = []
        for filename, data in staged:
            try:
                target = self.storage.locate(filename, self.destination, upload.trip_num)
                replacing = self.storage.exists(target)
                file_id = self.storage.store(filename, data, self.destination, upload.trip_num)
            except StorageFailure as e:
                logger.error("photo_store_failed", filename=filename, error=e.message)
                if created and self.rollback_on_failure:
                    self._rollback(created)
                raise
            stored.append(file_id)
            if not replacing:
                created.append(file_id)
            logger.info("photo_stored", filename=filename, file_id=file_id, backend=self.storage.name)
        return stored
