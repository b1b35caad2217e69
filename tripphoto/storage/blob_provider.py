from typing import Optional

from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.storage.blob import BlobServiceClient, ContentSettings

from ..errors import ConfigurationError, ErrorKind, StorageFailure
from .provider import StorageProvider


class BlobStorageProvider(StorageProvider):
    """Azure Blob Storage provider.

    Objects land at ``<destination>/<logical name>`` inside the container and
    the blob name is returned as the identifier. Uploads overwrite, so a
    re-submitted photo replaces the previous object instead of duplicating it.
    """

    name = "blob"

    def __init__(self, connection_string: Optional[str], container: Optional[str]) -> None:
        if not connection_string or not container:
            raise ConfigurationError("AZURE_BLOB_CONNECTION and AZURE_BLOB_CONTAINER must be set")
        self._service = BlobServiceClient.from_connection_string(connection_string)
        self._container = container

    def _client(self, key: str):
        return self._service.get_blob_client(self._container, key.lstrip("/"))

    def locate(self, logical_name: str, destination: str, scope: str) -> str:
        prefix = destination.strip("/")
        return f"{prefix}/{logical_name}" if prefix else logical_name

    def store(self, logical_name: str, data: bytes, destination: str, scope: str) -> str:
        key = self.locate(logical_name, destination, scope)
        try:
            self._client(key).upload_blob(
                data,
                overwrite=True,
                content_settings=ContentSettings(content_type="image/jpeg"),
            )
        except AzureError as e:
            raise StorageFailure(f"Failed to upload {key}: {e}", kind=ErrorKind.WRITE_FAILED)
        return key

    def read(self, identifier: str) -> bytes:
        try:
            return self._client(identifier).download_blob().readall()
        except AzureError as e:
            raise StorageFailure(f"Failed to download {identifier}: {e}")

    def exists(self, identifier: str) -> bool:
        try:
            return self._client(identifier).exists()
        except AzureError as e:
            raise StorageFailure(f"Failed to check {identifier}: {e}")

    def delete(self, identifier: str) -> None:
        try:
            self._client(identifier).delete_blob()
        except ResourceNotFoundError:
            pass
        except AzureError as e:
            raise StorageFailure(f"Failed to delete {identifier}: {e}")
