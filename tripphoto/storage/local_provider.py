"""
Local filesystem storage provider.
Writes each photo to <destination>/<trip>/<logical name>.
"""
from pathlib import Path

from ..errors import ErrorKind, StorageFailure
from .provider import StorageProvider


def _single_component(value: str, what: str) -> str:
    if not value or value in (".", "..") or "/" in value or "\\" in value:
        raise StorageFailure(f"Refusing unsafe {what}: {value!r}", kind=ErrorKind.WRITE_FAILED)
    return value


class LocalStorageProvider(StorageProvider):
    """Local filesystem storage provider."""

    name = "local"

    def locate(self, logical_name: str, destination: str, scope: str) -> str:
        folder = Path(destination) / _single_component(scope, "scope")
        return str(folder / _single_component(logical_name, "file name"))

    def store(self, logical_name: str, data: bytes, destination: str, scope: str) -> str:
        path = Path(self.locate(logical_name, destination, scope))
        folder = path.parent
        try:
            folder.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise StorageFailure(f"Failed to write {path}: {e}")
        return str(path)

    def read(self, identifier: str) -> bytes:
        try:
            return Path(identifier).read_bytes()
        except OSError as e:
            raise StorageFailure(f"Failed to read {identifier}: {e}")

    def exists(self, identifier: str) -> bool:
        return Path(identifier).is_file()

    def delete(self, identifier: str) -> None:
        try:
            Path(identifier).unlink(missing_ok=True)
        except OSError as e:
            raise StorageFailure(f"Failed to delete {identifier}: {e}")
