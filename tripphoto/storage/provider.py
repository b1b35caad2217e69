class StorageProvider:
    """Persists named byte blobs; subclasses pick where.

    ``destination`` is the deployment-wide scope (a root directory or a remote
    folder prefix) and ``scope`` is the sanitized trip identifier. Both
    backends overwrite an existing artifact with the same logical name.
    """

    name = "base"

    def locate(self, logical_name: str, destination: str, scope: str) -> str:
        """Identifier that ``store`` would return for these arguments."""
        raise NotImplementedError

    def store(self, logical_name: str, data: bytes, destination: str, scope: str) -> str:
        raise NotImplementedError

    def read(self, identifier: str) -> bytes:
        raise NotImplementedError

    def exists(self, identifier: str) -> bool:
        raise NotImplementedError

    def delete(self, identifier: str) -> None:
        raise NotImplementedError
