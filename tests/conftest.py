import base64
import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("ENABLE_METRICS", "false")

import pytest
from fastapi.testclient import TestClient

from tripphoto.config import Settings
from tripphoto.errors import StorageFailure
from tripphoto.main import create_app
from tripphoto.storage.provider import StorageProvider


ODOMETER_BYTES = b"\xff\xd8\xff\xe0odometer-jpeg\xff\xd9"
CARGO_BYTES = b"\xff\xd8\xff\xe0cargo-jpeg\xff\xd9"


def b64(data: bytes, prefix: str = "") -> str:
    return prefix + base64.b64encode(data).decode("ascii")


class InMemoryStorageProvider(StorageProvider):
    name = "memory"

    def __init__(self, fail_on=(), fail_deletes=False):
        self.objects = {}
        self.calls = []
        self.deleted = []
        self.fail_on = set(fail_on)
        self.fail_deletes = fail_deletes

    def locate(self, logical_name, destination, scope):
        return f"{destination}/{scope}/{logical_name}"

    def store(self, logical_name, data, destination, scope):
        self.calls.append((logical_name, destination, scope))
        if logical_name in self.fail_on:
            raise StorageFailure(f"simulated failure for {logical_name}")
        key = self.locate(logical_name, destination, scope)
        self.objects[key] = data
        return key

    def read(self, identifier):
        return self.objects[identifier]

    def exists(self, identifier):
        return identifier in self.objects

    def delete(self, identifier):
        self.deleted.append(identifier)
        if self.fail_deletes:
            raise StorageFailure(f"simulated delete failure for {identifier}")
        self.objects.pop(identifier, None)


@pytest.fixture()
def make_settings(tmp_path):
    def _make(**overrides):
        values = {
            "JWT_SECRET": "test-secret",
            "STORAGE_DESTINATION": str(tmp_path / "photos"),
            "ENABLE_METRICS": False,
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture()
def memory_storage():
    return InMemoryStorageProvider()


@pytest.fixture()
def make_client(make_settings):
    def _make(storage=None, use_configured_storage=False, **overrides):
        settings = make_settings(**overrides)
        if use_configured_storage:
            app = create_app(settings)
        else:
            app = create_app(settings, storage=storage)
        return TestClient(app)

    return _make


@pytest.fixture()
def client(make_client, memory_storage):
    return make_client(storage=memory_storage)


def bearer(client: TestClient, username: str = "budi") -> dict:
    resp = client.post("/api/get-jwt", json={"username": username, "empCode": "E001", "site": "SGI053"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}
