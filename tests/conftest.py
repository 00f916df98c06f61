import pytest
from fastapi.testclient import TestClient

from students_api.core.config import Settings
from students_api.core.exceptions import StorageError
from students_api.main import create_app
from students_api.storage.base import Storage
from students_api.storage.sqlite import SqliteStorage


class BrokenStorage(Storage):
    """Backend whose every call fails like a dead database."""

    def create_student(self, name, email, age):
        raise StorageError("insert error: disk I/O error")

    def get_student_by_id(self, student_id):
        raise StorageError("query error: disk I/O error")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CONFIG_PATH", "ENV", "STORAGE_PATH", "HTTP_SERVER__ADDR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        env="test",
        storage_path=str(tmp_path / "students.db"),
        http_server={"addr": "localhost:0"},
    )


@pytest.fixture
def storage(settings):
    storage = SqliteStorage(settings.storage_path)
    yield storage
    storage.close()


@pytest.fixture
def client(settings, storage):
    with TestClient(create_app(settings, storage)) as client:
        yield client


@pytest.fixture
def broken_client(settings):
    with TestClient(create_app(settings, BrokenStorage())) as client:
        yield client
