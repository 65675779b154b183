import pytest
from fastapi.testclient import TestClient

from clinical_concepts_api.app.core.config import Settings
from clinical_concepts_api.app.core.db import init_db
from clinical_concepts_api.app.main import create_app
from clinical_concepts_api.app.services.catalog_service import CatalogService
from clinical_concepts_api.app.services.concept_store import ConceptStore


@pytest.fixture
def db_path(tmp_path):
    """Fresh, migrated SQLite file per test."""
    path = str(tmp_path / "concepts.db")
    init_db(path)
    return path


@pytest.fixture
def store(db_path):
    return ConceptStore(db_path)


@pytest.fixture
def write_csv(tmp_path):
    """Write a tabular resource and return its absolute path."""
    def _write(content, name="data.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def service(store):
    return CatalogService(store)


@pytest.fixture
def make_client(tmp_path):
    """Build a TestClient for an app backed by a temporary database.

    The client is entered as a context manager so that the startup
    hook (migrations, optional seeding) runs.
    """
    clients = []

    def _make(csv_resource="data.csv", load_seed_on_startup=False):
        settings = Settings(
            database_url=str(tmp_path / "api.db"),
            csv_resource=csv_resource,
            load_seed_on_startup=load_seed_on_startup,
        )
        client = TestClient(create_app(settings))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
