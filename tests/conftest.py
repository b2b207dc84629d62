import os

import mongomock
import pytest
from fastapi.testclient import TestClient

# Evita leer un .env local o conectar a un Mongo real durante los tests
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SEED_DEFAULT_CATEGORIES", "false")

from notemanager.infrastructure.db import mongo  # noqa: E402


@pytest.fixture()
def db():
    """Base Mongo en memoria, inyectada como la base del proceso."""
    client = mongomock.MongoClient()
    database = client["note_manager_test"]
    mongo.use_database(database)
    yield database
    mongo.use_database(None)
    client.close()


@pytest.fixture()
def client(db):
    # Sin `with`: no corre el lifespan (no intenta conectar a Mongo real)
    from notemanager.main import app
    return TestClient(app)


@pytest.fixture()
def note_payload():
    return {"title": "Buy milk", "description": "2%", "categoryId": "1"}
