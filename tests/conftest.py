import mongomock
import pytest
from fastapi.testclient import TestClient

from rps.db.mongodb import init_mongo_indexes
from rps.main import app
from rps.services.mongo_service import RecordStore, get_store


@pytest.fixture
def store():
    db = mongomock.MongoClient()["rps_test"]
    init_mongo_indexes(db)
    return RecordStore(db)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def registration():
    def build(**overrides):
        payload = {
            "studentName": "A",
            "fatherName": "B",
            "motherName": "C",
            "session": "2025",
            "dept": "CSE",
        }
        payload.update(overrides)
        return payload
    return build
