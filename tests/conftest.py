import pytest
from fastapi.testclient import TestClient
from shop.backend import common
from shop.backend.main import app
from shop.data_store import save_data


@pytest.fixture(autouse=True)
def isolated_store(tmp_path, monkeypatch):
    monkeypatch.delenv("MONGO_URI", raising=False)
    monkeypatch.setenv("SHOP_DATA_JSON", str(tmp_path / "data.json"))
    monkeypatch.setenv("SHOP_SUBMIT_DELAY", "0")
    common.session.sign_out()
    yield tmp_path / "data.json"
    common.session.sign_out()


@pytest.fixture
def seeded():
    data = {
        "customers": [
            {"id": "c1", "name": "Ana Souza", "email": "ana@x.com", "phone": "123", "avatar_url": None},
        ],
        "users": [
            {"email": "staff@x.com", "name": "Staff Member", "role": "admin"},
        ],
    }
    save_data(data)
    return data


@pytest.fixture
def client():
    return TestClient(app)
