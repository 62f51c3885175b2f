import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from menucost import main
from menucost.services.costing import InMemoryInventory, InventoryItem
from menucost.storage import db as db_module
from menucost.storage import models  # noqa: F401


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(monkeypatch, engine):
    def _get_session_override():
        return Session(engine)

    monkeypatch.setattr(db_module, "engine", engine)
    monkeypatch.setattr(db_module, "get_session", _get_session_override)

    client = TestClient(main.app)
    return client


@pytest.fixture(name="milk")
def milk_fixture():
    return InventoryItem(id="milk", name="Whole Milk", purchase_unit="gallon", package_size=1, package_price=3.84)


@pytest.fixture(name="beans")
def beans_fixture():
    return InventoryItem(id="beans", name="Espresso Beans", purchase_unit="lb", package_size=3, package_price=45.00)


@pytest.fixture(name="inventory")
def inventory_fixture(milk, beans):
    cups = InventoryItem(id="cups", name="12oz Cups", purchase_unit="case", package_size=50, package_price=10.00)
    vanilla = InventoryItem(id="vanilla", name="Vanilla Syrup", purchase_unit="oz", package_size=25.4, package_price=12.70)
    return InMemoryInventory([milk, beans, cups, vanilla])
