from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker

import iceorders.persistence.pg as pg
from iceorders.core.config import get_settings
from iceorders.domain.orders import Order, OrderStatus
from iceorders.persistence.models import Base, OrderModel


@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("db") / "test.sqlite"


@pytest.fixture(scope="session", autouse=True)
def configure_test_engine(test_db_path: Path):
    engine = create_engine(
        f"sqlite+pysqlite:///{test_db_path}",
        future=True,
        connect_args={"check_same_thread": False},
    )
    TestSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)

    pg.engine = engine
    pg.SessionLocal = TestSessionLocal

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_orders(configure_test_engine):
    with pg.session_scope() as s:
        s.execute(delete(OrderModel))
    yield


@pytest.fixture()
def client(configure_test_engine):
    from iceorders.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def session(configure_test_engine):
    with pg.session_scope() as s:
        yield s


@pytest.fixture()
def base_time() -> datetime:
    return datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


@pytest.fixture()
def make_order(base_time: datetime):
    def _make(
        order_id: str,
        customer: str,
        minutes: int,
        product: str = "Gelo (Saco)",
        quantity: int = 1,
        status: OrderStatus = OrderStatus.PENDING,
    ) -> Order:
        return Order(
            id=order_id,
            product=product,
            quantity=quantity,
            customer=customer,
            created_at=base_time + timedelta(minutes=minutes),
            status=status,
        )

    return _make


@pytest.fixture()
def override_settings(monkeypatch):
    def _override(**env: str) -> None:
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()

    yield _override
    get_settings.cache_clear()
