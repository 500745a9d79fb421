import os
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

_TEST_DB = Path(tempfile.mkdtemp(prefix="order-ledger-")) / "test.db"
os.environ["DB__CONN"] = f"sqlite:///{_TEST_DB}"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, create_engine  # noqa: E402

from order_ledger.api.deps import get_db  # noqa: E402
from order_ledger.db.session import drop_db, engine, init_db  # noqa: E402
from order_ledger.main import create_application  # noqa: E402


def _client_for(bind) -> Generator[TestClient, None, None]:  # type: ignore[no-untyped-def]
    app = create_application()

    def get_db_override() -> Generator[Session, None, None]:
        with Session(bind) as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise

    app.dependency_overrides[get_db] = get_db_override

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="db_engine")
def db_engine_fixture() -> Generator[Any, None, None]:
    init_db()
    yield engine
    drop_db()


@pytest.fixture(name="session")
def session_fixture(db_engine) -> Generator[Session, None, None]:  # type: ignore[no-untyped-def]
    with Session(db_engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(db_engine):  # type: ignore[annotations]
    yield from _client_for(db_engine)


@pytest.fixture(name="broken_client")
def broken_client_fixture(db_engine, tmp_path):  # type: ignore[annotations]
    """Client whose sessions point at an empty database, so every query fails."""

    empty = create_engine(f"sqlite:///{tmp_path / 'empty.db'}", connect_args={"check_same_thread": False})
    yield from _client_for(empty)
    empty.dispose()


@pytest.fixture(name="direct_client")
def direct_client_fixture(db_engine):  # type: ignore[annotations]
    """Client running the real ``get_db`` dependency against the test database."""

    with TestClient(create_application()) as client:
        yield client
