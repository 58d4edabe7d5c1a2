from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from item_catalog.core.database import build_engine, get_db, init_db
from item_catalog.main import app
from item_catalog.services.image_service import ImageStore, get_image_store


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    engine = build_engine(f"sqlite:///{tmp_path / 'db' / 'catalog.sqlite3'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def image_store(tmp_path: Path) -> ImageStore:
    store = ImageStore(tmp_path / "images")
    store.ensure_default()
    return store


@pytest.fixture
def client(session_factory: sessionmaker, image_store: ImageStore) -> Iterator[TestClient]:
    def _get_db() -> Iterator[Session]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_image_store] = lambda: image_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def stored_images(image_store: ImageStore) -> Callable[[], list[str]]:
    """File names in the image directory, excluding the placeholder."""

    def _list() -> list[str]:
        return sorted(p.name for p in image_store.image_dir.iterdir() if p.name != image_store.default_name)

    return _list
