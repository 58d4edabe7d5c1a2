from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from item_catalog.core.config import settings


def build_engine(url: str) -> Engine:
    # SQLite: 스레드 공유 허용 + 외래키 강제
    is_sqlite = make_url(url).get_backend_name() == "sqlite"
    connect_args = {"check_same_thread": False} if is_sqlite else {}
    engine = create_engine(url, pool_pre_ping=True, connect_args=connect_args)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_db(bind: Engine) -> None:
    # SQLite 파일 디렉터리 생성
    url = bind.url
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    import item_catalog.models  # noqa: F401  (테이블 등록)
    Base.metadata.create_all(bind=bind)


# SQLAlchemy 엔진
engine = build_engine(settings.database_url)

# DB 세션 팩토리
SessionLocal = sessionmaker(
    autoflush=False,
    bind=engine
)

# ORM 베이스 클래스
Base = declarative_base()


# DB 세션 의존성 (요청마다 새 세션)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
