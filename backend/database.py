from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from config.settings import DATABASE_URL, SQL_ECHO, is_sqlite


def build_engine(url: str = DATABASE_URL, **kwargs):
    """
    Create an engine for the given URL.

    SQLite connections are shared with the uvicorn threadpool, so
    check_same_thread is disabled and the WAL/busy-timeout pragmas are set.
    """
    if is_sqlite(url):
        connect_args = kwargs.pop('connect_args', {})
        connect_args.setdefault('check_same_thread', False)
        engine = create_engine(url, connect_args=connect_args, echo=SQL_ECHO, **kwargs)
        event.listen(engine, "connect", set_sqlite_pragma)
        return engine

    return create_engine(
        url,
        echo=SQL_ECHO,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,  # Verify connections are alive before using
        pool_recycle=3600,  # Recycle connections after 1 hour
        **kwargs
    )


def set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine()

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
