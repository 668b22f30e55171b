# friendgraph/db/session.py
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from friendgraph.core.config import settings

# Server databases default to READ COMMITTED, where every statement takes a
# fresh snapshot; one facade call needs one snapshot for all its queries.
DEFAULT_ISOLATION_LEVEL = "REPEATABLE READ"

def engine_options(url: str, isolation_level: Optional[str] = None) -> dict:
    kwargs = {"echo": settings.SQL_ECHO}
    if url.startswith("sqlite"):
        # FastAPI serves sync routes from a thread pool
        kwargs["connect_args"] = {"check_same_thread": False}
        # SQLite transactions are always serializable; BEGIN is issued by
        # the hooks in _enable_sqlite_transactions
        return kwargs
    kwargs["isolation_level"] = isolation_level or DEFAULT_ISOLATION_LEVEL
    return kwargs

def _enable_sqlite_transactions(engine) -> None:
    """
    pysqlite only opens a transaction before DML, so SELECTs inside
    Session.begin() would each see the latest commit. Take transaction
    control away from the driver and emit BEGIN ourselves.
    """

    @event.listens_for(engine, "connect")
    def on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        # readers keep their snapshot while writers commit
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    @event.listens_for(engine, "begin")
    def on_begin(conn):
        conn.exec_driver_sql("BEGIN")

def build_engine(url: str = settings.DATABASE_URL, isolation_level=settings.DB_ISOLATION_LEVEL, **kwargs):
    options = engine_options(url, isolation_level)
    options.update(kwargs)
    engine = create_engine(url, **options)
    if url.startswith("sqlite"):
        _enable_sqlite_transactions(engine)
    return engine

engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def read_snapshot(db: Session) -> Iterator[Session]:
    """
    Run a group of reads inside one transaction.

    Every query issued inside the block sees the same database state. If the
    session is already inside a transaction, that transaction is reused and
    left open for its owner.
    """
    if db.in_transaction():
        yield db
        return
    with db.begin():
        yield db
