import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from friendgraph.core.security import create_access_token
from friendgraph.db.base_class import Base
from friendgraph.db.session import build_engine, get_db
from friendgraph.main import app
from friendgraph.models.friendship import Friendship, FriendshipStatus
from friendgraph.models.user import User


@pytest.fixture
def engine():
    """In-memory SQLite shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


class GraphBuilder:
    """Small helper for seeding users and friendship rows."""

    def __init__(self, db):
        self.db = db

    def users(self, *user_ids):
        for user_id in user_ids:
            self.db.add(User(id=user_id, full_name=f"User {user_id}", phone_number=f"555-000{user_id}"))
        self.db.commit()
        return self

    def edge(self, user_id, friend_user_id, status=FriendshipStatus.ACCEPTED):
        """A single directed row."""
        self.db.add(Friendship(user_id=user_id, friend_user_id=friend_user_id, status=status))
        self.db.commit()
        return self

    def befriend(self, a, b):
        """An accepted friendship, stored in both directions."""
        return self.edge(a, b).edge(b, a)


@pytest.fixture
def graph(db):
    return GraphBuilder(db)


@pytest.fixture
def example_graph(graph):
    """Users 1..4 with accepted friendships 1-2, 1-3, 2-3, 2-4."""
    graph.users(1, 2, 3, 4)
    graph.befriend(1, 2).befriend(1, 3).befriend(2, 3).befriend(2, 4)
    return graph


@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def auth_headers():
    def make(user_id):
        token = create_access_token({"sub": str(user_id)})
        return {"Authorization": f"Bearer {token}"}
    return make


@pytest.fixture
def file_engine(tmp_path):
    """File-backed SQLite built the way the service builds its engine."""
    engine = build_engine(f"sqlite:///{tmp_path / 'friendgraph.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def file_sessions(file_engine):
    """A reader and a writer session on separate connections."""
    SessionFactory = sessionmaker(autocommit=False, autoflush=False, bind=file_engine)
    reader = SessionFactory()
    writer = SessionFactory()
    try:
        yield reader, writer
    finally:
        reader.close()
        writer.close()


@pytest.fixture
def writer_graph(file_sessions):
    return GraphBuilder(file_sessions[1])
