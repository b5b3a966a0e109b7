"""
Shared fixtures: a throwaway SQLite database per test and an API client bound to it
"""
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.db.database import Base, get_db
from app.models import Post, PostReply, Product, Profile, Topic
from app.utils.auth import create_access_token
from main import app


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_db, None)


def auth_headers(profile_id) -> dict:
    token = create_access_token({"sub": str(profile_id)}, expires_delta=timedelta(hours=1))
    return {"Authorization": f"Bearer {token}"}


async def make_profile(db, username: str = "nico", **kwargs) -> Profile:
    profile = Profile(
        profile_id=kwargs.pop("profile_id", uuid.uuid4()),
        name=kwargs.pop("name", username.title()),
        username=username,
        avatar=kwargs.pop("avatar", f"https://example.com/{username}.png"),
        **kwargs,
    )
    db.add(profile)
    await db.commit()
    return profile


async def make_topic(db, slug: str = "productivity") -> Topic:
    topic = Topic(name=slug.replace("-", " ").title(), slug=slug)
    db.add(topic)
    await db.commit()
    return topic


async def make_post(db, author: Profile, topic: Topic, title: str = "Best productivity tool?", **kwargs) -> Post:
    post = Post(
        title=title,
        content=kwargs.pop("content", "Looking for recommendations."),
        profile_id=author.profile_id,
        topic_id=topic.topic_id,
        **kwargs,
    )
    db.add(post)
    await db.commit()
    return post


async def make_reply(db, author: Profile, text: str, post: Post = None, parent: PostReply = None, **kwargs) -> PostReply:
    reply = PostReply(
        reply=text,
        profile_id=author.profile_id,
        post_id=post.post_id if post else None,
        parent_id=parent.post_reply_id if parent else None,
        **kwargs,
    )
    db.add(reply)
    await db.commit()
    return reply


async def make_product(db, owner: Profile, name: str, created_at: datetime, upvotes: int = 0, **kwargs) -> Product:
    product = Product(
        name=name,
        tagline=kwargs.pop("tagline", f"{name} tagline"),
        description=kwargs.pop("description", f"{name} description"),
        how_it_works=kwargs.pop("how_it_works", "It just works"),
        icon=kwargs.pop("icon", "https://example.com/icon.png"),
        url=kwargs.pop("url", "https://example.com"),
        upvotes=upvotes,
        profile_id=owner.profile_id,
        created_at=created_at,
        **kwargs,
    )
    db.add(product)
    await db.commit()
    return product


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
async def author(db):
    return await make_profile(db, "nico")


@pytest.fixture
async def topic(db):
    return await make_topic(db, "productivity")


@pytest.fixture
async def post(db, author, topic):
    return await make_post(db, author, topic)
