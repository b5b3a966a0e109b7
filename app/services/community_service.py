"""
Community data access: topics, posts, upvotes and threaded replies
"""
import logging
from typing import List, Optional, Tuple, Union
from uuid import UUID

from sqlalchemy import select, func, or_, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased, selectinload

from app.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from app.models.post import Post, PostUpvote
from app.models.post_reply import PostReply
from app.models.topic import Topic
from app.services.date_windows import period_start
from app.utils.identifiers import parse_numeric_id

logger = logging.getLogger(__name__)

# (post, upvote count, reply count)
PostRow = Tuple[Post, int, int]


def _upvote_count():
    return (
        select(func.count())
        .select_from(PostUpvote)
        .where(PostUpvote.post_id == Post.post_id)
        .scalar_subquery()
    )


def _reply_count():
    """Top-level replies plus the replies to them"""
    top_level = aliased(PostReply)
    return (
        select(func.count(PostReply.post_reply_id))
        .where(
            or_(
                PostReply.post_id == Post.post_id,
                PostReply.parent_id.in_(
                    select(top_level.post_reply_id).where(top_level.post_id == Post.post_id)
                ),
            )
        )
        .scalar_subquery()
    )


def _post_rows_query():
    upvotes = _upvote_count().label("upvotes")
    replies = _reply_count().label("replies")
    stmt = select(Post, upvotes, replies).options(
        selectinload(Post.author),
        selectinload(Post.topic),
    )
    return stmt, upvotes


class CommunityService:
    """Community queries and mutations"""

    @staticmethod
    async def get_topics(db: AsyncSession) -> List[Topic]:
        result = await db.execute(select(Topic).order_by(Topic.name))
        return list(result.scalars().all())

    @staticmethod
    async def create_topic(db: AsyncSession, name: str, slug: str) -> Topic:
        existing = await db.execute(select(Topic).where(Topic.slug == slug))
        if existing.scalar_one_or_none():
            raise ConflictError(f"Topic {slug!r} already exists", errors={"slug": "already taken"})

        topic = Topic(name=name, slug=slug)
        db.add(topic)
        await db.commit()
        await db.refresh(topic)
        logger.info("Created topic %s", slug)
        return topic

    @staticmethod
    async def get_posts(
        db: AsyncSession,
        sorting: str = "newest",
        period: str = "all-time",
        topic: Optional[str] = None,
        limit: int = 20,
    ) -> List[PostRow]:
        """
        Community feed

        "newest" orders by creation time. "popular" orders by upvote count
        and restricts the feed to the requested period.
        """
        stmt, upvotes = _post_rows_query()

        if topic:
            stmt = stmt.join(Post.topic).where(Topic.slug == topic)

        if sorting == "popular":
            since = period_start(period)
            if since is not None:
                stmt = stmt.where(Post.created_at >= since)
            stmt = stmt.order_by(upvotes.desc(), Post.created_at.desc(), Post.post_id.desc())
        else:
            stmt = stmt.order_by(Post.created_at.desc(), Post.post_id.desc())

        result = await db.execute(stmt.limit(limit))
        return [tuple(row) for row in result.all()]

    @staticmethod
    async def get_post_by_id(db: AsyncSession, post_id: Union[str, int]) -> PostRow:
        post_id = parse_numeric_id(post_id, "post_id")
        stmt, _ = _post_rows_query()
        result = await db.execute(stmt.where(Post.post_id == post_id))
        row = result.one_or_none()
        if row is None:
            raise NotFoundError(f"Post {post_id} not found")
        return tuple(row)

    @staticmethod
    async def get_posts_by_author(db: AsyncSession, profile_id: UUID) -> List[PostRow]:
        stmt, _ = _post_rows_query()
        result = await db.execute(
            stmt.where(Post.profile_id == profile_id).order_by(Post.created_at.desc(), Post.post_id.desc())
        )
        return [tuple(row) for row in result.all()]

    @staticmethod
    async def create_post(
        db: AsyncSession,
        *,
        title: str,
        category: str,
        content: str,
        profile_id: UUID,
    ) -> Post:
        """
        Create a post in the topic whose slug is `category`
        """
        topic_result = await db.execute(select(Topic.topic_id).where(Topic.slug == category))
        topic_id = topic_result.scalar_one_or_none()
        if topic_id is None:
            raise NotFoundError(f"Topic {category!r} not found", errors={"category": "unknown topic"})

        post = Post(title=title, content=content, profile_id=profile_id, topic_id=topic_id)
        db.add(post)
        await db.commit()
        await db.refresh(post)
        logger.info("Profile %s created post %s", profile_id, post.post_id)
        return post

    @staticmethod
    async def delete_post(db: AsyncSession, post_id: Union[str, int], profile_id: UUID) -> None:
        """
        Delete a post together with its replies (both levels) and upvotes
        """
        post_id = parse_numeric_id(post_id, "post_id")
        result = await db.execute(select(Post).where(Post.post_id == post_id))
        post = result.scalar_one_or_none()
        if post is None:
            raise NotFoundError(f"Post {post_id} not found")
        if post.profile_id != profile_id:
            raise ForbiddenError("Only the author can delete this post")

        await db.delete(post)
        await db.commit()
        logger.info("Profile %s deleted post %s", profile_id, post_id)

    @staticmethod
    async def toggle_post_upvote(
        db: AsyncSession, post_id: Union[str, int], profile_id: UUID
    ) -> Tuple[bool, int]:
        """
        Add the profile's upvote, or remove it if already present.

        Returns (upvoted, new upvote count).
        """
        post_id = parse_numeric_id(post_id, "post_id")
        post_result = await db.execute(select(Post.post_id).where(Post.post_id == post_id))
        if post_result.scalar_one_or_none() is None:
            raise NotFoundError(f"Post {post_id} not found")

        existing = await db.execute(
            select(PostUpvote).where(
                PostUpvote.post_id == post_id,
                PostUpvote.profile_id == profile_id,
            )
        )
        if existing.scalar_one_or_none():
            await db.execute(
                delete(PostUpvote).where(
                    PostUpvote.post_id == post_id,
                    PostUpvote.profile_id == profile_id,
                )
            )
            upvoted = False
        else:
            db.add(PostUpvote(post_id=post_id, profile_id=profile_id))
            upvoted = True
        await db.commit()

        count_result = await db.execute(
            select(func.count()).select_from(PostUpvote).where(PostUpvote.post_id == post_id)
        )
        return upvoted, count_result.scalar_one()

    @staticmethod
    async def get_replies(db: AsyncSession, post_id: Union[str, int]) -> List[PostReply]:
        """
        Top-level replies of a post, newest first, each with its direct
        replies and the authors of both levels loaded.

        Deeper replies are never loaded.
        """
        # Reject before any query runs
        post_id = parse_numeric_id(post_id, "post_id")

        result = await db.execute(
            select(PostReply)
            .where(
                PostReply.post_id == post_id,
                PostReply.parent_id.is_(None),
            )
            .options(
                selectinload(PostReply.author),
                selectinload(PostReply.children).selectinload(PostReply.author),
            )
            .order_by(PostReply.created_at.desc(), PostReply.post_reply_id.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_top_level_reply(
        db: AsyncSession, post_id: int, reply_id: int
    ) -> Optional[PostReply]:
        result = await db.execute(
            select(PostReply).where(
                PostReply.post_reply_id == reply_id,
                PostReply.post_id == post_id,
                PostReply.parent_id.is_(None),
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def create_reply(
        db: AsyncSession,
        *,
        post_id: Union[str, int],
        reply: str,
        profile_id: UUID,
        top_level_id: Optional[int] = None,
    ) -> PostReply:
        """
        Insert one reply.

        With top_level_id the row hangs under that reply and carries no
        post_id; without it the row is attached to the post directly.
        Database errors propagate as-is.
        """
        post_id = parse_numeric_id(post_id, "post_id")
        if top_level_id is not None:
            target = {"parent_id": top_level_id}
        else:
            target = {"post_id": post_id}

        new_reply = PostReply(reply=reply, profile_id=profile_id, **target)
        db.add(new_reply)
        await db.commit()
        await db.refresh(new_reply)
        logger.info(
            "Profile %s replied to %s %s",
            profile_id,
            "post" if top_level_id is None else "reply",
            post_id if top_level_id is None else top_level_id,
        )
        return new_reply
