"""
Community API: topics, posts, upvotes and threaded replies
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID

from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.db.database import get_db
from app.models.post_reply import PostReply
from app.models.profile import Profile
from app.schemas.common import AuthorInfo, ResponseModel
from app.schemas.community import (
    TopicCreate, TopicResponse, PostCreate, PostListItem, PostDetail,
    PostUpvoteResponse, ReplyCreate, Reply, TopLevelReply, ReplyCreated, Sorting, Period
)
from app.services.community_service import CommunityService, PostRow
from app.utils.auth import get_current_profile_id

router = APIRouter(prefix="/api/community", tags=["community"])


def author_info(profile: Profile) -> AuthorInfo:
    return AuthorInfo(name=profile.name, username=profile.username, avatar=profile.avatar)


def post_list_item(row: PostRow) -> PostListItem:
    post, upvotes, replies = row
    return PostListItem(
        id=post.post_id,
        title=post.title,
        content=post.content,
        topic=post.topic.name,
        topicSlug=post.topic.slug,
        author=author_info(post.author),
        upvotes=upvotes or 0,
        replies=replies or 0,
        createdAt=post.created_at,
    )


def to_reply(reply: PostReply) -> Reply:
    return Reply(
        id=reply.post_reply_id,
        text=reply.reply,
        createdAt=reply.created_at,
        author=author_info(reply.author),
    )


def to_top_level_reply(reply: PostReply) -> TopLevelReply:
    """Materialise exactly two levels; children of children are dropped"""
    return TopLevelReply(
        **to_reply(reply).model_dump(),
        replies=[to_reply(child) for child in reply.children],
    )


@router.get("/topics", response_model=ResponseModel)
async def list_topics(db: AsyncSession = Depends(get_db)):
    """
    All topics
    """
    topics = await CommunityService.get_topics(db)
    return ResponseModel(data=[TopicResponse.model_validate(t) for t in topics])


@router.post("/topics", response_model=ResponseModel)
async def create_topic(
    topic_data: TopicCreate,
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    topic = await CommunityService.create_topic(db, topic_data.name, topic_data.slug)
    return ResponseModel(message="Topic created", data=TopicResponse.model_validate(topic))


@router.get("/posts", response_model=ResponseModel)
async def list_posts(
    sorting: Sorting = Query("newest"),
    period: Period = Query("all-time"),
    topic: Optional[str] = Query(None, description="Topic slug"),
    limit: int = Query(settings.DEFAULT_LIST_LIMIT, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """
    Community feed
    """
    rows = await CommunityService.get_posts(db, sorting=sorting, period=period, topic=topic, limit=limit)
    return ResponseModel(data=[post_list_item(row) for row in rows])


@router.post("/posts", response_model=ResponseModel)
async def create_post(
    post_data: PostCreate,
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    """
    Create a post in a topic
    """
    post = await CommunityService.create_post(
        db,
        title=post_data.title,
        category=post_data.category,
        content=post_data.content,
        profile_id=current_profile_id,
    )
    return ResponseModel(message="Post created", data={"id": post.post_id})


@router.get("/posts/{post_id}", response_model=ResponseModel)
async def get_post(post_id: str, db: AsyncSession = Depends(get_db)):
    row = await CommunityService.get_post_by_id(db, post_id)
    item = post_list_item(row)
    return ResponseModel(data=PostDetail(**item.model_dump(), updatedAt=row[0].updated_at))


@router.delete("/posts/{post_id}", response_model=ResponseModel)
async def delete_post(
    post_id: str,
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    """
    Delete a post with all of its replies
    """
    await CommunityService.delete_post(db, post_id, current_profile_id)
    return ResponseModel(message="Post deleted")


@router.post("/posts/{post_id}/upvote", response_model=ResponseModel)
async def upvote_post(
    post_id: str,
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    upvoted, upvotes = await CommunityService.toggle_post_upvote(db, post_id, current_profile_id)
    return ResponseModel(data=PostUpvoteResponse(postId=int(post_id), upvoted=upvoted, upvotes=upvotes))


@router.get("/posts/{post_id}/replies", response_model=ResponseModel)
async def list_replies(post_id: str, db: AsyncSession = Depends(get_db)):
    """
    Top-level replies, newest first, each with its own replies
    """
    replies = await CommunityService.get_replies(db, post_id)
    return ResponseModel(data=[to_top_level_reply(r) for r in replies])


@router.post("/posts/{post_id}/replies", response_model=ResponseModel, status_code=status.HTTP_201_CREATED)
async def create_reply(
    post_id: str,
    reply_data: ReplyCreate,
    db: AsyncSession = Depends(get_db),
    current_profile_id: UUID = Depends(get_current_profile_id)
):
    """
    Reply to a post, or to one of its top-level replies when topLevelId is given
    """
    post, _, _ = await CommunityService.get_post_by_id(db, post_id)

    if reply_data.topLevelId is not None:
        parent = await CommunityService.get_top_level_reply(db, post.post_id, reply_data.topLevelId)
        if parent is None:
            raise NotFoundError(
                f"Reply {reply_data.topLevelId} is not a top-level reply of post {post.post_id}",
                errors={"topLevelId": "unknown top-level reply"},
            )

    reply = await CommunityService.create_reply(
        db,
        post_id=post.post_id,
        reply=reply_data.reply,
        profile_id=current_profile_id,
        top_level_id=reply_data.topLevelId,
    )
    return ResponseModel(
        code=201,
        message="Reply created",
        data=ReplyCreated(
            id=reply.post_reply_id,
            postId=reply.post_id,
            parentId=reply.parent_id,
            level="second" if reply.parent_id else "top",
            createdAt=reply.created_at,
        )
    )
