from .profile import Profile
from .topic import Topic
from .post import Post, PostUpvote
from .post_reply import PostReply
from .product import Category, Product, ProductUpvote, Review
from .job import Job
from .team import Team
from .idea import GptIdea, GptIdeaLike

__all__ = [
    "Profile",
    "Topic",
    "Post",
    "PostUpvote",
    "PostReply",
    "Category",
    "Product",
    "ProductUpvote",
    "Review",
    "Job",
    "Team",
    "GptIdea",
    "GptIdeaLike",
]
