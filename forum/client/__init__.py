"""Client for the forum API and the comment tree reconciler."""

from .api import ForumAPIError, ForumClient, PageResult
from .tree import Reply, Tree
from .view import ListView, ThreadView

__all__ = [
    "ForumAPIError",
    "ForumClient",
    "ListView",
    "PageResult",
    "Reply",
    "ThreadView",
    "Tree",
]
