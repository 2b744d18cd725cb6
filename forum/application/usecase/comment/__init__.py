"""Comment use cases."""

from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .list_comments import ListCommentsRequest, ListCommentsUseCase
from .list_replies import ListRepliesRequest, ListRepliesUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "ListRepliesRequest",
    "ListRepliesUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
