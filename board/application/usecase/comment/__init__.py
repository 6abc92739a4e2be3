"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase

__all__ = [
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
]
