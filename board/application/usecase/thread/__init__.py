"""Thread use cases."""

from .create_thread import CreateThreadRequest, CreateThreadUseCase
from .delete_thread import DeleteThreadRequest, DeleteThreadUseCase
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase
from .views import CommentLinks, CommentView, ThreadView

__all__ = [
    "CommentLinks",
    "CommentView",
    "CreateThreadRequest",
    "CreateThreadUseCase",
    "DeleteThreadRequest",
    "DeleteThreadUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
    "ThreadView",
]
