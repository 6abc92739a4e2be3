"""Strongly typed identifiers for forum entities.

Threads and comments are keyed by store-assigned integers; users and their
profiles by the UUID issued by the auth service.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ThreadId = NewType("ThreadId", int)
CommentId = NewType("CommentId", int)
