"""Reply use cases."""

from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .delete_reply import DeleteReplyRequest, DeleteReplyResponse, DeleteReplyUseCase

__all__ = [
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "DeleteReplyRequest",
    "DeleteReplyResponse",
    "DeleteReplyUseCase",
]
