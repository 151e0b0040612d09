"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostDetailsUseCase, GetPostResponse, GetPostUseCase
from .items import PostItem, ReplyItem, ThreadItem
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostDetailsUseCase",
    "GetPostResponse",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostItem",
    "ReplyItem",
    "ThreadItem",
]
