"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from forum.domain.service import PostService
from forum.domain.value import Category

from .items import PostItem


class ListPostsRequest(BaseModel):
    """List posts request."""

    category: Category | None = None
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int
    limit: int
    offset: int


class ListPostsUseCase:
    """Use case for listing posts newest first."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Filter and pagination parameters

        Returns:
            A page of posts and the total matching the filter
        """
        with logfire.span(
            "list_posts",
            category=request.category.value if request.category else None,
        ):
            posts = await self.post_service.list_posts(
                category=request.category,
                limit=request.limit,
                offset=request.offset,
            )
            total = await self.post_service.count_posts(request.category)
            return ListPostsResponse(
                posts=[PostItem.from_domain(p) for p in posts],
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
