"""Create post use case."""

from pydantic import BaseModel, Field

from forum.domain.service import PostService, UserService
from forum.domain.value import Category, UserId

from .items import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=10000)
    category: Category
    author_id: str


class CreatePostUseCase:
    """Use case for opening a new thread."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Steps:
        1. Verify the author exists
        2. Create the post via post service

        Raises:
            NotFoundError: If the author doesn't exist
        """
        author = await self.user_service.get_by_id(UserId(request.author_id))
        post = await self.post_service.create_post(
            title=request.title,
            content=request.content,
            category=request.category,
            author_id=author.id,
        )
        return PostItem.from_domain(post)
