from .create_post import CreatePostUseCase
from .delete_post import DeletePostUseCase
from .get_post import GetPostUseCase
from .list_posts import ListPostsUseCase

__all__ = ["CreatePostUseCase", "DeletePostUseCase", "GetPostUseCase", "ListPostsUseCase"]
