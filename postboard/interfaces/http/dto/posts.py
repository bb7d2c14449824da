from __future__ import annotations

from pydantic import BaseModel, Field

from postboard.domain.posts.entities import Post, PostPage


class CreatePostRequestDTO(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)


class PaginationQueryDTO(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)


class PostResponseDTO(BaseModel):
    id: str
    title: str
    content: str
    author_id: str
    created_at: int
    updated_at: int

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponseDTO":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author_id=post.author_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PaginatedPostsDTO(BaseModel):
    data: list[PostResponseDTO]
    page: int
    limit: int
    total: int

    @classmethod
    def from_page(cls, page: PostPage) -> "PaginatedPostsDTO":
        return cls(
            data=[PostResponseDTO.from_entity(post) for post in page.items],
            page=page.page,
            limit=page.limit,
            total=page.total,
        )
