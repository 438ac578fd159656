"""PostgreSQL implementation of Post repository."""

from typing import Any, Optional

import logfire
from sqlalchemy import asc, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Post
from quill.domain.repository.post import PostRepository
from quill.domain.value import (
    PostCriteria,
    PostId,
    PostSortField,
    PostState,
    SortDirection,
)
from quill.persistence.mappers import post_to_dict, row_to_post
from quill.persistence.tables import posts_table

_SORT_COLUMNS = {
    PostSortField.CREATED_AT: posts_table.c.created_at,
    PostSortField.READ_COUNT: posts_table.c.read_count,
    PostSortField.TITLE: func.lower(posts_table.c.title),
    PostSortField.READING_TIME: posts_table.c.reading_time,
}


def _where_clauses(criteria: PostCriteria) -> list[Any]:
    clauses: list[Any] = []
    if criteria.state is not None:
        clauses.append(posts_table.c.state == criteria.state.value)
    if criteria.author_id is not None:
        clauses.append(posts_table.c.author_id == criteria.author_id)
    if criteria.title_contains is not None:
        clauses.append(
            posts_table.c.title.icontains(criteria.title_contains, autoescape=True)
        )
    return clauses


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def insert(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span(
            "post_repository.insert",
            post_id=str(post.id),
            author_id=str(post.author_id),
            title=post.title,
        ):
            stmt = posts_table.insert().values(**post_to_dict(post))
            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Post inserted", post_id=str(post.id))
            return post

    async def replace(self, post: Post) -> Optional[Post]:
        """Replace the mutable fields of an existing post."""
        with logfire.span("post_repository.replace", post_id=str(post.id)):
            values = post_to_dict(post)
            # Identity, ownership and creation time never change
            for key in ("id", "author_id", "created_at"):
                values.pop(key)

            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(**values)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn("Post vanished before replace", post_id=str(post.id))
                return None

            await self.session.flush()
            return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = posts_table.delete().where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return (result.rowcount or 0) > 0

    async def increment_read_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment read_count by 1 on a published post."""
        with logfire.span(
            "post_repository.increment_read_count", post_id=str(post_id)
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .where(posts_table.c.state == PostState.PUBLISHED.value)
                .values(read_count=posts_table.c.read_count + 1)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn("Post not found or not published", post_id=str(post_id))
                return None

            await self.session.flush()
            return row_to_post(row._asdict())

    async def find_many(
        self,
        criteria: PostCriteria,
        sort: PostSortField = PostSortField.CREATED_AT,
        direction: SortDirection = SortDirection.DESC,
        offset: int = 0,
        limit: int = 20,
    ) -> tuple[list[Post], int]:
        """Find posts with filtering, sorting and pagination."""
        with logfire.span(
            "post_repository.find_many",
            state=criteria.state.value if criteria.state else None,
            author_id=str(criteria.author_id) if criteria.author_id else None,
            search=criteria.title_contains,
            sort=sort.value,
            direction=direction.value,
            limit=limit,
            offset=offset,
        ):
            clauses = _where_clauses(criteria)

            count_stmt = select(func.count()).select_from(posts_table).where(*clauses)
            count_result = await self.session.execute(count_stmt)
            total = count_result.scalar() or 0

            if total == 0:
                logfire.info("No posts found")
                return [], 0

            order = desc if direction == SortDirection.DESC else asc
            stmt = (
                select(posts_table)
                .where(*clauses)
                # id keeps page boundaries stable when sort values tie
                .order_by(order(_SORT_COLUMNS[sort]), order(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]

            logfire.info("Found posts", count=len(posts), total=total)
            return posts, total
