"""Post lifecycle domain service.

Owns every write to a post: creation, content edits, state changes and
deletion. Every mutating operation loads the post and checks ownership
before touching the store.
"""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as ModelValidationError

from quill.config import ReadingSettings
from quill.domain.error import ForbiddenError, NotFoundError, ValidationError
from quill.domain.model.common import utc_now
from quill.domain.model.post import Post
from quill.domain.repository import PostRepository
from quill.domain.rules import compute_reading_time, is_author
from quill.domain.value import PostId, PostState, UserId


def _require_text(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required")
    return value


def _build_post(fields: dict[str, object]) -> Post:
    """Validate ``fields`` into a Post, surfacing failures as domain errors."""
    try:
        return Post.model_validate(fields)
    except ModelValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "post"
        raise ValidationError(f"{location}: {first['msg']}") from e


class PostService:
    """Domain service for the post lifecycle."""

    def __init__(
        self,
        post_repository: PostRepository,
        reading_settings: ReadingSettings | None = None,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            reading_settings: Reading speed used for reading time
        """
        self.post_repository = post_repository
        self.reading_settings = reading_settings or ReadingSettings()

    def _reading_time(self, body: str) -> int:
        return compute_reading_time(body, self.reading_settings.words_per_minute)

    async def _get_owned_post(self, post_id: PostId, caller_id: UserId) -> Post:
        """Load a post and check that ``caller_id`` is its author.

        Raises:
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller is not the author
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))

        if not is_author(post, caller_id):
            logfire.warn(
                "Rejected change by non-author",
                post_id=str(post_id),
                caller_id=str(caller_id),
            )
            raise ForbiddenError("post", str(post_id), str(caller_id))

        return post

    async def create_post(
        self,
        author_id: UserId,
        title: Optional[str],
        body: Optional[str],
        description: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> Post:
        """Create a new draft post.

        Args:
            author_id: Authenticated author
            title: Post title (required, non-empty)
            body: Post body (required, non-empty)
            description: Optional summary
            tags: Optional tags

        Returns:
            The stored post, including reading time

        Raises:
            ValidationError: If title or body is missing or empty
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), title=title
        ):
            title = _require_text(title, "Title")
            body = _require_text(body, "Body")

            now = utc_now()
            post = _build_post(
                {
                    "id": PostId(uuid4()),
                    "title": title,
                    "description": description,
                    "tags": tags or [],
                    "body": body,
                    "author_id": author_id,
                    "state": PostState.DRAFT,
                    "read_count": 0,
                    "reading_time": self._reading_time(body),
                    "created_at": now,
                    "updated_at": now,
                }
            )

            saved = await self.post_repository.insert(post)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                reading_time=saved.reading_time,
            )
            return saved

    async def update_content(
        self,
        post_id: PostId,
        caller_id: UserId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[list[str]] = None,
        body: Optional[str] = None,
    ) -> Post:
        """Apply the supplied content fields to a post.

        Fields left as None are not changed. A new body recomputes the
        reading time.

        Raises:
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller is not the author
            ValidationError: If a supplied title or body is empty
        """
        with logfire.span(
            "post_service.update_content",
            post_id=str(post_id),
            caller_id=str(caller_id),
        ):
            post = await self._get_owned_post(post_id, caller_id)

            changes: dict[str, object] = {"updated_at": utc_now()}
            if title is not None:
                changes["title"] = _require_text(title, "Title")
            if description is not None:
                changes["description"] = description
            if tags is not None:
                changes["tags"] = tags
            if body is not None:
                changes["body"] = _require_text(body, "Body")
                changes["reading_time"] = self._reading_time(body)

            # model_copy skips validation, so re-validate the merged fields
            updated = _build_post({**post.model_dump(), **changes})
            return await self._replace(updated)

    async def update_state(
        self, post_id: PostId, caller_id: UserId, target_state: str | PostState
    ) -> Post:
        """Move a post to ``target_state``.

        Setting the state a post already has is a successful no-op.

        Raises:
            ValidationError: If the target state is unknown
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller is not the author
        """
        target = PostState.parse(target_state)

        with logfire.span(
            "post_service.update_state",
            post_id=str(post_id),
            caller_id=str(caller_id),
            target=target.value,
        ):
            post = await self._get_owned_post(post_id, caller_id)

            new_state = post.state.transition_to(target)
            if new_state is post.state:
                logfire.info(
                    "Post already in requested state",
                    post_id=str(post_id),
                    state=new_state.value,
                )
                return post

            updated = post.model_copy(
                update={"state": new_state, "updated_at": utc_now()}
            )
            saved = await self._replace(updated)
            logfire.info(
                "Post state changed",
                post_id=str(post_id),
                previous=post.state.value,
                state=saved.state.value,
            )
            return saved

    async def delete_post(self, post_id: PostId, caller_id: UserId) -> None:
        """Permanently delete a post.

        Raises:
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller is not the author
        """
        with logfire.span(
            "post_service.delete_post",
            post_id=str(post_id),
            caller_id=str(caller_id),
        ):
            await self._get_owned_post(post_id, caller_id)

            if not await self.post_repository.delete(post_id):
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))

    async def _replace(self, post: Post) -> Post:
        saved = await self.post_repository.replace(post)
        if saved is None:
            # Deleted between the ownership check and the write
            raise NotFoundError("Post", str(post.id))
        return saved
