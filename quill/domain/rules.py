"""Shared post rules: derived fields and the ownership check."""

import math

from quill.domain.model.post import Post
from quill.domain.value import UserId

DEFAULT_WORDS_PER_MINUTE = 200


def count_words(body: str) -> int:
    """Number of whitespace-delimited tokens in ``body``."""
    return len(body.split())


def compute_reading_time(
    body: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> int:
    """Estimated reading time in whole minutes.

    Any non-empty body reads in at least one minute.

    Args:
        body: Post body
        words_per_minute: Assumed reading speed

    Returns:
        ``ceil(words / words_per_minute)``, floored at 1 for non-empty bodies
    """
    words = count_words(body)
    if words == 0:
        return 0
    return max(1, math.ceil(words / words_per_minute))


def is_author(post: Post, caller_id: UserId | None) -> bool:
    """Whether ``caller_id`` owns ``post``."""
    return caller_id is not None and post.author_id == caller_id
