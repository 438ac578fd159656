"""Unit tests for shared post rules."""

from uuid import uuid4

import pytest

from quill.domain.rules import compute_reading_time, count_words, is_author
from quill.domain.value import UserId
from tests.conftest import make_post


class TestCountWords:
    """Tests for count_words."""

    def test_counts_whitespace_delimited_tokens(self):
        assert count_words("one two  three\nfour\tfive") == 5

    def test_blank_body_has_no_words(self):
        assert count_words("   \n ") == 0


class TestComputeReadingTime:
    """Tests for compute_reading_time."""

    @pytest.mark.parametrize(
        "words,expected",
        [(1, 1), (199, 1), (200, 1), (201, 2), (400, 2), (401, 3)],
    )
    def test_rounds_up_to_whole_minutes(self, words, expected):
        body = " ".join(["word"] * words)

        assert compute_reading_time(body) == expected

    def test_empty_body_reads_in_zero_minutes(self):
        assert compute_reading_time("") == 0

    def test_custom_reading_speed(self):
        body = " ".join(["word"] * 300)

        assert compute_reading_time(body, words_per_minute=100) == 3


class TestIsAuthor:
    """Tests for the ownership predicate."""

    def test_author_owns_post(self):
        author_id = UserId(uuid4())
        post = make_post(author_id)

        assert is_author(post, author_id)

    def test_other_user_does_not_own_post(self):
        post = make_post(UserId(uuid4()))

        assert not is_author(post, UserId(uuid4()))

    def test_anonymous_caller_owns_nothing(self):
        post = make_post(UserId(uuid4()))

        assert not is_author(post, None)
