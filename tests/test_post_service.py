"""Direct tests for the post service and its like helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from devconnector.core.errors import BadRequestError, NotAuthorizedError, NotFoundError
from devconnector.db.database import utcnow
from devconnector.models.post import PostLike
from devconnector.models.user import User
from devconnector.services.post_service import PostService, add_like, ensure_author, remove_like


class FakeLike:
    def __init__(self, user_id):
        self.user_id = user_id


@pytest.fixture
def users(db):
    author = User(name="Author", email="author@example.com", hashed_password="x")
    reader = User(name="Reader", email="reader@example.com", hashed_password="x")
    db.add_all([author, reader])
    db.commit()
    return author, reader


def test_add_like_prepends():
    likes = [FakeLike("a")]

    add_like(likes, "b", FakeLike, "already liked")

    assert [like.user_id for like in likes] == ["b", "a"]


def test_add_like_conflict_leaves_list_untouched():
    likes = [FakeLike("a"), FakeLike("b")]

    with pytest.raises(BadRequestError) as exc_info:
        add_like(likes, "b", FakeLike, "already liked")

    assert exc_info.value.msg == "already liked"
    assert len(likes) == 2


def test_remove_like_removes_first_match_only():
    first, second = FakeLike("a"), FakeLike("a")
    likes = [FakeLike("b"), first, second]

    remove_like(likes, "a", "not liked")

    assert likes[1] is second
    assert len(likes) == 2


def test_remove_like_when_absent():
    with pytest.raises(BadRequestError):
        remove_like([FakeLike("a")], "z", "not liked")


def test_ensure_author_compares_as_strings():
    user = User(id="abc", name="x", email="x@example.com", hashed_password="x")

    ensure_author("abc", user)
    with pytest.raises(NotAuthorizedError):
        ensure_author("other", user)


@pytest.mark.asyncio
async def test_like_positions_follow_list_order(db, users):
    author, reader = users
    post = await PostService.create_post(db, author, "Ordering")

    await PostService.like_post(db, author, post.id)
    likes = await PostService.like_post(db, reader, post.id)

    assert [like.user_id for like in likes] == [reader.id, author.id]
    stored = db.query(PostLike).filter(PostLike.post_id == post.id).order_by(PostLike.position).all()
    assert [like.user_id for like in stored] == [reader.id, author.id]


@pytest.mark.asyncio
async def test_deleting_post_removes_its_likes(db, users):
    author, reader = users
    post = await PostService.create_post(db, author, "Short lived")
    await PostService.like_post(db, reader, post.id)

    await PostService.delete_post(db, author, post.id)

    assert db.query(PostLike).count() == 0
    with pytest.raises(NotFoundError):
        await PostService.get_post(db, post.id)


@pytest.mark.asyncio
async def test_like_on_missing_comment(db, users):
    author, reader = users
    post = await PostService.create_post(db, author, "No comments")

    with pytest.raises(NotFoundError) as exc_info:
        await PostService.like_comment(db, reader, post.id, "missing")

    assert exc_info.value.msg == "Comment does not exist"


def test_utcnow_is_timezone_aware():
    assert utcnow().tzinfo == timezone.utc


@pytest.mark.asyncio
async def test_post_date_is_current_utc_time(db, users):
    author, _ = users
    before = datetime.now(timezone.utc).replace(tzinfo=None)

    post = await PostService.create_post(db, author, "Dated")

    # SQLite hands the value back without tzinfo
    stored = post.date.replace(tzinfo=None)
    assert before - timedelta(seconds=1) <= stored <= before + timedelta(minutes=1)
