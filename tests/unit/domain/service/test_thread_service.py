"""Unit tests for ThreadService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from agora.domain.error import NotAuthorizedError, NotFoundError
from agora.domain.repository import (
    CommentRepository,
    ThreadRepository,
    ThreadSortOrder,
)
from agora.domain.service import ThreadService
from agora.domain.value import ThreadCategory, ThreadId
from tests.conftest import make_comment, make_thread, new_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateThread:
    """Tests for create_thread."""

    @pytest.mark.asyncio
    async def test_create_thread_with_empty_ledger(self, unit_env):
        """New threads should be saved with no votes, likes or views."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = new_user()

        # Act
        thread = await thread_service.create_thread(
            author_id=author,
            title="Show: a tiny SQL linter",
            content="Feedback welcome.",
            category=ThreadCategory.SHOWCASE,
            tags=["sql", " tooling "],
        )

        # Assert
        saved = await thread_repo.find_by_id(thread.id)
        assert saved == thread
        assert saved.author_id == author
        assert saved.tags == ["sql", "tooling"]
        assert saved.upvotes == frozenset()
        assert saved.downvotes == frozenset()
        assert saved.views == 0

    @pytest.mark.asyncio
    async def test_get_missing_thread_raises(self, unit_env):
        """Getting an unknown thread should raise NotFoundError."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Thread not found"):
            await thread_service.get_thread(ThreadId(uuid4()))


class TestRecordView:
    """Tests for record_view."""

    @pytest.mark.asyncio
    async def test_authenticated_viewer_counted_once(self, unit_env):
        """A signed-in user viewing twice should add a single view."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())
        viewer = new_user()

        # Act
        thread = await thread_service.record_view(thread, viewer)
        thread = await thread_service.record_view(thread, viewer)

        # Assert
        saved = await thread_repo.find_by_id(thread.id)
        assert saved.views == 1
        assert saved.viewed_by == frozenset({viewer})

    @pytest.mark.asyncio
    async def test_anonymous_views_always_count(self, unit_env):
        """Every anonymous view should increment the counter."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        # Act
        for _ in range(3):
            thread = await thread_service.record_view(thread, None)

        # Assert
        saved = await thread_repo.find_by_id(thread.id)
        assert saved.views == 3
        assert saved.viewed_by == frozenset()


class TestListThreads:
    """Tests for list_threads and list_user_threads."""

    @pytest.mark.asyncio
    async def test_filters_by_category(self, unit_env):
        """Only threads in the requested category should be listed."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        question = await thread_repo.save(
            make_thread(category=ThreadCategory.QUESTIONS)
        )
        await thread_repo.save(make_thread(category=ThreadCategory.SHOWCASE))

        # Act
        threads, total = await thread_service.list_threads(
            category=ThreadCategory.QUESTIONS
        )

        # Assert
        assert [t.id for t in threads] == [question.id]
        assert total == 1

    @pytest.mark.asyncio
    async def test_search_requires_every_word(self, unit_env):
        """All search words must match title, content or tags (any case)."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        match = await thread_repo.save(
            make_thread(title="Postgres arrays", content="Storing sets", tags=["SQL"])
        )
        await thread_repo.save(make_thread(title="Postgres tuning", content="Knobs"))

        # Act
        threads, total = await thread_service.list_threads(search="postgres  sql")

        # Assert
        assert [t.id for t in threads] == [match.id]
        assert total == 1

    @pytest.mark.asyncio
    async def test_sort_orders(self, unit_env):
        """Threads should come back in the requested order."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        old = await thread_repo.save(
            make_thread(age=timedelta(days=2), upvotes={new_user(), new_user()})
        )
        mid = await thread_repo.save(make_thread(age=timedelta(days=1), views=50))
        new = await thread_repo.save(make_thread(downvotes={new_user()}))

        # Act
        recent, _ = await thread_service.list_threads(sort=ThreadSortOrder.RECENT)
        oldest, _ = await thread_service.list_threads(sort=ThreadSortOrder.OLDEST)
        top, _ = await thread_service.list_threads(sort=ThreadSortOrder.TOP)
        views, _ = await thread_service.list_threads(sort=ThreadSortOrder.VIEWS)

        # Assert
        assert [t.id for t in recent] == [new.id, mid.id, old.id]
        assert [t.id for t in oldest] == [old.id, mid.id, new.id]
        assert [t.id for t in top] == [old.id, mid.id, new.id]
        assert views[0].id == mid.id

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        """Pages should slice the list while total counts every match."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        for days in range(5):
            await thread_repo.save(make_thread(age=timedelta(days=days)))

        # Act
        page_one, total = await thread_service.list_threads(page=1, limit=2)
        page_three, _ = await thread_service.list_threads(page=3, limit=2)

        # Assert
        assert len(page_one) == 2
        assert len(page_three) == 1
        assert total == 5

    @pytest.mark.asyncio
    async def test_list_user_threads(self, unit_env):
        """Only the author's threads should be listed, newest first."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = new_user()
        older = await thread_repo.save(
            make_thread(author_id=author, age=timedelta(hours=3))
        )
        newer = await thread_repo.save(make_thread(author_id=author))
        await thread_repo.save(make_thread())

        # Act
        threads, total = await thread_service.list_user_threads(author)

        # Assert
        assert [t.id for t in threads] == [newer.id, older.id]
        assert total == 2

    @pytest.mark.asyncio
    async def test_count_comments_includes_replies(self, unit_env):
        """Replies count; threads without comments report zero."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        comment_repo = await unit_env.get(CommentRepository)
        busy = await thread_repo.save(make_thread())
        quiet = await thread_repo.save(make_thread())
        top = await comment_repo.save(make_comment(busy.id))
        await comment_repo.save(make_comment(busy.id, parent_id=top.id))

        # Act
        counts = await thread_service.count_comments([busy.id, quiet.id])

        # Assert
        assert counts == {busy.id: 2, quiet.id: 0}


class TestUpdateAndDeleteThread:
    """Tests for update_thread and delete_thread."""

    @pytest.mark.asyncio
    async def test_author_can_update_and_votes_survive(self, unit_env):
        """Editing should change content but keep the vote ledger."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author, voter = new_user(), new_user()
        thread = await thread_repo.save(
            make_thread(author_id=author, upvotes={voter})
        )

        # Act
        updated = await thread_service.update_thread(
            thread_id=thread.id,
            user_id=author,
            title="Edited title",
            content="Edited body",
            category=ThreadCategory.FEEDBACK,
            tags=["edited"],
        )

        # Assert
        assert updated.title == "Edited title"
        assert updated.category == ThreadCategory.FEEDBACK
        assert updated.upvotes == frozenset({voter})
        assert (await thread_repo.find_by_id(thread.id)) == updated

    @pytest.mark.asyncio
    async def test_non_author_cannot_update(self, unit_env):
        """Only the author may edit a thread."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await thread_service.update_thread(
                thread_id=thread.id,
                user_id=new_user(),
                title="Hijacked",
                content="Nope",
                category=ThreadCategory.OTHER,
            )

    @pytest.mark.asyncio
    async def test_delete_cascades_to_comments(self, unit_env):
        """Deleting a thread should delete all of its comments."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = new_user()
        thread = await thread_repo.save(make_thread(author_id=author))
        other = await thread_repo.save(make_thread())
        top = await comment_repo.save(make_comment(thread.id))
        reply = await comment_repo.save(make_comment(thread.id, parent_id=top.id))
        survivor = await comment_repo.save(make_comment(other.id))

        # Act
        await thread_service.delete_thread(thread.id, author)

        # Assert
        assert await thread_repo.find_by_id(thread.id) is None
        assert await comment_repo.find_by_id(top.id) is None
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(survivor.id) == survivor

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        """Only the author may delete a thread."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await thread_service.delete_thread(thread.id, new_user())
        assert await thread_repo.find_by_id(thread.id) is not None


class TestToggleLike:
    """Tests for toggle_like."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        """Liking twice should add then remove the like."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())
        user = new_user()

        # Act
        liked = await thread_service.toggle_like(thread.id, user)
        unliked = await thread_service.toggle_like(thread.id, user)

        # Assert
        assert liked == (1, True)
        assert unliked == (0, False)

    @pytest.mark.asyncio
    async def test_like_missing_thread_raises(self, unit_env):
        """Liking an unknown thread should raise NotFoundError."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await thread_service.toggle_like(ThreadId(uuid4()), new_user())
