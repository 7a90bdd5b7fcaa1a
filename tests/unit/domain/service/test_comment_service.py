"""Unit tests for CommentService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from agora.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from agora.domain.repository import CommentRepository, ThreadRepository
from agora.domain.service import CommentService
from agora.domain.value import CommentId, ThreadId
from tests.conftest import make_comment, make_thread, new_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestAddComment:
    """Tests for add_comment."""

    @pytest.mark.asyncio
    async def test_add_top_level_comment(self, unit_env):
        """A comment on an existing thread should be saved with no votes."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        thread_repo = await unit_env.get(ThreadRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread = await thread_repo.save(make_thread())
        author = new_user()

        # Act
        comment = await comment_service.add_comment(
            thread_id=thread.id, author_id=author, content="  Great question  "
        )

        # Assert
        assert comment.content == "Great question"
        assert comment.parent_id is None
        assert comment.upvotes == frozenset()
        assert await comment_repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_add_reply(self, unit_env):
        """Replies should point at their parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        thread_repo = await unit_env.get(ThreadRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread = await thread_repo.save(make_thread())
        parent = await comment_repo.save(make_comment(thread.id))

        # Act
        reply = await comment_service.add_comment(
            thread_id=thread.id,
            author_id=new_user(),
            content="Agreed",
            parent_id=parent.id,
        )

        # Assert
        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_missing_thread_raises_not_found(self, unit_env):
        """Commenting on an unknown thread should raise NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Thread not found"):
            await comment_service.add_comment(
                thread_id=ThreadId(uuid4()), author_id=new_user(), content="Hello"
            )

    @pytest.mark.asyncio
    async def test_missing_parent_raises_validation_error(self, unit_env):
        """Replying to an unknown comment should raise ValidationError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        # Act & Assert
        with pytest.raises(ValidationError, match="Parent comment not found"):
            await comment_service.add_comment(
                thread_id=thread.id,
                author_id=new_user(),
                content="Hello",
                parent_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_thread_raises(self, unit_env):
        """A reply must stay on its parent's thread."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        thread_repo = await unit_env.get(ThreadRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread = await thread_repo.save(make_thread())
        other = await thread_repo.save(make_thread())
        parent = await comment_repo.save(make_comment(other.id))

        # Act & Assert
        with pytest.raises(ValidationError, match="does not belong"):
            await comment_service.add_comment(
                thread_id=thread.id,
                author_id=new_user(),
                content="Hello",
                parent_id=parent.id,
            )


class TestGetComments:
    """Tests for get_comments."""

    @pytest.mark.asyncio
    async def test_top_level_newest_first_with_replies_oldest_first(self, unit_env):
        """Top-level comments are newest first; replies oldest first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        thread_repo = await unit_env.get(ThreadRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread = await thread_repo.save(make_thread())
        first = await comment_repo.save(make_comment(thread.id, age=timedelta(hours=5)))
        second = await comment_repo.save(
            make_comment(thread.id, age=timedelta(hours=1))
        )
        early_reply = await comment_repo.save(
            make_comment(thread.id, parent_id=first.id, age=timedelta(hours=4))
        )
        late_reply = await comment_repo.save(
            make_comment(thread.id, parent_id=first.id, age=timedelta(hours=2))
        )

        # Act
        entries, total = await comment_service.get_comments(thread.id)

        # Assert
        assert total == 2
        assert [c.id for c, _ in entries] == [second.id, first.id]
        replies = dict((c.id, r) for c, r in entries)
        assert [r.id for r in replies[first.id]] == [early_reply.id, late_reply.id]
        assert replies[second.id] == []

    @pytest.mark.asyncio
    async def test_pagination_counts_top_level_only(self, unit_env):
        """Total and paging should only count top-level comments."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        thread_repo = await unit_env.get(ThreadRepository)
        comment_repo = await unit_env.get(CommentRepository)
        thread = await thread_repo.save(make_thread())
        parents = [
            await comment_repo.save(make_comment(thread.id, age=timedelta(minutes=i)))
            for i in range(3)
        ]
        await comment_repo.save(make_comment(thread.id, parent_id=parents[0].id))

        # Act
        entries, total = await comment_service.get_comments(thread.id, page=2, limit=2)

        # Assert
        assert total == 3
        assert len(entries) == 1


class TestUpdateAndDeleteComment:
    """Tests for update_comment and delete_comment."""

    @pytest.mark.asyncio
    async def test_update_marks_edited(self, unit_env):
        """Editing should replace the content and mark the comment edited."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, voter = new_user(), new_user()
        comment = await comment_repo.save(
            make_comment(make_thread().id, author_id=author, upvotes={voter})
        )

        # Act
        updated = await comment_service.update_comment(comment.id, author, "Fixed")

        # Assert
        assert updated.content == "Fixed"
        assert updated.is_edited is True
        assert updated.upvotes == frozenset({voter})

    @pytest.mark.asyncio
    async def test_non_author_cannot_update(self, unit_env):
        """Only the author may edit a comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(make_thread().id))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.update_comment(comment.id, new_user(), "Mine now")

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises(self, unit_env):
        """Editing an unknown comment should raise NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.update_comment(
                CommentId(uuid4()), new_user(), "Hello"
            )

    @pytest.mark.asyncio
    async def test_delete_removes_replies(self, unit_env):
        """Deleting a comment should delete its replies too."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = new_user()
        thread_id = make_thread().id
        parent = await comment_repo.save(make_comment(thread_id, author_id=author))
        reply = await comment_repo.save(make_comment(thread_id, parent_id=parent.id))
        sibling = await comment_repo.save(make_comment(thread_id))

        # Act
        await comment_service.delete_comment(parent.id, author)

        # Assert
        assert await comment_repo.find_by_id(parent.id) is None
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(sibling.id) == sibling

    @pytest.mark.asyncio
    async def test_delete_removes_replies_at_every_depth(self, unit_env):
        """Replies of replies should go along with the deleted comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = new_user()
        thread_id = make_thread().id
        parent = await comment_repo.save(make_comment(thread_id, author_id=author))
        reply = await comment_repo.save(make_comment(thread_id, parent_id=parent.id))
        nested = await comment_repo.save(make_comment(thread_id, parent_id=reply.id))
        sibling = await comment_repo.save(make_comment(thread_id))

        # Act
        await comment_service.delete_comment(parent.id, author)

        # Assert
        assert await comment_repo.find_by_id(parent.id) is None
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(nested.id) is None
        assert await comment_repo.find_by_id(sibling.id) == sibling

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        """Only the author may delete a comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(make_thread().id))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(comment.id, new_user())


class TestToggleCommentLike:
    """Tests for toggle_like."""

    @pytest.mark.asyncio
    async def test_like_is_independent_of_votes(self, unit_env):
        """Liking should not touch the vote ledger."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user = new_user()
        comment = await comment_repo.save(
            make_comment(make_thread().id, downvotes={user})
        )

        # Act
        likes, is_liked = await comment_service.toggle_like(comment.id, user)

        # Assert
        assert (likes, is_liked) == (1, True)
        saved = await comment_repo.find_by_id(comment.id)
        assert saved.downvotes == frozenset({user})
