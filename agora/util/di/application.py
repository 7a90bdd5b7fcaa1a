"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from agora.application.usecase.like import ToggleLikeUseCase
from agora.application.usecase.thread import (
    CreateThreadUseCase,
    DeleteThreadUseCase,
    GetThreadUseCase,
    ListThreadsUseCase,
    ListUserThreadsUseCase,
    UpdateThreadUseCase,
)
from agora.application.usecase.vote import CastVoteUseCase
from agora.config import PaginationSettings
from agora.domain.service import (
    CommentService,
    ScoreAggregator,
    ThreadService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide
    def get_toggle_like_use_case(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            thread_service=thread_service, comment_service=comment_service
        )

    # Thread use cases
    @provide
    def get_create_thread_use_case(
        self, thread_service: ThreadService, score_aggregator: ScoreAggregator
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(
            thread_service=thread_service, score_aggregator=score_aggregator
        )

    @provide
    def get_get_thread_use_case(
        self, thread_service: ThreadService, score_aggregator: ScoreAggregator
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            thread_service=thread_service, score_aggregator=score_aggregator
        )

    @provide
    def get_list_threads_use_case(
        self,
        thread_service: ThreadService,
        score_aggregator: ScoreAggregator,
        pagination: PaginationSettings,
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(
            thread_service=thread_service,
            score_aggregator=score_aggregator,
            pagination=pagination,
        )

    @provide
    def get_list_user_threads_use_case(
        self,
        thread_service: ThreadService,
        score_aggregator: ScoreAggregator,
        pagination: PaginationSettings,
    ) -> ListUserThreadsUseCase:
        """Provide list user threads use case."""
        return ListUserThreadsUseCase(
            thread_service=thread_service,
            score_aggregator=score_aggregator,
            pagination=pagination,
        )

    @provide
    def get_update_thread_use_case(
        self, thread_service: ThreadService, score_aggregator: ScoreAggregator
    ) -> UpdateThreadUseCase:
        """Provide update thread use case."""
        return UpdateThreadUseCase(
            thread_service=thread_service, score_aggregator=score_aggregator
        )

    @provide
    def get_delete_thread_use_case(
        self, thread_service: ThreadService
    ) -> DeleteThreadUseCase:
        """Provide delete thread use case."""
        return DeleteThreadUseCase(thread_service=thread_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, score_aggregator: ScoreAggregator
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, score_aggregator=score_aggregator
        )

    @provide
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        score_aggregator: ScoreAggregator,
        pagination: PaginationSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            score_aggregator=score_aggregator,
            pagination=pagination,
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, score_aggregator: ScoreAggregator
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, score_aggregator=score_aggregator
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)
