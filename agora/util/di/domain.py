"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import AuthSettings
from agora.domain.repository import CommentRepository, ThreadRepository
from agora.domain.service import (
    CommentService,
    JWTService,
    ScoreAggregator,
    ThreadService,
    VoteLedger,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_score_aggregator(self) -> ScoreAggregator:
        """Provide stateless score aggregator."""
        return ScoreAggregator()

    @provide
    def get_vote_ledger(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> VoteLedger:
        """Provide vote ledger."""
        return VoteLedger(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_vote_service(
        self, vote_ledger: VoteLedger, score_aggregator: ScoreAggregator
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_ledger=vote_ledger, score_aggregator=score_aggregator)

    @provide
    def get_thread_service(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )
