"""Score aggregation for votable entities."""

from agora.domain.model.common import Votable
from agora.domain.value import UserId, UserVote, VoteTally, VoteView

from .base import Service


class ScoreAggregator(Service):
    """Derives the viewer-facing vote representation from a vote ledger.

    Stateless and free of I/O; every valid entity has a view.
    """

    @staticmethod
    def user_vote(entity: Votable, viewer_id: UserId | None) -> UserVote | None:
        """Return the vote the viewer holds on the entity, if any.

        Args:
            entity: Thread or comment
            viewer_id: Viewing user (None for anonymous viewers)

        Returns:
            UPVOTE, DOWNVOTE, or None
        """
        if viewer_id is None:
            return None
        if viewer_id in entity.upvotes:
            return UserVote.UPVOTE
        if viewer_id in entity.downvotes:
            return UserVote.DOWNVOTE
        return None

    def compute_view(self, entity: Votable, viewer_id: UserId | None) -> VoteView:
        """Compute net score and the viewer's vote state.

        Args:
            entity: Thread or comment
            viewer_id: Viewing user (None for anonymous viewers)

        Returns:
            Vote view for the viewer
        """
        return VoteView(
            vote_score=len(entity.upvotes) - len(entity.downvotes),
            user_vote=self.user_vote(entity, viewer_id),
        )

    def tally(self, entity: Votable, viewer_id: UserId | None) -> VoteTally:
        """Compute the vote view plus raw upvote/downvote counts.

        Args:
            entity: Thread or comment
            viewer_id: Viewing user (None for anonymous viewers)

        Returns:
            Vote tally for the viewer
        """
        view = self.compute_view(entity, viewer_id)
        return VoteTally(
            vote_score=view.vote_score,
            user_vote=view.user_vote,
            upvotes=len(entity.upvotes),
            downvotes=len(entity.downvotes),
        )
