"""Vote domain service."""

from datetime import datetime
from uuid import UUID

import logfire

from agora.domain.error import InvalidVoteIntentError
from agora.domain.value import UserId, VotableType, VoteIntent, VoteTally

from .base import Service
from .score import ScoreAggregator
from .vote_ledger import VoteLedger


def parse_intent(vote_type: object) -> VoteIntent:
    """Parse a raw vote type into a VoteIntent.

    Raises:
        InvalidVoteIntentError: If the value is not "upvote" or "downvote"
    """
    if isinstance(vote_type, VoteIntent):
        return vote_type
    try:
        return VoteIntent(vote_type)
    except ValueError:
        raise InvalidVoteIntentError(vote_type)


def transition(
    upvotes: frozenset[UserId],
    downvotes: frozenset[UserId],
    user_id: UserId,
    intent: VoteIntent,
) -> tuple[frozenset[UserId], frozenset[UserId]]:
    """Apply a vote intent to a ledger.

    Same intent as the current vote cancels it; the opposite intent moves
    the user across in one step. The user never ends up in both sets.

    Args:
        upvotes: Current upvoters
        downvotes: Current downvoters
        user_id: Voting user
        intent: Requested vote

    Returns:
        New (upvotes, downvotes)
    """
    if intent == VoteIntent.UPVOTE:
        chosen, other = upvotes, downvotes
    else:
        chosen, other = downvotes, upvotes

    other = other - {user_id}
    if user_id in chosen:
        chosen = chosen - {user_id}
    else:
        chosen = chosen | {user_id}

    if intent == VoteIntent.UPVOTE:
        return chosen, other
    return other, chosen


class VoteService(Service):
    """Domain service applying vote intents to threads and comments."""

    def __init__(
        self, vote_ledger: VoteLedger, score_aggregator: ScoreAggregator
    ) -> None:
        """Initialize vote service.

        Args:
            vote_ledger: Vote ledger for loading and saving entities
            score_aggregator: Aggregator for the response view
        """
        self.vote_ledger = vote_ledger
        self.score_aggregator = score_aggregator

    async def apply_vote(
        self,
        votable_type: VotableType,
        entity_id: UUID,
        user_id: UserId,
        intent: VoteIntent | str,
    ) -> VoteTally:
        """Apply a vote intent from a user to a thread or comment.

        Loads the ledger, applies the toggle, saves once, and returns the
        acting user's view with raw counts. Storage errors are not retried.

        Args:
            votable_type: Thread or comment
            entity_id: Entity ID
            user_id: Acting (authenticated) user ID
            intent: "upvote" or "downvote"

        Returns:
            Vote tally for the acting user

        Raises:
            InvalidVoteIntentError: If intent is not recognized
            NotFoundError: If the entity doesn't exist
            StorageError: If loading or saving fails
        """
        with logfire.span(
            "vote_service.apply_vote",
            votable_type=votable_type.value,
            entity_id=str(entity_id),
            user_id=str(user_id),
            intent=str(intent),
        ):
            vote_intent = parse_intent(intent)

            entity = await self.vote_ledger.load(votable_type, entity_id)
            previous = self.score_aggregator.user_vote(entity, user_id)

            upvotes, downvotes = transition(
                entity.upvotes, entity.downvotes, user_id, vote_intent
            )
            updated = entity.model_copy(
                update={
                    "upvotes": upvotes,
                    "downvotes": downvotes,
                    "updated_at": datetime.now(),
                }
            )

            saved = await self.vote_ledger.save(updated)
            tally = self.score_aggregator.tally(saved, user_id)

            logfire.info(
                "Vote applied",
                votable_type=votable_type.value,
                entity_id=str(entity_id),
                user_id=str(user_id),
                previous=previous.value if previous else None,
                current=tally.user_vote.value if tally.user_vote else None,
                vote_score=tally.vote_score,
            )
            return tally
