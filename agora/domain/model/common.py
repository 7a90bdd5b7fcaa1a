"""Base models for all domain entities."""

from pydantic import BaseModel, ConfigDict, model_validator

from agora.domain.value import UserId


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,
    )


class Votable(DomainModel):
    """Base for entities carrying a vote ledger (threads and comments).

    The ledger is two sets of user IDs. A user appears in at most one of
    them; the net score is derived on read and never stored.
    """

    upvotes: frozenset[UserId] = frozenset()
    downvotes: frozenset[UserId] = frozenset()
    likes: frozenset[UserId] = frozenset()

    @model_validator(mode="after")
    def validate_disjoint_ledger(self) -> "Votable":
        """Reject a ledger where a user both upvoted and downvoted."""
        overlap = self.upvotes & self.downvotes
        if overlap:
            raise ValueError(
                f"Users cannot both upvote and downvote: {sorted(map(str, overlap))}"
            )
        return self

    @property
    def vote_score(self) -> int:
        """Net score: upvotes minus downvotes."""
        return len(self.upvotes) - len(self.downvotes)
