"""Domain value objects for Agora.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(frozen=True)


class VoteIntent(str, Enum):
    """Vote requested by a user.

    Repeating the same intent cancels the vote, switching intent flips it.
    """

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class UserVote(str, Enum):
    """Vote a viewer currently holds on an item."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    THREAD = "thread"
    COMMENT = "comment"


class ThreadCategory(str, Enum):
    """Discussion category a thread is filed under."""

    GENERAL = "General"
    QUESTIONS = "Questions"
    SHOWCASE = "Showcase"
    RESOURCES = "Resources"
    COLLABORATION = "Collaboration"
    FEEDBACK = "Feedback"
    OTHER = "Other"


class VoteView(ValueObject):
    """Viewer-facing vote representation of a thread or comment."""

    vote_score: int
    user_vote: UserVote | None = None


class VoteTally(VoteView):
    """Vote view plus the raw ledger sizes, returned after a vote."""

    upvotes: int = Field(ge=0)
    downvotes: int = Field(ge=0)
