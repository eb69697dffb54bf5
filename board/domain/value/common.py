"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, compared by value.

    Used for service outcomes (rate limit decisions, transfer and upvote
    outcomes), change events and outbound messages.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
