"""Base model for board entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for users, questions, answers, transfers and board views.

    Entities are frozen. Repositories return fresh instances, and changes
    go through ``model_copy(update=...)`` so a snapshot handed to readers
    can never be edited in place.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
