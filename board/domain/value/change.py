"""Change feed event."""

from typing import Any

from pydantic import Field

from board.domain.value.common import ValueObject
from board.domain.value.types import ChangeOp, ChangeTable


class ChangeEvent(ValueObject):
    """Row-level change notification.

    Delivery is at-least-once and may be out of order; the payload is
    informational only and never applied to a snapshot directly.
    """

    table: ChangeTable
    op: ChangeOp
    row: dict[str, Any] = Field(default_factory=dict)
