"""Login history entry, written once per successful sign-in."""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import DeviceType, LoginHistoryEntryId, UserId


class LoginHistoryEntry(DomainModel):
    """Append-only record of a sign-in and the client that made it."""

    id: LoginHistoryEntryId
    user_id: UserId
    device_type: DeviceType
    browser: str = Field(default="", max_length=1000)
    os: str = Field(default="", max_length=255)
    ip_address: str = Field(default="", max_length=64)
    login_at: datetime = Field(default_factory=datetime.now)
