"""Notifications pushed to the game client, the tracking agent, or email.

Stored at: ``/notifications/{notification_id}``

A notification is fire-and-forget: each channel picks it up once, and it
can be dropped once every targeted channel has done so or it has expired.
"""

import uuid

from pydantic import Field

from skyfleet.contracts.common import UtcDateTime, VersionedModel
from skyfleet.contracts.enums import NotificationStyle, NotificationTarget


def _new_id() -> str:
    return uuid.uuid4().hex


class Notification(VersionedModel):
    id: str = Field(default_factory=_new_id)
    grouping_id: str = Field(
        default_factory=_new_id,
        description="Shared by copies of one message sent to many recipients",
    )
    recipient_id: str
    sender: str = Field(default="OpenSky System", max_length=255)
    message: str = Field(..., min_length=1)
    style: NotificationStyle = NotificationStyle.TOAST_INFO
    target: NotificationTarget = NotificationTarget.CLIENT
    display_timeout: int | None = Field(default=None, gt=0, description="seconds")

    client_pickup: bool = False
    agent_pickup: bool = False
    expires: UtcDateTime | None = None
    email_fallback: UtcDateTime | None = Field(
        default=None, description="Send by email if not picked up by then"
    )
    email_sent: bool = False
    marked_for_deletion: bool = False
