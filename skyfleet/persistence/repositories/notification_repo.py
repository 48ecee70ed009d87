"""Repository for notifications."""

from __future__ import annotations

from skyfleet.contracts.notification import Notification
from skyfleet.persistence.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    def __init__(self):
        super().__init__(Notification, "notifications")

    async def list_for_recipient(self, recipient_id: str) -> list[Notification]:
        return await self._where("recipient_id", "==", recipient_id)

    async def list_group(self, grouping_id: str) -> list[Notification]:
        """Every copy of a message sent to several recipients."""
        return await self._where("grouping_id", "==", grouping_id)
