"""Notification endpoints: queue, poll pending, acknowledge pickup."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends

from skyfleet.api.deps import get_clock, get_notification_repo
from skyfleet.contracts.notification import Notification
from skyfleet.persistence.repositories.notification_repo import NotificationRepository
from skyfleet.services.clock import Clock
from skyfleet.services.notifications import mark_picked_up, pending_for

router = APIRouter(prefix="/notifications", tags=["notifications"])

Channel = Literal["client", "agent"]


@router.post("", status_code=201)
async def create_notification(
    notification: Notification,
    repo: NotificationRepository = Depends(get_notification_repo),
) -> dict:
    await repo.create(notification)
    return notification.to_firestore()


@router.get("/pending")
async def list_pending(
    recipient_id: str,
    channel: Channel = "client",
    repo: NotificationRepository = Depends(get_notification_repo),
    clock: Clock = Depends(get_clock),
) -> list[dict]:
    items = await repo.list_for_recipient(recipient_id)
    return [n.to_firestore() for n in pending_for(items, recipient_id, channel, clock)]


@router.post("/{notification_id}/pickup")
async def pickup(
    notification_id: str,
    channel: Channel = "client",
    repo: NotificationRepository = Depends(get_notification_repo),
) -> dict:
    item = await repo.require(notification_id)
    mark_picked_up(item, channel)
    await repo.update(item)
    return item.to_firestore()
