"""Notification delivery bookkeeping (pickup, expiry, email fallback)."""

from __future__ import annotations

from collections.abc import Iterable

from skyfleet.contracts.enums import NotificationTarget
from skyfleet.contracts.notification import Notification
from skyfleet.services.clock import Clock

# Channels a target has to be picked up on
_CHANNELS = {
    NotificationTarget.CLIENT: {"client"},
    NotificationTarget.AGENT: {"agent"},
    NotificationTarget.CLIENT_AND_AGENT: {"client", "agent"},
    NotificationTarget.EMAIL: set(),
    NotificationTarget.ALL: {"client", "agent"},
}


def _channels(notification: Notification) -> set[str]:
    return _CHANNELS[NotificationTarget(notification.target)]


def is_expired(notification: Notification, clock: Clock) -> bool:
    return notification.expires is not None and notification.expires <= clock.now()


def _picked_up(notification: Notification, channel: str) -> bool:
    return notification.client_pickup if channel == "client" else notification.agent_pickup


def pending_for(
    notifications: Iterable[Notification],
    recipient_id: str,
    channel: str,
    clock: Clock,
) -> list[Notification]:
    """Notifications still waiting to be shown on ``channel`` ("client"/"agent")."""
    return [
        n for n in notifications
        if n.recipient_id == recipient_id
        and not n.marked_for_deletion
        and channel in _channels(n)
        and not _picked_up(n, channel)
        and not is_expired(n, clock)
    ]


def mark_picked_up(notification: Notification, channel: str) -> None:
    if channel == "client":
        notification.client_pickup = True
    elif channel == "agent":
        notification.agent_pickup = True
    else:
        raise ValueError(f"Unknown pickup channel: {channel}")
    if is_delivered(notification):
        notification.marked_for_deletion = True


def is_delivered(notification: Notification) -> bool:
    """Every targeted channel has seen it (email counts once sent)."""
    channels = _channels(notification)
    if not all(_picked_up(notification, c) for c in channels):
        return False
    if NotificationTarget(notification.target) in (NotificationTarget.EMAIL, NotificationTarget.ALL):
        return notification.email_sent
    return True


def email_fallback_due(notification: Notification, clock: Clock) -> bool:
    """Email is needed: fallback time reached and nobody picked it up."""
    if notification.email_sent or notification.email_fallback is None:
        return False
    if any(_picked_up(notification, c) for c in _channels(notification)):
        return False
    return notification.email_fallback <= clock.now()
