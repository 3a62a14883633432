"""Session projection: profile plus notifications keyed by meta id."""

from __future__ import annotations

from projectarr.application.context import ProjectionContext
from projectarr.application.views import View
from projectarr.domain.entities.notifications import NotificationsBucket


def project_session(
    notifications: NotificationsBucket, ctx: ProjectionContext
) -> View:
    """Project the user session.

    Notifications are regrouped from ``meta id -> video id -> item`` to
    ``meta id -> [item, ...]``, keeping the inner order.
    """
    return {
        "profile": ctx.profile,
        "notifications": {
            "items": {
                meta_id: list(by_video.values())
                for meta_id, by_video in notifications.items.items()
            },
            "lastUpdated": notifications.last_updated,
            "created": notifications.created,
        },
    }
