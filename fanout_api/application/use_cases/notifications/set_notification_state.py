"""Use case for marking notifications read or unread."""

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from fanout_api.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def set_notification_state(
    session: Session, ids: Iterable[int], *, unread: bool
) -> None:
    """Set ``seen`` to ``not unread`` for every id; unknown ids are ignored.

    Ownership is not checked here; the caller has already authorized the ids.
    """

    ids = list(ids)
    if not ids:
        return
    changed = NotificationRepository(session).set_seen(ids, seen=not unread)
    logger.debug("Marked %d of %d notifications unread=%s", changed, len(ids), unread)
