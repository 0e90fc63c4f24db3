"""Tests for recording events and fanning them out to subscribers."""

from __future__ import annotations

import pytest

from fanout_api.application.use_cases.events import (
    create_comment_event,
    record_event,
    set_taxonomy_parent_event,
    set_uuid_state_event,
)
from fanout_api.application.use_cases.notifications import collect_subscribers, fan_out
from fanout_api.domain.errors import MissingObject, MissingUser
from fanout_api.infrastructure.connection import PooledCheckout
from fanout_api.infrastructure.models import EventLogModel, NotificationModel
from fanout_api.infrastructure.repositories import EventRepository, NotificationRepository


def _record(session_factory, payload):
    with PooledCheckout(session_factory) as context:
        with context.transaction() as session:
            return record_event(session, payload)


def test_event_without_subscribers_creates_no_notifications(session_factory, seed):
    actor = seed.user()
    comment = seed.object("comment")

    event = _record(
        session_factory, set_uuid_state_event(trashed=True, actor_id=actor, object_id=comment)
    )

    assert seed.notifications_for_event(event.id) == []


def test_actor_never_notifies_themselves(session_factory, seed):
    actor = seed.user()
    comment = seed.object("comment")
    seed.subscribe(comment, actor, send_email=True)

    event = _record(
        session_factory, set_uuid_state_event(trashed=True, actor_id=actor, object_id=comment)
    )

    assert seed.notifications_for_event(event.id) == []


def test_subscriber_of_the_object_is_notified(session_factory, seed):
    actor = seed.user()
    follower = seed.user()
    comment = seed.object("comment")
    seed.subscribe(comment, follower, send_email=True)

    event = _record(
        session_factory, set_uuid_state_event(trashed=False, actor_id=actor, object_id=comment)
    )

    assert seed.notifications_for_event(event.id) == [(follower, True)]


def test_related_object_subscribers_are_notified(session_factory, seed):
    actor = seed.user()
    follower = seed.user()
    thread = seed.object("comment")
    comment = seed.object("comment")
    seed.subscribe(thread, follower)

    event = _record(
        session_factory,
        create_comment_event(actor_id=actor, thread_id=thread, comment_id=comment),
    )

    assert seed.notifications_for_event(event.id) == [(follower, False)]


def test_user_subscribed_to_several_objects_gets_one_notification(session_factory, seed):
    actor = seed.user()
    follower = seed.user()
    other = seed.user()
    child = seed.object("taxonomyTerm")
    old_parent = seed.object("taxonomyTerm")
    new_parent = seed.object("taxonomyTerm")
    seed.subscribe(child, follower)
    seed.subscribe(old_parent, follower)
    seed.subscribe(new_parent, follower)
    seed.subscribe(new_parent, other)
    seed.subscribe(new_parent, actor)

    event = _record(
        session_factory,
        set_taxonomy_parent_event(
            actor_id=actor,
            child_id=child,
            previous_parent_id=old_parent,
            parent_id=new_parent,
        ),
    )

    recipients = [user_id for user_id, _ in seed.notifications_for_event(event.id)]
    assert sorted(recipients) == sorted([follower, other])


def test_first_subscription_decides_email_preference(session_factory, seed):
    actor = seed.user()
    follower = seed.user()
    thread = seed.object("comment")
    comment = seed.object("comment")
    seed.subscribe(comment, follower, send_email=False)
    seed.subscribe(thread, follower, send_email=True)

    with PooledCheckout(session_factory) as context:
        with context.transaction() as session:
            event = EventRepository(session).create(
                event_type="discussion/comment/create",
                actor_id=actor,
                object_id=comment,
                uuid_parameters={"discussion": thread},
            )
            subscribers = collect_subscribers(session, event)

    assert [(s.user_id, s.send_email) for s in subscribers] == [(follower, False)]


def test_same_object_in_several_slots_is_harmless(session_factory, seed):
    actor = seed.user()
    follower = seed.user()
    term = seed.object("taxonomyTerm")
    parent = seed.object("taxonomyTerm")
    seed.subscribe(parent, follower)
    seed.subscribe(parent, follower)

    event = _record(
        session_factory,
        set_taxonomy_parent_event(
            actor_id=actor, child_id=term, previous_parent_id=parent, parent_id=parent
        ),
    )

    assert seed.notifications_for_event(event.id) == [(follower, False)]


def test_failed_fan_out_rolls_back_event_and_notifications(
    session_factory, seed, monkeypatch
):
    actor = seed.user()
    comment = seed.object("comment")
    for _ in range(3):
        seed.subscribe(comment, seed.user())

    original = NotificationRepository.create_for_event
    calls = []

    def failing_create(self, **kwargs):
        calls.append(kwargs)
        if len(calls) == 2:
            raise RuntimeError("storage failure")
        return original(self, **kwargs)

    monkeypatch.setattr(NotificationRepository, "create_for_event", failing_create)

    with pytest.raises(RuntimeError):
        _record(
            session_factory,
            set_uuid_state_event(trashed=True, actor_id=actor, object_id=comment),
        )

    assert len(calls) == 2
    assert seed.count(EventLogModel) == 0
    assert seed.count(NotificationModel) == 0


def test_missing_actor_is_rejected(session_factory, seed):
    comment = seed.object("comment")

    with pytest.raises(MissingUser):
        _record(
            session_factory,
            set_uuid_state_event(trashed=True, actor_id=9999, object_id=comment),
        )
    assert seed.count(EventLogModel) == 0


def test_missing_object_is_rejected(session_factory, seed):
    actor = seed.user()

    with pytest.raises(MissingObject):
        _record(
            session_factory,
            set_uuid_state_event(trashed=True, actor_id=actor, object_id=9999),
        )


def test_fan_out_returns_created_notifications(session_factory, seed):
    actor = seed.user()
    follower = seed.user()
    comment = seed.object("comment")
    seed.subscribe(comment, follower, send_email=True)

    with PooledCheckout(session_factory) as context:
        with context.transaction() as session:
            event = EventRepository(session).create(
                event_type="uuid/trash", actor_id=actor, object_id=comment
            )
            notifications = fan_out(session, event)

    assert len(notifications) == 1
    notification = notifications[0]
    assert notification.user_id == follower
    assert notification.event_id == event.id
    assert notification.email is True
    assert notification.email_sent is False
    assert notification.unread is True
