import uuid

import pytest

from agentcast.exceptions import QueueSubmissionError
from agentcast.services.categories import NotificationCategory
from agentcast.services.directory import Recipient
from agentcast.services.dispatcher import (
    BroadcastDispatcher,
    BroadcastMessage,
    DispatchOptions,
    DispatchStatus,
    clean_reply_to,
)

from conftest import FakeJobQueue

MESSAGE = BroadcastMessage(
    category=NotificationCategory.BUYER_NEED,
    subject="Looking for a 3BR in Back Bay",
    body="Pre-approved buyers, closing in 60 days.",
    criteria_lines=("State: MA",),
)


def _recipients(*emails):
    return [Recipient(uuid.uuid4(), email) for email in emails]


async def test_one_job_per_recipient():
    queue = FakeJobQueue()
    dispatcher = BroadcastDispatcher(queue)

    result = await dispatcher.enqueue(
        _recipients("a@example.com", "b@example.com"),
        MESSAGE,
        DispatchOptions(reply_to="sender@example.com"),
    )

    assert result.status is DispatchStatus.QUEUED
    assert (result.recipient_count, result.queued) == (2, 2)
    assert len(queue.batches) == 1
    job = queue.jobs[0]
    assert job.subject == "Buyer Need: Looking for a 3BR in Back Bay"
    assert job.body == "State: MA\n\nPre-approved buyers, closing in 60 days."
    assert job.reply_to == "sender@example.com"
    assert not job.is_sender_copy


async def test_sender_copy_is_appended_once():
    queue = FakeJobQueue()
    dispatcher = BroadcastDispatcher(queue)

    await dispatcher.enqueue(
        _recipients("a@example.com", "b@example.com", "c@example.com"),
        MESSAGE,
        DispatchOptions(send_copy_to_self=True, sender_email="sender@example.com"),
    )

    copies = [job for job in queue.jobs if job.is_sender_copy]
    assert len(queue.jobs) == 4
    assert len(copies) == 1
    copy = copies[0]
    assert copy.recipient_email == "sender@example.com"
    assert copy.subject.startswith("[Copy] Buyer Need:")
    assert copy.to_payload()["variables"]["recipient_count"] == 3
    assert "sent to 3 agents" in copy.body


async def test_empty_recipients_queue_nothing():
    queue = FakeJobQueue()
    dispatcher = BroadcastDispatcher(queue)

    result = await dispatcher.enqueue(
        [], MESSAGE, DispatchOptions(send_copy_to_self=True, sender_email="sender@example.com")
    )

    assert result.status is DispatchStatus.NO_RECIPIENTS
    assert result.queued == 0
    assert result.message == "No agents match the selected criteria"
    assert queue.batches == []


async def test_invalid_reply_to_is_omitted():
    queue = FakeJobQueue()
    dispatcher = BroadcastDispatcher(queue)

    await dispatcher.enqueue(_recipients("a@example.com"), MESSAGE, DispatchOptions(reply_to="not-an-email"))

    assert queue.jobs[0].reply_to is None
    assert "reply_to" not in queue.jobs[0].to_payload()


async def test_queue_failure_propagates():
    dispatcher = BroadcastDispatcher(FakeJobQueue(fail=True))
    with pytest.raises(QueueSubmissionError):
        await dispatcher.enqueue(_recipients("a@example.com"), MESSAGE)


def test_clean_reply_to():
    assert clean_reply_to(" agent@example.com ") == "agent@example.com"
    assert clean_reply_to("") is None
    assert clean_reply_to("agent@") is None
