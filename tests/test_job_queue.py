import httpx
import pytest
from sqlalchemy import select

from agentcast.config import get_settings
from agentcast.exceptions import QueueSubmissionError
from agentcast.models import EmailJob
from agentcast.services.categories import NotificationCategory
from agentcast.services.job_queue import get_job_queue
from agentcast.services.job_queue_base import BroadcastJob
from agentcast.services.job_queue_celery import CeleryJobQueue
from agentcast.services.job_queue_db import DatabaseJobQueue
from agentcast.workers import tasks

JOBS = [
    BroadcastJob(
        recipient_email="a@example.com",
        subject="Buyer Need: 3BR",
        body="Details",
        reply_to="sender@example.com",
        category=NotificationCategory.BUYER_NEED,
    ),
    BroadcastJob(
        recipient_email="sender@example.com",
        subject="[Copy] Buyer Need: 3BR",
        body="Details",
        is_sender_copy=True,
        category=NotificationCategory.BUYER_NEED,
        recipient_count=1,
    ),
]


async def test_database_queue_inserts_one_row_per_job(db):
    queued = await DatabaseJobQueue(db, max_attempts=3).submit_batch(JOBS)

    assert queued == 2
    rows = (await db.execute(select(EmailJob).order_by(EmailJob.created_at))).scalars().all()
    assert len(rows) == 2
    assert {row.status for row in rows} == {"queued"}
    assert len({row.batch_id for row in rows}) == 1
    assert {row.max_attempts for row in rows} == {3}
    payloads = sorted((row.payload for row in rows), key=lambda p: p["to"])
    assert payloads[0]["reply_to"] == "sender@example.com"
    assert payloads[0]["variables"] == {"category": "buyer_need", "is_sender_copy": False}
    assert payloads[1]["variables"]["recipient_count"] == 1


async def test_database_queue_with_no_jobs_writes_nothing(db):
    assert await DatabaseJobQueue(db).submit_batch([]) == 0
    assert (await db.execute(select(EmailJob))).scalars().all() == []


async def test_celery_queue_publishes_single_message(monkeypatch):
    calls = []

    class FakeResult:
        id = "task-1"

    def fake_apply_async(args, queue):
        calls.append((args, queue))
        return FakeResult()

    monkeypatch.setattr(tasks.deliver_broadcast_batch, "apply_async", fake_apply_async)

    queued = await CeleryJobQueue(queue_name="email").submit_batch(JOBS)

    assert queued == 2
    assert len(calls) == 1
    (batch_id, payloads), queue_name = calls[0]
    assert queue_name == "email"
    assert [payload["to"] for payload in payloads] == ["a@example.com", "sender@example.com"]


async def test_celery_queue_broker_failure(monkeypatch):
    def broken_apply_async(args, queue):
        raise ConnectionError("redis down")

    monkeypatch.setattr(tasks.deliver_broadcast_batch, "apply_async", broken_apply_async)

    with pytest.raises(QueueSubmissionError) as exc:
        await CeleryJobQueue().submit_batch(JOBS)
    assert exc.value.job_count == 2


async def test_get_job_queue_follows_settings(db, monkeypatch):
    settings = get_settings()
    assert isinstance(get_job_queue(db), DatabaseJobQueue)

    monkeypatch.setattr(settings, "JOB_QUEUE_BACKEND", "celery")
    assert isinstance(get_job_queue(db), CeleryJobQueue)

    monkeypatch.setattr(settings, "JOB_QUEUE_BACKEND", "carrier-pigeon")
    with pytest.raises(ValueError):
        get_job_queue(db)


def test_deliver_broadcast_batch_counts_failures(monkeypatch):
    seen = []

    def handler(request):
        seen.append(request)
        if b"bounce@example.com" in request.content:
            return httpx.Response(500)
        return httpx.Response(202)

    monkeypatch.setattr(tasks.settings, "EMAIL_DELIVERY_URL", "http://mail.test/send")
    monkeypatch.setattr(
        tasks, "_delivery_client", lambda: httpx.Client(transport=httpx.MockTransport(handler))
    )

    payloads = [job.to_payload() for job in JOBS] + [{"to": "bounce@example.com", "subject": "x", "body": "y"}]
    result = tasks.deliver_broadcast_batch("batch-1", payloads)

    assert result == {"batch_id": "batch-1", "sent": 2, "failed": 1}
    assert len(seen) == 3


def test_deliver_broadcast_batch_without_endpoint(monkeypatch):
    monkeypatch.setattr(tasks.settings, "EMAIL_DELIVERY_URL", "")
    result = tasks.deliver_broadcast_batch("batch-2", [JOBS[0].to_payload()])
    assert result == {"batch_id": "batch-2", "sent": 0, "failed": 1}
