"""Celery application and async tasks."""
import logging

import httpx
from celery import Celery

from agentcast.config import get_settings

settings = get_settings()
logger = logging.getLogger("agentcast.workers")

# Create Celery application
celery_app = Celery(
    "agentcast",
    broker=settings.REDIS_URL,
    backend=settings.REDIS_URL,
)

# Celery configuration
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_routes={
        "agentcast.workers.tasks.deliver_broadcast_batch": {"queue": settings.EMAIL_QUEUE_NAME},
    },
)


def _delivery_client() -> httpx.Client:
    headers = {"Content-Type": "application/json"}
    if settings.EMAIL_DELIVERY_API_KEY:
        headers["Authorization"] = f"Bearer {settings.EMAIL_DELIVERY_API_KEY}"
    return httpx.Client(timeout=settings.EMAIL_DELIVERY_TIMEOUT_SECONDS, headers=headers)


@celery_app.task(bind=True, name="agentcast.workers.tasks.deliver_broadcast_batch")
def deliver_broadcast_batch(self, batch_id: str, payloads: list):
    """
    Relay a batch of broadcast emails to the delivery service.

    Each payload is posted independently; one failed email does not stop the
    rest. Retries are the delivery service's concern.

    Args:
        batch_id: Identifier shared by every job of the broadcast
        payloads: Serialized BroadcastJob payloads
    """
    if not settings.EMAIL_DELIVERY_URL:
        logger.error(f"EMAIL_DELIVERY_URL not configured; dropping batch {batch_id}")
        return {"batch_id": batch_id, "sent": 0, "failed": len(payloads)}

    sent = 0
    failed = 0
    with _delivery_client() as client:
        for payload in payloads:
            try:
                response = client.post(
                    settings.EMAIL_DELIVERY_URL,
                    json={**payload, "batch_id": batch_id},
                )
                response.raise_for_status()
                sent += 1
            except httpx.HTTPError as e:
                failed += 1
                logger.warning(f"Delivery failed for {payload.get('to')} in batch {batch_id}: {e}")

    logger.info(f"Batch {batch_id}: {sent} sent, {failed} failed")
    return {"batch_id": batch_id, "sent": sent, "failed": failed}
