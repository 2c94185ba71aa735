"""Celery-backed job queue: the whole batch travels as one task message."""
import logging
import uuid
from typing import Sequence

from agentcast.config import get_settings
from agentcast.exceptions import QueueSubmissionError
from agentcast.services.job_queue_base import BroadcastJob, JobQueue

settings = get_settings()
logger = logging.getLogger("agentcast.queue.celery")


class CeleryJobQueue(JobQueue):
    """Publishes a batch to the email queue for ``deliver_broadcast_batch``."""

    def __init__(self, queue_name: str = None):
        self.queue_name = queue_name or settings.EMAIL_QUEUE_NAME

    async def submit_batch(self, jobs: Sequence[BroadcastJob]) -> int:
        if not jobs:
            return 0

        from agentcast.workers.tasks import deliver_broadcast_batch

        batch_id = str(uuid.uuid4())
        try:
            task = deliver_broadcast_batch.apply_async(
                args=[batch_id, [job.to_payload() for job in jobs]],
                queue=self.queue_name,
            )
        except Exception as e:
            # Broker errors come from kombu/redis with no common base class
            logger.error(f"Failed to publish batch {batch_id} ({len(jobs)} jobs): {e}")
            raise QueueSubmissionError("Failed to queue email jobs", job_count=len(jobs)) from e

        logger.info(f"Published batch {batch_id} with {len(jobs)} jobs as task {task.id}")
        return len(jobs)
