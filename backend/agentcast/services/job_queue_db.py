"""Database-backed job queue: one email_jobs row per job."""
import logging
import uuid
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from agentcast.config import get_settings
from agentcast.exceptions import QueueSubmissionError
from agentcast.models import EmailJob
from agentcast.services.job_queue_base import BroadcastJob, JobQueue

settings = get_settings()
logger = logging.getLogger("agentcast.queue.database")


class DatabaseJobQueue(JobQueue):
    """Inserts the whole batch in one transaction for the email worker to poll."""

    def __init__(self, db: AsyncSession, max_attempts: int = None):
        self.db = db
        self.max_attempts = max_attempts or settings.EMAIL_JOB_MAX_ATTEMPTS

    async def submit_batch(self, jobs: Sequence[BroadcastJob]) -> int:
        if not jobs:
            return 0

        batch_id = uuid.uuid4()
        rows = [
            EmailJob(
                batch_id=batch_id,
                status="queued",
                attempts=0,
                max_attempts=self.max_attempts,
                payload=job.to_payload(),
            )
            for job in jobs
        ]
        try:
            self.db.add_all(rows)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to queue batch {batch_id} ({len(jobs)} jobs): {e}")
            raise QueueSubmissionError("Failed to queue email jobs", job_count=len(jobs)) from e

        logger.info(f"Queued batch {batch_id} with {len(rows)} email jobs")
        return len(rows)
