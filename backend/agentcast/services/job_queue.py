"""Job queue factory."""
from sqlalchemy.ext.asyncio import AsyncSession

from agentcast.config import get_settings
from agentcast.services.job_queue_base import JobQueue

settings = get_settings()


def get_job_queue(db: AsyncSession) -> JobQueue:
    """Get the job queue backend selected by JOB_QUEUE_BACKEND."""
    backend = settings.JOB_QUEUE_BACKEND
    if backend == "database":
        from agentcast.services.job_queue_db import DatabaseJobQueue
        return DatabaseJobQueue(db)
    if backend == "celery":
        from agentcast.services.job_queue_celery import CeleryJobQueue
        return CeleryJobQueue()
    raise ValueError(f"Unknown job queue backend: {backend}")
