"""Workers exports."""
from agentcast.workers.tasks import (
    celery_app,
    deliver_broadcast_batch,
)

__all__ = [
    "celery_app",
    "deliver_broadcast_batch",
]
