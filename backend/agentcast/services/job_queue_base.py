"""Job queue abstract base class.

Defines the contract for handing broadcast email jobs to the outbound queue.
Consumers should use get_job_queue() from job_queue.py to get the active
backend.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from agentcast.services.categories import NotificationCategory


@dataclass(frozen=True)
class BroadcastJob:
    """One outbound email. Rendering and transport happen downstream."""

    recipient_email: str
    subject: str
    body: str
    reply_to: Optional[str] = None
    is_sender_copy: bool = False
    category: Optional[NotificationCategory] = None
    recipient_count: Optional[int] = None

    def to_payload(self) -> dict:
        """Serialized form stored on the queue."""
        variables = {
            "category": self.category.value if self.category else None,
            "is_sender_copy": self.is_sender_copy,
        }
        if self.recipient_count is not None:
            variables["recipient_count"] = self.recipient_count
        payload = {
            "template": "broadcast",
            "to": self.recipient_email,
            "subject": self.subject,
            "body": self.body,
            "variables": variables,
        }
        if self.reply_to:
            payload["reply_to"] = self.reply_to
        return payload


class JobQueue(ABC):
    """Abstract base class for job queue backends."""

    @abstractmethod
    async def submit_batch(self, jobs: Sequence[BroadcastJob]) -> int:
        """Submit every job as a single batch.

        Either all jobs are queued or none are.

        Returns:
            The number of jobs queued

        Raises:
            QueueSubmissionError: when the batch could not be queued
        """
        ...
