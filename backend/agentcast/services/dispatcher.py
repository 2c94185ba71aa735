"""Turns matched recipients into email jobs and submits them as one batch."""
import enum
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from email_validator import EmailNotValidError, validate_email

from agentcast.services.categories import NotificationCategory
from agentcast.services.directory import Recipient
from agentcast.services.job_queue_base import BroadcastJob, JobQueue

logger = logging.getLogger("agentcast.dispatcher")

SENDER_COPY_PREFIX = "[Copy]"


def clean_reply_to(address: Optional[str]) -> Optional[str]:
    """Normalized reply-to address, or None when missing or malformed."""
    if not address or not address.strip():
        return None
    try:
        return validate_email(address.strip(), check_deliverability=False).normalized
    except EmailNotValidError as e:
        logger.warning(f"Omitting invalid reply-to address {address!r}: {e}")
        return None


@dataclass(frozen=True)
class BroadcastMessage:
    category: NotificationCategory
    subject: str
    body: str
    criteria_lines: tuple[str, ...] = ()

    @property
    def full_subject(self) -> str:
        return f"{self.category.label}: {self.subject}"

    @property
    def full_body(self) -> str:
        if not self.criteria_lines:
            return self.body
        return "\n".join(self.criteria_lines) + "\n\n" + self.body


@dataclass(frozen=True)
class DispatchOptions:
    reply_to: Optional[str] = None
    send_copy_to_self: bool = False
    sender_email: Optional[str] = None


class DispatchStatus(str, enum.Enum):
    QUEUED = "queued"
    NO_RECIPIENTS = "no_recipients"


@dataclass
class DispatchResult:
    status: DispatchStatus
    recipient_count: int = 0
    queued: int = 0
    omitted: list = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.status is DispatchStatus.NO_RECIPIENTS:
            return "No agents match the selected criteria"
        noun = "agent" if self.recipient_count == 1 else "agents"
        return f"Broadcast sent to {self.recipient_count} {noun}"


class BroadcastDispatcher:
    """Builds one job per recipient plus an optional sender copy."""

    def __init__(self, queue: JobQueue):
        self.queue = queue

    def build_jobs(
        self,
        recipients: Sequence[Recipient],
        message: BroadcastMessage,
        options: DispatchOptions = DispatchOptions(),
    ) -> list[BroadcastJob]:
        if not recipients:
            return []

        reply_to = clean_reply_to(options.reply_to)
        jobs = [
            BroadcastJob(
                recipient_email=recipient.email,
                subject=message.full_subject,
                body=message.full_body,
                reply_to=reply_to,
                category=message.category,
            )
            for recipient in recipients
        ]

        if options.send_copy_to_self:
            sender = clean_reply_to(options.sender_email)
            if sender is None:
                logger.warning("Sender copy requested but the sender has no valid address")
            else:
                count = len(recipients)
                noun = "agent" if count == 1 else "agents"
                jobs.append(
                    BroadcastJob(
                        recipient_email=sender,
                        subject=f"{SENDER_COPY_PREFIX} {message.full_subject}",
                        body=f"This message was sent to {count} {noun}.\n\n{message.full_body}",
                        reply_to=reply_to,
                        is_sender_copy=True,
                        category=message.category,
                        recipient_count=count,
                    )
                )
        return jobs

    async def enqueue(
        self,
        recipients: Sequence[Recipient],
        message: BroadcastMessage,
        options: DispatchOptions = DispatchOptions(),
        omitted: Sequence = (),
    ) -> DispatchResult:
        """Submit the batch. QueueSubmissionError propagates to the caller."""
        if not recipients:
            logger.info(f"No recipients for {message.category.value} broadcast; nothing queued")
            return DispatchResult(DispatchStatus.NO_RECIPIENTS, omitted=list(omitted))

        jobs = self.build_jobs(recipients, message, options)
        queued = await self.queue.submit_batch(jobs)
        return DispatchResult(
            DispatchStatus.QUEUED,
            recipient_count=len(recipients),
            queued=queued,
            omitted=list(omitted),
        )
