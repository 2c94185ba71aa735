"""Broadcast API endpoints."""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from agentcast.auth.jwt import get_current_agent
from agentcast.database import get_db
from agentcast.exceptions import PriceValidationError, QueueSubmissionError
from agentcast.models import Agent
from agentcast.schemas.broadcast import BroadcastCriteriaIn, BroadcastRequest, BroadcastResponse
from agentcast.services.broadcasts import BroadcastService, build_criteria
from agentcast.services.dispatcher import DispatchStatus
from agentcast.services.job_queue import get_job_queue
from agentcast.services.job_queue_base import JobQueue
from agentcast.utils.audit import log_audit_event

router = APIRouter(prefix="/broadcasts", tags=["Broadcasts"])
logger = logging.getLogger("agentcast.api.broadcasts")


async def get_queue(db: AsyncSession = Depends(get_db)) -> JobQueue:
    return get_job_queue(db)


@router.post("", response_model=BroadcastResponse)
async def create_broadcast(
    data: BroadcastRequest,
    current_agent: Agent = Depends(get_current_agent),
    db: AsyncSession = Depends(get_db),
    queue: JobQueue = Depends(get_queue),
):
    """
    Send a broadcast to every matching agent, or preview the match count.

    With ``previewOnly`` only ``recipientCount`` is returned and nothing is
    queued. An empty match is a successful response with zero recipients.
    """
    raw = data.criteria or BroadcastCriteriaIn()
    try:
        criteria = build_criteria(
            data.category,
            state=raw.state,
            counties=raw.counties,
            cities=raw.cities,
            min_price=raw.min_price,
            max_price=raw.max_price,
            property_types=raw.property_types,
        )
    except PriceValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "type": "price_validation",
                "field": e.field,
                "message": e.message,
            },
        )

    sender_id = current_agent.id
    service = BroadcastService(db, queue)

    if data.preview_only:
        count = await service.preview(criteria, current_agent)
        return BroadcastResponse(success=True, recipient_count=count)

    try:
        result = await service.send(
            criteria,
            current_agent,
            subject=data.subject,
            body=data.message,
            send_copy_to_self=data.send_copy_to_self,
            reply_to=data.reply_to,
        )
    except QueueSubmissionError as e:
        logger.error(f"Broadcast from {sender_id} could not be queued: {e}")
        body = BroadcastResponse(
            success=False,
            recipient_count=0,
            queued=0,
            message="Failed to queue broadcast emails. Please try again.",
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(mode="json", by_alias=True),
        )

    log_audit_event(
        "broadcast.sent",
        actor=current_agent,
        details={
            "category": criteria.category,
            "status": result.status,
            "recipient_count": result.recipient_count,
            "queued": result.queued,
            "omitted": len(result.omitted),
            "send_copy_to_self": data.send_copy_to_self,
        },
    )
    return BroadcastResponse(
        success=True,
        recipient_count=result.recipient_count,
        queued=result.queued if result.status is DispatchStatus.QUEUED else 0,
        message=result.message,
        omitted=result.omitted,
    )
