"""Structured audit logging helpers."""

from __future__ import annotations

import enum
import json
import logging
from datetime import datetime, timezone
from typing import Any, Mapping

audit_logger = logging.getLogger("agentcast.audit")


def _to_serializable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, enum.Enum):
        return _to_serializable(value.value)
    if isinstance(value, Mapping):
        return {str(k): _to_serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [_to_serializable(v) for v in value]
        return sorted(items, key=str) if isinstance(value, (set, frozenset)) else items
    return str(value)


def log_audit_event(
    event_type: str,
    *,
    actor: Any = None,
    details: Mapping[str, Any] | None = None,
) -> None:
    """Emit one JSON line describing a state-changing action."""
    payload: dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event_type,
    }

    if actor is not None:
        actor_id = getattr(actor, "id", None)
        payload.update(
            {
                "actor_id": str(actor_id) if actor_id else None,
                "actor_email": getattr(actor, "email", None),
                "actor_company": getattr(actor, "company", None),
            }
        )

    if details:
        payload["details"] = _to_serializable(details)

    audit_logger.info(json.dumps(payload, ensure_ascii=True))
