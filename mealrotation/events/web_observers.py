"""Web-facing observers for planning events.

Subscribes to the GLOBAL_EVENT_BUS for plan.generated, plan.empty_category
and plan.save_failed, and keeps a bounded in-memory buffer of recent events
that the API serves at /api/alerts.

Each event carries an auto-increment id (cursor) so clients can poll with
since=<last_id_seen> and only receive newer entries. The buffer is
per-process and guarded by a Lock.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    GLOBAL_EVENT_BUS, PLAN_GENERATED, PLAN_EMPTY_CATEGORY, PLAN_SAVE_FAILED
)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False

_LEVELS = {
    PLAN_GENERATED: 'info',
    PLAN_EMPTY_CATEGORY: 'warning',
    PLAN_SAVE_FAILED: 'error',
}


def _record(event_name: str, payload: Any):
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'level': _LEVELS.get(event_name, 'info'),
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        if isinstance(payload, dict):
            for k in ('category', 'week_start_date', 'days', 'error'):
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in (PLAN_GENERATED, PLAN_EMPTY_CATEGORY, PLAN_SAVE_FAILED):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive), or all buffered events.

    next_cursor is the largest id seen so the client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
