"""In-process event bus for planning alerts.

Event names:
  plan.generated      -> payload {"week_start_date": str, "days": int}
  plan.empty_category -> payload {"category": str}
  plan.save_failed    -> payload {"error": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

PLAN_GENERATED = "plan.generated"
PLAN_EMPTY_CATEGORY = "plan.empty_category"
PLAN_SAVE_FAILED = "plan.save_failed"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except ValueError:
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


GLOBAL_EVENT_BUS = EventBus()


def create_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'create_event',
	'PLAN_GENERATED', 'PLAN_EMPTY_CATEGORY', 'PLAN_SAVE_FAILED'
]
