"""Event helper utilities.

Publishing functions for planning events on the global event bus.

Quick import:
    from mealrotation.events.event_helpers import (
        publish_plan_generated, publish_empty_category, publish_save_failed
    )
"""
from __future__ import annotations
from .Event_Bus import (
    create_event,
    PLAN_GENERATED, PLAN_EMPTY_CATEGORY, PLAN_SAVE_FAILED,
)

__all__ = [
    'publish_plan_generated', 'publish_empty_category', 'publish_save_failed',
    'PLAN_GENERATED', 'PLAN_EMPTY_CATEGORY', 'PLAN_SAVE_FAILED',
]


def publish_plan_generated(plan):
    """Publish a plan.generated event for a freshly built plan."""
    create_event(PLAN_GENERATED, {
        'week_start_date': plan.week_start_date.isoformat(),
        'days': len(plan.days),
    })


def publish_empty_category(category):
    create_event(PLAN_EMPTY_CATEGORY, {'category': category.value})


def publish_save_failed(error: str):
    create_event(PLAN_SAVE_FAILED, {'error': error})
