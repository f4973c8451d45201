"""Rotation statistics for a plan compared with the one before it."""
from collections import Counter
from typing import Optional

from mealrotation.domain.MealCategory import MealCategory
from mealrotation.domain.Plan import WeeklyPlan


def _empty_totals():
    return {'filled': 0, 'empty': 0, 'distinct': 0, 'repeated_in_plan': 0,
            'carried_over': 0, 'carried_over_staples': 0}


def compute_rotation_summary(plan: Optional[WeeklyPlan], previous_plan: Optional[WeeklyPlan] = None):
    """Per-category variety figures for `plan`.

    Returns structure:
    {
      'days': int,
      'categories': {
         'breakfast': { 'filled', 'empty', 'distinct', 'repeated_in_plan',
                        'carried_over', 'carried_over_staples', 'repeats': [names] },
         ...
      },
      'totals': { same counters summed over categories }
    }
    carried_over counts non-staple meals that also appear in previous_plan;
    staples are counted separately in carried_over_staples.
    """
    totals = _empty_totals()
    if not plan:
        return {'days': 0, 'categories': {}, 'totals': totals}

    categories = {}
    for category in MealCategory:
        meals = plan.meals_for(category)
        counts = Counter(m.id for m in meals)
        names = {m.id: m.name for m in meals}
        previous_ids = {m.id for m in previous_plan.meals_for(category)} if previous_plan else set()
        distinct = {m.id: m for m in meals}.values()
        stats = {
            'filled': len(meals),
            'empty': len(plan.days) - len(meals),
            'distinct': len(counts),
            'repeated_in_plan': sum(c - 1 for c in counts.values()),
            'carried_over': sum(1 for m in distinct if m.id in previous_ids and not m.is_staple),
            'carried_over_staples': sum(1 for m in distinct if m.id in previous_ids and m.is_staple),
        }
        for key, value in stats.items():
            totals[key] += value
        stats['repeats'] = sorted(names[i] for i, c in counts.items() if c > 1)
        categories[category.slot] = stats

    return {'days': len(plan.days), 'categories': categories, 'totals': totals}


__all__ = ["compute_rotation_summary"]
