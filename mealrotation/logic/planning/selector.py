"""Meal selection for a single (day, category) slot.

The selector is stateless: everything it needs (what ran last period, what
has already been placed this period) is handed in by the caller.
"""
import logging
from typing import Collection, List, Optional, Sequence

from mealrotation.domain.MealCategory import MealCategory
from mealrotation.domain.MealOption import MealOption

logger = logging.getLogger(__name__)


def filter_eligible(options: Sequence[MealOption], previous_meals: Collection[MealOption],
                    allow_staple_repetition: bool) -> List[MealOption]:
    """Options not used last period; staples are exempt when repetition is allowed."""
    previous_ids = {m.id for m in previous_meals}
    return [
        o for o in options
        if (o.is_staple and allow_staple_repetition) or o.id not in previous_ids
    ]


def filter_preferred(eligible: Sequence[MealOption], current_meals: Collection[MealOption]) -> List[MealOption]:
    """Eligible options not yet placed earlier in the period being generated."""
    current_ids = {m.id for m in current_meals}
    return [o for o in eligible if o.id not in current_ids]


def select_meal(category: MealCategory, options: Sequence[MealOption],
                previous_meals: Collection[MealOption], current_meals: Collection[MealOption],
                allow_staple_repetition: bool, rng) -> Optional[MealOption]:
    """Pick one meal for `category`, avoiding repeats where the catalog allows it.

    Candidates narrow in order: category -> not used last period (staples
    exempt when allowed) -> not used yet this period. Whenever a narrowing
    step would leave nothing, the previous pool is kept instead, so a meal is
    always returned as long as the category has at least one option.

    Returns None only when the catalog has no option for the category.
    """
    in_category = [o for o in options if o.category == category]
    if not in_category:
        logger.warning("No meal options found for category: %s", category.value)
        return None

    eligible = filter_eligible(in_category, previous_meals, allow_staple_repetition)
    if not eligible:
        logger.warning("No eligible non-repeat meals for %s, using all options", category.value)
        eligible = in_category

    preferred = filter_preferred(eligible, current_meals)
    pool = preferred or eligible
    return rng.choice(pool)


__all__ = ["select_meal", "filter_eligible", "filter_preferred"]
