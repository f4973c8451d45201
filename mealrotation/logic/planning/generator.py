"""Plan assembly: one selection per category per day over the configured horizon."""
import logging
import random
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Set

from mealrotation.domain.GenerationConfig import GenerationConfig
from mealrotation.domain.MealCategory import MealCategory
from mealrotation.domain.MealOption import MealOption
from mealrotation.domain.Plan import DayPlan, WeeklyPlan
from mealrotation.events.event_helpers import publish_empty_category
from mealrotation.logic.planning.selector import select_meal

logger = logging.getLogger(__name__)


def _options_by_category(catalog: Sequence[MealOption]) -> Dict[MealCategory, List[MealOption]]:
    grouped: Dict[MealCategory, List[MealOption]] = {c: [] for c in MealCategory}
    for option in catalog:
        grouped[option.category].append(option)
    return grouped


def generate_plan(catalog: Sequence[MealOption], previous_plan: Optional[WeeklyPlan],
                  config: GenerationConfig, start_date: date, rng=None) -> WeeklyPlan:
    """Build a new plan of `config.days_to_generate` consecutive days from `start_date`.

    `rng` only needs a `choice(seq)` method; pass a seeded random.Random for
    reproducible plans. Neither `catalog` nor `previous_plan` is modified.

    A category with no catalog options stays empty on every day and is
    reported once per run (WARNING log + plan.empty_category event).
    """
    if rng is None:
        rng = random.Random()

    options = _options_by_category(catalog)
    previous: Dict[MealCategory, List[MealOption]] = {
        c: (previous_plan.meals_for(c) if previous_plan else []) for c in MealCategory
    }
    placed: Dict[MealCategory, Set[MealOption]] = {c: set() for c in MealCategory}

    active = []
    for category in MealCategory:
        if options[category]:
            active.append(category)
        else:
            logger.warning("No meal options found for category: %s; leaving it empty for all %d days",
                           category.value, config.days_to_generate)
            publish_empty_category(category)

    days: List[DayPlan] = []
    for offset in range(config.days_to_generate):
        day = DayPlan(start_date + timedelta(days=offset))
        for category in active:
            meal = select_meal(category, options[category], previous[category], placed[category],
                               config.allow_staple_repetition, rng)
            day.set(category, meal)
            if meal is not None:
                placed[category].add(meal)
        days.append(day)

    logger.debug("Generated %d day plan starting %s", len(days), start_date.isoformat())
    return WeeklyPlan(start_date, days)


__all__ = ["generate_plan"]
