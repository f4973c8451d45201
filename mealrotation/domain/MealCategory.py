"""MealCategory domain enum: the closed set of daily meal slots."""
import logging
from enum import Enum
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)


class MealCategory(str, Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"

    @property
    def slot(self) -> str:
        """Lower-case key used for plan rows ('breakfast', 'lunch', 'dinner')."""
        return self.value.lower()


class CategoryParse(NamedTuple):
    category: Optional[MealCategory]
    recognized: bool


def parse_category(value) -> CategoryParse:
    """Match a raw category value (trimmed, case-insensitive) against MealCategory."""
    raw = str(value).strip().lower() if value is not None else ""
    for category in MealCategory:
        if raw == category.value.lower():
            return CategoryParse(category, True)
    return CategoryParse(None, False)


def coerce_category(value) -> MealCategory:
    """Parse a category, mapping unknown values to Breakfast.

    Catalogs written before categories were validated rely on this default,
    so it is kept, but every coercion is logged.
    """
    parsed = parse_category(value)
    if parsed.recognized:
        return parsed.category
    logger.warning("Unrecognized meal category %r, defaulting to %s", value, MealCategory.BREAKFAST.value)
    return MealCategory.BREAKFAST


__all__ = ["MealCategory", "CategoryParse", "parse_category", "coerce_category"]
