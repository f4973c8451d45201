"""Plan domain entities: a DayPlan holds one optional meal per category, a WeeklyPlan a run of days."""
from datetime import date
from typing import Dict, List, Optional

from mealrotation.domain.MealCategory import MealCategory
from mealrotation.domain.MealOption import MealOption
from mealrotation.utilities.constants import DATE_FORMAT, EMPTY_SLOT


class DayPlan:
    def __init__(self, day: date, breakfast: Optional[MealOption] = None,
                 lunch: Optional[MealOption] = None, dinner: Optional[MealOption] = None):
        self.date = day
        self.breakfast = breakfast
        self.lunch = lunch
        self.dinner = dinner

    def get(self, category: MealCategory) -> Optional[MealOption]:
        return getattr(self, category.slot)

    def set(self, category: MealCategory, meal: Optional[MealOption]) -> None:
        setattr(self, category.slot, meal)

    def meal_names(self) -> Dict[str, str]:
        '''Display name per slot; absent selections become an empty string.'''
        names = {}
        for category in MealCategory:
            meal = self.get(category)
            names[category.slot] = meal.name if meal else EMPTY_SLOT
        return names

    def to_row(self) -> Dict[str, str]:
        row = {"date": self.date.strftime(DATE_FORMAT)}
        row.update(self.meal_names())
        return row

    def __str__(self) -> str:
        names = self.meal_names()
        return f"{self.date.isoformat()}: " + ", ".join(f"{k}={v or '-'}" for k, v in names.items())

    __repr__ = __str__


class WeeklyPlan:
    def __init__(self, week_start_date: date, days: List[DayPlan]):
        self.week_start_date = week_start_date
        self.days = days

    @classmethod
    def from_days(cls, days: List[DayPlan]) -> Optional["WeeklyPlan"]:
        """Wrap parsed days; the earliest date becomes the week start. No days -> None."""
        if not days:
            return None
        return cls(min(d.date for d in days), list(days))

    def meals_for(self, category: MealCategory) -> List[MealOption]:
        return [m for m in (d.get(category) for d in self.days) if m is not None]

    def to_rows(self) -> List[Dict[str, str]]:
        return [d.to_row() for d in self.days]

    def to_dict(self):
        return {
            "week_start_date": self.week_start_date.strftime(DATE_FORMAT),
            "days": self.to_rows(),
        }

    def __len__(self) -> int:
        return len(self.days)
