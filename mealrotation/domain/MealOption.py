"""MealOption domain entity: one catalog entry (id, name, category, staple flag, tags)."""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from mealrotation.domain.MealCategory import MealCategory


@dataclass(frozen=True, eq=False)
class MealOption:
    id: str
    name: str
    category: MealCategory
    is_staple: bool = False
    tags: FrozenSet[str] = field(default_factory=frozenset)

    # Identity is the catalog id; two entries with the same name are different meals.
    def __eq__(self, other):
        if not isinstance(other, MealOption):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __str__(self) -> str:
        staple = " (staple)" if self.is_staple else ""
        return f"{self.name} [{self.category.value}]{staple}"

    def matches_name(self, name: str) -> bool:
        return self.name.strip().lower() == str(name).strip().lower()

    @staticmethod
    def create(id: str, name: str, category: MealCategory, is_staple: bool = False,
               tags: Optional[Iterable[str]] = None) -> "MealOption":
        return MealOption(str(id), name, category, bool(is_staple), frozenset(tags or ()))

    @staticmethod
    def from_dict(data) -> "MealOption":
        '''Builds a MealOption from a raw store record (see MealOptionInput for accepted shapes).'''
        from mealrotation.utilities.validators import MealOptionInput
        record = MealOptionInput.model_validate(data)
        return record.to_meal_option()

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "is_staple": self.is_staple,
            "tags": sorted(self.tags),
        }
