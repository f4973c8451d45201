"""
Input validation schemas using Pydantic for store records and API requests.
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from mealrotation.domain.MealCategory import coerce_category
from mealrotation.domain.MealOption import MealOption
from mealrotation.utilities.constants import TRUTHY_STRINGS


class MealOptionInput(BaseModel):
    """Schema for one catalog record as stored in meal_options.json."""
    id: str = ""
    name: str = ""
    category: str = ""
    is_staple: bool = False
    tags: List[str] = Field(default_factory=list)

    @field_validator('id', 'name', 'category', mode='before')
    @classmethod
    def coerce_text(cls, v):
        """Accept numbers and None in text columns; strip whitespace."""
        if v is None:
            return ""
        return str(v).strip()

    @field_validator('is_staple', mode='before')
    @classmethod
    def parse_staple(cls, v):
        """Spreadsheet-style flags: booleans, 1/0 or yes/true strings."""
        if isinstance(v, bool):
            return v
        if v is None:
            return False
        if isinstance(v, (int, float)):
            return v != 0
        return str(v).strip().lower() in TRUTHY_STRINGS

    @field_validator('tags', mode='before')
    @classmethod
    def split_tags(cls, v):
        """Tags may arrive as a list or a comma separated string; blanks are dropped."""
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(',')
        return [str(tag).strip() for tag in v if tag is not None and str(tag).strip()]

    def to_meal_option(self) -> MealOption:
        # Records without an id fall back to their name so identity stays stable.
        return MealOption.create(
            id=self.id or self.name,
            name=self.name,
            category=coerce_category(self.category),
            is_staple=self.is_staple,
            tags=self.tags,
        )


class GenerateRequest(BaseModel):
    """Schema for an on-demand generation run; omitted fields use configured defaults."""
    days_to_generate: Optional[int] = Field(None, ge=1, le=366)
    allow_staple_repetition: Optional[bool] = None
    start_date: Optional[date] = None
    seed: Optional[int] = None
