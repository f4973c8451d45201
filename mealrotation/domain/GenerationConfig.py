"""GenerationConfig: per-run parameters for plan generation."""
from dataclasses import dataclass

from mealrotation.utilities.constants import DEFAULT_DAYS_TO_GENERATE


class ConfigurationError(ValueError):
    """Settings that make a generation run impossible; raised before any work starts."""


@dataclass(frozen=True)
class GenerationConfig:
    days_to_generate: int = DEFAULT_DAYS_TO_GENERATE
    allow_staple_repetition: bool = True

    def __post_init__(self):
        if isinstance(self.days_to_generate, bool) or not isinstance(self.days_to_generate, int):
            raise ConfigurationError(f"days_to_generate must be an integer, got {self.days_to_generate!r}")
        if self.days_to_generate <= 0:
            raise ConfigurationError(f"days_to_generate must be positive, got {self.days_to_generate}")
