"""Rotation run: load catalog and history, generate, persist, rotate."""
import logging
import random
from dataclasses import dataclass
from datetime import date
from typing import Optional

from mealrotation.domain.GenerationConfig import GenerationConfig
from mealrotation.domain.Plan import WeeklyPlan
from mealrotation.events.event_helpers import publish_plan_generated, publish_save_failed
from mealrotation.infra.Catalog_Repository import CatalogRepository
from mealrotation.infra.Plan_Repository import PlanRepository
from mealrotation.logic.planning.generator import generate_plan
from mealrotation.utilities.config import PlannerSettings

logger = logging.getLogger(__name__)


@dataclass
class RotationResult:
    success: bool
    plan: Optional[WeeklyPlan] = None
    error: Optional[str] = None

    def to_dict(self):
        return {
            "success": self.success,
            "plan": self.plan.to_dict() if self.plan else None,
            "error": self.error,
        }


class RotationService:
    def __init__(self, catalog_repo: CatalogRepository, plan_repo: PlanRepository,
                 config: Optional[GenerationConfig] = None):
        self.catalog_repo = catalog_repo
        self.plan_repo = plan_repo
        self.config = config or GenerationConfig()

    @classmethod
    def from_settings(cls, settings: PlannerSettings) -> "RotationService":
        return cls(
            CatalogRepository(settings.data_dir, settings.options_file_name),
            PlanRepository(settings.data_dir, settings.current_plan_file_name, settings.previous_plan_file_name),
            settings.generation,
        )

    def generate(self, start_date: Optional[date] = None, config: Optional[GenerationConfig] = None,
                 rng=None) -> WeeklyPlan:
        """Generate a plan against the stored catalog and previous plan without saving it."""
        catalog = self.catalog_repo.load_catalog()
        previous = self.plan_repo.load_previous_plan(catalog)
        if previous is None:
            logger.info("No previous plan found; generating without history")
        return generate_plan(catalog, previous, config or self.config, start_date or date.today(), rng)

    def generate_and_save(self, start_date: Optional[date] = None, config: Optional[GenerationConfig] = None,
                          seed: Optional[int] = None) -> RotationResult:
        """Full run. ConfigurationError propagates; storage problems become a failed result."""
        rng = random.Random(seed) if seed is not None else None
        plan = self.generate(start_date, config, rng)
        publish_plan_generated(plan)
        if not self.plan_repo.save_plan(plan):
            error = "Failed to save the generated plan"
            logger.error(error)
            publish_save_failed(error)
            return RotationResult(False, plan, error)
        logger.info("Successfully generated and saved meal plan")
        return RotationResult(True, plan)
