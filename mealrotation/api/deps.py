"""FastAPI dependencies; tests override get_service to point at a temporary store."""
from mealrotation.logic.planning.service import RotationService
from mealrotation.utilities.config import PlannerSettings, load_settings


def get_settings() -> PlannerSettings:
    return load_settings()


def get_service() -> RotationService:
    return RotationService.from_settings(get_settings())
