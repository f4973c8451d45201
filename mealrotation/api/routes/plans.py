import logging

from fastapi import APIRouter, Depends, HTTPException

from mealrotation.api.deps import get_service
from mealrotation.domain.GenerationConfig import GenerationConfig
from mealrotation.logic.planning.service import RotationService
from mealrotation.logic.reporting.rotation import compute_rotation_summary
from mealrotation.utilities.validators import GenerateRequest

router = APIRouter(prefix="/api/plan", tags=["plan"])
logger = logging.getLogger(__name__)


@router.get("/current")
def current_plan(service: RotationService = Depends(get_service)):
    catalog = service.catalog_repo.load_catalog()
    plan = service.plan_repo.load_current_plan(catalog)
    if plan is None:
        raise HTTPException(status_code=404, detail="No current plan")
    return plan.to_dict()


@router.get("/previous")
def previous_plan(service: RotationService = Depends(get_service)):
    catalog = service.catalog_repo.load_catalog()
    plan = service.plan_repo.load_previous_plan(catalog)
    if plan is None:
        raise HTTPException(status_code=404, detail="No previous plan")
    return plan.to_dict()


@router.get("/summary")
def plan_summary(service: RotationService = Depends(get_service)):
    """Variety figures for the current plan.

    After a save the previous-plan file holds the same plan, so the
    comparison uses the backup taken just before that rotation when one exists.
    """
    catalog = service.catalog_repo.load_catalog()
    plan = service.plan_repo.load_current_plan(catalog)
    before = service.plan_repo.load_archived_plan(catalog)
    return compute_rotation_summary(plan, before)


@router.post("/generate")
def generate(payload: GenerateRequest | None = None, service: RotationService = Depends(get_service)):
    payload = payload or GenerateRequest()
    config = GenerationConfig(
        days_to_generate=payload.days_to_generate or service.config.days_to_generate,
        allow_staple_repetition=(service.config.allow_staple_repetition
                                 if payload.allow_staple_repetition is None
                                 else payload.allow_staple_repetition),
    )
    logger.info("Generation requested: days=%s staples=%s seed=%s",
                config.days_to_generate, config.allow_staple_repetition, payload.seed)
    result = service.generate_and_save(payload.start_date, config, payload.seed)
    return result.to_dict()
