from fastapi import APIRouter, Depends

from mealrotation.api.deps import get_service
from mealrotation.domain.MealCategory import parse_category
from mealrotation.logic.planning.service import RotationService

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("")
def list_options(category: str | None = None, service: RotationService = Depends(get_service)):
    """Catalog entries, optionally restricted to one category (unknown category -> empty list)."""
    options = service.catalog_repo.load_catalog()
    if category is not None:
        parsed = parse_category(category)
        options = [o for o in options if parsed.recognized and o.category == parsed.category]
    return {"count": len(options), "options": [o.to_dict() for o in options]}
