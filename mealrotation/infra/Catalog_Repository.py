import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from mealrotation.domain.MealOption import MealOption
from mealrotation.infra.paths import DATA_DIR
from mealrotation.utilities.config import OPTIONS_FILE_NAME
from mealrotation.utilities.validators import MealOptionInput

logger = logging.getLogger(__name__)


class CatalogRepository:
    def __init__(self, data_dir: Optional[Path] = None, file_name: str = OPTIONS_FILE_NAME):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self.path = self.data_dir / file_name

    def load_catalog(self) -> List[MealOption]:
        """Read meal options; records without a name are skipped.

        A missing or unreadable file yields an empty catalog, which the
        generator turns into empty slots rather than an error.
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                records = json.load(f) or []
        except FileNotFoundError:
            logger.warning(f"Meal options file not found: {self.path}. Returning empty catalog.")
            return []
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in meal options file {self.path}: {e}")
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading meal options file {self.path}: {e}")
            return []
        if not isinstance(records, list):
            logger.error(f"Meal options file {self.path} must contain a list, got {type(records).__name__}")
            return []

        options: List[MealOption] = []
        for index, record in enumerate(records):
            try:
                parsed = MealOptionInput.model_validate(record)
            except ValidationError as e:
                logger.warning(f"Skipping malformed meal option #{index}: {e}")
                continue
            if not parsed.name:
                continue
            options.append(parsed.to_meal_option())
        logger.info(f"Loaded {len(options)} meal options from {self.path.name}")
        return options

