"""Configuration management for the meal rotation planner."""
import os
from dataclasses import dataclass
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

from mealrotation.domain.GenerationConfig import ConfigurationError, GenerationConfig
from mealrotation.utilities.constants import DEFAULT_DAYS_TO_GENERATE

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DEFAULT_DATA_DIR: Final[Path] = BASE_DIR / 'data'

# Store file names
OPTIONS_FILE_NAME: Final[str] = 'meal_options.json'
CURRENT_PLAN_FILE_NAME: Final[str] = 'current_plan.json'
PREVIOUS_PLAN_FILE_NAME: Final[str] = 'previous_plan.json'


@dataclass(frozen=True)
class PlannerSettings:
    data_dir: Path
    options_file_name: str = OPTIONS_FILE_NAME
    current_plan_file_name: str = CURRENT_PLAN_FILE_NAME
    previous_plan_file_name: str = PREVIOUS_PLAN_FILE_NAME
    generation: GenerationConfig = GenerationConfig()


def _parse_days(raw: Optional[str]) -> int:
    # Empty or zero means "use the default", matching older deployments.
    if raw is None or not raw.strip():
        return DEFAULT_DAYS_TO_GENERATE
    try:
        days = int(raw)
    except ValueError:
        raise ConfigurationError(f"DAYS_TO_GENERATE must be an integer, got {raw!r}") from None
    return days or DEFAULT_DAYS_TO_GENERATE


def load_settings(environ=None) -> PlannerSettings:
    """Build PlannerSettings from the environment.

    Raises ConfigurationError when the store location is blank or the
    generation parameters are invalid.
    """
    env = os.environ if environ is None else environ
    data_dir = env.get('MEAL_PLANNER_DATA_DIR', str(DEFAULT_DATA_DIR))
    if not data_dir or not data_dir.strip():
        raise ConfigurationError("MEAL_PLANNER_DATA_DIR is set but empty")
    generation = GenerationConfig(
        days_to_generate=_parse_days(env.get('DAYS_TO_GENERATE')),
        allow_staple_repetition=env.get('ALLOW_STAPLE_REPETITION', 'true').strip().lower() != 'false',
    )
    return PlannerSettings(
        data_dir=Path(data_dir.strip()),
        options_file_name=env.get('OPTIONS_FILE_NAME') or OPTIONS_FILE_NAME,
        current_plan_file_name=env.get('CURRENT_PLAN_FILE_NAME') or CURRENT_PLAN_FILE_NAME,
        previous_plan_file_name=env.get('PREVIOUS_PLAN_FILE_NAME') or PREVIOUS_PLAN_FILE_NAME,
        generation=generation,
    )
