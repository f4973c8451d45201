from pathlib import Path

from mealrotation.utilities.config import DEFAULT_DATA_DIR

# Default store location; repositories accept a data_dir override.
DATA_DIR = Path(DEFAULT_DATA_DIR).resolve()

__all__ = ['DATA_DIR']
