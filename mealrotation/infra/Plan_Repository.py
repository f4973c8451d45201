import json, os, shutil, tempfile
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, List, Optional

from mealrotation.domain.MealCategory import MealCategory
from mealrotation.domain.MealOption import MealOption
from mealrotation.domain.Plan import DayPlan, WeeklyPlan
from mealrotation.infra.paths import DATA_DIR
from mealrotation.utilities.backup import BackupManager
from mealrotation.utilities.config import CURRENT_PLAN_FILE_NAME, PREVIOUS_PLAN_FILE_NAME
from mealrotation.utilities.constants import DATE_FORMAT

logger = logging.getLogger(__name__)


def _parse_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        # Accept plain dates and full ISO timestamps.
        return datetime.strptime(value.strip()[:10], DATE_FORMAT).date()
    except ValueError:
        return None


def find_meal_by_name(name, category: MealCategory, catalog: Iterable[MealOption]) -> Optional[MealOption]:
    """Resolve a stored display name to a catalog entry (case-insensitive).

    Same-category matches win; otherwise the first entry with that name in
    any category is used. With duplicate names across categories this can
    bind to the wrong entry, so the fallback is logged.
    """
    name = str(name).strip() if name is not None else ""
    if not name:
        return None
    catalog = list(catalog)
    for meal in catalog:
        if meal.matches_name(name) and meal.category == category:
            return meal
    for meal in catalog:
        if meal.matches_name(name):
            logger.debug(f"'{name}' stored as {category.value} matched {meal.category.value} option {meal.id}")
            return meal
    logger.debug(f"'{name}' ({category.value}) is not in the catalog")
    return None


def parse_plan_rows(rows, catalog: Iterable[MealOption]) -> Optional[WeeklyPlan]:
    """Rebuild a WeeklyPlan from stored rows; rows without a valid date are skipped."""
    catalog = list(catalog)
    days: List[DayPlan] = []
    for row in rows or []:
        if not isinstance(row, dict):
            continue
        day_date = _parse_date(row.get("date"))
        if day_date is None:
            continue
        day = DayPlan(day_date)
        for category in MealCategory:
            day.set(category, find_meal_by_name(row.get(category.slot), category, catalog))
        days.append(day)
    return WeeklyPlan.from_days(days)


class PlanRepository:
    def __init__(self, data_dir: Optional[Path] = None,
                 current_file_name: str = CURRENT_PLAN_FILE_NAME,
                 previous_file_name: str = PREVIOUS_PLAN_FILE_NAME):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self.current_file = self.data_dir / current_file_name
        self.previous_file = self.data_dir / previous_file_name
        self.backups = BackupManager(self.data_dir)

    def _read_rows(self, path: Path) -> list:
        if not path.exists():
            logger.info(f"Plan file not found: {path.name}")
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                rows = json.load(f) or []
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in plan file {path}: {e}")
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading plan file {path}: {e}")
            return []
        if not isinstance(rows, list):
            logger.error(f"Plan file {path} must contain a list of rows")
            return []
        return rows

    def _atomic_write(self, path: Path, rows: list) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{path.stem}_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(rows, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def load_previous_plan(self, catalog: Iterable[MealOption]) -> Optional[WeeklyPlan]:
        return parse_plan_rows(self._read_rows(self.previous_file), catalog)

    def load_current_plan(self, catalog: Iterable[MealOption]) -> Optional[WeeklyPlan]:
        return parse_plan_rows(self._read_rows(self.current_file), catalog)

    def load_archived_plan(self, catalog: Iterable[MealOption]) -> Optional[WeeklyPlan]:
        """The previous plan as it was before the last rotation (newest backup), if any."""
        backups = self.backups.list_backups(self.previous_file.name)
        if not backups:
            return None
        return parse_plan_rows(self._read_rows(backups[0]), catalog)

    def save_plan(self, plan: WeeklyPlan) -> bool:
        """Store the plan as both the previous and the current plan.

        The old previous plan is backed up first, then the previous file is
        written, then the current file. If the current file cannot be written
        the backup is moved back, so a failed save leaves both files as they
        were. Only display names are stored (absent selections as "").
        Returns False and logs on any I/O failure.
        """
        rows = plan.to_rows()
        try:
            backup = self.backups.create_backup(self.previous_file.name)
            self._atomic_write(self.previous_file, rows)
        except OSError as e:
            logger.error(f"Error archiving plan to {self.previous_file}: {e}")
            return False
        try:
            self._atomic_write(self.current_file, rows)
        except OSError as e:
            logger.error(f"Error writing plan to {self.current_file}: {e}")
            self._restore_previous(backup)
            return False
        logger.info(f"Saved {len(rows)} day plan starting {plan.week_start_date.strftime(DATE_FORMAT)}")
        return True

    def _restore_previous(self, backup: Optional[Path]) -> None:
        try:
            if backup is not None:
                shutil.move(str(backup), self.previous_file)
            else:
                self.previous_file.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Could not roll back {self.previous_file} after a failed save: {e}")
