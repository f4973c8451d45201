"""
Backup utility for plan history files.
Keeps timestamped copies of a plan file before it is overwritten.
"""
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional
import logging

from mealrotation.utilities.constants import BACKUPS_TO_KEEP

logger = logging.getLogger(__name__)


class BackupManager:
    """Manages rolling backups of data files."""

    def __init__(self, data_dir: Path, backup_dir: Path = None, keep: int = BACKUPS_TO_KEEP):
        self.data_dir = Path(data_dir)
        self.backup_dir = backup_dir or (self.data_dir / 'backups')
        self.keep = keep

    def create_backup(self, filename: str) -> Optional[Path]:
        """Copy data_dir/filename to a timestamped backup; None if there is nothing to copy."""
        source = self.data_dir / filename
        if not source.exists():
            logger.debug(f"Nothing to back up, {filename} does not exist yet")
            return None

        self.backup_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        destination = self.backup_dir / f"{source.stem}_{timestamp}{source.suffix}"
        shutil.copy2(source, destination)
        logger.info(f"Backup created: {destination.name}")

        self._cleanup_old_backups(source.name)
        return destination

    def _cleanup_old_backups(self, filename: str):
        """Remove old backups, keeping only the most recent ones."""
        backups = self.list_backups(filename)
        for backup in backups[self.keep:]:
            try:
                backup.unlink()
                logger.info(f"Removed old backup: {backup.name}")
            except OSError as e:
                logger.error(f"Failed to remove old backup {backup.name}: {e}")

    def list_backups(self, filename: str) -> list:
        """Backups of one file, newest first."""
        if not self.backup_dir.exists():
            return []
        pattern = f"{Path(filename).stem}_*{Path(filename).suffix}"
        # Timestamped names sort chronologically.
        return sorted(self.backup_dir.glob(pattern), key=lambda p: p.name, reverse=True)
