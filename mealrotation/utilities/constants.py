from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DEFAULT_DAYS_TO_GENERATE: Final[int] = 7
EMPTY_SLOT: Final[str] = ""
TRUTHY_STRINGS: Final[frozenset[str]] = frozenset({"true", "yes", "y", "1", "x"})
BACKUPS_TO_KEEP: Final[int] = 10
