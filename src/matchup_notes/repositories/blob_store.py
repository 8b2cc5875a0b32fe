"""JSON file persistence for the whole application document."""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from matchup_notes.errors import SerializationError, StorageIOError
from matchup_notes.models.app_data import AppData
from matchup_notes.models.matchup import utc_now

logger = logging.getLogger(__name__)

APP_DIR_NAME = "matchuphelper"
DATA_FILE_NAME = "data.json"


def default_data_dir() -> Path:
    """Platform data directory for the application."""
    home = Path.home()
    if sys.platform == "win32":
        base = os.environ.get("APPDATA")
        root = Path(base) if base else home / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        root = home / "Library" / "Application Support"
    else:
        base = os.environ.get("XDG_DATA_HOME")
        root = Path(base) if base else home / ".local" / "share"
    return root / APP_DIR_NAME


class JsonBlobStore:
    """Reads and writes the AppData document as a single JSON file.

    There are no partial updates: every save rewrites the whole file.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """Initialize the store.

        Args:
            data_dir: Directory holding data.json. Defaults to the platform
                      data directory. Created if missing.

        Raises:
            StorageIOError: If the directory cannot be created
        """
        data_dir = data_dir or default_data_dir()
        try:
            data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"Cannot create data directory {data_dir}: {e}") from e
        self.data_path = data_dir / DATA_FILE_NAME

    def load(self) -> AppData:
        """Load the document, or an empty one if nothing was saved yet."""
        if not self.data_path.exists():
            return AppData()

        try:
            contents = self.data_path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageIOError(f"IO error: {e}") from e

        try:
            return AppData.from_dict(json.loads(contents))
        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
            raise SerializationError(f"JSON error in {self.data_path}: {e}") from e

    def save(self, data: AppData) -> None:
        """Stamp last_updated and rewrite the file."""
        data.metadata.last_updated = utc_now().isoformat()

        try:
            contents = json.dumps(data.to_dict(), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"JSON error: {e}") from e

        tmp_path = self.data_path.with_suffix(".json.tmp")
        try:
            tmp_path.write_text(contents, encoding="utf-8")
            os.replace(tmp_path, self.data_path)
        except OSError as e:
            raise StorageIOError(f"IO error: {e}") from e

        logger.debug(
            f"Saved {len(data.matchups)} matchups and {len(data.matches)} matches "
            f"to {self.data_path}"
        )
