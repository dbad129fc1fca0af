from pathlib import Path
from typing import Optional

from gctx.exceptions import ContextRecordError
from gctx.logger import get_logger

logger = get_logger("storage")


class PreviousContextStorage:
    """Single-slot plain-text record of the profile that was active before the last switch"""

    def __init__(self, storage_path: Path = None):
        """Initialize storage with default or custom path. The file is created on first save."""
        self.storage_path = storage_path or (Path.home() / ".config" / "gctx" / "previous")

    def read(self) -> Optional[str]:
        """Return the recorded previous profile, or None if nothing was recorded yet"""
        try:
            name = self.storage_path.read_text().strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise ContextRecordError(f"cannot read {self.storage_path}: {e}") from e
        return name or None

    def save(self, name: str):
        """Record name as the previous profile; skips the write if it is already recorded"""
        if self.read() == name:
            logger.debug("previous profile already %r, not rewriting %s", name, self.storage_path)
            return
        try:
            self.storage_path.parent.mkdir(parents=True, exist_ok=True)
            self.storage_path.write_text(name)
        except OSError as e:
            raise ContextRecordError(f"cannot write {self.storage_path}: {e}") from e
        logger.debug("recorded previous profile %r in %s", name, self.storage_path)

    def __repr__(self):
        return f"<PreviousContextStorage path={self.storage_path}>"
