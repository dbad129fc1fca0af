import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from gctx.exceptions import StoreError, UnknownProfile
from gctx.logger import get_logger

logger = get_logger("store")


class ProfileStore(ABC):
    """The external tool that owns profiles and decides which one is active.

    The high-level calls go through the tool itself. The raw record calls
    bypass it and touch the per-profile settings files directly; they are
    destructive and nothing makes a remove/move pair atomic.
    """

    @abstractmethod
    def list_profiles(self) -> List[str]:
        """Profile names in the store's own listing order"""

    @abstractmethod
    def active_profile(self) -> str:
        """Name of the active profile"""

    @abstractmethod
    def activate(self, name: str):
        """Make name the active profile, raising UnknownProfile if it doesn't exist"""

    @abstractmethod
    def delete(self, name: str):
        """Delete the settings record of a profile, active or not (shared credentials are left alone)"""

    # --- raw record operations ---

    @abstractmethod
    def has_record(self, name: str) -> bool:
        """Check whether the settings record for name exists on disk"""

    @abstractmethod
    def remove_record(self, name: str):
        """Unlink the settings record for name, if there is one"""

    @abstractmethod
    def move_record(self, old: str, new: str):
        """Move the settings record of old to new, raising UnknownProfile if old has none"""


class GcloudProfileStore(ProfileStore):
    """Profile store backed by `gcloud config configurations`"""

    def __init__(self, config_dir: Path = None, gcloud_bin: str = "gcloud"):
        self.config_dir = config_dir or (Path.home() / ".config" / "gcloud")
        self.gcloud_bin = gcloud_bin

    def _record_path(self, name: str) -> Path:
        """Return the full path of the settings record for a profile"""
        return self.config_dir / "configurations" / f"config_{name}"

    def _run(self, *args: str) -> str:
        cmd = [self.gcloud_bin, "config", "configurations", *args]
        logger.debug("running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
        except FileNotFoundError as e:
            raise StoreError(f"{self.gcloud_bin} not found; is the Google Cloud SDK installed?") from e
        return result.stdout

    def _failure(self, name: str, error: subprocess.CalledProcessError) -> StoreError:
        if name not in self.list_profiles():
            return UnknownProfile(name)
        message = (error.stderr or "").strip() or f"{self.gcloud_bin} exited with status {error.returncode}"
        return StoreError(message)

    def list_profiles(self) -> List[str]:
        try:
            out = self._run("list", "--format=value(name)")
        except subprocess.CalledProcessError as e:
            raise StoreError((e.stderr or "").strip() or "cannot list configurations") from e
        return [line.strip() for line in out.splitlines() if line.strip()]

    def active_profile(self) -> str:
        try:
            out = self._run("list", "--filter=is_active:true", "--format=value(name)")
        except subprocess.CalledProcessError as e:
            raise StoreError((e.stderr or "").strip() or "cannot query the active configuration") from e
        name = out.strip()
        if not name:
            raise StoreError("no active configuration")
        return name

    def activate(self, name: str):
        try:
            self._run("activate", name)
        except subprocess.CalledProcessError as e:
            raise self._failure(name, e) from e

    def delete(self, name: str):
        try:
            self._run("delete", name, "--quiet")
        except subprocess.CalledProcessError as e:
            if name != self.active_profile():
                raise self._failure(name, e) from e
            # gcloud refuses to delete the active configuration; drop its record instead
            if not self.has_record(name):
                raise UnknownProfile(name) from e
            logger.debug("gcloud refused to delete active %s, removing its record", name)
            self.remove_record(name)

    def has_record(self, name: str) -> bool:
        return self._record_path(name).is_file()

    def remove_record(self, name: str):
        path = self._record_path(name)
        logger.debug("removing record %s", path)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StoreError(f"cannot remove {path}: {e}") from e

    def move_record(self, old: str, new: str):
        src = self._record_path(old)
        if not self.has_record(old):
            raise UnknownProfile(old)
        logger.debug("moving record %s -> %s", src, self._record_path(new))
        try:
            src.rename(self._record_path(new))
        except OSError as e:
            raise StoreError(f"cannot move {src}: {e}") from e

    def __repr__(self):
        return f"<GcloudProfileStore config_dir={self.config_dir}>"
