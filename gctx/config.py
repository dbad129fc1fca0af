import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional


def _default_config_home(environ: Mapping[str, str]) -> Path:
    xdg = environ.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else Path.home() / ".config"


@dataclass
class Settings:
    """Resolved locations for the profile store and the previous-profile record"""
    gcloud_config_dir: Path = field(default_factory=lambda: Path.home() / ".config" / "gcloud")
    previous_file: Path = field(default_factory=lambda: Path.home() / ".config" / "gctx" / "previous")
    gcloud_bin: str = "gcloud"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None):
        """Build settings from environment variables, falling back to defaults"""
        environ = os.environ if environ is None else environ
        config_home = _default_config_home(environ)

        gcloud_dir = environ.get("CLOUDSDK_CONFIG")
        previous = environ.get("GCTX_PREVIOUS_FILE")
        return cls(
            gcloud_config_dir=Path(gcloud_dir).expanduser() if gcloud_dir else config_home / "gcloud",
            previous_file=Path(previous).expanduser() if previous else config_home / "gctx" / "previous",
            gcloud_bin=environ.get("GCTX_GCLOUD") or "gcloud",
        )

    @property
    def records_dir(self) -> Path:
        """Directory holding one settings record per profile"""
        return self.gcloud_config_dir / "configurations"
