from pathlib import Path

from gctx.config import Settings


def test_defaults_follow_xdg(tmp_path):
    settings = Settings.from_env({"XDG_CONFIG_HOME": str(tmp_path)})
    assert settings.gcloud_config_dir == tmp_path / "gcloud"
    assert settings.previous_file == tmp_path / "gctx" / "previous"
    assert settings.records_dir == tmp_path / "gcloud" / "configurations"
    assert settings.gcloud_bin == "gcloud"


def test_defaults_without_environment():
    settings = Settings.from_env({})
    assert settings.gcloud_config_dir == Path.home() / ".config" / "gcloud"
    assert settings.previous_file == Path.home() / ".config" / "gctx" / "previous"


def test_overrides(tmp_path):
    settings = Settings.from_env({
        "CLOUDSDK_CONFIG": str(tmp_path / "sdk"),
        "GCTX_PREVIOUS_FILE": str(tmp_path / "prev.txt"),
        "GCTX_GCLOUD": "/opt/google-cloud-sdk/bin/gcloud",
    })
    assert settings.gcloud_config_dir == tmp_path / "sdk"
    assert settings.previous_file == tmp_path / "prev.txt"
    assert settings.gcloud_bin == "/opt/google-cloud-sdk/bin/gcloud"
