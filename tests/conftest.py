from pathlib import Path

import pytest

from bgremover import config_manager
from bgremover.i18n import Translator

from helpers import FakeScheduler


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep every test away from the real home directory config."""
    config_path = tmp_path / "config" / "bgremover.json"
    config_path.parent.mkdir()
    monkeypatch.delenv(config_manager.SERVICE_URL_ENV, raising=False)
    monkeypatch.setattr(config_manager, "CONFIG_FILE", config_path)
    monkeypatch.setattr(config_manager, "DEFAULT_DOWNLOAD_DIR", tmp_path / "downloads")
    monkeypatch.setattr(config_manager, "_config_manager", None)
    return config_path


@pytest.fixture()
def translator() -> Translator:
    return Translator(language="en")


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def png_file(tmp_path: Path) -> Path:
    path = tmp_path / "photo.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 64)
    return path


@pytest.fixture()
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text("not an image")
    return path
