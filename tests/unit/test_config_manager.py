import json
from pathlib import Path

import pytest

from bgremover import config_manager
from bgremover.config_manager import ConfigManager, build_endpoint, get_config_manager
from bgremover.constants import DEFAULT_SERVICE_URL, DEFAULT_TIMEOUT


class TestDefaults:
    def test_creates_file_with_defaults(self, isolated_config: Path) -> None:
        manager = ConfigManager()

        assert isolated_config.exists()
        saved = json.loads(isolated_config.read_text())
        assert saved["language"] == "ar"
        assert saved["service_url"] == DEFAULT_SERVICE_URL
        assert manager.get_request_timeout() == DEFAULT_TIMEOUT

    def test_env_var_overrides_service_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(config_manager.SERVICE_URL_ENV, "http://remote.example:8080")

        manager = ConfigManager()

        assert manager.get_endpoint() == "http://remote.example:8080/api/remove-background"

    def test_backfills_missing_keys(self, isolated_config: Path) -> None:
        isolated_config.write_text(json.dumps({"language": "en"}))

        manager = ConfigManager()

        assert manager.get_language() == "en"
        assert manager.get_service_url() == DEFAULT_SERVICE_URL
        assert "download_directory" in json.loads(isolated_config.read_text())

    def test_corrupt_file_falls_back_to_defaults(self, isolated_config: Path) -> None:
        isolated_config.write_text("{not json")

        manager = ConfigManager()

        assert manager.get_language() == "ar"

    def test_non_object_file_falls_back_to_defaults(self, isolated_config: Path) -> None:
        isolated_config.write_text("[1, 2, 3]")

        manager = ConfigManager()

        assert manager.get_service_url() == DEFAULT_SERVICE_URL


class TestPersistence:
    def test_language_round_trips_through_file(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.json"
        ConfigManager(path).set_language("en")

        assert ConfigManager(path).get_language() == "en"

    def test_download_directory_is_created(self, tmp_path: Path) -> None:
        manager = ConfigManager(tmp_path / "custom.json")
        target = tmp_path / "saved" / "images"

        manager.set_download_directory(target)

        assert manager.get_download_directory() == target
        assert target.is_dir()

    @pytest.mark.parametrize("value", ["abc", -5, 0, None])
    def test_invalid_timeout_uses_default(self, tmp_path: Path, value) -> None:
        manager = ConfigManager(tmp_path / "custom.json")
        manager.config["request_timeout"] = value

        assert manager.get_request_timeout() == DEFAULT_TIMEOUT

    def test_service_url_setter(self, tmp_path: Path) -> None:
        manager = ConfigManager(tmp_path / "custom.json")

        manager.set_service_url("https://bg.example.com/")

        assert manager.get_endpoint() == "https://bg.example.com/api/remove-background"


class TestBuildEndpoint:
    @pytest.mark.parametrize(
        ("base", "expected"),
        [
            ("http://localhost:5000", "http://localhost:5000/api/remove-background"),
            ("http://localhost:5000/", "http://localhost:5000/api/remove-background"),
            (" http://host/api/remove-background ", "http://host/api/remove-background"),
        ],
    )
    def test_joins_path_once(self, base: str, expected: str) -> None:
        assert build_endpoint(base) == expected


def test_global_instance_is_shared() -> None:
    assert get_config_manager() is get_config_manager()
