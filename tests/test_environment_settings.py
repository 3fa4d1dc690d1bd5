import pytest

pytest.importorskip("PyQt6.QtCore")

from modmanager.core.signals import global_signals
from modmanager.models import AppConfig
from modmanager.services import EnvironmentSettings, GameModeRegistry


@pytest.fixture
def changed_ids():
    received = []

    def _record(mode_id):
        received.append(mode_id)

    global_signals.game_mode_paths_changed.connect(_record)
    yield received
    global_signals.game_mode_paths_changed.disconnect(_record)


def test_from_config():
    settings = EnvironmentSettings.from_config(
        AppConfig(installation_paths={"a": "/a"}, executable_paths={"a": "/a/a.exe"})
    )
    assert settings.installation_paths == {"a": "/a"}
    assert settings.executable_paths == {"a": "/a/a.exe"}


def test_views_are_read_only():
    settings = EnvironmentSettings({"a": "/a"})
    with pytest.raises(TypeError):
        settings.installation_paths["a"] = "/b"
    with pytest.raises(TypeError):
        settings.executable_paths["a"] = "/b"


def test_updates_are_visible_to_descriptors(make_info):
    settings = EnvironmentSettings()
    registry = GameModeRegistry(settings)
    descriptor = registry.register(make_info())

    settings.set_installation_path("skyrim", "/games/skyrim")
    settings.set_executable_path("skyrim", "/games/skyrim/TESV.exe")
    assert descriptor.installation_path == "/games/skyrim"
    assert descriptor.executable_path == "/games/skyrim/TESV.exe"

    settings.clear_installation_path("skyrim")
    settings.clear_executable_path("skyrim")
    assert descriptor.installation_path is None
    assert descriptor.executable_path is None


def test_changes_are_announced_once(changed_ids):
    settings = EnvironmentSettings()

    settings.set_installation_path("a", "/a")
    settings.set_installation_path("a", "/a")
    settings.set_executable_path("b", "/b.exe")
    settings.clear_executable_path("b")
    settings.clear_executable_path("b")

    assert changed_ids == ["a", "b", "b"]


def test_empty_mode_id_rejected():
    with pytest.raises(ValueError):
        EnvironmentSettings().set_installation_path("", "/a")


def test_snapshot_is_a_copy():
    settings = EnvironmentSettings({"a": "/a"}, {"a": "/a.exe"})
    installation_paths, executable_paths = settings.snapshot()
    installation_paths["b"] = "/b"

    assert executable_paths == {"a": "/a.exe"}
    assert "b" not in settings.installation_paths
