import pytest

from modmanager.models import GameModeInfo, ModeTheme
from modmanager.utils import logger_utils


@pytest.fixture(autouse=True, scope="session")
def _log_to_tmp(tmp_path_factory):
    # Keep test runs from writing into the repository's logs/ folder
    logger_utils.reconfigure_logger(tmp_path_factory.mktemp("logs"))


class FakeSettings:
    """Minimal settings provider: two plain dicts."""

    def __init__(self, installation_paths=None, executable_paths=None):
        self.installation_paths = dict(installation_paths or {})
        self.executable_paths = dict(executable_paths or {})


@pytest.fixture
def fake_settings():
    return FakeSettings()


@pytest.fixture
def theme():
    return ModeTheme(name="Test", primary_color="#123456")


@pytest.fixture
def make_info(theme):
    def _make(**overrides):
        fields = {
            "name": "Skyrim",
            "mode_id": "skyrim",
            "game_executables": ("TESV.exe",),
            "mode_theme": theme,
            "plugin_directory": "Data",
        }
        fields.update(overrides)
        return GameModeInfo(**fields)

    return _make
