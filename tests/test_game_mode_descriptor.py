from pathlib import Path

from modmanager.models import GameModeDescriptor, RequiredTool

from conftest import FakeSettings


def test_installation_path_found_and_executable_absent(make_info):
    settings = FakeSettings(installation_paths={"skyrim": "/games/skyrim"})
    descriptor = GameModeDescriptor(make_info(), settings)

    assert descriptor.installation_path == "/games/skyrim"
    assert descriptor.executable_path is None


def test_executable_path_lookup(make_info):
    settings = FakeSettings(executable_paths={"skyrim": "/games/skyrim/TESV.exe"})
    descriptor = GameModeDescriptor(make_info(), settings)

    assert descriptor.executable_path == "/games/skyrim/TESV.exe"
    assert descriptor.installation_path is None


def test_unknown_mode_id_resolves_to_none(make_info):
    settings = FakeSettings(
        installation_paths={"other": "/x"}, executable_paths={"other": "/x/a.exe"}
    )
    descriptor = GameModeDescriptor(make_info(), settings)

    assert descriptor.installation_path is None
    assert descriptor.executable_path is None


def test_paths_are_read_live(make_info, fake_settings):
    descriptor = GameModeDescriptor(make_info(), fake_settings)
    assert descriptor.installation_path is None

    fake_settings.installation_paths["skyrim"] = "/first"
    assert descriptor.installation_path == "/first"

    fake_settings.installation_paths["skyrim"] = "/second"
    fake_settings.executable_paths["skyrim"] = "/second/TESV.exe"
    assert descriptor.installation_path == "/second"
    assert descriptor.executable_path == "/second/TESV.exe"

    del fake_settings.installation_paths["skyrim"]
    assert descriptor.installation_path is None


def test_repeated_reads_are_identical(make_info):
    settings = FakeSettings(installation_paths={"skyrim": "/games/skyrim"})
    descriptor = GameModeDescriptor(
        make_info(plugin_extensions={".esp"}, ordered_critical_plugin_names=["a.esm"]),
        settings,
    )

    for attr in (
        "installation_path",
        "executable_path",
        "plugin_extensions",
        "stop_folders",
        "ordered_critical_plugin_names",
        "mode_theme",
    ):
        assert getattr(descriptor, attr) == getattr(descriptor, attr)


def test_optional_fields_default_to_not_applicable(make_info, fake_settings):
    descriptor = GameModeDescriptor(make_info(), fake_settings)

    assert descriptor.secondary_installation_path is None
    assert descriptor.plugin_extensions == frozenset()
    assert descriptor.stop_folders == frozenset()
    assert descriptor.ordered_critical_plugin_names is None
    assert descriptor.ordered_official_plugin_names is None
    assert descriptor.ordered_official_unmanaged_plugin_names is None
    assert descriptor.required_tool_name is None
    assert descriptor.ordered_required_tool_file_names is None
    assert descriptor.required_tool_error_message is None
    assert descriptor.critical_files_error_message is None
    assert not descriptor.has_required_tool
    assert not descriptor.has_critical_plugins


def test_only_critical_plugins_overridden(make_info, fake_settings):
    descriptor = GameModeDescriptor(
        make_info(ordered_critical_plugin_names=["base.plugin", "update.plugin"]),
        fake_settings,
    )

    assert descriptor.ordered_critical_plugin_names == ("base.plugin", "update.plugin")
    assert descriptor.ordered_official_plugin_names is None
    assert descriptor.ordered_official_unmanaged_plugin_names is None


def test_required_fields_are_exposed(make_info, fake_settings, theme):
    descriptor = GameModeDescriptor(
        make_info(game_executables=["TESV.exe", "SkyrimLauncher.exe"]), fake_settings
    )

    assert descriptor.name == "Skyrim"
    assert descriptor.mode_id == "skyrim"
    assert descriptor.game_executables == ("TESV.exe", "SkyrimLauncher.exe")
    assert descriptor.mode_theme == theme
    assert descriptor.plugin_directory == "Data"


def test_required_tool_fields_come_from_one_record(make_info, fake_settings):
    tool = RequiredTool("ToolX", ["toolx.exe", "toolx.dll"], "Install ToolX first.")
    descriptor = GameModeDescriptor(make_info(required_tool=tool), fake_settings)

    assert descriptor.has_required_tool
    assert descriptor.required_tool_name == "ToolX"
    assert descriptor.ordered_required_tool_file_names == ("toolx.exe", "toolx.dll")
    assert descriptor.required_tool_error_message == "Install ToolX first."


def test_installation_path_resolver_replaces_lookup(make_info):
    settings = FakeSettings(
        installation_paths={"skyrim": "/ignored"},
        executable_paths={"skyrim": "/games/skyrim/TESV.exe"},
    )
    calls = []

    def from_executable(provider, mode_id):
        calls.append(mode_id)
        return str(Path(provider.executable_paths[mode_id]).parent)

    descriptor = GameModeDescriptor(make_info(), settings, from_executable)

    assert descriptor.installation_path == str(Path("/games/skyrim"))
    assert descriptor.executable_path == "/games/skyrim/TESV.exe"
    assert calls == ["skyrim"]


def test_construction_does_not_touch_settings(make_info):
    # A missing provider only fails once a lookup is attempted
    descriptor = GameModeDescriptor(make_info(), None)
    assert descriptor.name == "Skyrim"


def test_descriptor_does_not_mutate_settings(make_info):
    settings = FakeSettings(installation_paths={"skyrim": "/games/skyrim"})
    descriptor = GameModeDescriptor(make_info(), settings)

    descriptor.installation_path
    descriptor.executable_path
    descriptor.resolve_plugin_directory()

    assert settings.installation_paths == {"skyrim": "/games/skyrim"}
    assert settings.executable_paths == {}


def test_resolve_plugin_directory_relative(make_info, fake_settings):
    descriptor = GameModeDescriptor(make_info(), fake_settings)
    assert descriptor.resolve_plugin_directory() is None

    fake_settings.installation_paths["skyrim"] = "/games/skyrim"
    assert descriptor.resolve_plugin_directory() == Path("/games/skyrim") / "Data"


def test_resolve_plugin_directory_absolute(make_info, fake_settings, tmp_path):
    descriptor = GameModeDescriptor(make_info(plugin_directory=str(tmp_path)), fake_settings)
    assert descriptor.resolve_plugin_directory() == tmp_path


def test_equality_follows_mode_id(make_info, fake_settings):
    first = GameModeDescriptor(make_info(), fake_settings)
    second = GameModeDescriptor(make_info(name="Renamed"), FakeSettings())
    other = GameModeDescriptor(make_info(mode_id="fallout"), fake_settings)

    assert first == second
    assert hash(first) == hash(second)
    assert first != other
    assert len({first, second, other}) == 2
