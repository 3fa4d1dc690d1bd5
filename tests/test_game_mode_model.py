import pytest

from modmanager.models import DEFAULT_THEME, ModeTheme, RequiredTool


def test_lists_are_stored_as_immutable_values(make_info):
    info = make_info(
        game_executables=["a.exe", "b.exe"],
        plugin_extensions=[".ESP", ".esm"],
        stop_folders=["textures", "meshes"],
        ordered_official_plugin_names=["z.esm", "a.esm"],
    )

    assert info.game_executables == ("a.exe", "b.exe")
    assert info.plugin_extensions == frozenset({".esp", ".esm"})
    assert info.stop_folders == frozenset({"textures", "meshes"})
    # Load order is kept, not sorted
    assert info.ordered_official_plugin_names == ("z.esm", "a.esm")


def test_empty_ordered_list_is_not_absent(make_info):
    info = make_info(ordered_official_unmanaged_plugin_names=[])
    assert info.ordered_official_unmanaged_plugin_names == ()


@pytest.mark.parametrize("field", ["name", "mode_id"])
def test_identity_fields_required(make_info, field):
    with pytest.raises(ValueError):
        make_info(**{field: ""})


def test_info_is_frozen(make_info):
    info = make_info()
    with pytest.raises(AttributeError):
        info.mode_id = "other"


def test_required_tool_needs_name_and_files():
    with pytest.raises(ValueError):
        RequiredTool(name="", file_names=("tool.exe",))
    with pytest.raises(ValueError):
        RequiredTool(name="Tool", file_names=())

    tool = RequiredTool(name="Tool", file_names=["tool.exe"])
    assert tool.file_names == ("tool.exe",)
    assert tool.error_message is None


def test_theme_validation():
    assert ModeTheme("A", "#abcdef", "light").appearance == "light"
    assert DEFAULT_THEME.appearance == "dark"

    with pytest.raises(ValueError):
        ModeTheme("Bad", "red")
    with pytest.raises(ValueError):
        ModeTheme("Bad", "#000000", "sepia")


def test_themes_compare_by_value():
    assert ModeTheme("A", "#000000") == ModeTheme("A", "#000000")
    assert ModeTheme("A", "#000000") != ModeTheme("A", "#000001")


@pytest.mark.parametrize(
    "field, value",
    [
        ("game_executables", "TESV.exe"),
        ("plugin_extensions", ".esp"),
        ("stop_folders", "textures"),
        ("ordered_critical_plugin_names", "Skyrim.esm"),
        ("ordered_official_plugin_names", "Skyrim.esm"),
        ("ordered_official_unmanaged_plugin_names", "Skyrim.esm"),
    ],
)
def test_single_string_rejected_for_collections(make_info, field, value):
    with pytest.raises(TypeError):
        make_info(**{field: value})


def test_required_tool_rejects_single_file_name_string():
    with pytest.raises(TypeError):
        RequiredTool(name="Tool", file_names="tool.exe")


def test_theme_color_rejects_trailing_newline():
    with pytest.raises(ValueError):
        ModeTheme("T", "#123456\n")
