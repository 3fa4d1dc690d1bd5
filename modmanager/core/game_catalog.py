# modmanager/core/game_catalog.py
"""
Built-in game modes. Each entry is plain configuration; behaviour shared by
all games lives in GameModeDescriptor.
"""
from __future__ import annotations
from pathlib import Path

from modmanager.models.game_mode_descriptor import PathSettings, lookup_installation_path
from modmanager.models.game_mode_model import GameModeInfo, RequiredTool
from modmanager.models.theme_model import ModeTheme

# --- Shared Bethesda layout ---
_BETHESDA_PLUGIN_EXTENSIONS = frozenset({".esp", ".esm"})
_BETHESDA_STOP_FOLDERS = frozenset(
    {
        "distantlod",
        "facegen",
        "fonts",
        "interface",
        "menus",
        "meshes",
        "music",
        "scripts",
        "shaders",
        "sound",
        "strings",
        "textures",
        "trees",
        "video",
    }
)

SKYRIM = GameModeInfo(
    name="The Elder Scrolls V: Skyrim",
    mode_id="Skyrim",
    game_executables=("TESV.exe",),
    mode_theme=ModeTheme(name="Skyrim", primary_color="#7A8B99"),
    plugin_directory="Data",
    plugin_extensions=_BETHESDA_PLUGIN_EXTENSIONS,
    stop_folders=_BETHESDA_STOP_FOLDERS | {"skse", "skyproc patchers"},
    ordered_critical_plugin_names=("Skyrim.esm", "Update.esm"),
    ordered_official_plugin_names=(
        "Skyrim.esm",
        "Update.esm",
        "Dawnguard.esm",
        "HearthFires.esm",
        "Dragonborn.esm",
        "HighResTexturePack01.esp",
        "HighResTexturePack02.esp",
        "HighResTexturePack03.esp",
    ),
)

SKYRIM_SE = GameModeInfo(
    name="Skyrim Special Edition",
    mode_id="SkyrimSE",
    game_executables=("SkyrimSE.exe",),
    mode_theme=ModeTheme(name="Skyrim Special Edition", primary_color="#B7C4CF"),
    plugin_directory="Data",
    plugin_extensions=_BETHESDA_PLUGIN_EXTENSIONS | {".esl"},
    stop_folders=_BETHESDA_STOP_FOLDERS | {"skse", "seq"},
    ordered_critical_plugin_names=(
        "Skyrim.esm",
        "Update.esm",
        "Dawnguard.esm",
        "HearthFires.esm",
        "Dragonborn.esm",
    ),
    ordered_official_plugin_names=(
        "Skyrim.esm",
        "Update.esm",
        "Dawnguard.esm",
        "HearthFires.esm",
        "Dragonborn.esm",
    ),
    # The game loads these itself regardless of plugins.txt
    ordered_official_unmanaged_plugin_names=(
        "Skyrim.esm",
        "Update.esm",
        "Dawnguard.esm",
        "HearthFires.esm",
        "Dragonborn.esm",
    ),
    critical_files_error_message=(
        "Skyrim Special Edition is missing one or more master files. "
        "Use 'Verify integrity of game files' in Steam, then restart the manager."
    ),
)

OBLIVION = GameModeInfo(
    name="The Elder Scrolls IV: Oblivion",
    mode_id="Oblivion",
    game_executables=("Oblivion.exe", "OblivionLauncher.exe"),
    mode_theme=ModeTheme(name="Oblivion", primary_color="#5C7A3A"),
    plugin_directory="Data",
    plugin_extensions=_BETHESDA_PLUGIN_EXTENSIONS,
    stop_folders=_BETHESDA_STOP_FOLDERS | {"obse"},
    ordered_critical_plugin_names=("Oblivion.esm",),
    ordered_official_plugin_names=(
        "Oblivion.esm",
        "DLCShiveringIsles.esp",
        "DLCHorseArmor.esp",
        "DLCOrrery.esp",
        "DLCVileLair.esp",
        "DLCMehrunesRazor.esp",
        "DLCSpellTomes.esp",
        "DLCThievesDen.esp",
        "DLCBattlehornCastle.esp",
        "DLCFrostcrag.esp",
        "Knights.esp",
    ),
)

FALLOUT_3 = GameModeInfo(
    name="Fallout 3",
    mode_id="Fallout3",
    game_executables=("Fallout3.exe", "FalloutLauncher.exe"),
    mode_theme=ModeTheme(name="Fallout 3", primary_color="#3F9C35"),
    plugin_directory="Data",
    plugin_extensions=_BETHESDA_PLUGIN_EXTENSIONS,
    stop_folders=_BETHESDA_STOP_FOLDERS | {"fose"},
    ordered_critical_plugin_names=("Fallout3.esm",),
    ordered_official_plugin_names=(
        "Fallout3.esm",
        "Anchorage.esm",
        "ThePitt.esm",
        "BrokenSteel.esm",
        "PointLookout.esm",
        "Zeta.esm",
    ),
)

FALLOUT_NV = GameModeInfo(
    name="Fallout: New Vegas",
    mode_id="FalloutNV",
    game_executables=("FalloutNV.exe", "FalloutNVLauncher.exe"),
    mode_theme=ModeTheme(name="Fallout: New Vegas", primary_color="#D9A441"),
    plugin_directory="Data",
    plugin_extensions=_BETHESDA_PLUGIN_EXTENSIONS,
    stop_folders=_BETHESDA_STOP_FOLDERS | {"nvse"},
    ordered_critical_plugin_names=("FalloutNV.esm",),
    ordered_official_plugin_names=(
        "FalloutNV.esm",
        "DeadMoney.esm",
        "HonestHearts.esm",
        "OldWorldBlues.esm",
        "LonesomeRoad.esm",
        "GunRunnersArsenal.esm",
        "ClassicPack.esm",
        "MercenaryPack.esm",
        "TribalPack.esm",
        "CaravanPack.esm",
    ),
)

FALLOUT_4 = GameModeInfo(
    name="Fallout 4",
    mode_id="Fallout4",
    game_executables=("Fallout4.exe",),
    mode_theme=ModeTheme(name="Fallout 4", primary_color="#2E6DB4"),
    plugin_directory="Data",
    plugin_extensions=_BETHESDA_PLUGIN_EXTENSIONS | {".esl"},
    stop_folders=_BETHESDA_STOP_FOLDERS | {"f4se", "materials", "vis"},
    ordered_critical_plugin_names=("Fallout4.esm",),
    ordered_official_plugin_names=(
        "Fallout4.esm",
        "DLCRobot.esm",
        "DLCworkshop01.esm",
        "DLCCoast.esm",
        "DLCworkshop02.esm",
        "DLCworkshop03.esm",
        "DLCNukaWorld.esm",
    ),
    ordered_official_unmanaged_plugin_names=(
        "Fallout4.esm",
        "DLCRobot.esm",
        "DLCworkshop01.esm",
        "DLCCoast.esm",
        "DLCworkshop02.esm",
        "DLCworkshop03.esm",
        "DLCNukaWorld.esm",
    ),
)

DARK_SOULS = GameModeInfo(
    name="Dark Souls",
    mode_id="DarkSouls",
    game_executables=("DARKSOULS.exe",),
    mode_theme=ModeTheme(name="Dark Souls", primary_color="#8C2F1B"),
    plugin_directory="DATA",
    stop_folders=frozenset(
        {"chr", "event", "facegen", "font", "map", "menu", "msg", "mtd", "obj",
         "other", "param", "paramdef", "parts", "remo", "script", "sfx",
         "shader", "sound"}
    ),
    required_tool=RequiredTool(
        name="UnpackDARKSOULSForModding",
        file_names=("UnpackDARKSOULSForModding.exe",),
        error_message=(
            "Dark Souls must be unpacked before mods can be installed. "
            "Run UnpackDARKSOULSForModding from the game folder and try again."
        ),
    ),
)


def _witcher3_installation_path(settings: PathSettings, mode_id: str) -> str | None:
    """
    Mods go into <game>/Mods. Falls back to deriving the game folder from
    the executable, which lives in <game>/bin/x64.
    """
    configured = lookup_installation_path(settings, mode_id)
    if configured:
        return configured
    executable = settings.executable_paths.get(mode_id)
    if not executable:
        return None
    return str(Path(executable).parent.parent.parent)


WITCHER_3 = GameModeInfo(
    name="The Witcher 3: Wild Hunt",
    mode_id="Witcher3",
    game_executables=("witcher3.exe",),
    mode_theme=ModeTheme(name="The Witcher 3", primary_color="#A31B1B"),
    plugin_directory="Mods",
    stop_folders=frozenset({"content", "bin", "dlc"}),
)

BUILTIN_GAME_MODES: tuple[GameModeInfo, ...] = (
    SKYRIM,
    SKYRIM_SE,
    OBLIVION,
    FALLOUT_3,
    FALLOUT_NV,
    FALLOUT_4,
    DARK_SOULS,
    WITCHER_3,
)

# Game modes that compute their installation path instead of looking it up
INSTALLATION_PATH_RESOLVERS = {
    WITCHER_3.mode_id: _witcher3_installation_path,
}
