from pathlib import Path

import pytest
import vdf

from steamfolders.defs import GameRecord, to_unsigned_id

# shortcuts.vdf stores ids as signed int32
SHORTCUT_C_ID = -123456
SHORTCUT_D_ID = -222222
SHORTCUT_E_ID = -333333


class SteamLayout:
    """Builds a fake Steam installation under a temporary folder."""

    def __init__(self, root: Path):
        self.root = root
        (root / "steamapps").mkdir(parents=True, exist_ok=True)

    def add_app(self, appid, name, installdir, create_dir=True, library=None):
        library = library or self.root
        steamapps = library / "steamapps"
        steamapps.mkdir(parents=True, exist_ok=True)
        app_state = {"appid": str(appid), "installdir": installdir}
        if name is not None:
            app_state["name"] = name
        with open(steamapps / f"appmanifest_{appid}.acf", "w", encoding="utf-8") as f:
            vdf.dump({"AppState": app_state}, f, pretty=True)
        install_path = steamapps / "common" / installdir
        if create_dir:
            install_path.mkdir(parents=True, exist_ok=True)
        return install_path

    def set_libraries(self, *paths):
        folders = {str(i): {"path": str(p)} for i, p in enumerate(paths)}
        with open(self.root / "steamapps" / "libraryfolders.vdf", "w", encoding="utf-8") as f:
            vdf.dump({"libraryfolders": folders}, f, pretty=True)

    def set_shortcuts(self, shortcuts, steamid="12345"):
        config = self.root / "userdata" / steamid / "config"
        config.mkdir(parents=True, exist_ok=True)
        data = {"shortcuts": {str(i): s for i, s in enumerate(shortcuts)}}
        with open(config / "shortcuts.vdf", "wb") as f:
            vdf.binary_dump(data, f)

    def set_compat_tools(self, app_ids):
        mapping = {
            str(app_id): {"name": "proton_9", "config": "", "priority": "250"}
            for app_id in app_ids
        }
        config = self.root / "config"
        config.mkdir(parents=True, exist_ok=True)
        data = {
            "InstallConfigStore": {
                "Software": {"Valve": {"Steam": {"CompatToolMapping": mapping}}}
            }
        }
        with open(config / "config.vdf", "w", encoding="utf-8") as f:
            vdf.dump(data, f, pretty=True)

    def add_prefix(self, app_id):
        pfx = self.root / "steamapps" / "compatdata" / str(app_id) / "pfx"
        pfx.mkdir(parents=True, exist_ok=True)
        return pfx


def shortcut(appid, name, exe="/games/game.exe"):
    entry = {"AppName": name, "Exe": f'"{exe}"', "StartDir": '"/games/"'}
    if appid is not None:
        entry["appid"] = appid
    return entry


class FakeScreen:
    """Stands in for a curses window and remembers what was drawn where."""

    def __init__(self, keys=(), height=24, width=100):
        self.keys = list(keys)
        self.height = height
        self.width = width
        self.lines = {}
        self.refreshes = 0

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.lines = {}

    def addnstr(self, y, x, text, n, attr=0):
        assert 0 <= y < self.height
        assert n < self.width
        self.lines[y] = (text[:n], attr)

    def refresh(self):
        self.refreshes += 1

    def keypad(self, flag):
        pass

    def get_wch(self):
        if not self.keys:
            raise AssertionError("the app asked for more keys than the test provided")
        return self.keys.pop(0)

    def text(self):
        return [self.lines[y][0] for y in sorted(self.lines)]

    def rows_with(self, attr):
        return [text for text, a in self.lines.values() if a & attr]


@pytest.fixture
def steam(tmp_path):
    return SteamLayout(tmp_path / "Steam")


@pytest.fixture
def populated_steam(steam):
    """2 native games and 3 shortcuts, of which only Game C has a usable prefix."""
    steam.add_app(100, "Game A", "GameA")
    steam.add_app(200, "Game B", "GameB")
    steam.set_shortcuts(
        [
            shortcut(SHORTCUT_C_ID, "Game C"),
            shortcut(SHORTCUT_D_ID, "Game D"),
            shortcut(SHORTCUT_E_ID, "Game E"),
        ]
    )
    # D has no compat tool, E has one but its prefix was never created
    steam.set_compat_tools([to_unsigned_id(SHORTCUT_C_ID), to_unsigned_id(SHORTCUT_E_ID)])
    steam.add_prefix(to_unsigned_id(SHORTCUT_C_ID))
    return steam


@pytest.fixture
def records(tmp_path):
    games = []
    for name, non_steam in [("Game A", False), ("Game B", False), ("Game C", True)]:
        folder = tmp_path / "folders" / name.replace(" ", "")
        folder.mkdir(parents=True)
        games.append(GameRecord(name, folder, non_steam, len(games) + 1))
    return games
