# LICENSE: AGPLv3. See LICENSE at root of repo

import logging
import os
import platform
import struct
from pathlib import Path

import vdf

from steamfolders.errors import ParseFailureError, SteamNotFoundError

log = logging.getLogger(__name__)


def get_default_steam_paths():
    """Where Steam usually lives on this platform, most likely first.

    get_default_steam_paths() -> list[Path]
    """
    system = platform.system()
    home = Path(os.path.expanduser("~"))
    if system == "Linux":
        return [
            home / ".steam" / "steam",
            home / ".local" / "share" / "Steam",
            home / ".var" / "app" / "com.valvesoftware.Steam" / ".local" / "share" / "Steam",
        ]
    if system == "Darwin":
        return [home / "Library" / "Application Support" / "Steam"]
    return [Path("C:\\Program Files (x86)\\Steam")]


def get_ci(data, key, default=None):
    """dict.get, but ignoring case. Steam isn't consistent about
    "Valve" vs "valve" or "AppName" vs "appname" between versions.
    """
    if key in data:
        return data[key]
    lowered = key.lower()
    for k, v in data.items():
        if k.lower() == lowered:
            return v
    return default


def _load_text_vdf(path):
    # Replace malformed characters, we only need names and paths out of these
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return vdf.load(f)
    except (OSError, SyntaxError, ValueError) as e:
        raise ParseFailureError(path, e) from e


def _load_binary_vdf(path):
    try:
        with open(path, "rb") as f:
            return vdf.binary_load(f)
    except (OSError, SyntaxError, ValueError, struct.error) as e:
        raise ParseFailureError(path, e) from e


class SteamDir:

    """Read-only view of a Steam installation."""

    def __init__(self, steam_path):
        """
        :steam_path: Path to the Steam root (the folder containing steamapps).
        """
        self._steam_path = Path(steam_path)

    @classmethod
    def locate(cls, steam_path=None):
        """Find the Steam installation, either at steam_path or in the usual spots.

        locate(str|None) -> SteamDir
        """
        candidates = [Path(steam_path)] if steam_path else get_default_steam_paths()
        for candidate in candidates:
            if (candidate / "steamapps").is_dir():
                log.info("Using Steam installation at %s", candidate)
                return cls(candidate.resolve())
            log.debug("No Steam installation at %s", candidate)
        raise SteamNotFoundError(candidates)

    @property
    def path(self):
        return self._steam_path

    def library_folders(self):
        """
        Returns every Steam library folder, the root one first.

        Newer libraryfolders.vdf files nest each library as {"path": ...},
        older ones map the index straight to the path.

        library_folders() -> list(Path)
        """
        libraries = [self._steam_path]
        libraryfolders = self._steam_path / "steamapps" / "libraryfolders.vdf"
        if libraryfolders.is_file():
            data = _load_text_vdf(libraryfolders)
            folders = get_ci(data, "libraryfolders", {})
            for k, v in folders.items():
                if not k.isdigit():
                    # eg "TimeNextStatsReport" and "ContentStatsID"
                    continue
                path = get_ci(v, "path") if isinstance(v, dict) else v
                if path:
                    libraries.append(Path(path))

        result = []
        seen = set()
        for library in libraries:
            if not (library / "steamapps").is_dir():
                log.debug("Skipping library %s since it has no steamapps folder", library)
                continue
            key = os.path.normcase(str(library.resolve()))
            if key in seen:
                continue
            seen.add(key)
            result.append(library)
        return result

    def app_manifests(self, library):
        """
        Returns the parsed AppState of every appmanifest_*.acf in the library

        app_manifests(Path) -> list(dict)
        """
        manifests = []
        steamapps = Path(library) / "steamapps"
        for manifest in sorted(steamapps.glob("appmanifest_*.acf")):
            data = _load_text_vdf(manifest)
            app_state = get_ci(data, "AppState")
            if not isinstance(app_state, dict):
                log.warning("Skipping %s since it has no AppState", manifest)
                continue
            manifests.append(app_state)
        return manifests

    def install_dir(self, library, installdir):
        return Path(library) / "steamapps" / "common" / installdir

    def enumerate_user_ids(self):
        """
        Returns the ids of every user that signed into steam on this machine

        enumerate_user_ids() -> list(str)
        """
        userdata = self._steam_path / "userdata"
        if not userdata.is_dir():
            return []
        ids = []
        with os.scandir(userdata) as childs:
            for child in childs:
                if child.is_dir():
                    ids.append(os.fsdecode(child.name))
        return sorted(ids)

    def shortcuts(self):
        """
        Returns every non-steam shortcut of every user, in file order.

        shortcuts() -> list(dict)
        """
        entries = []
        for steamid in self.enumerate_user_ids():
            shortcut_file = (
                self._steam_path / "userdata" / steamid / "config" / "shortcuts.vdf"
            )
            if not shortcut_file.is_file():
                continue
            data = _load_binary_vdf(shortcut_file)
            # the shortcuts "list" is actually a dict of "index": value
            shortcuts = get_ci(data, "shortcuts", {})
            for k in sorted(shortcuts, key=lambda idx: int(idx) if idx.isdigit() else 0):
                if isinstance(shortcuts[k], dict):
                    entries.append(shortcuts[k])
        return entries

    def compat_tool_mapping(self):
        """
        Returns the apps that have a compatibility tool (Proton, Wine...) forced on them.

        compat_tool_mapping() -> dict[int, dict]
        """
        config_file = self._steam_path / "config" / "config.vdf"
        if not config_file.is_file():
            log.debug("No %s, so no compatibility tools are configured", config_file)
            return {}
        data = _load_text_vdf(config_file)

        node = data
        for key in ["InstallConfigStore", "Software", "Valve", "Steam", "CompatToolMapping"]:
            node = get_ci(node, key)
            if not isinstance(node, dict):
                return {}

        mapping = {}
        for app_id, tool in node.items():
            try:
                mapping[int(app_id)] = tool
            except ValueError:
                log.warning("Ignoring CompatToolMapping entry with bad app id '%s'", app_id)
        return mapping

    def prefix_path(self, app_id):
        return self._steam_path / "steamapps" / "compatdata" / str(app_id) / "pfx"
