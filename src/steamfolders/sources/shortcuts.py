# LICENSE: AGPLv3. See LICENSE at root of repo

import logging

import steamfolders.defs as defs
import steamfolders.sources.source as source
from steamfolders.steamdir import get_ci

log = logging.getLogger(__name__)


def get_exe_from_shortcut(shortcut):
    exe = get_ci(shortcut, "Exe", "")
    # Manually added shortcuts may have additional quotes.
    return exe.strip('"')


def get_shortcut_app_id(shortcut):
    """The unsigned id Steam uses for this shortcut in compatdata and config.vdf.

    get_shortcut_app_id(dict) -> int
    """
    app_id = get_ci(shortcut, "appid")
    if app_id is None:
        # Old shortcuts.vdf entries don't carry their id, regenerate it.
        return defs.get_steam_shortcut_id(
            get_ci(shortcut, "Exe", ""), get_ci(shortcut, "appname", "")
        )
    return defs.to_unsigned_id(int(app_id))


class ShortcutSource(source.GameSource):
    """Non-steam shortcuts that run through a compatibility tool, opened at
    their Wine prefix.
    """

    def __init__(self, steam_dir):
        self.steam_dir = steam_dir

    def collect_games(self) -> list[defs.GameRecord]:
        log.info("Scanning non-steam shortcuts (%s)...", self.steam_dir.path)
        compat_tools = self.steam_dir.compat_tool_mapping()
        games = []
        seen = set()

        for shortcut in self.steam_dir.shortcuts():
            display_name = get_ci(shortcut, "appname") or get_exe_from_shortcut(shortcut)
            if not display_name:
                log.warning("Entry in shortcuts.vdf has no name or exe, is this a malformed entry?")
                continue

            app_id = get_shortcut_app_id(shortcut)
            if app_id in seen:
                # Same shortcut synced to more than one user
                continue
            if app_id not in compat_tools:
                log.debug("Skipping '%s' since it has no compatibility tool", display_name)
                continue

            pfx_path = self.steam_dir.prefix_path(app_id)
            if not pfx_path.is_dir():
                log.debug("Skipping '%s' since `%s` does not exist", display_name, pfx_path)
                continue

            seen.add(app_id)
            games.append(
                defs.GameRecord(
                    name=display_name,
                    target_path=pfx_path.absolute(),
                    is_non_steam=True,
                    app_id=app_id,
                )
            )

        log.info("Collected %d non-steam games with a prefix", len(games))
        return games

    def get_source_id(self) -> str:
        return defs.TAG_NON_STEAM

    def get_display_name(self) -> str:
        return "Non-Steam shortcuts"
